"""Policy documents — schema, loading, and engine construction."""

from dotacl.config.loader import PolicyLoader, build_engine, parse_policy
from dotacl.config.models import PolicySpec, RoleSpec

__all__ = [
    "PolicyLoader",
    "PolicySpec",
    "RoleSpec",
    "build_engine",
    "parse_policy",
]
