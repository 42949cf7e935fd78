"""dotacl — role-based access control for actions in ``resource.access`` notation."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from dotacl.config.loader import PolicyLoader as PolicyLoader
    from dotacl.engine.policy import PolicyEngine as PolicyEngine

_LAZY_EXPORTS = {
    "PolicyEngine": "dotacl.engine.policy",
    "PolicyLoader": "dotacl.config.loader",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'dotacl' has no attribute {name!r}")
