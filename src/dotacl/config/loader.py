"""Policy loading — parse YAML/JSON documents and populate a PolicyEngine."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from dotacl.config.models import PolicySpec
from dotacl.engine.policy import PolicyEngine
from dotacl.errors import PolicyValidationError

logger = logging.getLogger(__name__)


def parse_policy(raw: str, *, format: str = "yaml", source: str | None = None) -> PolicySpec:
    """Parse a raw policy document into a validated :class:`PolicySpec`.

    Args:
        raw: The document text.
        format: ``"yaml"`` (default) or ``"json"``.
        source: Where *raw* came from, used in error messages.

    Raises:
        PolicyValidationError: On parse errors or schema validation failures.
    """
    try:
        if format == "json":
            data: Any = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise PolicyValidationError(f"{format.upper()} parse error: {exc}", source=source) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PolicyValidationError("policy document must be a mapping", source=source)

    try:
        return PolicySpec.model_validate(data)
    except ValidationError as exc:
        raise PolicyValidationError(str(exc), source=source) from exc


def build_engine(spec: PolicySpec, *, engine: PolicyEngine | None = None) -> PolicyEngine:
    """Register every role and rule of *spec* on *engine* (a new one by default).

    Roles are registered in document order; within a role, ``allow``
    entries are applied before ``deny`` entries.
    """
    engine = engine or PolicyEngine()
    engine.set_default_action(spec.default_allow)

    for name, role in spec.roles.items():
        engine.add_role(name, role.inherits)
        for action in role.allow:
            engine.allow(name, action)
        for action in role.deny:
            engine.deny(name, action)

    logger.info(
        "Loaded policy with %d role(s) and %d rule(s)",
        len(engine.registry),
        len(engine.rules),
    )
    return engine


class PolicyLoader:
    """Load and validate a policy file into a :class:`PolicySpec`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> PolicySpec:
        """Read the file, interpolate env vars, and validate.

        Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
        with :func:`os.path.expandvars` before parsing.  Files ending in
        ``.json`` are parsed as JSON, everything else as YAML.

        Raises:
            PolicyValidationError: If the file cannot be read or is invalid.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PolicyValidationError(f"Cannot read {self._path}: {exc}") from exc

        fmt = "json" if self._path.suffix == ".json" else "yaml"
        return parse_policy(os.path.expandvars(raw), format=fmt, source=str(self._path))

    def build(self) -> PolicyEngine:
        """Load the file and return a populated :class:`PolicyEngine`."""
        return build_engine(self.load())
