"""PolicyEngine — the public facade over registry, rule store, and resolver.

Pure logic, no I/O.  Typical usage::

    engine = PolicyEngine(default_allow=False)
    engine.add_role("member", ["guest"])
    engine.allow("guest", "post.view")
    engine.allow("member", "post.*")
    engine.deny("member", "post.delete")

    engine.is_allowed("member", "post.delete")   # False
    engine.get_allowed_roles("post.view")        # ["member", "guest"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from dotacl.engine.actions import parse_rule, split_action
from dotacl.engine.registry import RoleRegistry
from dotacl.engine.resolver import Resolver
from dotacl.engine.rules import RuleStore
from dotacl.utils.telemetry import (
    ATTR_ACTION,
    ATTR_DECISION,
    ATTR_DEFAULT_USED,
    ATTR_ROLE,
    ATTR_ROLES_COUNT,
    get_tracer,
)

if TYPE_CHECKING:
    from dotacl.config.models import PolicySpec

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class PolicyEngine:
    """Decide whether a role may perform an action.

    Rules are looked up on the role itself first (exact, ``resource.*``,
    ``*.access``, ``*.*``), then on its parents depth-first.  When nothing
    in the inheritance closure matches, :attr:`default_allow` decides.
    """

    def __init__(self, *, default_allow: bool = True) -> None:
        self._default_allow = default_allow
        self._registry = RoleRegistry()
        self._rules = RuleStore()
        self._resolver = Resolver(self._registry, self._rules)

    @classmethod
    def from_spec(cls, spec: PolicySpec) -> PolicyEngine:
        """Build an engine populated from a validated :class:`PolicySpec`."""
        from dotacl.config.loader import build_engine

        return build_engine(spec, engine=cls())

    @classmethod
    def from_file(cls, path: str | Path) -> PolicyEngine:
        """Load a YAML or JSON policy document and build an engine from it."""
        from dotacl.config.loader import PolicyLoader

        return cls.from_spec(PolicyLoader(Path(path)).load())

    @property
    def registry(self) -> RoleRegistry:
        return self._registry

    @property
    def rules(self) -> RuleStore:
        return self._rules

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Default outcome
    # ------------------------------------------------------------------

    @property
    def default_allow(self) -> bool:
        return self._default_allow

    def set_default_action(self, allowed: bool) -> None:
        """Set the outcome used when no rule matches."""
        self._default_allow = bool(allowed)
        logger.debug("Default action set to %s", "allow" if self._default_allow else "deny")

    def get_default_action(self) -> bool:
        """Return the outcome used when no rule matches."""
        return self._default_allow

    # ------------------------------------------------------------------
    # Roles
    # ------------------------------------------------------------------

    def add_role(self, role: str, parents: str | Iterable[str] | None = None) -> None:
        """Register *role*, optionally inheriting from one or more *parents*."""
        self._registry.add_role(role, parents)

    def add_inherit(self, role: str, parent: str) -> None:
        """Make *role* fall back to *parent*'s rules."""
        self._registry.add_inherit(role, parent)

    def get_roles(self) -> list[str]:
        """Return all known roles in registration order."""
        return self._registry.get_roles()

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def allow(self, role: str, action_spec: str) -> None:
        """Allow *role* to perform *action_spec* (``!`` prefix denies)."""
        self._set_rule(role, action_spec, True)

    def deny(self, role: str, action_spec: str) -> None:
        """Deny *role* the *action_spec* (``!`` prefix allows)."""
        self._set_rule(role, action_spec, False)

    def _set_rule(self, role: str, action_spec: str, allowed: bool) -> None:
        rule = parse_rule(action_spec, allowed)
        self._registry.ensure(role)
        self._rules.set(role, rule.resource, rule.access, rule.allowed)
        logger.debug(
            "Rule %s %s.%s for role %r",
            "allow" if rule.allowed else "deny",
            rule.resource,
            rule.access,
            role,
        )

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    def is_allowed(self, role: str, action: str) -> bool:
        """Return whether *role* may perform *action* (``"resource.access"``)."""
        with _tracer.start_as_current_span("dotacl.is_allowed") as span:
            span.set_attribute(ATTR_ROLE, role)
            span.set_attribute(ATTR_ACTION, action)

            resource, access = split_action(action)
            decision = self._resolver.resolve(role, resource, access)
            default_used = decision is None
            allowed = self._default_allow if decision is None else decision

            span.set_attribute(ATTR_DECISION, allowed)
            span.set_attribute(ATTR_DEFAULT_USED, default_used)
            logger.debug(
                "Decision for %r on %r: %s%s",
                role,
                action,
                "allow" if allowed else "deny",
                " (default)" if default_used else "",
            )
            return allowed

    def get_allowed_roles(self, action: str) -> list[str]:
        """Return the roles allowed to perform *action*, in registration order."""
        with _tracer.start_as_current_span("dotacl.get_allowed_roles") as span:
            span.set_attribute(ATTR_ACTION, action)

            resource, access = split_action(action)
            allowed_roles: list[str] = []
            for role in self._registry.get_roles():
                decision = self._resolver.resolve(role, resource, access)
                if decision is None:
                    decision = self._default_allow
                if decision:
                    allowed_roles.append(role)

            span.set_attribute(ATTR_ROLES_COUNT, len(allowed_roles))
            return allowed_roles
