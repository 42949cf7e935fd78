"""RuleStore — explicit allow/deny facts and the single-role matcher."""

from __future__ import annotations

import logging

from dotacl.engine.models import Decision, Pattern, RuleKey, Wildcard

logger = logging.getLogger(__name__)


class RuleStore:
    """Mapping of ``(role, resource, access)`` keys to allow/deny booleans.

    Keys are unique; writing an existing key silently replaces its value.
    """

    def __init__(self) -> None:
        self._rules: dict[RuleKey, bool] = {}

    def __len__(self) -> int:
        return len(self._rules)

    def set(self, role: str, resource: Pattern, access: Pattern, allowed: bool) -> None:
        """Store a rule, overwriting any previous value for the same key."""
        key = RuleKey(role, resource, access)
        previous = self._rules.get(key)
        self._rules[key] = allowed
        if previous is not None and previous != allowed:
            logger.debug("Rule %s overwritten: %s -> %s", key, previous, allowed)

    def get(self, role: str, resource: Pattern, access: Pattern) -> Decision:
        """Return the stored value for an exact key, or ``None``."""
        return self._rules.get(RuleKey(role, resource, access))

    def rules_for(self, role: str) -> dict[RuleKey, bool]:
        """Return the rules defined directly on *role*, in insertion order."""
        return {key: value for key, value in self._rules.items() if key.role == role}

    def match_role(self, role: str, resource: str, access: str) -> Decision:
        """Look up the most specific rule for *role* alone (no inheritance).

        Probe order:
        1. ``resource.access``: exact match
        2. ``resource.*``: any access on the resource
        3. ``*.access``: the access on any resource
        4. ``*.*``: everything

        The first probe that hits wins, so an exact rule always outranks a
        wildcard rule regardless of which was added first.
        """
        probes: tuple[tuple[Pattern, Pattern], ...] = (
            (resource, access),
            (resource, Wildcard.ANY),
            (Wildcard.ANY, access),
            (Wildcard.ANY, Wildcard.ANY),
        )
        for probe_resource, probe_access in probes:
            result = self._rules.get(RuleKey(role, probe_resource, probe_access))
            if result is not None:
                return result
        return None
