"""Resolver — inheritance-aware rule lookup.

Walks the inheritance graph depth-first, parents left to right in the order
they were added, and returns the first rule found.  A single visited set is
shared by the whole lookup, so a role reachable along several paths (diamond
inheritance) is only evaluated via the first path that reaches it, and
cyclic graphs terminate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dotacl.engine.models import Decision
    from dotacl.engine.registry import RoleRegistry
    from dotacl.engine.rules import RuleStore


class Resolver:
    """Resolve ``(role, resource, access)`` against a registry and rule store."""

    def __init__(self, registry: RoleRegistry, rules: RuleStore) -> None:
        self._registry = registry
        self._rules = rules

    def resolve(self, role: str, resource: str, access: str) -> Decision:
        """Return the first matching rule in *role*'s inheritance closure.

        Returns ``None`` when no role in the closure has a matching rule.
        A role whose own rules match stops the search, even on a deny.
        """
        decision, _ = self.trace(role, resource, access)
        return decision

    def trace(self, role: str, resource: str, access: str) -> tuple[Decision, list[str]]:
        """Like :meth:`resolve` but also return the roles visited, in order.

        The last visited role is the one that decided when the decision is
        not ``None``.
        """
        visited: list[str] = []
        seen: set[str] = set()
        stack = [role]

        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            visited.append(current)

            decision = self._rules.match_role(current, resource, access)
            if decision is not None:
                return decision, visited

            # Reversed so the first-added parent is popped next.
            stack.extend(reversed(self._registry.parents_of(current)))

        return None, visited
