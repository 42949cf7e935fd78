"""RoleRegistry — known roles and their ordered inheritance edges."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class RoleRegistry:
    """Insertion-ordered set of roles plus a parent list per role.

    Roles are created on first reference and never removed.  Parent lists
    keep the order edges were added in; self-edges are dropped and duplicate
    edges are kept as-is.
    """

    def __init__(self) -> None:
        self._parents: dict[str, list[str]] = {}

    def __contains__(self, role: object) -> bool:
        return role in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def ensure(self, role: str) -> None:
        """Register *role* if it is not known yet."""
        if role not in self._parents:
            self._parents[role] = []
            logger.debug("Registered role %r", role)

    def add_role(self, role: str, parents: str | Iterable[str] | None = None) -> None:
        """Register *role* and inherit from each of *parents* in order.

        *parents* may be ``None``, a single role, or an iterable of roles.
        """
        self.ensure(role)
        if parents is None:
            return
        if isinstance(parents, str):
            parents = [parents]
        for parent in parents:
            self.add_inherit(role, parent)

    def add_inherit(self, role: str, parent: str) -> None:
        """Make *role* inherit *parent*'s rules (after its own)."""
        self.ensure(role)
        self.ensure(parent)
        if role == parent:
            return
        self._parents[role].append(parent)
        logger.debug("Role %r inherits %r", role, parent)

    def get_roles(self) -> list[str]:
        """Return every known role once, in first-registration order."""
        return list(self._parents)

    def parents_of(self, role: str) -> list[str]:
        """Return the direct parents of *role* (empty for unknown roles)."""
        return list(self._parents.get(role, ()))
