"""Data types shared by the policy engine components."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, TypeAlias


class Wildcard(Enum):
    """Sentinel for the ``*`` token in a rule definition.

    Kept distinct from the string ``"*"`` so a rule key never collides with a
    resource or access that happens to be spelled ``*``.
    """

    ANY = "*"

    def __repr__(self) -> str:
        return "Wildcard.ANY"

    def __str__(self) -> str:
        return self.value


WILDCARD_TOKEN = "*"

Pattern: TypeAlias = str | Wildcard
"""Either a literal resource/access token or :attr:`Wildcard.ANY`."""

Decision: TypeAlias = bool | None
"""Tri-state lookup result: ``True``/``False`` for a matching rule, ``None`` for no rule."""


class Action(NamedTuple):
    """A ``resource.access`` pair split out of an action string."""

    resource: str
    access: str

    def __str__(self) -> str:
        if not self.resource:
            return self.access
        return f"{self.resource}.{self.access}"


class RuleKey(NamedTuple):
    """Composite key of the rule store."""

    role: str
    resource: Pattern
    access: Pattern


class RuleSpec(NamedTuple):
    """A parsed rule definition ready to be written to the store."""

    resource: Pattern
    access: Pattern
    allowed: bool
