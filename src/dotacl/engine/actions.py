"""Action string parsing.

An action is written ``"resource.access"`` and split on the first ``.``
only; anything after it belongs to the access token.  Without a ``.`` the
resource is empty and the whole string is the access token.

Rule definitions additionally accept a leading ``!`` which inverts the
rule, so ``allow(role, "!admin.*")`` stores the same fact as
``deny(role, "admin.*")``.
"""

from __future__ import annotations

from dotacl.engine.models import WILDCARD_TOKEN, Action, Pattern, RuleSpec, Wildcard

NEGATION_PREFIX = "!"
SEPARATOR = "."


def split_action(action: str) -> Action:
    """Split *action* into its resource and access parts."""
    resource, sep, access = str(action).partition(SEPARATOR)
    if not sep:
        return Action(resource="", access=resource)
    return Action(resource=resource, access=access)


def to_pattern(token: str) -> Pattern:
    """Map the literal ``*`` token to :attr:`Wildcard.ANY`."""
    if token == WILDCARD_TOKEN:
        return Wildcard.ANY
    return token


def parse_rule(action_spec: str, allowed: bool) -> RuleSpec:
    """Parse a rule definition such as ``"post.*"`` or ``"!*.delete"``.

    A leading ``!`` is consumed and flips *allowed*.
    """
    spec = str(action_spec)
    if spec.startswith(NEGATION_PREFIX):
        spec = spec[len(NEGATION_PREFIX) :]
        allowed = not allowed

    action = split_action(spec)
    return RuleSpec(
        resource=to_pattern(action.resource),
        access=to_pattern(action.access),
        allowed=allowed,
    )
