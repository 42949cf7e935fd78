"""Shared error types.

The engine itself never raises: unknown roles and malformed actions resolve
to the default outcome.  Errors only surface at the configuration boundary.
"""


class DotAclError(Exception):
    """Base error for all dotacl failures."""


class PolicyValidationError(DotAclError):
    """A policy document could not be read, parsed, or validated."""

    def __init__(self, detail: str = "", *, source: str | None = None) -> None:
        self.detail = detail
        self.source = source
        msg = "Invalid policy"
        if source:
            msg += f" ({source})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
