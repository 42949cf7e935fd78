"""Pydantic models for policy documents.

A policy document lists roles in the order they should be registered::

    version: "1"
    default_allow: false
    roles:
      guest:
        allow: [post.view, "!admin.*"]
      member:
        inherits: guest
        allow: ["post.*"]
        deny: [post.delete]
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RoleSpec(BaseModel):
    """Inheritance and rules declared for a single role."""

    inherits: list[str] = Field(
        default_factory=list,
        description="Parent roles, checked in order when this role has no matching rule.",
    )
    allow: list[str] = Field(default_factory=list, description="Action specs to allow.")
    deny: list[str] = Field(default_factory=list, description="Action specs to deny.")

    @field_validator("inherits", mode="before")
    @classmethod
    def _coerce_inherits(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("allow", "deny", mode="before")
    @classmethod
    def _coerce_actions(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("allow", "deny")
    @classmethod
    def _reject_empty(cls, value: list[str]) -> list[str]:
        for spec in value:
            if not spec or spec == "!":
                msg = "action specs must not be empty"
                raise ValueError(msg)
        return value


class PolicySpec(BaseModel):
    """Top-level policy document."""

    version: str = "1"
    default_allow: bool = True
    roles: dict[str, RoleSpec] = Field(default_factory=dict)

    @field_validator("roles", mode="before")
    @classmethod
    def _fill_bare_roles(cls, value: object) -> object:
        # ``roles: {guest: }`` declares a role with no rules.
        if isinstance(value, dict):
            return {name: spec if spec is not None else {} for name, spec in value.items()}
        return value
