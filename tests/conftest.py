"""Shared fixtures: a representative web-application policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dotacl.engine.policy import PolicyEngine

if TYPE_CHECKING:
    from pathlib import Path

# role -> (parents, allowed action specs), in registration order
SAMPLE_POLICY: dict[str, tuple[list[str], list[str]]] = {
    "Unauthorized": (
        [],
        [
            "routes.*",
            "export.documentation_html",
            "export.documentation_json",
            "export.postman_json",
            "Album.all",
            "Album.find",
            "!user.me",
        ],
    ),
    "Authorized": (["Unauthorized"], ["user.me"]),
    "Administrator": (["Authorized"], ["*.*"]),
    "Developer": (
        ["Authorized"],
        ["user.find", "album.find", "album.browse", "demo.*", "!*.browse"],
    ),
    "Programmer": (["Authorized"], ["export.*"]),
    "Master": (["Developer", "Programmer"], ["Photo.find"]),
}

SAMPLE_POLICY_YAML = """\
version: "1"
default_allow: false
roles:
  Unauthorized:
    allow:
      - "routes.*"
      - export.documentation_html
      - export.documentation_json
      - export.postman_json
      - Album.all
      - Album.find
      - "!user.me"
  Authorized:
    inherits: Unauthorized
    allow: [user.me]
  Administrator:
    inherits: Authorized
    allow: ["*.*"]
  Developer:
    inherits: Authorized
    allow: [user.find, album.find, album.browse, "demo.*", "!*.browse"]
  Programmer:
    inherits: Authorized
    allow: ["export.*"]
  Master:
    inherits: [Developer, Programmer]
    allow: [Photo.find]
"""


@pytest.fixture
def engine() -> PolicyEngine:
    """The sample policy loaded rule by rule, with the default left at allow."""
    acl = PolicyEngine()
    for role, (parents, actions) in SAMPLE_POLICY.items():
        acl.add_role(role, parents)
        for action in actions:
            acl.allow(role, action)
    return acl


@pytest.fixture
def policy_file(tmp_path: Path) -> Path:
    """The sample policy written out as YAML (default: deny)."""
    path = tmp_path / "policy.yaml"
    path.write_text(SAMPLE_POLICY_YAML, encoding="utf-8")
    return path
