"""Tests for the PolicyEngine facade."""

from __future__ import annotations

import logging

import pytest

from dotacl.engine.policy import PolicyEngine


class TestDefaultAction:
    def test_defaults_to_allow(self) -> None:
        assert PolicyEngine().get_default_action() is True

    def test_constructor_override(self) -> None:
        assert PolicyEngine(default_allow=False).get_default_action() is False

    def test_set_and_get(self) -> None:
        acl = PolicyEngine()
        acl.set_default_action(False)
        assert acl.get_default_action() is False
        assert acl.default_allow is False
        acl.set_default_action(True)
        assert acl.get_default_action() is True

    def test_applies_immediately(self) -> None:
        acl = PolicyEngine()
        assert acl.is_allowed("ghost", "anything.at_all") is True
        acl.set_default_action(False)
        assert acl.is_allowed("ghost", "anything.at_all") is False


class TestRoles:
    def test_get_roles(self, engine: PolicyEngine) -> None:
        assert engine.get_roles() == [
            "Unauthorized",
            "Authorized",
            "Administrator",
            "Developer",
            "Programmer",
            "Master",
        ]

    def test_rule_registers_role(self) -> None:
        acl = PolicyEngine()
        acl.allow("editor", "post.edit")
        assert acl.get_roles() == ["editor"]

    def test_add_inherit(self) -> None:
        acl = PolicyEngine()
        acl.add_inherit("First", "Zero")
        acl.add_inherit("Next", "Zero")
        assert acl.get_roles() == ["First", "Zero", "Next"]


class TestIsAllowed:
    def test_default_allow(self, engine: PolicyEngine) -> None:
        engine.set_default_action(True)
        assert engine.is_allowed("Unauthorized", "routes.root")
        assert engine.is_allowed("Unauthorized", "routes2.root")

    def test_sample_policy(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)

        assert engine.is_allowed("Unauthorized", "routes.root")
        assert not engine.is_allowed("Unauthorized", "routes2.root")
        assert engine.is_allowed("Unauthorized", "Album.find")
        assert not engine.is_allowed("Unauthorized", "user.me")

        assert engine.is_allowed("Authorized", "user.me")
        assert engine.is_allowed("Authorized", "export.documentation_json")
        assert engine.is_allowed("Master", "export.documentation_json")

        assert engine.is_allowed("Developer", "demo.new")
        assert engine.is_allowed("Developer", "export.documentation_html")
        assert not engine.is_allowed("Developer", "export.documentation_xml")
        assert engine.is_allowed("Programmer", "export.documentation_xml")

        assert not engine.is_allowed("Developer", "Photo.find")
        assert engine.is_allowed("Administrator", "Photo.find")
        assert engine.is_allowed("Master", "Photo.find")

    def test_exact_beats_negated_wildcard(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.is_allowed("Developer", "album.browse")
        assert not engine.is_allowed("Developer", "photo.browse")

    def test_deny_stops_inheritance(self, engine: PolicyEngine) -> None:
        # Master's parent Developer denies *.browse before Programmer is reached.
        engine.allow("Programmer", "photo.browse")
        assert not engine.is_allowed("Master", "photo.browse")

    def test_case_sensitive(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.is_allowed("Unauthorized", "Album.find")
        assert not engine.is_allowed("Unauthorized", "album.all")

    def test_unknown_role_uses_default(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert not engine.is_allowed("Nobody", "routes.root")
        assert "Nobody" not in engine.get_roles()

    def test_malformed_actions_do_not_raise(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.is_allowed("Administrator", "")
        assert engine.is_allowed("Administrator", "no_dot")
        assert not engine.is_allowed("Unauthorized", "...")

    def test_multiple_dots(self) -> None:
        acl = PolicyEngine(default_allow=False)
        acl.allow("dev", "export.documentation.json")
        assert acl.is_allowed("dev", "export.documentation.json")
        assert not acl.is_allowed("dev", "export.documentation")

    def test_no_dot_rule(self) -> None:
        acl = PolicyEngine(default_allow=False)
        acl.allow("dev", "dashboard")
        assert acl.is_allowed("dev", "dashboard")
        assert not acl.is_allowed("dev", "app.dashboard")

    def test_cyclic_inheritance(self) -> None:
        acl = PolicyEngine(default_allow=False)
        acl.add_inherit("A", "B")
        acl.add_inherit("B", "A")
        assert not acl.is_allowed("A", "post.view")
        acl.allow("A", "post.view")
        assert acl.is_allowed("B", "post.view")


class TestAllowDeny:
    def test_allow(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert not engine.is_allowed("Developer", "new.success")
        assert not engine.is_allowed("Developer", "new.other")

        engine.allow("Developer", "new.*")

        assert engine.is_allowed("Developer", "new.success")
        assert engine.is_allowed("Developer", "new.other")

    def test_deny(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.is_allowed("Developer", "Album.all")
        assert engine.is_allowed("Developer", "Album.find")

        engine.deny("Developer", "Album.find")

        assert engine.is_allowed("Developer", "Album.all")
        assert not engine.is_allowed("Developer", "Album.find")

    def test_redefinition_overwrites(self) -> None:
        acl = PolicyEngine(default_allow=False)
        acl.allow("dev", "post.view")
        acl.deny("dev", "post.view")
        assert not acl.is_allowed("dev", "post.view")
        assert len(acl.rules) == 1

    @pytest.mark.parametrize("action", ["post.view", "post.*", "*.view", "*.*"])
    def test_negated_allow_equals_deny(self, action: str) -> None:
        negated = PolicyEngine()
        negated.allow("dev", f"!{action}")
        plain = PolicyEngine()
        plain.deny("dev", action)
        assert negated.rules.rules_for("dev") == plain.rules.rules_for("dev")
        assert not negated.is_allowed("dev", "post.view")

    def test_negated_deny_equals_allow(self) -> None:
        acl = PolicyEngine(default_allow=False)
        acl.deny("admin", "!admin.*")
        assert acl.is_allowed("admin", "admin.users")


class TestGetAllowedRoles:
    def test_album_browse(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.get_allowed_roles("album.browse") == ["Administrator", "Developer", "Master"]

    def test_export_documentation_json(self, engine: PolicyEngine) -> None:
        engine.set_default_action(False)
        assert engine.get_allowed_roles("export.documentation_json") == [
            "Unauthorized",
            "Authorized",
            "Administrator",
            "Developer",
            "Programmer",
            "Master",
        ]

    def test_default_allow_includes_unmatched_roles(self) -> None:
        acl = PolicyEngine(default_allow=True)
        acl.add_role("guest")
        acl.deny("banned", "post.view")
        assert acl.get_allowed_roles("post.view") == ["guest"]

    def test_empty_engine(self) -> None:
        assert PolicyEngine().get_allowed_roles("post.view") == []


class TestLogging:
    def test_decision_logged(self, engine: PolicyEngine, caplog: pytest.LogCaptureFixture) -> None:
        engine.set_default_action(False)
        with caplog.at_level(logging.DEBUG, logger="dotacl.engine.policy"):
            engine.is_allowed("Developer", "Photo.find")
        assert "'Developer'" in caplog.text
        assert "deny (default)" in caplog.text
