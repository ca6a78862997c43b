"""Tests for Resolver install/uninstall/list/env."""

import os

import pytest

from conftest import FakeRuntime, install_versions, link_alias
from errors import InvalidVersion, NoRemoteVersionSatisfies
from versioning.service import Resolver


REMOTE = ["v3.0.0-beta.1", "v2.1.0", "v2.0.0", "v1.5.0", "not-a-tag"]


class TestInstall:
    def test_range_picks_highest_stable(self, home, make_resolver):
        resolver, kind, _ = make_resolver(remote=REMOTE)
        assert resolver.install("^2.0.0") == ("2.1.0", True)
        assert kind.installed_raw == ["2.1.0"]
        assert resolver.store.list_installed() == ["2.1.0"]

    def test_first_install_creates_default(self, home, make_resolver):
        resolver, _, _ = make_resolver(remote=REMOTE)
        resolver.install("^2.0.0")
        default = resolver.layout.default_alias_path
        assert os.path.islink(default)
        assert not os.path.isabs(os.readlink(default))
        assert resolver.aliases.resolve("default") == "2.1.0"

    def test_later_install_keeps_default(self, home, make_resolver):
        install_versions(home, "node", ["1.5.0"])
        link_alias(home, "node", "default", "1.5.0")
        resolver, _, _ = make_resolver(remote=REMOTE)
        resolver.install("2")
        assert resolver.aliases.resolve("default") == "1.5.0"

    def test_exact_version_skips_remote_listing(self, home, make_resolver):
        resolver, kind, _ = make_resolver(remote=REMOTE)
        assert resolver.install("2.0.0") == ("2.0.0", True)
        assert kind.remote_calls == 0

    def test_already_installed(self, home, make_resolver):
        install_versions(home, "node", ["2.1.0"])
        resolver, kind, _ = make_resolver(remote=REMOTE)
        assert resolver.install("^2.0.0") == ("2.1.0", False)
        assert kind.installed_raw == []

    def test_prereleases_are_never_candidates(self, home, make_resolver):
        resolver, _, _ = make_resolver(remote=REMOTE)
        with pytest.raises(NoRemoteVersionSatisfies):
            resolver.install("^3.0.0-0")

    def test_remote_versions_normalized(self, make_resolver):
        resolver, _, _ = make_resolver(remote=["v1.0.0", "1.0.0", "v10.0.0", "v2.0.0"])
        assert resolver.remote_versions() == ["10.0.0", "2.0.0", "1.0.0"]


class TestUninstall:
    def test_invalid_version(self, make_resolver):
        resolver, _, _ = make_resolver()
        with pytest.raises(InvalidVersion):
            resolver.uninstall("^1.0.0")

    def test_not_installed(self, make_resolver):
        resolver, _, _ = make_resolver()
        assert resolver.uninstall("1.0.0") is False

    def test_removes_directory_and_cascades(self, home, make_resolver):
        install_versions(home, "node", ["1.0.0", "2.0.0"])
        link_alias(home, "node", "default", "1.0.0")
        link_alias(home, "node", "old", "1.0.0")
        resolver, _, _ = make_resolver()
        assert resolver.uninstall("1.0.0") is True
        assert resolver.store.list_installed() == ["2.0.0"]
        assert resolver.aliases.list_aliases() == {"default": "2.0.0"}

    def test_session_left_dangling(self, home, session_path, make_resolver):
        install_versions(home, "node", ["1.0.0"])
        link_alias(home, "node", "default", "1.0.0")
        resolver, _, _ = make_resolver()
        resolver.resolve("1.0.0")
        resolver.uninstall("1.0.0")
        assert os.path.islink(session_path)
        assert not os.path.exists(session_path)


class TestListAndEnv:
    def test_list_versions(self, home, session_path, make_resolver):
        install_versions(home, "node", ["1.0.0", "2.0.0", "10.0.0"])
        link_alias(home, "node", "default", "2.0.0")
        link_alias(home, "node", "lts", "2.0.0")
        resolver, _, _ = make_resolver()
        resolver.resolve("^2.0.0")
        rows = resolver.list_versions()
        assert [row.version for row in rows] == ["10.0.0", "2.0.0", "1.0.0"]
        assert rows[1].aliases == ["default", "lts"]
        assert rows[1].is_using
        assert not rows[0].is_using and rows[0].aliases == []

    def test_list_without_session(self, home):
        install_versions(home, "node", ["1.0.0"])
        rows = Resolver(FakeRuntime(), home, environ={}).list_versions()
        assert [(row.version, row.is_using) for row in rows] == [("1.0.0", False)]

    def test_env(self, home, make_resolver):
        resolver, _, _ = make_resolver()
        envs = resolver.env()
        session = envs["JRM_MULTISHELL_PATH_OF_NODE"]
        assert os.path.dirname(session) == os.path.join(home, "node", "multishells")
        assert envs["JRM_DEFAULT_ALIAS_PATH_OF_NODE"] == os.path.join(home, "node", "aliases", "default")
