"""Tests for VersionStore."""

import os

from conftest import install_versions
from versioning.models import RuntimeLayout
from versioning.store import VersionStore


def _store(home):
    return VersionStore(RuntimeLayout(home, "node"))


def test_missing_versions_dir_is_empty(home):
    assert _store(home).list_installed() == []


def test_list_installed_sorted_descending_by_semver(home):
    install_versions(home, "node", ["9.0.0", "10.0.0", "9.11.2"])
    assert _store(home).list_installed() == ["10.0.0", "9.11.2", "9.0.0"]


def test_non_semver_entries_are_ignored(home):
    install_versions(home, "node", ["1.0.0"])
    versions_dir = RuntimeLayout(home, "node").versions_dir
    os.makedirs(os.path.join(versions_dir, "vnext"))
    os.makedirs(os.path.join(versions_dir, "2.0.0"))
    os.makedirs(os.path.join(versions_dir, "v1.0"))
    with open(os.path.join(versions_dir, ".DS_Store"), "w", encoding="utf-8") as fh:
        fh.write("")
    assert _store(home).list_installed() == ["1.0.0"]


def test_is_installed_and_remove(home):
    install_versions(home, "node", ["1.0.0", "2.0.0"])
    store = _store(home)
    assert store.is_installed("1.0.0")
    store.remove("1.0.0")
    assert not store.is_installed("1.0.0")
    assert store.list_installed() == ["2.0.0"]


def test_version_dir_layout(home):
    store = _store(home)
    assert store.version_dir("1.2.3") == os.path.join(home, "node", "versions", "v1.2.3")
