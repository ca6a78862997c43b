"""Tests for symlink and removal helpers."""

import os

import pytest

from common.fs_utils import create_relative_symlink, path_exists, remove_path, version_from_link


def test_relative_link_requires_absolute_paths(tmp_path):
    with pytest.raises(TypeError):
        create_relative_symlink("relative", str(tmp_path / "link"))
    with pytest.raises(TypeError):
        create_relative_symlink(str(tmp_path), "link")


def test_link_replaces_existing_entry(tmp_path):
    first, second = tmp_path / "v1.0.0", tmp_path / "v2.0.0"
    first.mkdir()
    second.mkdir()
    link = str(tmp_path / "aliases" / "lts")
    create_relative_symlink(str(first), link)
    create_relative_symlink(str(second), link)
    assert os.readlink(link) == os.path.join("..", "v2.0.0")
    assert version_from_link(link) == "2.0.0"


def test_dangling_link_counts_as_present(tmp_path):
    link = tmp_path / "dangling"
    os.symlink(str(tmp_path / "gone"), link)
    assert path_exists(str(link))
    assert not os.path.exists(link)


def test_remove_path_does_not_follow_links(tmp_path):
    target = tmp_path / "v1.0.0"
    (target / "bin").mkdir(parents=True)
    link = tmp_path / "session"
    os.symlink(str(target), link)
    assert remove_path(str(link)) is True
    assert target.is_dir() and (target / "bin").is_dir()
    assert remove_path(str(target)) is True
    assert remove_path(str(target)) is False
