"""Filesystem helpers shared by the store, alias registry and sessions."""

from __future__ import annotations

import logging
import os
import shutil

logger = logging.getLogger(__name__)


def path_exists(path: str) -> bool:
    """True when ``path`` exists, counting dangling symlinks as present."""
    return os.path.lexists(path)


def remove_path(path: str) -> bool:
    """Remove a symlink, file or directory tree at ``path``.

    Symlinks are unlinked, never followed. Returns False when nothing was there.
    """
    if os.path.islink(path) or os.path.isfile(path):
        os.unlink(path)
        return True
    if os.path.isdir(path):
        shutil.rmtree(path)
        return True
    return False


def create_relative_symlink(target: str, source: str) -> None:
    """Point ``source`` at ``target`` through a path relative to ``source``'s directory.

    Any existing entry at ``source`` is removed first. The replacement is
    remove-then-create, so a concurrent reader may briefly see no entry.
    """
    if not os.path.isabs(target):
        raise TypeError(f"Target path '{target}' is not an absolute path.")
    if not os.path.isabs(source):
        raise TypeError(f"Source path '{source}' is not an absolute path.")
    parent = os.path.dirname(source)
    os.makedirs(parent, exist_ok=True)
    remove_path(source)
    os.symlink(os.path.relpath(target, parent), source, target_is_directory=True)
    logger.debug("Linked %s -> %s", source, target)


def version_from_link(path: str) -> str:
    """Version a ``v<semver>`` symlink resolves to, with the ``v`` stripped."""
    name = os.path.basename(os.path.realpath(path))
    return name[1:] if name.startswith("v") else name
