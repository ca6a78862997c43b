"""Named symlinks to installed version directories.

``default`` is reserved: it is created with the first install, re-pointed when
its version is uninstalled, and can never be removed by the user.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List

from constants import Constants
from errors import (
    AliasNotFound,
    InvalidAliasName,
    InvalidVersion,
    ReservedAlias,
    VersionNotInstalled,
)
from common.fs_utils import create_relative_symlink, path_exists, remove_path, version_from_link
from common.logging_utils import extra_context, is_debug_enabled
from versioning.semver import is_valid_range, is_valid_version
from versioning.store import VersionStore

logger = logging.getLogger(__name__)


class AliasRegistry:
    """Alias name -> version bindings stored under ``<kind>/aliases``."""

    def __init__(self, store: VersionStore):
        self.store = store
        self.kind = store.layout.kind
        self.aliases_dir = store.layout.aliases_dir

    def alias_path(self, name: str) -> str:
        return os.path.join(self.aliases_dir, name)

    def exists(self, name: str) -> bool:
        return path_exists(self.alias_path(name))

    def resolve(self, name: str) -> str:
        """Return the version ``name`` points at.

        Raises:
            AliasNotFound: If no such alias exists.
        """
        path = self.alias_path(name)
        if not path_exists(path):
            raise AliasNotFound(self.kind, name)
        return version_from_link(path)

    def set(self, name: str, version: str) -> None:
        """Create or re-point ``name`` at an installed ``version``."""
        if not is_valid_version(version):
            raise InvalidVersion(version)
        if not self.store.is_installed(version):
            raise VersionNotInstalled(self.kind, version)
        _validate_alias_name(name)
        create_relative_symlink(self.store.version_dir(version), self.alias_path(name))
        logger.info("Alias %s -> %s@%s", name, self.kind, version)

    def unset(self, name: str) -> None:
        """Remove ``name``; a missing alias is a no-op."""
        if name == Constants.DEFAULT_ALIAS:
            raise ReservedAlias(name)
        if remove_path(self.alias_path(name)):
            logger.info("Removed alias %s for %s", name, self.kind)

    def list_aliases(self) -> Dict[str, str]:
        """Every alias mapped to the version it resolves to."""
        try:
            names = sorted(os.listdir(self.aliases_dir))
        except OSError:
            return {}
        return {name: version_from_link(self.alias_path(name)) for name in names}

    def cascade_on_uninstall(self, removed_version: str) -> List[str]:
        """Drop aliases bound to ``removed_version`` and repair ``default``.

        Returns the names of the removed aliases.
        """
        removed = [
            name for name, version in self.list_aliases().items()
            if version == removed_version
        ]
        for name in removed:
            remove_path(self.alias_path(name))

        if is_debug_enabled(logger):
            logger.debug(
                "Alias cascade",
                extra=extra_context(
                    event="cascade",
                    component="aliases",
                    action="uninstall",
                    target=f"{self.kind}@{removed_version}",
                    count=len(removed),
                )
            )

        if Constants.DEFAULT_ALIAS in removed:
            remaining = self.store.list_installed()
            if remaining:
                create_relative_symlink(
                    self.store.version_dir(remaining[0]),
                    self.alias_path(Constants.DEFAULT_ALIAS),
                )
                logger.info(
                    "Default %s alias now points at %s", self.kind, remaining[0]
                )
        return removed


def _validate_alias_name(name: str) -> None:
    if is_valid_range(name):
        raise InvalidAliasName(
            f"Invalid alias name: {name}. "
            "Alias name cannot be a valid semver or a valid semver range."
        )
    if not name or name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
        raise InvalidAliasName(f"Invalid alias name: {name}. Alias name must be a plain name.")
