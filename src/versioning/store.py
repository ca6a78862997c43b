"""On-disk registry of installed versions for one runtime kind."""

from __future__ import annotations

import logging
import os
import shutil
from typing import List

from versioning.models import RuntimeLayout
from versioning.semver import is_valid_version, sort_descending

logger = logging.getLogger(__name__)


class VersionStore:
    """Pure filesystem queries over ``<home>/<kind>/versions/v<semver>``."""

    def __init__(self, layout: RuntimeLayout):
        self.layout = layout

    @property
    def versions_dir(self) -> str:
        return self.layout.versions_dir

    def version_dir(self, version: str) -> str:
        return os.path.join(self.versions_dir, f"v{version}")

    def ensure_versions_dir(self) -> str:
        os.makedirs(self.versions_dir, exist_ok=True)
        return self.versions_dir

    def list_installed(self) -> List[str]:
        """Installed versions, highest first.

        A missing versions directory is an empty store. Entries that are not
        ``v<semver>`` are ignored.
        """
        try:
            entries = os.listdir(self.versions_dir)
        except OSError:
            return []
        candidates = [
            name[1:] for name in entries
            if name.startswith("v") and is_valid_version(name[1:])
        ]
        return sort_descending(candidates)

    def is_installed(self, version: str) -> bool:
        return os.path.exists(self.version_dir(version))

    def remove(self, version: str) -> None:
        """Delete the version's directory tree.

        Sessions still linked to it are left dangling.
        """
        path = self.version_dir(version)
        shutil.rmtree(path)
        logger.info("Removed %s@%s", self.layout.kind, version)
