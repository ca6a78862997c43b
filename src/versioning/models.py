"""Data models for version detection, storage layout and list output."""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from constants import Constants, OnFail


@dataclass
class DetectionResult:
    """Version range found for a directory and what to do if nothing matches."""
    version_range: str
    on_fail: Optional[OnFail] = None


@dataclass(frozen=True)
class RuntimeLayout:
    """On-disk paths for one runtime kind under the jrm home directory."""
    home: str
    kind: str

    @property
    def root(self) -> str:
        return os.path.join(self.home, self.kind)

    @property
    def versions_dir(self) -> str:
        return os.path.join(self.root, Constants.VERSIONS_DIR)

    @property
    def aliases_dir(self) -> str:
        return os.path.join(self.root, Constants.ALIASES_DIR)

    @property
    def multishells_dir(self) -> str:
        return os.path.join(self.root, Constants.MULTISHELLS_DIR)

    @property
    def default_alias_path(self) -> str:
        return os.path.join(self.aliases_dir, Constants.DEFAULT_ALIAS)


@dataclass
class InstalledVersion:
    """One row of ``jrm list`` output."""
    version: str
    aliases: List[str] = field(default_factory=list)
    is_using: bool = False
