"""Abstract base class for runtime kinds."""

from __future__ import annotations

import platform
import sys
from abc import ABC, abstractmethod
from typing import List, Tuple


class RuntimeKind(ABC):
    """Capabilities jrm needs from one runtime family.

    Subclasses list the tags a remote publishes and lay one version out as
    ``<versions_dir>/v<version>`` with executables in its ``bin/``.
    """

    #: Other executables shipped with the runtime, e.g. npm and npx for node.
    bundled_binaries: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Runtime kind name, also the executable name."""

    @abstractmethod
    def list_remote_versions(self) -> List[str]:
        """Raw remote tags, any order, possibly ``v``-prefixed or prerelease."""

    @abstractmethod
    def install_raw(self, version: str, versions_dir: str) -> None:
        """Download and unpack ``version`` into ``<versions_dir>/v<version>``."""

    @staticmethod
    def host_platform() -> str:
        """Host OS as ``linux``, ``darwin`` or ``win32``."""
        if sys.platform.startswith("linux"):
            return "linux"
        return sys.platform

    @staticmethod
    def host_arch() -> str:
        """Host CPU as ``x64`` or ``arm64`` (other values pass through lowercased)."""
        machine = platform.machine().lower()
        if machine in ("x86_64", "amd64"):
            return "x64"
        if machine in ("aarch64", "arm64"):
            return "arm64"
        return machine

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
