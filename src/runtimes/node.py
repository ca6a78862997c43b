"""Node.js runtime backed by the nodejs.org distribution index."""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from constants import Constants, RuntimeKinds
from common.http_client import get_json
from runtimes.archive import download_and_extract, staging_dir
from runtimes.base import RuntimeKind

logger = logging.getLogger(__name__)


class NodeRuntime(RuntimeKind):
    """Official Node.js builds from ``<mirror>/index.json``."""

    bundled_binaries = ("npm", "npx")

    def __init__(self, mirror: Optional[str] = None):
        self.mirror = (mirror or Constants.NODE_DIST_MIRROR).rstrip("/")

    @property
    def name(self) -> str:
        return RuntimeKinds.NODE.value

    def list_remote_versions(self) -> List[str]:
        status_code, _, data = get_json(f"{self.mirror}/index.json")
        if status_code != 200 or not isinstance(data, list):
            logger.warning("Could not list remote node versions (status %s)", status_code)
            return []
        return [
            item["version"] for item in data
            if isinstance(item, dict) and isinstance(item.get("version"), str)
        ]

    def _dist_platform(self) -> str:
        plat = self.host_platform()
        return "win" if plat == "win32" else plat

    def _dist_stem(self, version: str) -> str:
        return f"node-v{version}-{self._dist_platform()}-{self.host_arch()}"

    def archive_name(self, version: str) -> str:
        ext = "zip" if self.host_platform() == "win32" else "tar.gz"
        return f"{self._dist_stem(version)}.{ext}"

    def install_raw(self, version: str, versions_dir: str) -> None:
        url = f"{self.mirror}/v{version}/{self.archive_name(version)}"
        with staging_dir(versions_dir) as staging:
            download_and_extract(url, staging)
            os.rename(
                os.path.join(staging, self._dist_stem(version)),
                os.path.join(versions_dir, f"v{version}"),
            )
