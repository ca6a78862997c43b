"""Bun runtime backed by oven-sh/bun GitHub releases."""

from __future__ import annotations

import os
from typing import List, Optional

from constants import Constants, RuntimeKinds
from runtimes.archive import download_and_extract, staging_dir
from runtimes.base import RuntimeKind
from runtimes.github import list_tag_names

_TAG_PREFIX = "bun-"


class BunRuntime(RuntimeKind):
    """Bun builds; tags look like ``bun-v1.1.0``."""

    repo = "oven-sh/bun"

    def __init__(self, api_base: Optional[str] = None, github_base: Optional[str] = None):
        self.api_base = api_base or Constants.GITHUB_API_BASE
        self.github_base = (github_base or Constants.GITHUB_BASE).rstrip("/")

    @property
    def name(self) -> str:
        return RuntimeKinds.BUN.value

    def target(self) -> str:
        plat, arch = self.host_platform(), self.host_arch()
        if plat == "win32":
            return "windows-x64"
        if plat == "darwin":
            return "darwin-aarch64" if arch == "arm64" else "darwin-x64"
        return "linux-aarch64" if arch == "arm64" else "linux-x64"

    def list_remote_versions(self) -> List[str]:
        return [
            name[len(_TAG_PREFIX):]
            for name in list_tag_names(self.repo, self.api_base)
            if name.startswith(f"{_TAG_PREFIX}v")
        ]

    def install_raw(self, version: str, versions_dir: str) -> None:
        target = self.target()
        url = (
            f"{self.github_base}/{self.repo}/releases/download/"
            f"bun-v{version}/bun-{target}.zip"
        )
        with staging_dir(versions_dir) as staging:
            download_and_extract(url, staging)
            root = os.path.join(staging, "root")
            os.makedirs(root)
            os.rename(os.path.join(staging, f"bun-{target}"), os.path.join(root, "bin"))
            os.rename(root, os.path.join(versions_dir, f"v{version}"))
