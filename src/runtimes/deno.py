"""Deno runtime: tags from denoland/deno, archives from dl.deno.land."""

from __future__ import annotations

import os
from typing import List, Optional

from constants import Constants, RuntimeKinds
from runtimes.archive import download_and_extract, staging_dir
from runtimes.base import RuntimeKind
from runtimes.github import list_tag_names


class DenoRuntime(RuntimeKind):
    """Deno builds; the zip holds a single ``deno`` executable."""

    repo = "denoland/deno"

    def __init__(self, mirror: Optional[str] = None, api_base: Optional[str] = None):
        self.mirror = (mirror or Constants.DENO_DIST_MIRROR).rstrip("/")
        self.api_base = api_base or Constants.GITHUB_API_BASE

    @property
    def name(self) -> str:
        return RuntimeKinds.DENO.value

    def target(self) -> str:
        plat, arch = self.host_platform(), self.host_arch()
        if plat == "win32":
            return "x86_64-pc-windows-msvc"
        if plat == "darwin":
            return "aarch64-apple-darwin" if arch == "arm64" else "x86_64-apple-darwin"
        return "aarch64-unknown-linux-gnu" if arch == "arm64" else "x86_64-unknown-linux-gnu"

    def list_remote_versions(self) -> List[str]:
        return [name for name in list_tag_names(self.repo, self.api_base) if name.startswith("v")]

    def install_raw(self, version: str, versions_dir: str) -> None:
        url = f"{self.mirror}/release/v{version}/deno-{self.target()}.zip"
        with staging_dir(versions_dir) as staging:
            root = os.path.join(staging, "root")
            download_and_extract(url, os.path.join(root, "bin"))
            os.rename(root, os.path.join(versions_dir, f"v{version}"))
