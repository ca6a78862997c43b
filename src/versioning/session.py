"""Per-shell activation directories.

Each shell gets its own ``multishells/<ppid>_<epoch_ms>`` path through
``jrm env``; ``jrm use`` only ever rewrites that path, so concurrently open
shells never share a "current version" pointer. Session directories are never
cleaned up.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Iterable, Mapping, Optional

from constants import Constants
from errors import EnvNotSet, PathNotAbsolute
from common.fs_utils import create_relative_symlink, remove_path, version_from_link

logger = logging.getLogger(__name__)

_PLACEHOLDER_TEMPLATE = """#!/usr/bin/env bash
echo 'No {kind} is used. Run `jrm use {kind}@<version>` to make {binary} available.' >&2
exit 1
"""


def multishell_env_var(kind: str) -> str:
    return f"{Constants.ENV_MULTISHELL_PREFIX}{kind.upper()}"


def default_alias_env_var(kind: str) -> str:
    return f"{Constants.ENV_DEFAULT_ALIAS_PREFIX}{kind.upper()}"


class MultishellSession:
    """The activation point owned by a single shell."""

    def __init__(self, kind: str, path: str):
        self.kind = kind
        self.path = path

    @staticmethod
    def new_path(multishells_dir: str) -> str:
        """Fresh session path keyed by parent pid and creation time."""
        return os.path.join(
            multishells_dir, f"{os.getppid()}_{int(time.time() * 1000)}"
        )

    @classmethod
    def from_env(cls, kind: str, environ: Optional[Mapping[str, str]] = None) -> "MultishellSession":
        """Session named by ``JRM_MULTISHELL_PATH_OF_<KIND>``.

        Raises:
            EnvNotSet: The variable is missing or empty.
            PathNotAbsolute: The variable is not an absolute path.
        """
        env = os.environ if environ is None else environ
        variable = multishell_env_var(kind)
        value = env.get(variable)
        if not value:
            raise EnvNotSet(variable)
        if not os.path.isabs(value):
            raise PathNotAbsolute(variable, value)
        return cls(kind, value)

    @property
    def bin_dir(self) -> str:
        return os.path.join(self.path, "bin")

    def activate(self, version_dir: str) -> None:
        """Point the session at ``version_dir``."""
        create_relative_symlink(version_dir, self.path)

    def install_placeholders(self, binaries: Iterable[str]) -> None:
        """Fill ``bin/`` with scripts that explain no version is active."""
        if os.path.islink(self.path):
            remove_path(self.path)
        os.makedirs(self.bin_dir, exist_ok=True)
        for binary in binaries:
            script = os.path.join(self.bin_dir, binary)
            with open(script, "w", encoding="utf-8") as fh:
                fh.write(_PLACEHOLDER_TEMPLATE.format(kind=self.kind, binary=binary))
            os.chmod(script, 0o755)
        logger.debug("Installed placeholder executables in %s", self.bin_dir)

    def active_version(self) -> Optional[str]:
        """Version the session links to, or None for placeholders/no session."""
        if not os.path.islink(self.path):
            return None
        return version_from_link(self.path)
