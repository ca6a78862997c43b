"""Version resolution and activation for one runtime kind.

``Resolver.resolve`` is the engine behind ``jrm use``: it turns an optional
request (version, range or alias) plus a project directory into the installed
version the current shell session should point at, falling back to a remote
install when the user agrees.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from constants import Constants, OnFail
from errors import InvalidVersion, NoRemoteVersionSatisfies
from common.fs_utils import create_relative_symlink, path_exists
from common.logging_utils import extra_context, is_debug_enabled
from common.prompt import ask, is_yes
from runtimes.base import RuntimeKind
from versioning.aliases import AliasRegistry
from versioning.detector import Detector
from versioning.models import DetectionResult, InstalledVersion, RuntimeLayout
from versioning.semver import (
    highest_satisfying,
    is_valid_range,
    is_valid_version,
    normalize_remote,
    satisfies,
)
from versioning.session import MultishellSession, default_alias_env_var, multishell_env_var
from versioning.store import VersionStore

logger = logging.getLogger(__name__)

Prompter = Callable[[str], str]


class Resolver:
    """Chooses and activates versions of one runtime kind.

    Args:
        kind: The runtime kind's installer capabilities.
        home: jrm home directory holding ``<kind>/versions`` and friends.
        prompter: Returns the trimmed answer to a question.
        environ: Environment used to locate the session (defaults to os.environ).
        assume_yes: Answer install prompts with yes without asking.
    """

    def __init__(
        self,
        kind: RuntimeKind,
        home: Optional[str] = None,
        *,
        prompter: Prompter = ask,
        environ: Optional[Mapping[str, str]] = None,
        assume_yes: bool = False,
    ):
        self.kind = kind
        self.layout = RuntimeLayout(home or Constants.JRM_HOME, kind.name)
        self.store = VersionStore(self.layout)
        self.aliases = AliasRegistry(self.store)
        self.detector = Detector(kind.name)
        self.prompter = prompter
        self.environ = os.environ if environ is None else environ
        self.assume_yes = assume_yes

    @property
    def name(self) -> str:
        return self.kind.name

    # ---------- use ----------

    def resolve(self, requested: Optional[str] = None, project_dir: Optional[str] = None) -> Optional[str]:
        """Activate a version for the current session.

        Returns the activated version, or None when nothing changed (no range
        found, install declined, or an onFail policy suppressed the prompt).
        """
        session = MultishellSession.from_env(self.name, self.environ)
        default_version = self._init_session(session)

        detection = self._resolve_spec(requested, project_dir)
        if detection is None:
            self._trace("no_range")
            return None
        version_range = detection.version_range

        if (
            default_version is not None
            and self.store.is_installed(default_version)
            and satisfies(default_version, version_range)
        ):
            session.activate(self.store.version_dir(default_version))
            self._trace("default", default_version)
            return default_version

        installed = highest_satisfying(self.store.list_installed(), version_range)
        if installed is not None:
            session.activate(self.store.version_dir(installed))
            self._trace("installed", installed)
            return installed

        if not self._should_install(detection, auto_detected=not requested):
            self._trace("declined")
            return None

        target = self.pick_remote(version_range)
        self.install(target)
        session.activate(self.store.version_dir(target))
        self._trace("remote", target)
        return target

    def _init_session(self, session: MultishellSession) -> Optional[str]:
        """Baseline activation: default alias, or placeholder executables."""
        if self.aliases.exists(Constants.DEFAULT_ALIAS):
            default_version = self.aliases.resolve(Constants.DEFAULT_ALIAS)
            session.activate(self.store.version_dir(default_version))
            return default_version
        session.install_placeholders([*self.kind.bundled_binaries, self.name])
        return None

    def _resolve_spec(self, requested: Optional[str], project_dir: Optional[str]) -> Optional[DetectionResult]:
        if not requested:
            return self.detector.detect(project_dir or os.getcwd())
        if is_valid_range(requested):
            return DetectionResult(version_range=requested)
        return DetectionResult(version_range=self.aliases.resolve(requested))

    def _should_install(self, detection: DetectionResult, auto_detected: bool) -> bool:
        version_range = detection.version_range
        if auto_detected and detection.on_fail is OnFail.IGNORE:
            return False
        if auto_detected and detection.on_fail is OnFail.WARN:
            logger.warning(
                "No installed %s version satisfies %s. Run `jrm install %s@%s` to install one.",
                self.name, version_range, self.name, version_range,
            )
            return False
        if self.assume_yes:
            return True
        answer = self.prompter(
            f"No installed {self.name} version satisfies {version_range}. "
            "Do you want to install one? (y/N): "
        )
        return is_yes(answer)

    def _trace(self, outcome: str, version: Optional[str] = None) -> None:
        if is_debug_enabled(logger):
            logger.debug(
                "Resolution finished",
                extra=extra_context(
                    event="decision",
                    component="resolver",
                    action="use",
                    target=self.name,
                    outcome=outcome,
                    version=version,
                )
            )

    # ---------- install / uninstall ----------

    def remote_versions(self) -> List[str]:
        """Remote stable versions, highest first."""
        return normalize_remote(self.kind.list_remote_versions())

    def pick_remote(self, version_range: str) -> str:
        """Highest remote stable version satisfying ``version_range``.

        Raises:
            NoRemoteVersionSatisfies: If no remote candidate matches.
        """
        target = highest_satisfying(self.remote_versions(), version_range)
        if target is None:
            raise NoRemoteVersionSatisfies(self.name, version_range)
        return target

    def install(self, version_range: str) -> Tuple[str, bool]:
        """Install the version ``version_range`` names.

        An exact version is installed as given; a range goes through the remote
        listing. Returns (version, installed) where ``installed`` is False if
        the version was already present. The very first install for a kind
        also creates the ``default`` alias.
        """
        version = version_range if is_valid_version(version_range) else self.pick_remote(version_range)
        versions_dir = self.store.ensure_versions_dir()
        if version in self.store.list_installed():
            return version, False

        logger.info("Installing %s@%s", self.name, version)
        self.kind.install_raw(version, versions_dir)

        installed = self.store.list_installed()
        if installed == [version]:
            create_relative_symlink(self.store.version_dir(version), self.layout.default_alias_path)
            logger.info("Default %s alias set to %s", self.name, version)
        return version, True

    def uninstall(self, version: str) -> bool:
        """Remove an installed version and every alias bound to it.

        Returns False when the version was not installed.
        """
        if not is_valid_version(version):
            raise InvalidVersion(version)
        if not self.store.is_installed(version):
            return False
        self.store.remove(version)
        self.aliases.cascade_on_uninstall(version)
        return True

    # ---------- aliases / list / env ----------

    def set_alias(self, name: str, version: str) -> None:
        self.aliases.set(name, version)

    def unset_alias(self, name: str) -> None:
        self.aliases.unset(name)

    def using_version(self) -> Optional[str]:
        """Version the current session links to, if any."""
        path = self.environ.get(multishell_env_var(self.name))
        if not path or not os.path.isabs(path) or not path_exists(path):
            return None
        return MultishellSession(self.name, path).active_version()

    def list_versions(self) -> List[InstalledVersion]:
        """Installed versions with their aliases and in-use marker."""
        by_version: Dict[str, List[str]] = {}
        for alias, version in self.aliases.list_aliases().items():
            by_version.setdefault(version, []).append(alias)
        using = self.using_version()
        return [
            InstalledVersion(
                version=version,
                aliases=by_version.get(version, []),
                is_using=version == using,
            )
            for version in self.store.list_installed()
        ]

    def env(self) -> Dict[str, str]:
        """Variables ``jrm env`` exports for this kind."""
        return {
            multishell_env_var(self.name): MultishellSession.new_path(self.layout.multishells_dir),
            default_alias_env_var(self.name): self.layout.default_alias_path,
        }
