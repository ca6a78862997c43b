"""Shared fixtures: a fake runtime kind and a temporary jrm home."""

import logging
import os
from typing import List, Optional

import pytest

from constants import Constants
from runtimes.base import RuntimeKind
from versioning.models import RuntimeLayout
from versioning.service import Resolver
from versioning.session import multishell_env_var


class FakeRuntime(RuntimeKind):
    """Runtime kind that serves canned tags and installs empty version dirs."""

    bundled_binaries = ("npm", "npx")

    def __init__(self, remote: Optional[List[str]] = None, name: str = "node"):
        self.remote = list(remote or [])
        self._name = name
        self.installed_raw: List[str] = []
        self.remote_calls = 0

    @property
    def name(self) -> str:
        return self._name

    def list_remote_versions(self) -> List[str]:
        self.remote_calls += 1
        return list(self.remote)

    def install_raw(self, version: str, versions_dir: str) -> None:
        self.installed_raw.append(version)
        bin_dir = os.path.join(versions_dir, f"v{version}", "bin")
        os.makedirs(bin_dir)
        with open(os.path.join(bin_dir, self._name), "w", encoding="utf-8") as fh:
            fh.write("#!/bin/sh\n")


class Answers:
    """Prompter that replays answers and records the questions asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: List[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else ""


def install_versions(home: str, kind: str, versions: List[str]) -> None:
    """Create ``versions/v<version>`` directories directly on disk."""
    layout = RuntimeLayout(home, kind)
    for version in versions:
        os.makedirs(os.path.join(layout.versions_dir, f"v{version}", "bin"))


def link_alias(home: str, kind: str, name: str, version: str) -> None:
    layout = RuntimeLayout(home, kind)
    os.makedirs(layout.aliases_dir, exist_ok=True)
    target = os.path.join(layout.versions_dir, f"v{version}")
    source = os.path.join(layout.aliases_dir, name)
    os.symlink(os.path.relpath(target, layout.aliases_dir), source)


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "jrm-home"
    path.mkdir()
    return str(path)


@pytest.fixture
def session_path(tmp_path):
    return str(tmp_path / "jrm-home" / "node" / "multishells" / "123_456")


@pytest.fixture
def environ(session_path):
    return {multishell_env_var("node"): session_path}


@pytest.fixture
def project(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return str(path)


@pytest.fixture
def make_resolver(home, environ):
    def _make(remote=None, answers=("n",), assume_yes=False):
        kind = FakeRuntime(remote)
        prompter = Answers(*answers)
        resolver = Resolver(kind, home, prompter=prompter, environ=environ, assume_yes=assume_yes)
        return resolver, kind, prompter
    return _make


@pytest.fixture(autouse=True)
def restore_constants():
    """Undo config overrides applied to Constants during a test."""
    saved = {k: v for k, v in vars(Constants).items() if k.isupper()}
    yield
    for key, value in saved.items():
        setattr(Constants, key, value)


@pytest.fixture
def restore_logging():
    """Undo handler and level changes made by configure_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
