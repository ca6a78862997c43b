"""Explicit catalog of supported runtime kinds.

Built once by the CLI and handed to command handlers.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from errors import UnsupportedRuntime
from runtimes.base import RuntimeKind
from runtimes.bun import BunRuntime
from runtimes.deno import DenoRuntime
from runtimes.node import NodeRuntime


class RuntimeCatalog:
    """Ordered name -> RuntimeKind mapping."""

    def __init__(self, kinds: Iterable[RuntimeKind]):
        self._kinds: Dict[str, RuntimeKind] = {}
        for kind in kinds:
            self._kinds[kind.name] = kind

    def get(self, name: str) -> RuntimeKind:
        try:
            return self._kinds[name]
        except KeyError:
            raise UnsupportedRuntime(name) from None

    def all(self) -> List[RuntimeKind]:
        return list(self._kinds.values())

    def names(self) -> List[str]:
        return list(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds


def build_default_catalog() -> RuntimeCatalog:
    """node, bun and deno configured from the current Constants."""
    return RuntimeCatalog([NodeRuntime(), BunRuntime(), DenoRuntime()])
