"""Runtime kinds supported by jrm."""

from .base import RuntimeKind
from .node import NodeRuntime
from .bun import BunRuntime
from .deno import DenoRuntime
from .catalog import RuntimeCatalog, build_default_catalog

__all__ = [
    "RuntimeKind",
    "NodeRuntime",
    "BunRuntime",
    "DenoRuntime",
    "RuntimeCatalog",
    "build_default_catalog",
]
