"""Discover the version range a project asks for.

Starting at a directory and walking up to the filesystem root, each directory
is checked for ``.<kind>-version`` first and ``package.json`` second; the first
hit wins. Unreadable or malformed files count as "not found" so the walk keeps
going.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Optional

from constants import Constants, OnFail
from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import DetectionResult

logger = logging.getLogger(__name__)


class Detector:
    """Version-file and ``devEngines.runtime`` lookup for one runtime kind."""

    def __init__(self, kind: str):
        self.kind = kind

    @property
    def version_file_name(self) -> str:
        return f".{self.kind}-version"

    def detect_by_version_file(self, dir_path: str) -> Optional[DetectionResult]:
        path = os.path.join(dir_path, self.version_file_name)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as fh:
                content = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            return None
        return DetectionResult(version_range=content.strip())

    def detect_by_package_json(self, dir_path: str) -> Optional[DetectionResult]:
        path = os.path.join(dir_path, Constants.PACKAGE_JSON_FILE)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as fh:
                manifest = json.load(fh)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.debug("Failed to parse %s: %s", path, e)
            return None

        for entry in _runtime_entries(manifest):
            if entry.get("name") != self.kind:
                continue
            version = entry.get("version")
            if not isinstance(version, str):
                # First entry for this kind decides, even when unusable
                return None
            return DetectionResult(
                version_range=version,
                on_fail=_parse_on_fail(entry.get("onFail")),
            )
        return None

    def detect(self, start_dir: str) -> Optional[DetectionResult]:
        """Return the nearest detection result at or above ``start_dir``."""
        current = os.path.abspath(start_dir)
        while True:
            result = self.detect_by_version_file(current) or self.detect_by_package_json(current)
            if result is not None:
                if is_debug_enabled(logger):
                    logger.debug(
                        "Detected version range",
                        extra=extra_context(
                            event="decision",
                            component="detector",
                            action="detect",
                            target=current,
                            outcome=result.version_range,
                        )
                    )
                return result
            parent = os.path.dirname(current)
            if parent == current:
                return None
            current = parent


def _runtime_entries(manifest: Any) -> List[dict]:
    if not isinstance(manifest, dict):
        return []
    dev_engines = manifest.get("devEngines")
    if not isinstance(dev_engines, dict):
        return []
    runtime = dev_engines.get("runtime")
    if isinstance(runtime, dict):
        return [runtime]
    if isinstance(runtime, list):
        return [r for r in runtime if isinstance(r, dict)]
    return []


def _parse_on_fail(value: Any) -> Optional[OnFail]:
    try:
        return OnFail(value) if value else None
    except ValueError:
        logger.debug("Ignoring unknown onFail value %r", value)
        return None
