"""Configuration overrides for runtime tunables (home, mirrors, timeouts).

Precedence, lowest to highest: Constants defaults, YAML config file,
environment variables, CLI flags. A missing or malformed config file is
logged and ignored so it never breaks the CLI.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


def load_config_file(path: str) -> Dict[str, Any]:
    """Load a YAML mapping from ``path``; anything else yields {}."""
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def apply_config(cfg: Dict[str, Any]) -> None:
    """Apply a parsed config mapping onto Constants."""
    home = cfg.get("home")
    if isinstance(home, str) and home.strip():
        Constants.JRM_HOME = os.path.abspath(os.path.expanduser(home.strip()))

    timeout = cfg.get("request_timeout")
    if timeout is not None:
        try:
            Constants.REQUEST_TIMEOUT = int(timeout)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid request_timeout: %r", timeout)

    mirrors = cfg.get("mirrors") or {}
    if not isinstance(mirrors, dict):
        logger.warning("Ignoring invalid mirrors section: %r", mirrors)
        return
    for key, attr in (
        ("node", "NODE_DIST_MIRROR"),
        ("deno", "DENO_DIST_MIRROR"),
        ("github_api", "GITHUB_API_BASE"),
        ("github", "GITHUB_BASE"),
    ):
        value = mirrors.get(key)
        if isinstance(value, str) and value.strip():
            setattr(Constants, attr, value.strip())


def apply_env_overrides(environ: Optional[Dict[str, str]] = None) -> None:
    """Apply JRM_* environment overrides onto Constants."""
    env = os.environ if environ is None else environ
    home = env.get(Constants.ENV_HOME)
    if home and home.strip():
        Constants.JRM_HOME = os.path.abspath(os.path.expanduser(home.strip()))
    node_mirror = env.get(Constants.ENV_NODE_MIRROR)
    if node_mirror and node_mirror.strip():
        Constants.NODE_DIST_MIRROR = node_mirror.strip()
    deno_mirror = env.get(Constants.ENV_DENO_MIRROR)
    if deno_mirror and deno_mirror.strip():
        Constants.DENO_DIST_MIRROR = deno_mirror.strip()


def apply_cli_overrides(args) -> None:
    """Apply CLI flags; they win over every other source."""
    home = getattr(args, "HOME", None)
    if home:
        Constants.JRM_HOME = os.path.abspath(os.path.expanduser(home))


def configure(args, environ: Optional[Dict[str, str]] = None) -> None:
    """Resolve the effective configuration for this invocation.

    The config file location depends on the home directory, so home is
    resolved from env and CLI first, then the file, then env and CLI again so
    they keep precedence over file values.
    """
    apply_env_overrides(environ)
    apply_cli_overrides(args)
    path = getattr(args, "CONFIG", None) or os.path.join(Constants.JRM_HOME, Constants.CONFIG_FILE)
    cfg = load_config_file(path)
    if cfg:
        logger.debug("Loaded config from %s", path)
        apply_config(cfg)
        apply_env_overrides(environ)
        apply_cli_overrides(args)
