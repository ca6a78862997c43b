"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    RESOLUTION_ERROR = 1
    CONNECTION_ERROR = 2
    USAGE_ERROR = 3


class RuntimeKinds(Enum):
    """Runtime kinds supported by the program.

    Args:
        Enum (string): Runtime kinds supported by the program.
    """

    NODE = "node"
    BUN = "bun"
    DENO = "deno"


class OnFail(Enum):
    """devEngines.runtime onFail policies."""

    DOWNLOAD = "download"
    ERROR = "error"
    WARN = "warn"
    IGNORE = "ignore"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    JRM_HOME = os.path.join(os.path.expanduser("~"), ".jrm")
    CONFIG_FILE = "config.yml"
    SUPPORTED_RUNTIMES = [
        RuntimeKinds.NODE.value,
        RuntimeKinds.BUN.value,
        RuntimeKinds.DENO.value,
    ]

    VERSIONS_DIR = "versions"
    ALIASES_DIR = "aliases"
    MULTISHELLS_DIR = "multishells"
    DEFAULT_ALIAS = "default"
    PACKAGE_JSON_FILE = "package.json"

    ENV_HOME = "JRM_HOME"
    ENV_LOG_LEVEL = "JRM_LOG_LEVEL"
    ENV_NODE_MIRROR = "JRM_NODE_MIRROR"
    ENV_DENO_MIRROR = "JRM_DENO_MIRROR"
    ENV_MULTISHELL_PREFIX = "JRM_MULTISHELL_PATH_OF_"
    ENV_DEFAULT_ALIAS_PREFIX = "JRM_DEFAULT_ALIAS_PATH_OF_"
    ENV_GITHUB_TOKEN = "GITHUB_TOKEN"

    NODE_DIST_MIRROR = "https://nodejs.org/dist"
    DENO_DIST_MIRROR = "https://dl.deno.land"
    GITHUB_API_BASE = "https://api.github.com"
    GITHUB_BASE = "https://github.com"
    GITHUB_TAGS_PER_PAGE = 100

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    DOWNLOAD_CHUNK_SIZE = 64 * 1024
