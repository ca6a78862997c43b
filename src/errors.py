"""Exception taxonomy for jrm.

Every failure that ends a command derives from ``JrmError`` so the CLI entry
point can report it with a single handler. Declining an install prompt is not
an error and never raises.
"""

from constants import ExitCodes


class JrmError(Exception):
    """Base class for all jrm failures."""

    exit_code = ExitCodes.RESOLUTION_ERROR


class EnvNotSet(JrmError):
    """Raised when the session activation variable is missing."""

    def __init__(self, variable: str):
        super().__init__(
            f"{variable} is not set. Add `eval \"$(jrm env)\"` to your shell profile."
        )
        self.variable = variable


class PathNotAbsolute(JrmError):
    """Raised when the session activation variable holds a relative path."""

    def __init__(self, variable: str, value: str):
        super().__init__(f"Value of {variable} is not an absolute path: {value}")
        self.variable = variable
        self.value = value


class AliasNotFound(JrmError):
    """Raised when an alias symlink does not exist."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"No alias named {name} found for {kind}.")
        self.kind = kind
        self.name = name


class InvalidAliasName(JrmError):
    """Raised when an alias name collides with version or range syntax."""


class ReservedAlias(InvalidAliasName):
    """Raised when removing the auto-managed default alias."""

    def __init__(self, name: str):
        super().__init__(f"'{name}' alias is reserved. Cannot remove it.")
        self.name = name


class InvalidVersion(JrmError):
    """Raised when a concrete version is required but the input is not semver."""

    def __init__(self, version: str):
        super().__init__(
            f"Invalid version: {version}. Expected a valid semver (e.g., 20.0.0)."
        )
        self.version = version


class VersionNotInstalled(JrmError):
    """Raised when an operation needs a version that is not in the store."""

    def __init__(self, kind: str, version: str):
        super().__init__(
            f"{kind}@{version} is not installed. Run `jrm install {kind}@{version}` first."
        )
        self.kind = kind
        self.version = version


class NoRemoteVersionSatisfies(JrmError):
    """Raised when no remote candidate satisfies the requested range."""

    def __init__(self, kind: str, version_range: str):
        super().__init__(f"No remote {kind} version satisfies {version_range}.")
        self.kind = kind
        self.version_range = version_range


class UnsupportedRuntime(JrmError):
    """Raised for runtime names missing from the catalog."""

    exit_code = ExitCodes.USAGE_ERROR

    def __init__(self, name: str):
        super().__init__(f"Runtime {name} is not supported.")
        self.name = name


class InvalidRuntimeSpec(JrmError):
    """Raised for ``<runtime>@<version>`` tokens that do not parse."""

    exit_code = ExitCodes.USAGE_ERROR

    def __init__(self, token: str):
        super().__init__(
            f"Invalid runtime specification: {token}. "
            "Expected format: runtime@version (e.g., node@20.0.0)"
        )
        self.token = token


class DownloadError(JrmError):
    """Raised when a runtime archive can not be fetched."""

    exit_code = ExitCodes.CONNECTION_ERROR
