"""Command handlers behind the jrm subcommands.

Each handler receives the runtime catalog built at startup and writes its
user-facing output to stdout. Failures propagate as JrmError.
"""

import sys
from typing import List, Optional, Tuple

from cli_env import render_env_script
from constants import Constants
from runtimes.catalog import RuntimeCatalog
from versioning.parser import parse_runtime_specs
from versioning.service import Resolver


def _print(content: str) -> None:
    sys.stdout.write(f"{content}\n")


def make_resolver(catalog: RuntimeCatalog, name: str, assume_yes: bool = False) -> Resolver:
    """Resolver for ``name`` rooted at the configured home directory."""
    return Resolver(catalog.get(name), Constants.JRM_HOME, assume_yes=assume_yes)


def _resolvers_for(catalog: RuntimeCatalog, tokens: List[str]) -> List[Tuple[Resolver, str]]:
    # Parse and look up everything before touching disk or network
    return [(make_resolver(catalog, name), spec) for name, spec in parse_runtime_specs(tokens)]


def env_command(catalog: RuntimeCatalog) -> None:
    """Print the shell setup script for every runtime kind."""
    envs = {}
    for kind in catalog.all():
        envs.update(make_resolver(catalog, kind.name).env())
    _print(render_env_script(envs))


def install_command(catalog: RuntimeCatalog, tokens: List[str]) -> None:
    for resolver, version_range in _resolvers_for(catalog, tokens):
        version, installed = resolver.install(version_range)
        if installed:
            _print(f"Installed {resolver.name}@{version}")
        else:
            _print(f"{resolver.name}@{version} is already installed, skip.")


def uninstall_command(catalog: RuntimeCatalog, tokens: List[str]) -> None:
    for resolver, version in _resolvers_for(catalog, tokens):
        if resolver.uninstall(version):
            _print(f"Uninstalled {resolver.name}@{version}")
        else:
            _print(f"{resolver.name}@{version} is not installed, skip.")


def use_command(catalog: RuntimeCatalog, tokens: List[str], assume_yes: bool = False) -> None:
    """Activate requested versions, or detect one per runtime kind when none given."""
    if tokens:
        items = [
            (make_resolver(catalog, name, assume_yes), spec)
            for name, spec in parse_runtime_specs(tokens)
        ]
    else:
        items = [(make_resolver(catalog, kind.name, assume_yes), None) for kind in catalog.all()]

    for resolver, spec in items:
        using = resolver.resolve(spec)
        if using:
            _print(f"Using {resolver.name}@{using}")


def list_command(catalog: RuntimeCatalog, name: Optional[str] = None) -> None:
    kinds = [catalog.get(name)] if name else catalog.all()
    for kind in kinds:
        rows = make_resolver(catalog, kind.name).list_versions()
        if not rows:
            _print(f"No {kind.name} versions installed")
            continue
        _print(f"{kind.name} versions:")
        for row in rows:
            marker = "*" if row.is_using else " "
            suffix = f" ({', '.join(row.aliases)})" if row.aliases else ""
            _print(f"{marker} {row.version}{suffix}")


def alias_command(catalog: RuntimeCatalog, name: str, alias: str, version: str) -> None:
    make_resolver(catalog, name).set_alias(alias, version)
    _print(f"{name}@{version} is now aliased as {alias}")


def unalias_command(catalog: RuntimeCatalog, name: str, alias: str) -> None:
    make_resolver(catalog, name).unset_alias(alias)
    _print(f"Removed alias {alias} for {name}")
