"""Argument parsing functionality for jrm."""

import argparse

from constants import Constants


def _add_common_options(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML). Defaults to <home>/config.yml",
                        action="store",
                        type=str)
    parser.add_argument("--home",
                        dest="HOME",
                        help="jrm home directory (default: ~/.jrm, or $JRM_HOME)",
                        action="store",
                        type=str)


def build_parser():
    """Build the top-level parser with one subcommand per action."""
    parser = argparse.ArgumentParser(
        prog="jrm",
        description="jrm - JavaScript runtime manager for node, bun and deno",
        add_help=True,
    )
    _add_common_options(parser)
    sub = parser.add_subparsers(dest="action", metavar="<command>")
    sub.required = True

    sub.add_parser("env", help="generate shell environment setup script")

    install = sub.add_parser("install", help="install specified runtime versions")
    install.add_argument("RUNTIMES",
                         nargs="+",
                         metavar="runtime@range",
                         help="runtime specifications (e.g., node@20 deno@2.0.0)")

    uninstall = sub.add_parser("uninstall", help="uninstall specified runtime versions")
    uninstall.add_argument("RUNTIMES",
                           nargs="+",
                           metavar="runtime@version",
                           help="runtime specifications (e.g., node@20.0.0)")

    use = sub.add_parser("use", help="use specified runtime versions or auto-detect from project")
    use.add_argument("RUNTIMES",
                     nargs="*",
                     metavar="runtime@range-or-alias",
                     help="runtime specifications (e.g., node@20 bun@some-alias deno@2.0.0)")
    use.add_argument("-y", "--yes",
                     dest="ASSUME_YES",
                     help="Install a missing version without asking.",
                     action="store_true")

    list_cmd = sub.add_parser("list", help="list installed runtime versions")
    list_cmd.add_argument("RUNTIME",
                          nargs="?",
                          choices=Constants.SUPPORTED_RUNTIMES,
                          help="runtime name to list versions for; lists all runtimes when omitted")

    alias = sub.add_parser("alias", help="create an alias for a specific runtime version")
    alias.add_argument("RUNTIME", choices=Constants.SUPPORTED_RUNTIMES, help="runtime name (e.g., node)")
    alias.add_argument("--name", dest="ALIAS_NAME", required=True, help="alias name")
    alias.add_argument("--version", dest="ALIAS_VERSION", required=True, help="runtime version")

    unalias = sub.add_parser("unalias", help="remove an alias for a runtime")
    unalias.add_argument("RUNTIME", choices=Constants.SUPPORTED_RUNTIMES, help="runtime name (e.g., node)")
    unalias.add_argument("--name", dest="ALIAS_NAME", required=True, help="alias name to remove")

    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    return build_parser().parse_args(argv)
