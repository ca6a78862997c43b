"""jrm - JavaScript runtime manager

    Installs node, bun and deno versions side by side and switches the one a
    shell session uses, per project.

    Returns:
        int: Exit code
"""
import logging
import sys

from constants import ExitCodes
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from errors import JrmError
from args import parse_args
import cli_commands
from cli_config import configure
from runtimes.catalog import build_default_catalog

logger = logging.getLogger(__name__)


def dispatch(args, catalog):
    """Run the handler for ``args.action``."""
    action = args.action
    if action == "env":
        cli_commands.env_command(catalog)
    elif action == "install":
        cli_commands.install_command(catalog, args.RUNTIMES)
    elif action == "uninstall":
        cli_commands.uninstall_command(catalog, args.RUNTIMES)
    elif action == "use":
        cli_commands.use_command(catalog, args.RUNTIMES, assume_yes=args.ASSUME_YES)
    elif action == "list":
        cli_commands.list_command(catalog, args.RUNTIME)
    elif action == "alias":
        cli_commands.alias_command(catalog, args.RUNTIME, args.ALIAS_NAME, args.ALIAS_VERSION)
    elif action == "unalias":
        cli_commands.unalias_command(catalog, args.RUNTIME, args.ALIAS_NAME)
    else:
        logger.error("Unknown command: %s", action)
        sys.exit(ExitCodes.USAGE_ERROR.value)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)
    if args.LOG_FILE:
        add_file_handler(args.LOG_FILE)

    configure(args)
    catalog = build_default_catalog()

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.action)
        )

    try:
        dispatch(args, catalog)
    except JrmError as e:
        logger.error("%s", e)
        sys.exit(e.exit_code.value)
    except OSError as e:
        logger.error("Filesystem error: %s", e)
        sys.exit(ExitCodes.RESOLUTION_ERROR.value)
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        sys.exit(130)

    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
