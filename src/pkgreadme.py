"""pkgreadme - fetch the README of any npm package (GitHub-first, registry fallback).

Subcommands:
    mcp     run the MCP server exposing the ``readme`` tool
    readme  print the README for one package to stdout
"""
import logging
import os
import sys

from args import parse_args
from cli_config import apply_overrides, load_config
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from readme.errors import RegistryUnavailable, ResolutionError
from readme.resolver import ReadmeResolver

logger = logging.getLogger(__name__)


def setup_logging(args):
    """Configure stderr logging from --loglevel and optional --logfile."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        ))
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def run_readme(args):
    """Resolve one README and print it.

    Returns:
        int: Exit code
    """
    apply_overrides(args, load_config(getattr(args, "CONFIG", None)))
    try:
        text = ReadmeResolver().resolve(args.NAME, getattr(args, "PKG_VERSION", None))
    except RegistryUnavailable as e:
        logger.error("%s", e)
        return ExitCodes.CONNECTION_ERROR.value
    except ResolutionError as e:
        logger.error("%s", e)
        return ExitCodes.RESOLUTION_ERROR.value
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    setup_logging(args)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.command)
        )

    if args.command == "mcp":
        # Lazy import to avoid loading the MCP SDK for the readme command
        from cli_mcp import run_mcp_server  # pylint: disable=import-outside-toplevel
        run_mcp_server(args)
        return ExitCodes.SUCCESS.value
    return run_readme(args)


if __name__ == "__main__":
    sys.exit(main())
