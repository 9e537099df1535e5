"""Argument parsing functionality for pkgreadme."""

import argparse

from constants import Constants


def _add_common_options(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--registry-url",
                        dest="REGISTRY_URL",
                        help=f"npm registry base URL (default: {Constants.REGISTRY_URL_NPM})",
                        action="store",
                        type=str)
    parser.add_argument("--raw-url",
                        dest="RAW_URL",
                        help=f"GitHub raw-content base URL (default: {Constants.GITHUB_RAW_BASE})",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"Per-request timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store",
                        type=float)


def build_parser():
    """Build the top-level parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="pkgreadme",
        description="Fetch the README of any npm package (GitHub-first, registry fallback).",
        add_help=True,
    )
    parser.add_argument("--version",
                        action="version",
                        version=f"%(prog)s {Constants.VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    mcp = sub.add_parser("mcp", help="Run the MCP server (stdio by default)")
    _add_common_options(mcp)
    mcp.add_argument("--host",
                     dest="MCP_HOST",
                     help="Serve streamable HTTP on this host instead of stdio (requires --port)",
                     action="store",
                     type=str)
    mcp.add_argument("--port",
                     dest="MCP_PORT",
                     help="Port for streamable HTTP transport",
                     action="store",
                     type=int)

    readme = sub.add_parser("readme", help="Print the README for a package")
    _add_common_options(readme)
    readme.add_argument("NAME",
                        help='Package name, e.g. "react"',
                        type=str)
    readme.add_argument("--version",
                        dest="PKG_VERSION",
                        help='Exact version (defaults to registry "latest")',
                        action="store",
                        type=str)
    return parser


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "mcp" and bool(args.MCP_HOST) != (args.MCP_PORT is not None):
        parser.error("--host and --port must be given together")
    return args
