"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    RESOLUTION_ERROR = 3


class ReadmeSource(Enum):
    """Where a resolved README text came from."""

    GITHUB = "github"
    REGISTRY_VERSION = "registry_version"
    REGISTRY_PACKAGE = "registry_package"
    PLACEHOLDER = "placeholder"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    REGISTRY_URL_NPM = "https://registry.npmjs.org/"
    PACKAGE_PAGE_URL_NPM = "https://www.npmjs.com/package/"
    GITHUB_RAW_BASE = "https://raw.githubusercontent.com/"
    GITHUB_HOST = "github.com"
    DEFAULT_README_FILENAME = "README.md"
    LATEST_TAG = "latest"
    REQUEST_TIMEOUT = 10  # Timeout in seconds for all HTTP requests

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "PKGREADME_LOG_LEVEL"
    CONFIG_SECTION = "pkgreadme"

    # MCP server advertisement
    MCP_SERVER_NAME = "mcp-package-readme"
    VERSION = "0.1.0"
    MCP_TOOL_NAME = "readme"
