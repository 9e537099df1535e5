"""NPM registry package.

- discovery.py: packument parsing into PackageMetadata
- client.py: HTTP interaction with the npm registry
"""

# Patch points exposed for tests (e.g., monkeypatch in tests)
from common.http_client import safe_get  # noqa: F401

from .discovery import parse_packument  # noqa: F401
from .client import fetch_package_metadata, package_page_url, packument_url  # noqa: F401

__all__ = [
    "fetch_package_metadata",
    "package_page_url",
    "packument_url",
    "parse_packument",
    # Patch points for tests
    "safe_get",
]
