"""Errors raised by README resolution.

Only these cross the resolver boundary; every other failure degrades into
the next fallback tier.
"""

from typing import Optional


class ResolutionError(Exception):
    """Base class for fatal README resolution failures."""

    def __init__(self, package: str, message: str):
        super().__init__(message)
        self.package = package


class RegistryUnavailable(ResolutionError):
    """The registry record could not be fetched or decoded."""

    def __init__(self, package: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        if status_code is not None:
            message = f"{package}: registry HTTP {status_code}"
        else:
            message = f"{package}: registry unreachable ({reason or 'unknown error'})"
        super().__init__(package, message)
        self.status_code = status_code
        self.reason = reason


class VersionNotFound(ResolutionError):
    """The effective version has no entry in the registry record."""

    def __init__(self, package: str, version: Optional[str]):
        if version is None:
            message = f'{package}: no version given and no "latest" dist-tag'
        else:
            message = f'{package}: version "{version}" not found'
        super().__init__(package, message)
        self.version = version
