"""README resolution for npm packages.

- models.py: registry record and result types
- errors.py: fatal resolution errors
- resolver.py: the GitHub-first, registry-fallback resolver

The resolver is imported from ``readme.resolver`` directly; this package
only re-exports the types so registry modules can depend on them without
import cycles.
"""

from .errors import RegistryUnavailable, ResolutionError, VersionNotFound  # noqa: F401
from .models import PackageMetadata, RepoRef, ResolvedReadme, VersionRecord, candidate_refs  # noqa: F401

__all__ = [
    "PackageMetadata",
    "RegistryUnavailable",
    "RepoRef",
    "ResolutionError",
    "ResolvedReadme",
    "VersionNotFound",
    "VersionRecord",
    "candidate_refs",
]
