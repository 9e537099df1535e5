"""Data models for README resolution."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from constants import ReadmeSource


@dataclass(frozen=True)
class VersionRecord:
    """Per-version registry data that can override package-level values."""
    version: str
    repository_url: Optional[str] = None
    readme_filename: Optional[str] = None
    readme: Optional[str] = None


@dataclass(frozen=True)
class PackageMetadata:
    """Registry record for one package, fetched fresh for each resolution."""
    name: str
    versions: Mapping[str, VersionRecord] = field(default_factory=dict)
    dist_tags: Mapping[str, str] = field(default_factory=dict)
    repository_url: Optional[str] = None
    readme_filename: Optional[str] = None
    readme: Optional[str] = None


@dataclass(frozen=True)
class RepoRef:
    """Owner/repository pair parsed from a repository URL."""
    host: str
    owner: str
    repo: str


@dataclass(frozen=True)
class ResolvedReadme:
    """README text plus where it came from."""
    package: str
    version: str
    text: str
    source: ReadmeSource
    ref: Optional[str] = None


def candidate_refs(version: str) -> Tuple[str, ...]:
    """Revision selectors tried on the source host, in order."""
    return (f"v{version}", version, "main", "master")
