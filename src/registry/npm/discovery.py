"""NPM discovery helpers: turn a raw packument into PackageMetadata."""

import logging
from typing import Any, Dict, Mapping, Optional

from common.logging_utils import extra_context, is_debug_enabled
from readme.models import PackageMetadata, VersionRecord

logger = logging.getLogger(__name__)


def _non_empty_str(value: Any) -> Optional[str]:
    """Return the value when it is a non-blank string, else None."""
    if isinstance(value, str) and value.strip():
        return value
    return None


def _readme_text(value: Any) -> Optional[str]:
    """README blobs are kept verbatim; only non-strings and '' count as absent."""
    if isinstance(value, str) and value:
        return value
    return None


def _parse_repository_field(info: Mapping[str, Any]) -> Optional[str]:
    """Parse the repository field, handling string or object formats.

    Args:
        info: Packument root or a single version dictionary

    Returns:
        Repository URL string, or None when absent or malformed
    """
    repo = info.get("repository")
    if isinstance(repo, str):
        return _non_empty_str(repo)
    if isinstance(repo, dict):
        return _non_empty_str(repo.get("url"))
    return None


def _parse_version_record(version: str, info: Any) -> VersionRecord:
    if not isinstance(info, dict):
        return VersionRecord(version=version)
    return VersionRecord(
        version=version,
        repository_url=_parse_repository_field(info),
        readme_filename=_non_empty_str(info.get("readmeFilename")),
        readme=_readme_text(info.get("readme")),
    )


def _parse_dist_tags(packument: Mapping[str, Any]) -> Dict[str, str]:
    tags = packument.get("dist-tags")
    if not isinstance(tags, dict):
        return {}
    return {tag: value for tag, value in tags.items() if isinstance(value, str)}


def parse_packument(name: str, packument: Mapping[str, Any]) -> PackageMetadata:
    """Build PackageMetadata from a decoded packument.

    Args:
        name: Package name the packument was requested for
        packument: Decoded JSON body from the registry

    Returns:
        PackageMetadata with per-version records
    """
    raw_versions = packument.get("versions")
    if not isinstance(raw_versions, dict):
        raw_versions = {}
    versions = {
        version: _parse_version_record(version, info)
        for version, info in raw_versions.items()
    }
    metadata = PackageMetadata(
        name=name,
        versions=versions,
        dist_tags=_parse_dist_tags(packument),
        repository_url=_parse_repository_field(packument),
        readme_filename=_non_empty_str(packument.get("readmeFilename")),
        readme=_readme_text(packument.get("readme")),
    )
    if is_debug_enabled(logger):
        logger.debug("Parsed packument", extra=extra_context(
            event="parse", component="discovery", action="parse_packument",
            target=name, count=len(versions), package_manager="npm"
        ))
    return metadata
