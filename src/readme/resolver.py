"""README resolution: GitHub first, registry blob second, placeholder last."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from constants import Constants, ReadmeSource
from common.logging_utils import extra_context, is_debug_enabled, Timer
from registry.npm.client import fetch_package_metadata, package_page_url
from repository.github import GitHubRawClient
from repository.url_normalize import parse_repo_url

from .errors import VersionNotFound
from .models import PackageMetadata, ResolvedReadme, VersionRecord, candidate_refs

logger = logging.getLogger(__name__)


class ReadmeResolver:
    """Resolve README text for ``package@version``.

    Holds no per-call state, so one instance can serve concurrent calls.
    Only RegistryUnavailable and VersionNotFound escape ``resolve``.
    """

    def __init__(
        self,
        fetch_metadata: Callable[[str], PackageMetadata] = fetch_package_metadata,
        raw_client: Optional[GitHubRawClient] = None,
    ):
        self.fetch_metadata = fetch_metadata
        self.raw_client = raw_client or GitHubRawClient()

    def resolve(self, package: str, version: Optional[str] = None) -> str:
        """Return README text, or a not-found placeholder when no source has one."""
        return self.resolve_detailed(package, version).text

    def resolve_detailed(self, package: str, version: Optional[str] = None) -> ResolvedReadme:
        """Like ``resolve`` but also reports the effective version and source."""
        with Timer() as t:
            meta = self.fetch_metadata(package)
            effective = version if version is not None else meta.dist_tags.get(Constants.LATEST_TAG)
            if effective is None:
                raise VersionNotFound(package, None)
            record = meta.versions.get(effective)
            if record is None:
                raise VersionNotFound(package, effective)

            result = (
                self._from_source_host(package, meta, record)
                or self._from_registry_blob(package, meta, record)
                or ResolvedReadme(
                    package=package,
                    version=effective,
                    text=(
                        f"README not found for {package}@{effective}. "
                        f"See {package_page_url(package)}"
                    ),
                    source=ReadmeSource.PLACEHOLDER,
                )
            )

        logger.info(
            "Resolved README for %s@%s from %s",
            package,
            effective,
            result.source.value,
            extra=extra_context(
                event="resolve", component="resolver", action="resolve",
                outcome=result.source.value, target=package, ref=result.ref,
                duration_ms=t.duration_ms()
            ),
        )
        return result

    def _from_source_host(
        self, package: str, meta: PackageMetadata, record: VersionRecord
    ) -> Optional[ResolvedReadme]:
        repo_url = record.repository_url or meta.repository_url
        ref = parse_repo_url(repo_url)
        if ref is None:
            if is_debug_enabled(logger):
                logger.debug("No source-host repository", extra=extra_context(
                    event="decision", component="resolver", action="parse_repo",
                    outcome="skip", target=repo_url
                ))
            return None

        filename = (
            record.readme_filename
            or meta.readme_filename
            or Constants.DEFAULT_README_FILENAME
        )
        for candidate in candidate_refs(record.version):
            text = self.raw_client.get_file(ref.owner, ref.repo, candidate, filename)
            if text:
                return ResolvedReadme(
                    package=package,
                    version=record.version,
                    text=text,
                    source=ReadmeSource.GITHUB,
                    ref=candidate,
                )
        return None

    @staticmethod
    def _from_registry_blob(
        package: str, meta: PackageMetadata, record: VersionRecord
    ) -> Optional[ResolvedReadme]:
        if record.readme:
            return ResolvedReadme(package, record.version, record.readme, ReadmeSource.REGISTRY_VERSION)
        if meta.readme:
            return ResolvedReadme(package, record.version, meta.readme, ReadmeSource.REGISTRY_PACKAGE)
        return None


def resolve_readme(package: str, version: Optional[str] = None) -> str:
    """Resolve with a resolver built from the current Constants."""
    return ReadmeResolver().resolve(package, version)
