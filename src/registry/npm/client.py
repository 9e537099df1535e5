"""NPM registry client: packument retrieval."""

from __future__ import annotations

import json
import logging
from typing import Optional
from urllib.parse import quote

import requests

from constants import Constants
from common.http_client import is_success
from common.logging_utils import extra_context, is_debug_enabled, Timer, safe_url
from readme.errors import RegistryUnavailable
from readme.models import PackageMetadata

from .discovery import parse_packument
import registry.npm as npm_pkg

logger = logging.getLogger(__name__)

PACKUMENT_HEADERS = {"Accept": "application/json"}


def packument_url(name: str, base_url: Optional[str] = None) -> str:
    """Registry URL for a package; scoped names are encoded as one path segment."""
    return f"{base_url or Constants.REGISTRY_URL_NPM}{quote(name, safe='')}"


def package_page_url(name: str) -> str:
    """Public npmjs.com listing page for a package."""
    return f"{Constants.PACKAGE_PAGE_URL_NPM}{quote(name, safe='')}"


def fetch_package_metadata(name: str, base_url: Optional[str] = None) -> PackageMetadata:
    """Fetch the full registry record for a package.

    Args:
        name: Package name, e.g. "react" or "@types/node".
        base_url: Registry base URL override; defaults to Constants.REGISTRY_URL_NPM.

    Returns:
        PackageMetadata parsed from the packument.

    Raises:
        RegistryUnavailable: On non-2xx status, network failure or an undecodable body.
    """
    url = packument_url(name, base_url)
    with Timer() as timer:
        try:
            res = npm_pkg.safe_get(url, context="npm", headers=PACKUMENT_HEADERS)
        except requests.RequestException as exc:
            logger.error(
                "Registry request failed",
                extra=extra_context(
                    event="http_error",
                    outcome="exception",
                    target=safe_url(url),
                    package_manager="npm"
                )
            )
            raise RegistryUnavailable(name, reason=str(exc)) from exc

    if not is_success(res.status_code):
        logger.warning(
            "Registry returned HTTP %s for %s",
            res.status_code,
            name,
            extra=extra_context(
                event="http_response",
                outcome="non_2xx",
                status_code=res.status_code,
                duration_ms=timer.duration_ms(),
                target=safe_url(url),
                package_manager="npm"
            )
        )
        raise RegistryUnavailable(name, status_code=res.status_code)

    try:
        packument = json.loads(res.text)
    except json.JSONDecodeError as exc:
        logger.warning("Couldn't decode registry JSON for %s", name)
        raise RegistryUnavailable(name, reason="invalid JSON body") from exc
    if not isinstance(packument, dict):
        raise RegistryUnavailable(name, reason="unexpected JSON body")

    if is_debug_enabled(logger):
        logger.debug(
            "Registry record fetched",
            extra=extra_context(
                event="http_response",
                outcome="success",
                status_code=res.status_code,
                duration_ms=timer.duration_ms(),
                package_manager="npm"
            )
        )
    return parse_packument(name, packument)
