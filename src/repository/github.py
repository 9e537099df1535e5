"""GitHub raw-content client.

Fetches single files from raw.githubusercontent.com. Every miss (non-2xx,
empty body, network failure) is reported as None so callers can move on to
the next candidate reference.
"""
from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests

from constants import Constants
from common.http_client import is_success, safe_get
from common.logging_utils import extra_context, is_debug_enabled, safe_url

logger = logging.getLogger(__name__)


class GitHubRawClient:
    """Lightweight client for raw file downloads. No authentication."""

    def __init__(self, base_url: Optional[str] = None):
        """Initialize the client.

        Args:
            base_url: Raw-content base URL (defaults to Constants.GITHUB_RAW_BASE)
        """
        self.base_url = base_url or Constants.GITHUB_RAW_BASE

    def raw_url(self, owner: str, repo: str, ref: str, filename: str) -> str:
        """Build the raw URL for ``owner/repo/ref/filename``."""
        base = self.base_url if self.base_url.endswith("/") else self.base_url + "/"
        return f"{base}{owner}/{repo}/{quote(ref)}/{quote(filename)}"

    def get_file(self, owner: str, repo: str, ref: str, filename: str) -> Optional[str]:
        """Fetch one raw file.

        Args:
            owner: Repository owner
            repo: Repository name
            ref: Branch or tag name
            filename: Path of the file within the repository

        Returns:
            File text for a 2xx response with a non-empty body, otherwise None
        """
        url = self.raw_url(owner, repo, ref, filename)
        try:
            res = safe_get(url, context="github")
        except requests.RequestException:
            return None

        if not is_success(res.status_code) or not res.text:
            if is_debug_enabled(logger):
                logger.debug("Raw file miss", extra=extra_context(
                    event="http_response", component="github", action="get_file",
                    outcome="miss", status_code=res.status_code, target=safe_url(url)
                ))
            return None
        return res.text
