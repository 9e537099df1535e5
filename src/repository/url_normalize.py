"""Repository URL parsing for the source host.

Recognized shape (case-insensitive):

    [git+]http[s]://<host>/<owner>/<repo>[.git][/...]

Anything else (ssh URLs, ``github:`` shorthands, other hosts) yields None;
callers treat that as "no repository" rather than an error.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional, Pattern

from constants import Constants
from readme.models import RepoRef


@lru_cache(maxsize=8)
def _repo_pattern(host: str) -> Pattern[str]:
    return re.compile(
        r"^(?:git\+)?https?://"
        r"(?P<host>" + re.escape(host) + r")/"
        r"(?P<owner>[^/?#]+)/"
        r"(?P<repo>[^/?#]+?)(?:\.git)?"
        r"(?:[/?#].*)?$",
        re.IGNORECASE,
    )


def parse_repo_url(url: Optional[str], host: Optional[str] = None) -> Optional[RepoRef]:
    """Extract owner/repo from a repository URL.

    Args:
        url: Repository URL as stored in the registry, may be None.
        host: Source host to accept; defaults to Constants.GITHUB_HOST.

    Returns:
        RepoRef, or None when the URL does not point at the source host.
    """
    if not url:
        return None
    m = _repo_pattern(host or Constants.GITHUB_HOST).match(url.strip())
    if not m:
        return None
    return RepoRef(host=m.group("host").lower(), owner=m.group("owner"), repo=m.group("repo"))
