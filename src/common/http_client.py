"""Shared HTTP helpers used across registry and repository clients.

Every outbound request goes through ``safe_get`` so the configured timeout
and DEBUG traces apply uniformly. Network failures are not handled here:
``requests.RequestException`` propagates and each caller decides whether it
is fatal (registry metadata) or just a miss (raw file candidates).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    """Return True for any 2xx status."""
    return 200 <= status_code < 300


def safe_get(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> requests.Response:
    """Perform a GET request with the configured timeout and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "npm", "github").
        headers: Optional request headers.
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object.

    Raises:
        requests.RequestException: On timeouts and connection failures.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                ),
            )
        try:
            res = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, headers=headers, **kwargs)
        except requests.Timeout:
            logger.warning(
                "%s request timed out after %s seconds",
                context,
                Constants.REQUEST_TIMEOUT,
                extra=extra_context(
                    event="http_exception",
                    component="http_client",
                    outcome="timeout",
                    target=safe_target,
                ),
            )
            raise
        except requests.RequestException as exc:  # includes ConnectionError
            logger.warning(
                "%s connection error: %s",
                context,
                exc,
                extra=extra_context(
                    event="http_exception",
                    component="http_client",
                    outcome="request_exception",
                    target=safe_target,
                ),
            )
            raise
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if is_success(res.status_code) else "non_2xx",
                    status_code=res.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context,
                ),
            )
        return res
