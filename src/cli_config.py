"""Runtime configuration: YAML config file plus CLI overrides.

Precedence, lowest to highest: built-in Constants, config file, CLI flags.
Overrides are written onto Constants so every client picks them up.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load settings from a YAML file.

    Settings may sit at the top level or under a ``pkgreadme:`` section.

    Args:
        config_path: Path to the YAML file; None means no config file.

    Returns:
        Settings dict, empty when the file is missing or unreadable.
    """
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config: %s", e)
        return {}
    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    return section if isinstance(section, dict) else {}


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


def _apply_timeout(value: Any) -> None:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring invalid request timeout: %r", value)
        return
    if timeout <= 0:
        logger.warning("Ignoring non-positive request timeout: %r", value)
        return
    Constants.REQUEST_TIMEOUT = timeout  # type: ignore[assignment]


def apply_overrides(args: Any, config: Optional[Dict[str, Any]] = None) -> None:
    """Apply config file values, then CLI values, to Constants.

    Args:
        args: Parsed CLI namespace (attributes REGISTRY_URL, RAW_URL, TIMEOUT).
        config: Settings returned by load_config.
    """
    config = config or {}

    registry_url = getattr(args, "REGISTRY_URL", None) or config.get("registry_url")
    if registry_url:
        Constants.REGISTRY_URL_NPM = _with_trailing_slash(str(registry_url))

    raw_url = getattr(args, "RAW_URL", None) or config.get("raw_url")
    if raw_url:
        Constants.GITHUB_RAW_BASE = _with_trailing_slash(str(raw_url))

    timeout = getattr(args, "TIMEOUT", None)
    if timeout is None:
        timeout = config.get("request_timeout")
    if timeout is not None:
        _apply_timeout(timeout)
