import json
import logging
from unittest.mock import MagicMock

import pytest

from common.logging_utils import STDERR_HANDLER_NAME
from constants import Constants


_TUNABLES = ("REGISTRY_URL_NPM", "GITHUB_RAW_BASE", "REQUEST_TIMEOUT")


@pytest.fixture(autouse=True)
def _restore_constants(monkeypatch):
    """Config overrides write onto Constants; undo them after every test."""
    for attr in _TUNABLES:
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))
    monkeypatch.setenv(Constants.ENV_LOG_LEVEL, "INFO")


def make_response(status_code=200, text="", data=None):
    """Stand-in for requests.Response with just what the clients read."""
    res = MagicMock()
    res.status_code = status_code
    res.text = json.dumps(data) if data is not None else text
    return res


@pytest.fixture
def left_pad_packument():
    return {
        "name": "left-pad",
        "dist-tags": {"latest": "1.3.0"},
        "repository": {"type": "git", "url": "git+https://github.com/stevemao/left-pad.git"},
        "readme": "package level readme",
        "readmeFilename": "README.md",
        "versions": {
            "1.2.0": {
                "name": "left-pad",
                "version": "1.2.0",
            },
            "1.3.0": {
                "name": "left-pad",
                "version": "1.3.0",
                "repository": {"type": "git", "url": "git+https://github.com/ljharb/left-pad.git"},
            },
        },
    }


@pytest.fixture(autouse=True)
def _detach_stderr_handler():
    """configure_logging binds sys.stderr, which pytest swaps per test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler.get_name() == STDERR_HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
