"""
Shared test fixtures for readme-stats-action tests.
Patches config module and the Action environment so tests never read a real
.env, write to a real $GITHUB_OUTPUT, or reach the network.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

_ACTION_ENV_KEYS = [
    "GITHUB_ACTIONS",
    "GITHUB_OUTPUT",
    "GITHUB_REPOSITORY_OWNER",
    "INPUT_CARD",
    "INPUT_OPTIONS",
    "INPUT_PATH",
]


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from readme_stats_action import config

    for key in _ACTION_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "REPOSITORY_OWNER", "")
    monkeypatch.setattr(config, "RENDERER_BASE_URL", config.DEFAULT_RENDERER_BASE_URL)
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", 30.0)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)


@pytest.fixture
def svg_handler():
    """Return a handler factory that records its calls and sends fixed markup."""

    def make(body="<svg>...</svg>"):
        calls = []

        def handler(request, response):
            calls.append(request)
            response.set_header("Content-Type", "image/svg+xml")
            response.send(body)

        handler.calls = calls
        return handler

    return make
