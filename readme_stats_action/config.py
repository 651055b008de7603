"""
readme-stats-action shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

# Keys read from the process environment when .env does not set them.
_ENV_KEYS = (
    "GITHUB_REPOSITORY_OWNER",
    "GRS_BASE_URL",
    "GRS_HTTP_TIMEOUT_SECONDS",
    "GRS_HTTP_MAX_RESPONSE_BYTES",
    "GRS_HTTP_LOG",
    "GRS_MCP_RESPONSE_MODE",
)


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _ENV_KEYS:
        if key not in env and os.environ.get(key):
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "1.0.0"
CONTRACT_SCHEMA_VERSION = "1.0"

CARD_TYPES = ("stats", "top-langs", "pin", "wakatime", "gist")
DEFAULT_OUTPUT_DIR = "profile"
OUTPUT_EXTENSION = ".svg"

DEFAULT_RENDERER_BASE_URL = "https://github-readme-stats.vercel.app"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env and the process environment)
# ---------------------------------------------------------------------------

env = load_env()

REPOSITORY_OWNER = env.get("GITHUB_REPOSITORY_OWNER", "")
RENDERER_BASE_URL = env.get("GRS_BASE_URL", "") or DEFAULT_RENDERER_BASE_URL
HTTP_TIMEOUT_SECONDS = _env_float("GRS_HTTP_TIMEOUT_SECONDS", 30.0)
HTTP_MAX_RESPONSE_BYTES = _env_int("GRS_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("GRS_HTTP_LOG", False)
MCP_RESPONSE_MODE = env.get("GRS_MCP_RESPONSE_MODE", "legacy").strip().lower()
if MCP_RESPONSE_MODE not in ("legacy", "envelope"):
    MCP_RESPONSE_MODE = "legacy"

# Set by the CLI from global flags.
RUNTIME_QUIET = False
RUNTIME_VERBOSE = False
