"""
Option parsing and normalization.

Options arrive as one string, either a query string (``username=a&show_icons=true``)
or a JSON object (``{"username": "a", "hide": ["prs", "issues"]}``), and leave as a
flat ``dict[str, str]`` that card renderers can consume as-is.
"""

from __future__ import annotations

import json
import math
import urllib.parse
from typing import Any

from readme_stats_action.exceptions import ParseError


def _stringify(value: Any) -> str:
    """Render one option value the way a query string would carry it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def normalize_options(options: dict[str, Any]) -> dict[str, str]:
    """Coerce every option value to a string.

    Lists are comma-joined in order, ``None`` drops the key, anything else is
    converted with :func:`_stringify`.
    """
    normalized: dict[str, str] = {}
    for key, val in options.items():
        if val is None:
            continue
        normalized[key] = _stringify(val)
    return normalized


def _parse_query_string(query: str) -> dict[str, str]:
    options: dict[str, str] = {}
    for key, val in urllib.parse.parse_qsl(query, keep_blank_values=True):
        # An empty accumulated value is replaced rather than joined.
        if options.get(key):
            options[key] = f"{options[key]},{val}"
        else:
            options[key] = val
    return options


def parse_options(value: str | None) -> dict[str, str]:
    """Parse a query-string or JSON options string into a normalized mapping.

    Raises ParseError when a JSON-looking value does not parse.
    """
    if not value:
        return {}

    trimmed = value.strip()
    options: dict[str, Any] = {}
    if trimmed.startswith("{"):
        try:
            options.update(json.loads(trimmed))
        except (json.JSONDecodeError, RecursionError):
            raise ParseError("Invalid JSON in options.") from None
    else:
        query = trimmed[1:] if trimmed.startswith("?") else trimmed
        options.update(_parse_query_string(query))

    return normalize_options(options)
