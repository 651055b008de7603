"""Core helpers: response contract and the exception-to-dict call wrapper."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from readme_stats_action import CliError, SetupError, config


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": config.CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _finalize_tool_result(result: Any) -> Any:
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): dicts gain contract metadata (ok/schema_version),
          other values are returned unchanged.
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict):
        if result.get("ok") is False:
            return result
        out = dict(result)
        out.pop("ok", None)
        out.pop("schema_version", None)
        if config.MCP_RESPONSE_MODE == "envelope":
            return {"ok": True, "schema_version": config.CONTRACT_SCHEMA_VERSION, "data": out}
        return {"ok": True, "schema_version": config.CONTRACT_SCHEMA_VERSION, **out}
    if config.MCP_RESPONSE_MODE == "envelope":
        return {"ok": True, "schema_version": config.CONTRACT_SCHEMA_VERSION, "data": result}
    return result


def _call(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Call *fn*, converting exceptions to error dicts."""
    try:
        return _finalize_tool_result(fn(*args, **kwargs))
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
