"""MCP server exposing card rendering as tools.

Package structure:
  __init__.py  — FastMCP init, register() call, re-exports
  __main__.py  — ``python -m readme_stats_action.mcp_server`` entry point
  _core.py     — Response contract, exception-to-dict wrapper
  _tools.py    — render_card, list_card_types, parse_options

Run: python -m readme_stats_action.mcp_server
Requires: python -m pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from readme_stats_action.mcp_server import _tools

mcp = FastMCP(
    "readme-stats",
    instructions=(
        "Render GitHub readme cards (stats, top-langs, pin, wakatime, gist) to SVG files. "
        "Options are a query string or a JSON object. "
        "stats, top-langs and wakatime need username; pin needs repo; gist needs id. "
        "Call list_card_types first if unsure."
    ),
)

_tools.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from readme_stats_action.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _finalize_tool_result,
)
from readme_stats_action.mcp_server._tools import (  # noqa: E402, F401
    list_card_types,
    parse_options,
    render_card,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
