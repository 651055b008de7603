"""Card tools: render, list card types, preview option parsing."""

from __future__ import annotations

from readme_stats_action import cards, runner
from readme_stats_action.mcp_server._core import _call
from readme_stats_action.options import parse_options as _parse_options


def _render(card: str, options: str, path: str | None) -> dict:
    # Warnings come back in the result; stdout belongs to the MCP transport.
    return dict(runner.render_card(card, options, path, warn=lambda _msg: None))


def render_card(card: str, options: str = "", path: str | None = None) -> dict:
    """Render a readme card (stats, top-langs, pin, wakatime, gist) to an SVG file.

    options is a query string (username=alice&show_icons=true) or a JSON object.
    path defaults to profile/<card>.svg under the server's working directory.
    """
    return _call(_render, card, options, path)


def list_card_types() -> dict:
    """List supported card types with their required option. No network access."""
    return _call(lambda: {"cards": cards.list_card_types()})


def parse_options(options: str) -> dict:
    """Show the normalized option mapping a card renderer would receive."""
    return _call(lambda: {"options": _parse_options(options)})


def register(mcp):
    """Register all card tools with the FastMCP instance."""
    mcp.tool()(render_card)
    mcp.tool()(list_card_types)
    mcp.tool()(parse_options)
