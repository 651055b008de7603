"""Typed response definitions for the runner, CLI, and MCP tools.

These TypedDicts document the shape of returned dicts.
They are optional — runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import TypedDict


class RenderResult(TypedDict):
    """Return type of runner.render_card()."""

    card: str
    path: str
    absolute_path: str
    bytes: int
    warnings: list[str]


class CardTypeRow(TypedDict):
    """One row of cards.list_card_types()."""

    card: str
    required: str
    description: str
    default_path: str


class ErrorDetail(TypedDict):
    type: str
    message: str
    exit_code: int


class ErrorPayload(TypedDict):
    """JSON error object printed by the CLI in json format."""

    ok: bool
    schema_version: str
    error: ErrorDetail
