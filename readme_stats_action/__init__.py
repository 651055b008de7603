"""readme-stats-action — render GitHub readme cards to SVG files from a workflow."""

from readme_stats_action.config import VERSION
from readme_stats_action.exceptions import (
    CliError,
    EmptyOutputError,
    MissingInputError,
    OutputError,
    ParseError,
    RenderError,
    SetupError,
    UnsupportedCardError,
    ValidationError,
)
from readme_stats_action.options import normalize_options, parse_options
from readme_stats_action.types import CardTypeRow, RenderResult

__all__ = [
    "VERSION",
    "CliError",
    "EmptyOutputError",
    "MissingInputError",
    "OutputError",
    "ParseError",
    "RenderError",
    "SetupError",
    "UnsupportedCardError",
    "ValidationError",
    "normalize_options",
    "parse_options",
    "CardTypeRow",
    "RenderResult",
]
