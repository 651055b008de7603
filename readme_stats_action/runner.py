"""
Runner: resolve, parse, validate, render, and save one card.

``render_card`` does the work and returns a RenderResult; ``run`` adds the
Action reporting (warnings, the ``Wrote ...`` line, the ``path`` output).
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable

from readme_stats_action import actions, config
from readme_stats_action.cards import normalize_card_type, resolve_handler, validate_card_options
from readme_stats_action.exceptions import (
    CliError,
    EmptyOutputError,
    OutputError,
    RenderError,
)
from readme_stats_action.options import parse_options
from readme_stats_action.response import CaptureResponse, CardRequest, Handler, invoke_handler
from readme_stats_action.types import RenderResult


def default_output_path(card: str) -> str:
    return os.path.join(config.DEFAULT_OUTPUT_DIR, f"{card}{config.OUTPUT_EXTENSION}")


def _write_text_atomic(path: str, text: str) -> None:
    """Write *text* to *path* via a temp file and rename, overwriting *path*."""
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), prefix=".card_tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp_path, path)
    except Exception:
        # Clean up temp file on any failure.
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise


def render_card(
    card: str,
    options: str | None = "",
    path: str | None = None,
    *,
    repo_owner: str | None = None,
    cwd: str | None = None,
    handlers: dict[str, Handler] | None = None,
    warn: Callable[[str], None] | None = None,
) -> RenderResult:
    """Render *card* with *options* and save the output.

    Raises a CliError subclass on the first failing step; nothing is written
    to *path* unless every step succeeds.
    """
    emit = warn or actions.warning
    card = normalize_card_type(card)
    handler = resolve_handler(card, handlers)

    query = parse_options(options or "")
    owner = config.REPOSITORY_OWNER if repo_owner is None else repo_owner
    warnings = validate_card_options(card, query, owner)
    for w in warnings:
        emit(w)

    output_path_value = path or default_output_path(card)
    output_path = os.path.abspath(os.path.join(cwd or os.getcwd(), output_path_value))
    try:
        os.makedirs(os.path.dirname(output_path), exist_ok=True)
    except OSError as e:
        raise OutputError(str(e)) from e

    request = CardRequest(card=card, query=query)
    response = CaptureResponse()
    actions.debug(f"Rendering {card} card with options {sorted(query)}")
    try:
        svg = invoke_handler(handler, request, response)
    except CliError:
        raise
    except Exception as e:
        raise RenderError(str(e)) from e
    for w in response.warnings:
        emit(w)
    warnings.extend(response.warnings)

    if not svg:
        raise EmptyOutputError("Card renderer returned empty output.")

    try:
        _write_text_atomic(output_path, svg)
    except OSError as e:
        raise OutputError(str(e)) from e
    return {
        "card": card,
        "path": output_path_value,
        "absolute_path": output_path,
        "bytes": len(svg.encode("utf-8")),
        "warnings": warnings,
    }


def run(card: str, options: str | None = "", path: str | None = None, **kwargs) -> RenderResult:
    """Render one card and report it the way the Action does."""
    result = render_card(card, options, path, **kwargs)
    actions.info(f"Wrote {result['absolute_path']}")
    actions.set_output("path", result["path"])
    return result
