"""
Card types, required-option validation, and the renderer dispatch table.
"""

from __future__ import annotations

from readme_stats_action import config, renderers
from readme_stats_action.exceptions import UnsupportedCardError, ValidationError
from readme_stats_action.response import Handler

CARD_HANDLERS: dict[str, Handler] = {
    "stats": renderers.stats_card,
    "top-langs": renderers.top_langs_card,
    "pin": renderers.pin_card,
    "wakatime": renderers.wakatime_card,
    "gist": renderers.gist_card,
}

REQUIRED_FIELDS = {
    "stats": "username",
    "top-langs": "username",
    "wakatime": "username",
    "pin": "repo",
    "gist": "id",
}

_CARD_DESCRIPTIONS = {
    "stats": "GitHub statistics summary",
    "top-langs": "Most used languages",
    "pin": "Pinned repository",
    "wakatime": "WakaTime coding activity",
    "gist": "Pinned gist",
}

USERNAME_FALLBACK_WARNING = "username not provided; defaulting to repository owner."


def normalize_card_type(card):
    return (card or "").strip().lower()


def resolve_handler(card, handlers=None):
    """Return the renderer for *card* (case-insensitive).

    Raises UnsupportedCardError for anything outside the dispatch table.
    """
    table = CARD_HANDLERS if handlers is None else handlers
    key = normalize_card_type(card)
    handler = table.get(key)
    if handler is None:
        raise UnsupportedCardError(f"Unsupported card type: {key or card}")
    return handler


def validate_card_options(card, query, repo_owner=None):
    """Check required options for *card*, filling ``username`` from *repo_owner*.

    Mutates *query* in place. Returns the list of warnings raised along the
    way; raises ValidationError when a required option is missing.
    """
    warnings = []
    if not query.get("username") and repo_owner:
        query["username"] = repo_owner
        warnings.append(USERNAME_FALLBACK_WARNING)

    required = REQUIRED_FIELDS.get(card)
    if required and not query.get(required):
        raise ValidationError(f"{required} is required for the {card} card.")
    return warnings


def list_card_types():
    """One row per supported card type, in dispatch order."""
    return [
        {
            "card": card,
            "required": REQUIRED_FIELDS[card],
            "description": _CARD_DESCRIPTIONS[card],
            "default_path": f"{config.DEFAULT_OUTPUT_DIR}/{card}{config.OUTPUT_EXTENSION}",
        }
        for card in config.CARD_TYPES
    ]
