"""Tests for cards.py — dispatch table and required-option validation."""

import pytest

from readme_stats_action import config, renderers
from readme_stats_action.cards import (
    CARD_HANDLERS,
    USERNAME_FALLBACK_WARNING,
    list_card_types,
    resolve_handler,
    validate_card_options,
)
from readme_stats_action.exceptions import UnsupportedCardError, ValidationError


class TestResolveHandler:
    def test_every_card_type_has_handler(self):
        assert set(CARD_HANDLERS) == set(config.CARD_TYPES)

    def test_stats(self):
        assert resolve_handler("stats") is renderers.stats_card

    def test_mixed_case_resolves_same_handler(self):
        assert resolve_handler("STATS") is resolve_handler("stats")
        assert resolve_handler("Top-Langs") is renderers.top_langs_card

    def test_unknown_card_raises(self):
        with pytest.raises(UnsupportedCardError) as exc_info:
            resolve_handler("streak")
        assert str(exc_info.value) == "Unsupported card type: streak"

    def test_empty_card_raises(self):
        with pytest.raises(UnsupportedCardError):
            resolve_handler("")

    def test_custom_table(self):
        def fake(request, response):
            return None

        assert resolve_handler("Stats", {"stats": fake}) is fake
        with pytest.raises(UnsupportedCardError):
            resolve_handler("pin", {"stats": fake})


class TestValidateCardOptions:
    @pytest.mark.parametrize("card", ["stats", "top-langs", "wakatime"])
    def test_username_required(self, card):
        with pytest.raises(ValidationError) as exc_info:
            validate_card_options(card, {}, None)
        assert str(exc_info.value) == f"username is required for the {card} card."

    def test_pin_requires_repo(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_card_options("pin", {"username": "alice"})
        assert str(exc_info.value) == "repo is required for the pin card."

    def test_gist_requires_id(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_card_options("gist", {"username": "alice"})
        assert str(exc_info.value) == "id is required for the gist card."

    def test_empty_value_counts_as_missing(self):
        with pytest.raises(ValidationError):
            validate_card_options("pin", {"username": "alice", "repo": ""})

    def test_fallback_username_applied(self):
        query = {}
        warnings = validate_card_options("stats", query, "octocat")
        assert query == {"username": "octocat"}
        assert warnings == [USERNAME_FALLBACK_WARNING]

    def test_explicit_username_kept(self):
        query = {"username": "alice"}
        warnings = validate_card_options("stats", query, "octocat")
        assert query == {"username": "alice"}
        assert warnings == []

    def test_fallback_applies_to_pin_too(self):
        query = {"repo": "hello-world"}
        validate_card_options("pin", query, "octocat")
        assert query["username"] == "octocat"

    def test_fallback_does_not_satisfy_repo(self):
        with pytest.raises(ValidationError, match="repo is required"):
            validate_card_options("pin", {}, "octocat")

    def test_unknown_card_not_validated(self):
        assert validate_card_options("streak", {}, None) == []

    def test_valid_options_pass(self):
        assert validate_card_options("gist", {"id": "abc123", "username": "a"}) == []


class TestListCardTypes:
    def test_rows_in_dispatch_order(self):
        rows = list_card_types()
        assert [r["card"] for r in rows] == list(config.CARD_TYPES)

    def test_required_and_default_path(self):
        pin = next(r for r in list_card_types() if r["card"] == "pin")
        assert pin["required"] == "repo"
        assert pin["default_path"] == "profile/pin.svg"
