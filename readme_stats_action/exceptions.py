"""
readme-stats-action exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class CliError(Exception):
    """Exit code 1 — parse, validation, dispatch, render errors."""

    exit_code = 1


class SetupError(CliError):
    """Exit code 2 — bad configuration (renderer URL, environment)."""

    exit_code = 2


class MissingInputError(CliError):
    """A required Action input was not supplied."""


class ParseError(CliError):
    """The options string is malformed JSON."""


class UnsupportedCardError(CliError):
    """The card type is not in the dispatch table."""


class ValidationError(CliError):
    """A field required by the card type is missing."""


class EmptyOutputError(CliError):
    """The card renderer never emitted any output."""


class RenderError(CliError):
    """Opaque failure raised inside a card renderer; message passed through."""


class OutputError(CliError):
    """The output directory or file could not be written."""


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
