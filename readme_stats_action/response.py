"""
Request/response adapter for card renderers.

Renderers follow a serverless-handler convention: they receive a request with a
``query`` mapping and a response on which they set headers and ``send`` the
rendered body. ``CaptureResponse`` keeps that body instead of writing it to a
socket, so one render can be captured and saved to disk.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CardRequest:
    """One validated card render request."""

    card: str
    query: dict[str, str] = field(default_factory=dict)


class CaptureResponse:
    """Response stand-in that captures the single emitted body."""

    def __init__(self) -> None:
        self.body = ""
        self.headers: dict[str, str] = {}
        self.send_count = 0
        self.warnings: list[str] = []

    def set_header(self, name: str, value: Any) -> None:
        # Recorded only; nothing is sent anywhere.
        self.headers[name] = str(value)

    def send(self, value: Any) -> Any:
        """Capture *value* as the rendered output and return it. Last call wins."""
        self.send_count += 1
        if self.send_count > 1:
            self.warnings.append(
                f"Card renderer emitted output {self.send_count} times; keeping the last value."
            )
        if isinstance(value, bytes):
            self.body = value.decode("utf-8")
        elif value is None:
            self.body = ""
        else:
            self.body = str(value)
        return value


Handler = Callable[[CardRequest, CaptureResponse], Any]


def invoke_handler(handler: Handler, request: CardRequest, response: CaptureResponse) -> str:
    """Call *handler* once and return the captured body.

    Coroutine handlers are run to completion; there is no timeout.
    """
    result = handler(request, response)
    if inspect.isawaitable(result):
        asyncio.run(_await(result))
    return response.body


async def _await(awaitable):
    return await awaitable
