"""
HTTP request layer used by the card renderers.

One GET per call, no retries. Errors come back as CliError with a short,
sanitized description of what the server said.
"""

import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
import uuid

from readme_stats_action import config
from readme_stats_action.exceptions import CliError, HTTPError, SetupError

_SENSITIVE_PARAMS = frozenset({"token", "pat", "access_token", "api_key"})


# ---------------------------------------------------------------------------
# Logging helpers
# ---------------------------------------------------------------------------


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _sanitize_url_for_log(url):
    """Mask sensitive query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in _SENSITIVE_PARAMS:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _log_http_event(**fields):
    """Emit structured HTTP logs to stderr when enabled."""
    if not (config.HTTP_LOG_ENABLED or config.RUNTIME_VERBOSE):
        return
    print("[HTTP] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def _error_envelope(message, status=None, request_id=None, detail=None):
    """Build a consistent CLI-safe HTTP error message."""
    meta = []
    if status is not None:
        meta.append(f"status={status}")
    if request_id:
        meta.append(f"request_id={request_id}")
    suffix = f" ({', '.join(meta)})" if meta else ""
    body = f"{message}{suffix}"
    if detail:
        body += f"\n{detail}"
    return body


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, headers=None):
    """GET *url* and return ``(text, content_type)``.

    Raises HTTPError for HTTP status errors and CliError for network, timeout,
    size and decoding failures.
    """
    request_id = (headers or {}).get("X-Request-Id")
    safe_url = _sanitize_url_for_log(url)
    timeout = max(1, config.HTTP_TIMEOUT_SECONDS)
    start = time.perf_counter()
    req = urllib.request.Request(url, headers=headers or {}, method="GET")
    _log_http_event(
        phase="request",
        method="GET",
        url=safe_url,
        request_id=request_id,
        timeout_seconds=timeout,
    )
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            content_type = resp.headers.get("Content-Type", "")
            raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
            if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                raise CliError(
                    "Response too large from card renderer "
                    f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
                )
            _log_http_event(
                phase="response",
                method="GET",
                url=safe_url,
                status=getattr(resp, "status", 200),
                content_type=content_type,
                bytes=len(raw),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
                request_id=request_id,
            )
            try:
                return raw.decode("utf-8"), content_type
            except UnicodeDecodeError:
                raise CliError("Unexpected response from card renderer (not UTF-8 text).") from None
    except urllib.error.HTTPError as e:
        error_body = (
            e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
            if e.fp
            else ""
        )
        _log_http_event(
            phase="response",
            method="GET",
            url=safe_url,
            status=e.code,
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
            request_id=request_id,
        )
        raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
    except TimeoutError as e:
        _log_http_event(
            phase="network_error",
            method="GET",
            url=safe_url,
            error="timeout",
            request_id=request_id,
        )
        raise CliError(
            _error_envelope(
                f"Request timed out after {timeout} seconds. Is the card renderer reachable?",
                request_id=request_id,
            )
        ) from e
    except urllib.error.URLError as e:
        _log_http_event(
            phase="network_error",
            method="GET",
            url=safe_url,
            error=f"url_error: {e.reason}",
            request_id=request_id,
        )
        raise CliError(
            _error_envelope(f"Connection failed: {e.reason}", request_id=request_id)
        ) from e


def build_card_url(endpoint, query):
    """Join the configured renderer base URL, *endpoint*, and encoded *query*."""
    base = (config.RENDERER_BASE_URL or "").rstrip("/")
    parsed = urllib.parse.urlsplit(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise SetupError(
            f"Invalid card renderer URL {base!r}. Set GRS_BASE_URL to an http(s) URL."
        )
    url = base + endpoint
    if query:
        url += "?" + urllib.parse.urlencode(query)
    return url


def fetch_card(endpoint, query):
    """Fetch one rendered card. Returns ``(svg_text, content_type)``."""
    url = build_card_url(endpoint, query)
    headers = {
        "Accept": "image/svg+xml, text/plain;q=0.5, */*;q=0.1",
        "User-Agent": f"readme-stats-action/{config.VERSION}",
        "X-Request-Id": str(uuid.uuid4()),
    }
    try:
        return _http_request(url, headers)
    except HTTPError as e:
        server_req_id = e.headers.get("X-Request-Id") if e.headers else None
        raise CliError(
            _error_envelope(
                f"HTTP {e.code}: {e.reason}",
                status=e.code,
                request_id=server_req_id,
                detail=_sanitize_error(e.body),
            )
        ) from e
