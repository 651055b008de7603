"""
Card renderers backed by a github-readme-stats deployment.

Each renderer takes ``(request, response)``, asks the deployment for the card
matching ``request.query`` and sends the returned SVG through ``response``.
Point ``GRS_BASE_URL`` at a self-hosted deployment to use your own tokens.
"""

from readme_stats_action.api import fetch_card

ENDPOINTS = {
    "stats": "/api",
    "top-langs": "/api/top-langs",
    "pin": "/api/pin",
    "wakatime": "/api/wakatime",
    "gist": "/api/gist",
}

_SVG_CONTENT_TYPE = "image/svg+xml"


def _render(card, request, response):
    body, content_type = fetch_card(ENDPOINTS[card], request.query)
    response.set_header("Content-Type", content_type or _SVG_CONTENT_TYPE)
    return response.send(body)


def stats_card(request, response):
    return _render("stats", request, response)


def top_langs_card(request, response):
    return _render("top-langs", request, response)


def pin_card(request, response):
    return _render("pin", request, response)


def wakatime_card(request, response):
    return _render("wakatime", request, response)


def gist_card(request, response):
    return _render("gist", request, response)
