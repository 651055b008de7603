"""
readme-stats-action — render GitHub readme cards to SVG files
"""

import argparse
import json
import sys

from readme_stats_action import actions, config
from readme_stats_action.cards import list_card_types
from readme_stats_action.exceptions import CliError
from readme_stats_action.options import parse_options
from readme_stats_action.runner import run
from readme_stats_action.types import ErrorPayload

HELP_TEXT = """\
Usage: readme-stats-action [<command>] [args...]

With no command, runs as a GitHub Action and reads INPUT_CARD,
INPUT_OPTIONS and INPUT_PATH from the environment.

Global flags:
  --format json           Print results and errors as JSON (default: text)
  --quiet, -q             Suppress info and warning lines
  --verbose, -v           Enable debug and HTTP request logging
  --version               Show version number

Commands:
  render                  - Render one card and save it
    --card <type>           stats, top-langs, pin, wakatime, gist
    --options <string>      Query string or JSON object (e.g. username=alice)
    --path <file>           Output file (default: profile/<card>.svg)
  cards                   - List supported card types and required options
  parse <options>         - Show how an options string is normalized
  version                 - Show version number

Environment:
  GITHUB_REPOSITORY_OWNER Default username when options carry none
  GRS_BASE_URL            github-readme-stats deployment to render with
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so flags work after the command)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "text"
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"readme-stats-action {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in ("json", "text"):
                raise CliError(f"Invalid format '{fmt}'. Use: json, text")
            i += 1
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("--quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(message)


def build_parser():
    parser = _SubcommandParser(
        prog="readme-stats-action",
        description="Render GitHub readme cards to SVG files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    p = sub.add_parser("render")
    p.add_argument("--card")
    p.add_argument("--options")
    p.add_argument("--path")
    p.set_defaults(func=cmd_render)

    sub.add_parser("cards").set_defaults(func=cmd_cards)

    p = sub.add_parser("parse")
    p.add_argument("options", nargs="?", default="")
    p.set_defaults(func=cmd_parse)

    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_render(ns):
    """Render from flags, falling back to the Action inputs for anything unset."""
    card = ns.card or actions.get_input("card", required=True)
    options = ns.options if ns.options is not None else actions.get_input("options")
    path = ns.path or actions.get_input("path") or None
    result = run(card, options, path)
    if ns.format == "json":
        print(json.dumps({"ok": True, **result}, ensure_ascii=False))


def cmd_cards(ns):
    rows = list_card_types()
    if ns.format == "json":
        print(json.dumps(rows, indent=2))
        return
    width = max(len(r["card"]) for r in rows)
    for r in rows:
        print(f"{r['card']:<{width}}  requires {r['required']:<8}  {r['description']}")


def cmd_parse(ns):
    print(json.dumps(parse_options(ns.options), ensure_ascii=False, sort_keys=True))


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _error_type(err):
    """snake_case error type from the exception class (ValidationError -> validation)."""
    name = type(err).__name__
    if name.endswith("Error"):
        name = name[: -len("Error")]
    out = []
    for ch in name:
        if ch.isupper() and out:
            out.append("_")
        out.append(ch.lower())
    return "".join(out) or "cli"


def _emit_cli_error(err, fmt):
    msg = str(err)
    exit_code = getattr(err, "exit_code", 1)
    if fmt == "json":
        payload: ErrorPayload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": _error_type(err),
                "message": msg,
                "exit_code": exit_code,
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return exit_code
    return actions.set_failed(msg, exit_code)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    fmt = "text"
    try:
        fmt, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose

        # Bare invocation is the Action entry point.
        if not remaining_argv:
            remaining_argv = ["render"]

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"readme-stats-action {config.VERSION}")
            sys.exit(0)

        ns.func(ns)

    except CliError as e:
        sys.exit(_emit_cli_error(e, fmt))


if __name__ == "__main__":
    main()
