"""
GitHub Actions runtime glue: inputs, outputs, log lines, and failure state.

Inside a workflow (``GITHUB_ACTIONS=true``) messages use workflow-command
syntax so they show up as annotations; elsewhere they print as plain
``[WARN]``/``[ERROR]`` lines on stderr.
"""

import os
import sys
import uuid

from readme_stats_action import config
from readme_stats_action.exceptions import MissingInputError


def in_actions():
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def _escape_data(value):
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value):
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def _issue(command, message, **properties):
    props = ",".join(f"{k}={_escape_property(v)}" for k, v in properties.items() if v)
    head = f"::{command} {props}" if props else f"::{command}"
    print(f"{head}::{_escape_data(message)}")


# ---------------------------------------------------------------------------
# Inputs and outputs
# ---------------------------------------------------------------------------


def get_input(name, required=False):
    """Read an Action input from ``INPUT_<NAME>``, stripped of whitespace."""
    key = "INPUT_" + name.replace(" ", "_").upper()
    value = os.environ.get(key, "").strip()
    if required and not value:
        raise MissingInputError(f"Input required and not supplied: {name}")
    return value


def set_output(name, value):
    """Publish an Action output through ``$GITHUB_OUTPUT``."""
    output_file = os.environ.get("GITHUB_OUTPUT", "")
    if not output_file:
        print()
        _issue("set-output", value, name=name)
        return
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def debug(message):
    if not config.RUNTIME_VERBOSE:
        return
    if in_actions():
        _issue("debug", message)
    else:
        print(f"[DEBUG] {message}", file=sys.stderr)


def info(message):
    if config.RUNTIME_QUIET:
        return
    print(message)


def warning(message):
    if config.RUNTIME_QUIET:
        return
    if in_actions():
        _issue("warning", message)
    else:
        print(f"[WARN] {message}", file=sys.stderr)


def error(message):
    if in_actions():
        _issue("error", message)
    else:
        print(f"[ERROR] {message}", file=sys.stderr)


def set_failed(message, exit_code=1):
    """Report *message* as the run's failure. Returns the exit code to use."""
    error(message)
    return exit_code
