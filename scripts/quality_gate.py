"""Run lint, format, type and test checks and report results as JSON.

Usage:
    python scripts/quality_gate.py              # run all, JSON output
    python scripts/quality_gate.py --skip-tests # skip pytest (fast)
    python scripts/quality_gate.py --fix        # auto-fix ruff issues first
"""

from __future__ import annotations

import argparse
import json
import re
import subprocess
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# The MCP package is optional and left out of type checks.
MYPY_TARGETS = [
    "readme_stats_action/actions.py",
    "readme_stats_action/api.py",
    "readme_stats_action/cards.py",
    "readme_stats_action/exceptions.py",
    "readme_stats_action/options.py",
    "readme_stats_action/response.py",
    "readme_stats_action/runner.py",
    "readme_stats_action/types.py",
]


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, capture_output=True, text=True, cwd=str(ROOT), timeout=300)


def _check(args: list[str], issue_pattern: str, issue_key: str) -> dict:
    """Run one tool and count output lines matching *issue_pattern*."""
    t0 = time.monotonic()
    r = _run([sys.executable, "-m", *args])
    output = r.stdout + r.stderr
    issues = sum(1 for line in output.splitlines() if re.search(issue_pattern, line))
    return {
        "status": "pass" if r.returncode == 0 else "fail",
        issue_key: issues if r.returncode != 0 else 0,
        "duration_s": round(time.monotonic() - t0, 1),
        "output": output.strip()[-2000:] if r.returncode != 0 else "",
    }


def check_pytest() -> dict:
    t0 = time.monotonic()
    r = _run([sys.executable, "-m", "pytest", "tests/", "-q", "--no-header", "--tb=short"])
    passed = failed = 0
    # Summary line: "58 passed" or "3 failed, 55 passed"
    for line in reversed(r.stdout.strip().splitlines()):
        m_passed = re.search(r"(\d+)\s+passed", line)
        m_failed = re.search(r"(\d+)\s+failed", line)
        if m_passed or m_failed:
            passed = int(m_passed.group(1)) if m_passed else 0
            failed = int(m_failed.group(1)) if m_failed else 0
            break
    result: dict = {
        "status": "pass" if r.returncode == 0 else "fail",
        "passed": passed,
        "failed": failed,
        "duration_s": round(time.monotonic() - t0, 1),
    }
    if r.returncode != 0:
        result["output"] = r.stdout.strip()[-2000:]
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Run all quality checks")
    parser.add_argument("--skip-tests", action="store_true", help="Skip pytest")
    parser.add_argument("--fix", action="store_true", help="Auto-fix ruff issues first")
    args = parser.parse_args()

    t0 = time.monotonic()
    if args.fix:
        _run([sys.executable, "-m", "ruff", "check", "--fix", "."])

    checks: dict[str, dict] = {}
    print("Running ruff lint...", file=sys.stderr)
    checks["ruff_lint"] = _check(["ruff", "check", "."], r"^\S+:\d+:\d+:", "errors")
    print("Running ruff format...", file=sys.stderr)
    checks["ruff_format"] = _check(
        ["ruff", "format", "--check", "."], r"^Would reformat", "files_to_reformat"
    )
    print("Running mypy...", file=sys.stderr)
    checks["mypy"] = _check(["mypy", *MYPY_TARGETS], r": error:", "errors")
    if args.skip_tests:
        checks["pytest"] = {"status": "skip", "reason": "--skip-tests"}
    else:
        print("Running pytest...", file=sys.stderr)
        checks["pytest"] = check_pytest()

    for check in checks.values():
        if check.get("status") == "pass":
            check.pop("output", None)

    overall = "pass" if all(c["status"] in ("pass", "skip") for c in checks.values()) else "fail"
    print(
        json.dumps(
            {
                "overall": overall,
                "checks": checks,
                "total_duration_s": round(time.monotonic() - t0, 1),
            },
            indent=2,
        )
    )
    sys.exit(0 if overall == "pass" else 1)


if __name__ == "__main__":
    main()
