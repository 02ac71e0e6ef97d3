"""Command-line entrypoint: validate one HTML document and exit 0 (clean) or 1."""

from __future__ import annotations

import argparse
import json
import logging
import math
import os
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import DEFAULT_HTML_PATH, InputMissingError, validate_file
from .report import build_report
from .summary import render_summary
from .trace import render_trace

log = logging.getLogger("sri-validator")

WARN_ONLY_ENV_VAR = "SRI_VALIDATOR_WARN_ONLY"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check SRI digests, crossorigin attributes and security headers in an HTML file"
    )
    parser.add_argument("--html", type=Path, default=DEFAULT_HTML_PATH, help="HTML document to validate")
    parser.add_argument("--config", type=Path, default=None, help="Optional JSON settings file")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--jobs", type=int, default=1, help="Resources to verify concurrently")
    parser.add_argument("--format", choices=("text", "json"), default="text")
    parser.add_argument("--summary", type=Path, default=None, help="Append a Markdown summary here")
    parser.add_argument("--warn-only", action="store_true", help="Report issues but exit 0")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser.parse_args(argv)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _warn_only(args: argparse.Namespace) -> bool:
    if args.warn_only:
        return True
    return os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in {"1", "true", "yes", "y"}


def run(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.jobs < 1:
        print("ERROR: --jobs must be at least 1", file=sys.stderr)
        return 1

    timeout = args.timeout if args.timeout is not None else settings.timeout
    if not math.isfinite(timeout) or timeout <= 0:
        print("ERROR: --timeout must be a positive number", file=sys.stderr)
        return 1

    log.debug("Exemption rules: %s", json.dumps([rule.to_dict() for rule in settings.exemptions]))
    try:
        result = validate_file(
            args.html, rules=settings.exemptions, timeout=timeout, jobs=args.jobs
        )
    except InputMissingError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    report = build_report(result)
    if args.format == "json":
        print(json.dumps(report, indent=2))
    else:
        print(render_trace(result), end="")

    if args.summary is not None:
        with args.summary.open("a", encoding="utf-8") as fh:
            fh.write(render_summary(report))

    if result.has_issues and _warn_only(args):
        log.warning("%d issues found; exiting 0 because warn-only is enabled", result.issue_count)
        return 0
    return 1 if result.has_issues else 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)
    try:
        return run(args)
    except Exception as exc:
        log.debug("Unhandled error", exc_info=True)
        print(f"❌ Validation failed: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
