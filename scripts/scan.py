#!/usr/bin/env python3
"""CI entrypoint to run the validator from a checked-out repository.

Usage:
  python scripts/scan.py [--html src/index.html] [--jobs 4] [--warn-only]

Any argument accepted by ``sri-validator`` is passed through. When running
under GitHub Actions, a Markdown summary is appended to $GITHUB_STEP_SUMMARY
unless ``--summary`` is given explicitly.
"""

from __future__ import annotations

import os
import sys

from sri_validator.cli import main as cli_main


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    step_summary = os.getenv("GITHUB_STEP_SUMMARY", "").strip()
    explicit = any(a == "--summary" or a.startswith("--summary=") for a in args)
    if step_summary and not explicit:
        args += ["--summary", step_summary]

    return cli_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
