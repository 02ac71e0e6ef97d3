"""Check a saved ``--format json`` report against the shipped report schema.

Usage:
  sri-validator-check-report report.json [--schema path] [--fail-on-issues]

Prints the report's resource and issue totals when it conforms. With
``--fail-on-issues`` a conforming report that recorded issues also exits 1,
which lets CI gate on an artifact produced by an earlier job.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

DEFAULT_SCHEMA = Path(__file__).resolve().parents[1] / "schemas" / "report.schema.json"


class ReportSchemaError(ValueError):
    """Raised when a report does not conform to the report schema."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        lines = [f"- {'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors]
        super().__init__("\n" + "\n".join(lines))


def validate_report(report: dict[str, Any], schema_path: Path = DEFAULT_SCHEMA) -> None:
    """Raise ``ReportSchemaError`` listing every schema violation in ``report``."""
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    errors = sorted(
        Draft202012Validator(schema).iter_errors(report), key=lambda e: [str(p) for p in e.path]
    )
    if errors:
        raise ReportSchemaError(errors)


def describe_report(report: dict[str, Any]) -> str:
    totals = report["totals"]
    missing = [h["name"] for h in report["headers"] if not h["present"]]
    line = f"{totals['resources']} external resources, {totals['issues']} issues"
    if missing:
        line += f" (missing headers: {', '.join(missing)})"
    return line


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check an sri-validator JSON report")
    parser.add_argument("report", type=Path, help="JSON report written by sri-validator --format json")
    parser.add_argument("--schema", type=Path, default=DEFAULT_SCHEMA)
    parser.add_argument(
        "--fail-on-issues", action="store_true", help="Exit 1 when the report records any issue"
    )
    args = parser.parse_args(argv)

    try:
        report = json.loads(args.report.read_text(encoding="utf-8"))
        validate_report(report, args.schema)
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ReportSchemaError as exc:
        print(f"ERROR: {args.report} does not match the report schema:{exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"ERROR: {args.report} is not valid JSON: {exc}", file=sys.stderr)
        return 1

    print(f"{args.report}: {describe_report(report)}")
    if args.fail_on_issues and report["hasIssues"]:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
