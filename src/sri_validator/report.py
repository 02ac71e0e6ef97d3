"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .core import ResourceCheck, ValidationResult
from .headers import SECURITY_HEADERS, header_issue


def _sri_status(check: ResourceCheck) -> str:
    if check.resource.integrity is None:
        return "missing" if check.requires_integrity else "exempt"
    if check.error is not None:
        return "error"
    return "valid" if check.outcome.matches else "mismatch"


def _check_to_dict(check: ResourceCheck) -> dict[str, Any]:
    entry: dict[str, Any] = check.resource.to_dict()
    entry.update(
        {
            "requiresIntegrity": check.requires_integrity,
            "exemption": check.exemption.id if check.exemption else None,
            "sri": _sri_status(check),
            "issues": check.issue_count,
        }
    )
    if check.outcome is not None:
        entry["verification"] = check.outcome.to_dict()
    if check.error is not None:
        entry["error"] = {
            "kind": type(check.error).__name__,
            "message": str(check.error),
        }
    return entry


def build_report(result: ValidationResult) -> dict[str, Any]:
    """Aggregate a validation result into a single schema-compatible report.

    ``headers`` lists every tracked header name with a ``present`` flag, in
    the fixed audit order. ``totals.issues`` equals the run's issue counter.
    """
    report: dict[str, Any] = {
        "version": "1",
        "hasIssues": result.has_issues,
        "resources": [_check_to_dict(check) for check in result.checks],
        "headers": [
            {"name": name, "present": header_issue(name) not in result.header_issues}
            for name in SECURITY_HEADERS
        ],
        "totals": {
            "resources": len(result.checks),
            "issues": result.issue_count,
        },
    }

    return report
