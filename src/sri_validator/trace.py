"""Human-readable console trace for a validation run."""

from __future__ import annotations

from .core import ResourceCheck, ValidationResult


def _integrity_lines(check: ResourceCheck) -> list[str]:
    resource = check.resource
    if resource.integrity is None:
        if check.requires_integrity:
            return ["  ❌ SRI hash missing for static resource"]
        return [f"  ℹ️  {check.exemption.reason}"]

    if check.error is not None:
        return [f"  ❌ SRI validation failed: {check.error}"]

    outcome = check.outcome
    if outcome.matches:
        return [f"  ✅ SRI hash valid ({outcome.algorithm})"]
    return [
        "  ❌ SRI hash mismatch!",
        f"     Expected: {outcome.expected_digest}",
        f"     Actual:   {outcome.computed_digest}",
    ]


def _crossorigin_line(check: ResourceCheck) -> str:
    if check.resource.has_crossorigin:
        return "  ✅ Crossorigin attribute present"
    return "  ⚠️  Missing crossorigin attribute"


def render_trace(result: ValidationResult) -> str:
    """Return the full console log: inventory, per-resource checks, headers, summary."""
    lines = ["🔒 SRI Validation Starting...", ""]

    lines.append(f"📋 Found {len(result.checks)} external resources:")
    for index, resource in enumerate(result.resources, start=1):
        lines.append(f"  {index}. {resource.kind.value.upper()}: {resource.url}")
    lines.append("")

    for check in result.checks:
        lines.append(f"🔍 Validating: {check.resource.url}")
        lines.extend(_integrity_lines(check))
        lines.append(_crossorigin_line(check))
        lines.append("")

    lines.append("🛡️  Security Headers Validation:")
    if not result.header_issues:
        lines.append("  ✅ All security headers present")
    else:
        lines.extend(f"  ❌ {issue}" for issue in result.header_issues)

    lines.append("")
    lines.append("📊 Validation Summary:")
    lines.append(f"  External resources: {len(result.checks)}")
    lines.append(f"  Security issues: {result.issue_count}")
    lines.append("")
    if result.has_issues:
        lines.append(f"⚠️  Found {result.issue_count} security issues that should be addressed.")
    else:
        lines.append("🎉 All SRI validations passed! Your application is secure.")

    return "\n".join(lines) + "\n"
