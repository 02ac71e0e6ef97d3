"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of checked resources."""
    totals = report.get("totals", {})
    resources = report.get("resources", [])

    lines = []
    lines.append("# sri-validator Summary")
    lines.append("")
    lines.append(
        f"External resources: {totals.get('resources', 0)} | Issues: {totals.get('issues', 0)}"
    )
    lines.append("")
    lines.append("| Type | URL | SRI | Crossorigin |")
    lines.append("| --- | --- | --- | --- |")

    for res in resources:
        kind = res.get("type", "")
        url = res.get("url", "")
        sri = res.get("sri", "")
        if res.get("exemption"):
            sri = f"{sri} ({res['exemption']})"
        crossorigin = "yes" if res.get("crossorigin") else "no"
        lines.append(f"| {kind} | {url} | {sri} | {crossorigin} |")

    if not resources:
        lines.append("| (none) | No external resources | n/a | n/a |")

    missing = [h.get("name", "") for h in report.get("headers", []) if not h.get("present")]
    lines.append("")
    if missing:
        lines.append("Missing security headers: " + ", ".join(missing))
    else:
        lines.append("All security headers present")

    return "\n".join(lines) + "\n"
