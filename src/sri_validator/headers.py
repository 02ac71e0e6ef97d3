"""Baseline security header audit.

The check is a case-sensitive substring search over the raw document. Any
textual occurrence of a header name satisfies it, whether it sits in a
``<meta http-equiv>`` element, a comment or a string literal. Header values
are not inspected.
"""

from __future__ import annotations

SECURITY_HEADERS = (
    "Content-Security-Policy",
    "X-Frame-Options",
    "X-Content-Type-Options",
    "Referrer-Policy",
)


def header_issue(name: str) -> str:
    return f"Missing {name} header"


def audit_headers(html: str) -> list[str]:
    """Return one issue per missing header name, in ``SECURITY_HEADERS`` order."""
    return [header_issue(name) for name in SECURITY_HEADERS if name not in html]
