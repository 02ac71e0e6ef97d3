"""Extract externally-hosted ``<link>`` and ``<script>`` elements from HTML.

Matching is pattern-based rather than a structural parse. Each element type is
scanned in its own pass, so the result lists every link (in document order)
before every script (in document order).
"""

from __future__ import annotations

import re
from pathlib import Path

from ..models.resource import Resource, ResourceKind

_LINK_RE = re.compile(r"""<link[^>]+href\s*=\s*["']https?://[^"']+["'][^>]*>""", re.IGNORECASE)
_SCRIPT_RE = re.compile(r"""<script[^>]+src\s*=\s*["']https?://[^"']+["'][^>]*>""", re.IGNORECASE)

_HREF_RE = re.compile(r"""href\s*=\s*["'](https?://[^"']+)["']""", re.IGNORECASE)
_SRC_RE = re.compile(r"""src\s*=\s*["'](https?://[^"']+)["']""", re.IGNORECASE)
_INTEGRITY_RE = re.compile(r"""integrity\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
_CROSSORIGIN_RE = re.compile(r"""crossorigin\s*=\s*["']([^"']+)["']""", re.IGNORECASE)

# (element kind, element pattern, url attribute pattern), scanned in this order
_PASSES = (
    (ResourceKind.STYLESHEET_LINK, _LINK_RE, _HREF_RE),
    (ResourceKind.SCRIPT, _SCRIPT_RE, _SRC_RE),
)


def _has_crossorigin(element: str) -> bool:
    # A bare ``crossorigin`` attribute has no value to capture.
    return bool(_CROSSORIGIN_RE.search(element)) or "crossorigin" in element


def extract_resources(html: str) -> list[Resource]:
    """Return external resources referenced by ``html``, links first then scripts."""
    resources: list[Resource] = []
    for kind, element_re, url_re in _PASSES:
        for match in element_re.finditer(html):
            element = match.group(0)
            url_match = url_re.search(element)
            if not url_match:
                continue
            integrity_match = _INTEGRITY_RE.search(element)
            resources.append(
                Resource(
                    kind=kind,
                    url=url_match.group(1),
                    integrity=integrity_match.group(1) if integrity_match else None,
                    has_crossorigin=_has_crossorigin(element),
                    element=element,
                )
            )
    return resources


def parse(path: Path) -> list[Resource]:
    """Return external resources from an HTML file read as UTF-8."""
    return extract_resources(path.read_text(encoding="utf-8"))
