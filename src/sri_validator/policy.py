"""SRI requirement policy.

Some external resources cannot carry a stable integrity digest: preconnect
hints fetch no body, and a few font providers serve content generated per
account or per user agent. Those exemptions live in ``DEFAULT_EXEMPTIONS`` as
data; the classifier only walks the list.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Sequence
from typing import Any

from .models.resource import Resource


@dataclass(frozen=True)
class ExemptionRule:
    """A resource is exempt when every listed substring is present.

    ``markup_contains`` is matched against the raw element text and
    ``url_contains`` against the resource URL, both case-sensitively.
    """

    id: str
    reason: str
    markup_contains: tuple[str, ...] = ()
    url_contains: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Exemption id must be non-empty")
        if not self.markup_contains and not self.url_contains:
            raise ValueError(f"Exemption '{self.id}' must declare at least one condition")
        if any(not needle for needle in (*self.markup_contains, *self.url_contains)):
            raise ValueError(f"Exemption '{self.id}' contains an empty substring")

    def matches(self, resource: Resource) -> bool:
        return all(needle in resource.element for needle in self.markup_contains) and all(
            needle in resource.url for needle in self.url_contains
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "reason": self.reason,
            "markupContains": list(self.markup_contains),
            "urlContains": list(self.url_contains),
        }

    @classmethod
    def from_iterables(
        cls,
        *,
        id: str,
        reason: str,
        markup_contains: Iterable[str] = (),
        url_contains: Iterable[str] = (),
    ) -> ExemptionRule:
        return cls(
            id=id,
            reason=reason,
            markup_contains=tuple(markup_contains),
            url_contains=tuple(url_contains),
        )


DEFAULT_EXEMPTIONS: tuple[ExemptionRule, ...] = (
    ExemptionRule(
        id="preconnect",
        reason="Preconnect link - SRI not applicable",
        markup_contains=('rel="preconnect"',),
    ),
    ExemptionRule(
        id="font-awesome-kit",
        reason="Font Awesome Kit - SRI not available for dynamic content",
        url_contains=("kit.fontawesome.com",),
    ),
    ExemptionRule(
        id="google-fonts-css",
        reason="Google Fonts CSS - SRI not supported for dynamic content",
        url_contains=("fonts.googleapis.com", "css"),
    ),
)


def exemption_for(
    resource: Resource, rules: Sequence[ExemptionRule] = DEFAULT_EXEMPTIONS
) -> ExemptionRule | None:
    """Return the first rule exempting ``resource`` from SRI, if any."""
    for rule in rules:
        if rule.matches(resource):
            return rule
    return None


def requires_integrity(
    resource: Resource, rules: Sequence[ExemptionRule] = DEFAULT_EXEMPTIONS
) -> bool:
    return exemption_for(resource, rules) is None
