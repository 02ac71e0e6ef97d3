"""External resource model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(str, Enum):
    """Element type an external resource was extracted from."""

    STYLESHEET_LINK = "link"
    SCRIPT = "script"


@dataclass(frozen=True)
class Resource:
    """An externally-hosted asset referenced by the document."""

    kind: ResourceKind
    url: str
    integrity: str | None
    has_crossorigin: bool
    element: str

    def __post_init__(self) -> None:
        if not self.url.startswith(("http://", "https://")):
            raise ValueError(f"Resource URL must be absolute HTTP(S): {self.url}")
        if self.integrity is not None and not self.integrity:
            raise ValueError("integrity must be None or a non-empty string")

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind.value,
            "url": self.url,
            "integrity": self.integrity,
            "crossorigin": self.has_crossorigin,
        }
