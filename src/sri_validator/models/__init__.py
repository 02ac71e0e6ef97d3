"""Data models for external resources and their verification results."""

from __future__ import annotations

from .resource import Resource, ResourceKind
from .verification import VerificationOutcome

__all__ = [
    "Resource",
    "ResourceKind",
    "VerificationOutcome",
]
