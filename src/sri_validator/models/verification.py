"""Verification outcome model."""

from __future__ import annotations

from dataclasses import dataclass

SUPPORTED_ALGORITHMS = ("sha256", "sha384", "sha512")


@dataclass(frozen=True)
class VerificationOutcome:
    """Result of recomputing a resource digest and comparing it to the declared one."""

    matches: bool
    algorithm: str
    expected_digest: str
    computed_digest: str

    def __post_init__(self) -> None:
        if self.algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported algorithm: {self.algorithm}")

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.matches,
            "algorithm": self.algorithm,
            "expected": self.expected_digest,
            "actual": self.computed_digest,
        }
