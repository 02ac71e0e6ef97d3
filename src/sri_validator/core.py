"""Core validation entrypoints.

This module MUST NOT print or exit so it can be driven by the CLI, the CI
wrapper script and tests alike. Rendering lives in ``trace``, ``report`` and
``summary``.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from collections.abc import Callable, Sequence

from .headers import audit_headers
from .integrity import DEFAULT_TIMEOUT, IntegrityError, verify
from .models.resource import Resource
from .models.verification import VerificationOutcome
from .parsers.html_resources import extract_resources
from .policy import DEFAULT_EXEMPTIONS, ExemptionRule, exemption_for

log = logging.getLogger(__name__)

DEFAULT_HTML_PATH = Path("src") / "index.html"

Verifier = Callable[..., VerificationOutcome]


class InputMissingError(RuntimeError):
    """Raised when the HTML document to validate does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"index.html not found at: {path}")
        self.path = path


@dataclass(frozen=True)
class ResourceCheck:
    """Classification and verification result for one resource."""

    resource: Resource
    exemption: ExemptionRule | None = None
    outcome: VerificationOutcome | None = None
    error: IntegrityError | None = None

    @property
    def requires_integrity(self) -> bool:
        return self.exemption is None

    @property
    def integrity_issue(self) -> bool:
        if self.resource.integrity is None:
            return self.requires_integrity
        if self.error is not None:
            return True
        return self.outcome is not None and not self.outcome.matches

    @property
    def crossorigin_issue(self) -> bool:
        # Exempt resources are reported without crossorigin but never counted.
        return not self.resource.has_crossorigin and self.requires_integrity

    @property
    def issue_count(self) -> int:
        return int(self.integrity_issue) + int(self.crossorigin_issue)


@dataclass(frozen=True)
class ValidationResult:
    """Everything one validation run found, in extraction order."""

    checks: tuple[ResourceCheck, ...]
    header_issues: tuple[str, ...]

    @property
    def resources(self) -> list[Resource]:
        return [check.resource for check in self.checks]

    @property
    def issue_count(self) -> int:
        return sum(check.issue_count for check in self.checks) + len(self.header_issues)

    @property
    def has_issues(self) -> bool:
        return self.issue_count > 0


def check_resource(
    resource: Resource,
    rules: Sequence[ExemptionRule] = DEFAULT_EXEMPTIONS,
    timeout: float = DEFAULT_TIMEOUT,
    verifier: Verifier = verify,
) -> ResourceCheck:
    """Classify ``resource`` and verify its declared integrity, if any.

    Integrity errors are captured on the returned check; anything else
    propagates.
    """
    exemption = exemption_for(resource, rules)
    if resource.integrity is None:
        return ResourceCheck(resource=resource, exemption=exemption)

    try:
        outcome = verifier(resource.url, resource.integrity, timeout=timeout)
    except IntegrityError as exc:
        log.debug("Integrity verification failed for %s: %s", resource.url, exc)
        return ResourceCheck(resource=resource, exemption=exemption, error=exc)
    return ResourceCheck(resource=resource, exemption=exemption, outcome=outcome)


def validate_html(
    html: str,
    *,
    rules: Sequence[ExemptionRule] = DEFAULT_EXEMPTIONS,
    timeout: float = DEFAULT_TIMEOUT,
    jobs: int = 1,
    verifier: Verifier = verify,
) -> ValidationResult:
    """Validate an HTML document held in memory.

    Params:
        html: document text
        rules: SRI exemption rules, checked in order
        timeout: per-request timeout in seconds
        jobs: number of resources verified concurrently; results are always
            returned in extraction order
        verifier: integrity verification callable, replaceable in tests
    """
    if jobs < 1:
        raise ValueError("jobs must be at least 1")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError("timeout must be a positive number")

    resources = extract_resources(html)
    log.info("Found %d external resources", len(resources))

    def _check(resource: Resource) -> ResourceCheck:
        return check_resource(resource, rules=rules, timeout=timeout, verifier=verifier)

    if jobs == 1 or len(resources) < 2:
        checks = [_check(resource) for resource in resources]
    else:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            checks = list(pool.map(_check, resources))

    return ValidationResult(checks=tuple(checks), header_issues=tuple(audit_headers(html)))


def validate_file(
    path: Path,
    *,
    rules: Sequence[ExemptionRule] = DEFAULT_EXEMPTIONS,
    timeout: float = DEFAULT_TIMEOUT,
    jobs: int = 1,
    verifier: Verifier = verify,
) -> ValidationResult:
    """Validate the HTML document at ``path``.

    Raises:
        InputMissingError: ``path`` does not exist.
    """
    if not path.exists():
        raise InputMissingError(path)

    html = path.read_text(encoding="utf-8")
    return validate_html(html, rules=rules, timeout=timeout, jobs=jobs, verifier=verifier)
