"""Subresource Integrity digest verification.

Each call fetches the resource once, hashes the raw response body with the
algorithm named in the integrity value and compares the base64 digest with
the declared one. Failures are raised as ``IntegrityError`` subclasses so the
caller can record them per resource and carry on.
"""

from __future__ import annotations

import base64
import hashlib
import logging
import re

import requests
from requests import Response

from .models.verification import VerificationOutcome

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_INTEGRITY_RE = re.compile(r"^(sha256|sha384|sha512)-(.+)$")


class IntegrityError(RuntimeError):
    """Base error for a resource whose integrity could not be verified."""


class InvalidIntegrityFormatError(IntegrityError):
    """Raised when an integrity value is not ``<algorithm>-<base64digest>``."""

    def __init__(self, integrity: str) -> None:
        super().__init__(f"Invalid integrity format: {integrity}")
        self.integrity = integrity


class HttpStatusError(IntegrityError):
    """Raised when the resource responds with anything other than 200."""

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP {status_code} for {url}")
        self.url = url
        self.status_code = status_code


class NetworkError(IntegrityError):
    """Raised on transport failures (DNS, TLS, connection reset, timeout)."""


def parse_integrity(integrity: str) -> tuple[str, str]:
    """Split an integrity value into ``(algorithm, base64_digest)``."""
    match = _INTEGRITY_RE.match(integrity)
    if not match:
        raise InvalidIntegrityFormatError(integrity)
    return match.group(1), match.group(2)


def compute_digest(algorithm: str, body: bytes) -> str:
    return base64.b64encode(hashlib.new(algorithm, body).digest()).decode("ascii")


def _http_get(url: str, timeout: float) -> Response:  # pragma: no cover - patched in tests
    return requests.get(url, timeout=timeout)


def verify(url: str, integrity: str, *, timeout: float = DEFAULT_TIMEOUT) -> VerificationOutcome:
    """Fetch ``url`` and check its body against the declared ``integrity``.

    Raises:
        InvalidIntegrityFormatError: the integrity value cannot be parsed.
        HttpStatusError: the response status is not 200.
        NetworkError: the request failed at the transport level.
    """
    algorithm, expected = parse_integrity(integrity)

    log.debug("Fetching %s (timeout=%ss)", url, timeout)
    try:
        response = _http_get(url, timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code != 200:
        raise HttpStatusError(url, response.status_code)

    computed = compute_digest(algorithm, response.content)
    log.debug("Computed %s digest for %s: %s", algorithm, url, computed)
    return VerificationOutcome(
        matches=computed == expected,
        algorithm=algorithm,
        expected_digest=expected,
        computed_digest=computed,
    )
