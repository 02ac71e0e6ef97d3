import base64
import hashlib

import pytest

from sri_validator import cli, config, integrity


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(config.CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv(cli.WARN_ONLY_ENV_VAR, raising=False)
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)


def sri(body: bytes, algorithm: str = "sha384") -> str:
    digest = base64.b64encode(hashlib.new(algorithm, body).digest()).decode("ascii")
    return f"{algorithm}-{digest}"


@pytest.fixture
def fake_http(monkeypatch):
    """Serve canned responses keyed by URL and record every requested URL."""
    responses: dict[str, object] = {}
    requested: list[str] = []

    def _fake_get(url: str, timeout: float):
        requested.append(url)
        result = responses[url]
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(integrity, "_http_get", _fake_get)
    _fake_get.responses = responses
    _fake_get.requested = requested
    return _fake_get
