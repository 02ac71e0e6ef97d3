"""Optional settings loader.

Without a settings file the validator runs with the built-in exemption rules
and request timeout. A settings file is a JSON object with any of:

``exemptions``
    list of ``{"id", "reason", "markupContains", "urlContains"}`` objects;
    replaces the built-in rules entirely when present.
``timeout``
    per-request timeout in seconds (positive number).
"""

from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .integrity import DEFAULT_TIMEOUT
from .policy import DEFAULT_EXEMPTIONS, ExemptionRule

CONFIG_PATH_ENV_VAR = "SRI_VALIDATOR_CONFIG"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    exemptions: tuple[ExemptionRule, ...] = DEFAULT_EXEMPTIONS
    timeout: float = DEFAULT_TIMEOUT


def _string_list(data: dict[str, Any], key: str, rule_id: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ConfigError(
            f"Exemption '{rule_id}' has invalid '{key}' field (must be list of non-empty strings)"
        )
    return value


def _exemption_from_dict(data: Any, index: int) -> ExemptionRule:
    if not isinstance(data, dict):
        raise ConfigError(f"Exemption at index {index} must be an object")

    rule_id = data.get("id")
    if not rule_id or not isinstance(rule_id, str):
        raise ConfigError(f"Exemption at index {index} is missing required 'id' field")

    reason = data.get("reason", f"{rule_id} - SRI not required")
    if not isinstance(reason, str):
        raise ConfigError(f"Exemption '{rule_id}' has invalid 'reason' field (must be string)")

    markup = _string_list(data, "markupContains", rule_id)
    url = _string_list(data, "urlContains", rule_id)
    if not markup and not url:
        raise ConfigError(
            f"Exemption '{rule_id}' must declare 'markupContains' or 'urlContains'"
        )

    return ExemptionRule.from_iterables(
        id=rule_id, reason=reason, markup_contains=markup, url_contains=url
    )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. SRI_VALIDATOR_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            SRI_VALIDATOR_CONFIG env var or falls back to built-in defaults.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    exemptions = DEFAULT_EXEMPTIONS
    if "exemptions" in data:
        items = data["exemptions"]
        if not isinstance(items, list):
            raise ConfigError("'exemptions' must be an array")
        rules = [_exemption_from_dict(item, index) for index, item in enumerate(items)]
        seen: set[str] = set()
        for rule in rules:
            if rule.id in seen:
                raise ConfigError(f"Duplicate exemption ID: '{rule.id}'")
            seen.add(rule.id)
        exemptions = tuple(rules)

    timeout = data.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        raise ConfigError("'timeout' must be a positive number")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError("'timeout' must be a positive number")

    return Settings(exemptions=exemptions, timeout=float(timeout))
