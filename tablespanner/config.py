"""Configuration loader for the tablespanner CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: Optional[int]) -> Optional[int]:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


@dataclass(slots=True)
class AppConfig:
    log_level: str = "WARNING"
    json_indent: Optional[int] = None
    ensure_ascii: bool = False


PRETTY_INDENT = 2


def load_config() -> AppConfig:
    log_level = _get_env("LOG_LEVEL", "WARNING").upper()

    json_indent = _get_int("TABLESPANNER_JSON_INDENT", None)
    if json_indent is not None and json_indent < 0:
        raise ValueError("Environment variable TABLESPANNER_JSON_INDENT must not be negative")

    ensure_ascii = _get_bool("TABLESPANNER_ENSURE_ASCII", False)

    return AppConfig(
        log_level=log_level,
        json_indent=json_indent,
        ensure_ascii=ensure_ascii,
    )
