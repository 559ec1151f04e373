"""Config loader from env + yaml."""

from __future__ import annotations

from pathlib import Path
import os
from typing import Any

import yaml
from pydantic import BaseModel, Field

from phish_risk_engine.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config" / "defaults.yaml"
DEFAULT_LEXICON_PATH = PACKAGE_ROOT / "lexicon" / "default_lexicon.yaml"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppConfig(BaseModel):

    lexicon_path: str = Field(default=str(DEFAULT_LEXICON_PATH))
    parallel_detectors: bool = Field(default=True)
    max_workers: int = Field(default=5, gt=0)
    log_level: str = Field(default="INFO")
    default_config_path: str = Field(default=str(DEFAULT_CONFIG_PATH))


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    try:
        payload = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml in {p}: {exc}") from exc
    return payload if isinstance(payload, dict) else {}


def _pick_env(name: str, fallback: Any) -> Any:
    value = os.getenv(name)
    return value if value not in (None, "") else fallback


def _parse_int(raw: Any, fallback: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_bool(raw: Any, fallback: bool) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return fallback
    value = str(raw).strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return fallback


def _parse_str(raw: Any, fallback: str) -> str:
    value = str(raw if raw is not None else "").strip()
    return value or fallback


def _parse_log_level(raw: Any, fallback: str) -> str:
    value = _parse_str(raw, fallback).upper()
    return value if value in _LOG_LEVELS else fallback


def _resolve_default_config_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    env_default_path = os.getenv("PHISH_RISK_DEFAULT_CONFIG_PATH")
    if env_default_path:
        return Path(env_default_path)
    return DEFAULT_CONFIG_PATH


def _resolve_lexicon_path(raw: Any, config_path: Path) -> str:
    value = _parse_str(raw, str(DEFAULT_LEXICON_PATH))
    candidate = Path(value)
    if not candidate.is_absolute():
        # Relative entries in a config file are read next to that file.
        sibling = (config_path.parent / candidate).resolve()
        if sibling.exists():
            return str(sibling)
    return value


def load_config(path: str | Path | None = None) -> tuple[AppConfig, dict[str, Any]]:
    default_path = _resolve_default_config_path(path)
    merged = load_yaml(default_path)

    payload = {
        "lexicon_path": _resolve_lexicon_path(
            _pick_env("PHISH_RISK_LEXICON_PATH", merged.get("lexicon_path")),
            default_path,
        ),
        "parallel_detectors": _parse_bool(
            _pick_env("PHISH_RISK_PARALLEL_DETECTORS", merged.get("parallel_detectors", True)),
            True,
        ),
        "max_workers": _parse_int(
            _pick_env("PHISH_RISK_MAX_WORKERS", merged.get("max_workers", 5)),
            5,
        ),
        "log_level": _parse_log_level(
            _pick_env("PHISH_RISK_LOG_LEVEL", merged.get("log_level", "INFO")),
            "INFO",
        ),
        "default_config_path": str(default_path),
    }

    cfg = AppConfig.model_validate(payload)
    return cfg, merged
