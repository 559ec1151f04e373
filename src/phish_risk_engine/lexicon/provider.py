"""Lexicon providers: the word, domain and extension lists behind the detectors."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml

logger = logging.getLogger(__name__)


class LexiconName(str, Enum):
    PHISHING_KEYWORDS = "phishing_keywords"
    SUSPICIOUS_DOMAINS = "suspicious_domains"
    LEGITIMATE_DOMAINS = "legitimate_domains"
    HIGH_RISK_EXTENSIONS = "high_risk_extensions"
    MEDIUM_RISK_EXTENSIONS = "medium_risk_extensions"


class LexiconProvider(Protocol):
    """Supplies one named list at a time. Must return [] rather than raise."""

    def load(self, name: str) -> list[str]: ...


def _clean_entries(raw: Any) -> list[str]:
    if not isinstance(raw, (list, tuple)):
        return []
    entries: list[str] = []
    for item in raw:
        if item is None:
            continue
        value = str(item).strip()
        if not value or value.startswith("#"):
            continue
        entries.append(value)
    return entries


class StaticLexiconProvider:
    """In-memory provider backed by a plain mapping."""

    def __init__(self, lists: Mapping[str, Any]) -> None:
        self._lists = {str(key): value for key, value in lists.items()}
        self.missing: set[str] = set()

    def load(self, name: str) -> list[str]:
        key = str(getattr(name, "value", name))
        if key not in self._lists:
            self.missing.add(key)
            return []
        return _clean_entries(self._lists[key])


class YamlLexiconProvider:
    """Reads every list from a single YAML mapping of ``name -> [entries]``."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.missing: set[str] = set()
        self._payload: dict[str, Any] | None = None

    def _read(self) -> dict[str, Any]:
        if self._payload is not None:
            return self._payload
        payload: dict[str, Any] = {}
        if not self.path.exists():
            logger.error("lexicon file not found: %s", self.path)
        else:
            try:
                loaded = yaml.safe_load(self.path.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError):
                logger.exception("failed to read lexicon file %s", self.path)
                loaded = None
            if isinstance(loaded, dict):
                payload = loaded
            elif loaded is not None:
                logger.error("lexicon file %s is not a mapping", self.path)
        self._payload = payload
        return payload

    def load(self, name: str) -> list[str]:
        key = str(getattr(name, "value", name))
        payload = self._read()
        if key not in payload:
            self.missing.add(key)
            return []
        return _clean_entries(payload[key])
