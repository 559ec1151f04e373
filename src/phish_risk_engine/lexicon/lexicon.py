"""Immutable, process-wide detection lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import logging

from phish_risk_engine.config.settings import load_config
from phish_risk_engine.lexicon.provider import LexiconName, LexiconProvider, YamlLexiconProvider

logger = logging.getLogger(__name__)


def _normalize(entries: list[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(item.strip().lower() for item in entries if item.strip()))


@dataclass(frozen=True)
class Lexicon:
    """Five lower-cased lists. ``missing`` names lists the provider never supplied."""

    phishing_keywords: tuple[str, ...] = ()
    suspicious_domains: tuple[str, ...] = ()
    legitimate_domains: tuple[str, ...] = ()
    high_risk_extensions: tuple[str, ...] = ()
    medium_risk_extensions: tuple[str, ...] = ()
    missing: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_provider(cls, provider: LexiconProvider) -> "Lexicon":
        lists: dict[str, tuple[str, ...]] = {}
        for name in LexiconName:
            lists[name.value] = _normalize(provider.load(name.value))
        provider_missing = getattr(provider, "missing", set())
        missing = frozenset(str(item) for item in provider_missing) & {n.value for n in LexiconName}
        lexicon = cls(**lists, missing=missing)
        lexicon.log_diagnostics()
        return lexicon

    def entries(self, name: LexiconName | str) -> tuple[str, ...]:
        key = LexiconName(name).value
        return getattr(self, key)

    def is_loaded(self, name: LexiconName | str) -> bool:
        return LexiconName(name).value not in self.missing

    def log_diagnostics(self) -> None:
        for name in LexiconName:
            if name.value in self.missing:
                logger.warning("lexicon list %s was not loaded; its rules will never fire", name.value)
            elif not self.entries(name):
                logger.warning("lexicon list %s loaded empty; its rules will never fire", name.value)
            else:
                logger.debug("lexicon list %s loaded with %d entries", name.value, len(self.entries(name)))


@lru_cache(maxsize=1)
def default_lexicon() -> Lexicon:
    """Lexicon loaded once from the configured YAML file."""

    cfg, _ = load_config()
    logger.info("loading lexicon from %s", cfg.lexicon_path)
    return Lexicon.from_provider(YamlLexiconProvider(cfg.lexicon_path))


def reset_default_lexicon() -> None:
    default_lexicon.cache_clear()
