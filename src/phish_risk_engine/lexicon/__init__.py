"""Detection word, domain and extension lists."""

from phish_risk_engine.lexicon.lexicon import Lexicon, default_lexicon, reset_default_lexicon
from phish_risk_engine.lexicon.provider import (
    LexiconName,
    LexiconProvider,
    StaticLexiconProvider,
    YamlLexiconProvider,
)

__all__ = [
    "Lexicon",
    "LexiconName",
    "LexiconProvider",
    "StaticLexiconProvider",
    "YamlLexiconProvider",
    "default_lexicon",
    "reset_default_lexicon",
]
