"""Detector contract shared by the six heuristics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory
from phish_risk_engine.lexicon.lexicon import Lexicon

MAX_SCORE = 100


class Detector(ABC):
    """Scores one facet of an email from 0 to 100 and lists what it matched.

    ``analyze`` must not mutate the email it is given.
    """

    category: ClassVar[DetectorCategory]

    def __init__(self, lexicon: Lexicon) -> None:
        self.lexicon = lexicon

    @property
    def name(self) -> str:
        return self.category.label

    @abstractmethod
    def analyze(self, email: EmailView) -> DetectionResult:
        """Return the raw score and matched indicators for ``email``."""

    def _result(self, score: int, indicators: list[str]) -> DetectionResult:
        return DetectionResult(
            category=self.category,
            score=max(0, min(score, MAX_SCORE)),
            indicators=indicators,
        )
