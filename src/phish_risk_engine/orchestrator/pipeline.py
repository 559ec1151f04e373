"""Three-phase phishing risk pipeline: extraction, scoring, reduction."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Mapping

from phish_risk_engine.config.settings import AppConfig
from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.detectors.body import BodyExtractor
from phish_risk_engine.detectors.registry import build_detectors
from phish_risk_engine.domain.email.models import Email, EmailView
from phish_risk_engine.domain.results import (
    AssessmentTier,
    CompositeResult,
    DetectionResult,
    DetectorCategory,
)
from phish_risk_engine.lexicon.lexicon import Lexicon, default_lexicon
from phish_risk_engine.orchestrator.fusion import DetectorWeights, escalate, weighted_score
from phish_risk_engine.orchestrator.multipliers import (
    CombinationSignals,
    apply_multiplier,
    select_multiplier,
)
from phish_risk_engine.orchestrator.report import build_findings

logger = logging.getLogger(__name__)


class PhishingOrchestrator:
    """Runs every detector over one email and reduces their scores.

    Instances hold no per-request state, so one orchestrator can serve
    concurrent callers once its lexicon is loaded.
    """

    def __init__(
        self,
        lexicon: Lexicon | None = None,
        *,
        weights: DetectorWeights | None = None,
        parallel: bool = True,
        max_workers: int = 5,
    ) -> None:
        self.weights = weights or DetectorWeights()
        self.parallel = parallel
        self.max_workers = max(1, int(max_workers))
        self.extractor = BodyExtractor()
        self.reload(lexicon if lexicon is not None else default_lexicon())

    @classmethod
    def from_config(cls, cfg: AppConfig, lexicon: Lexicon | None = None) -> "PhishingOrchestrator":
        return cls(lexicon, parallel=cfg.parallel_detectors, max_workers=cfg.max_workers)

    def reload(self, lexicon: Lexicon) -> None:
        """Swap in a new lexicon and rebuild the detector set around it."""

        detectors = build_detectors(lexicon)
        self.lexicon = lexicon
        self.detectors: dict[DetectorCategory, Detector] = detectors

    def analyze(self, email: Email) -> CompositeResult:
        # One detector set for the whole pass, even if reload() runs concurrently.
        detectors = self.detectors
        degradations: list[str] = []

        # Phase 1: extraction mutates the email, then the body detector scores it.
        self.extractor.extract(email)
        body_result, failed = self._run_detector(detectors[DetectorCategory.BODY], email)
        if failed:
            degradations.append(DetectorCategory.BODY.value)

        # Phase 2: the other five detectors read a frozen snapshot.
        snapshot = email.snapshot()
        results = {DetectorCategory.BODY: body_result}
        for category, (result, failed) in self._score(detectors, snapshot).items():
            results[category] = result
            if failed:
                degradations.append(category.value)

        # Phase 3: reduction.
        ordered = [results[category] for category in DetectorCategory]
        scores = {result.category: result.score for result in ordered}
        for result in ordered:
            logger.debug("%s detector scored %d", result.category.label, result.score)

        weighted = weighted_score(scores, self.weights)
        floored, tier = escalate(weighted, max(scores.values()))
        if tier is not None:
            logger.debug("escalation tier %d applied, floor %d", tier.threshold, tier.floor)

        multiplier = select_multiplier(CombinationSignals.from_email(snapshot))
        if multiplier is not None:
            logger.debug("multiplier %s applied (x%.1f)", multiplier.rule, multiplier.factor)
        final = apply_multiplier(floored, multiplier)
        assessment = AssessmentTier.from_score(final)
        logger.debug("analysed email from %r", email.sender)
        logger.info("email scored %d (%s)", final, assessment.value)

        return CompositeResult(
            final_score=final,
            weighted_score=weighted,
            detector_scores=scores,
            results=ordered,
            escalation=tier,
            multiplier=multiplier,
            findings=build_findings(ordered),
            assessment=assessment,
            degradations=degradations,
        )

    def _score(
        self,
        detectors: Mapping[DetectorCategory, Detector],
        snapshot: EmailView,
    ) -> dict[DetectorCategory, tuple[DetectionResult, bool]]:
        scoring = [
            detector for category, detector in detectors.items() if category != DetectorCategory.BODY
        ]
        if not self.parallel:
            return {detector.category: self._run_detector(detector, snapshot) for detector in scoring}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                detector.category: executor.submit(self._run_detector, detector, snapshot)
                for detector in scoring
            }
            return {category: future.result() for category, future in futures.items()}

    @staticmethod
    def _run_detector(detector: Detector, email: EmailView) -> tuple[DetectionResult, bool]:
        try:
            return detector.analyze(email), False
        except Exception:
            logger.exception("%s detector failed; scoring it as 0", detector.name)
            return DetectionResult(category=detector.category), True
