"""Attachment file-type heuristics; the detector reports its worst attachment."""

from __future__ import annotations

from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.attachment.detect import has_double_extension, matching_extension
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory

HIGH_RISK_SCORE = 80
MEDIUM_RISK_SCORE = 40
DOUBLE_EXTENSION_SCORE = 15


class AttachmentAnalyzer(Detector):
    category = DetectorCategory.ATTACHMENT

    def analyze(self, email: EmailView) -> DetectionResult:
        if not email.attachments:
            return self._result(0, [])

        best = 0
        indicators: list[str] = []
        for name in email.attachments:
            attachment_score, attachment_indicators = self.score_attachment(name)
            best = max(best, attachment_score)
            indicators.extend(attachment_indicators)
        return self._result(best, indicators)

    def score_attachment(self, name: str) -> tuple[int, list[str]]:
        score = 0
        indicators: list[str] = []

        high = matching_extension(name, self.lexicon.high_risk_extensions)
        if high:
            score = HIGH_RISK_SCORE
            indicators.append(f"high-risk file type ({high}): {name}")
        else:
            medium = matching_extension(name, self.lexicon.medium_risk_extensions)
            if medium:
                score = MEDIUM_RISK_SCORE
                indicators.append(f"medium-risk file type ({medium}): {name}")

        if has_double_extension(name):
            score += DOUBLE_EXTENSION_SCORE
            indicators.append(f"double extension: {name}")

        return score, indicators
