"""Body extraction step and body wording heuristics.

Extraction is the only place an email is mutated during analysis. It is kept
apart from scoring so the orchestrator can run it to completion before any
detector reads ``links`` or ``attachments``.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.attachment.extract import extract_attachment_mentions
from phish_risk_engine.domain.email.models import Email, EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory
from phish_risk_engine.domain.url.extract import extract_links

logger = logging.getLogger(__name__)

ACCOUNT_UPDATE_SCORE = 15
MIXED_EMPHASIS_SCORE = 5
GENERIC_SALUTATION_SCORE = 15
# Literal, case-sensitive phrases checked against the raw body.
GENERIC_SALUTATIONS = (
    "Dear Customer",
    "Dear User",
    "Dear Sir",
    "Dear Madam",
    "Dear Account Holder",
)


@dataclass(frozen=True)
class ExtractionResult:
    links: tuple[str, ...] = ()
    attachments: tuple[str, ...] = ()


class BodyExtractor:
    """Populates ``Email.links`` and ``Email.attachments`` from the body text."""

    def extract(self, email: Email) -> ExtractionResult:
        links = extract_links(email.body)
        for link in links:
            email.add_link(link)

        added: list[str] = []
        for name in extract_attachment_mentions(email.body):
            if email.add_attachment(name):
                added.append(name)

        logger.debug("extracted %d links and %d attachment mentions", len(links), len(added))
        return ExtractionResult(links=tuple(links), attachments=tuple(added))


class BodyAnalyzer(Detector):
    category = DetectorCategory.BODY

    def analyze(self, email: EmailView) -> DetectionResult:
        body = email.body
        score = 0
        indicators: list[str] = []

        if "your account" in body and "needs updates" in body:
            score += ACCOUNT_UPDATE_SCORE
            indicators.append("account update wording: needs updates")

        if "_" in body and "*" in body:
            score += MIXED_EMPHASIS_SCORE
            indicators.append("mixed emphasis markup (_ and *)")

        for salutation in GENERIC_SALUTATIONS:
            if body.startswith(salutation):
                score += GENERIC_SALUTATION_SCORE
                indicators.append(f"generic salutation: {salutation}")
                break

        return self._result(score, indicators)
