"""Phishing language and pressure heuristics over subject and body."""

from __future__ import annotations

import re

from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory

SUBJECT_KEYWORD_SCORE = 20
BODY_KEYWORD_SCORE = 8
BODY_KEYWORD_CAP = 40
SENSITIVE_REQUEST_SCORE = 15
EXCLAMATION_SCORE = 10
EXCLAMATION_LIMIT = 3
UPPERCASE_RUN_SCORE = 10

SENSITIVE_INFO_PATTERNS = (
    re.compile(r"\b(?:password|passcode)\b", re.IGNORECASE),
    re.compile(r"\b(?:credit\s*card|card\s*number)\b", re.IGNORECASE),
    re.compile(r"\bbank\s*account\b", re.IGNORECASE),
    re.compile(r"\b(?:login|sign\s*in)\b", re.IGNORECASE),
    re.compile(r"\bverify your\b", re.IGNORECASE),
)
UPPERCASE_RUN = re.compile(r"[A-Z]{10,}")


class ContentAnalyzer(Detector):
    category = DetectorCategory.CONTENT

    def analyze(self, email: EmailView) -> DetectionResult:
        subject = email.subject.lower()
        body = email.body
        lower_body = body.lower()
        score = 0
        indicators: list[str] = []

        for keyword in self.lexicon.phishing_keywords:
            if keyword in subject:
                score += SUBJECT_KEYWORD_SCORE
                indicators.append(f"phishing keyword in subject: {keyword}")
                break

        body_keywords = [keyword for keyword in self.lexicon.phishing_keywords if keyword in lower_body]
        if body_keywords:
            score += min(BODY_KEYWORD_CAP, len(body_keywords) * BODY_KEYWORD_SCORE)
            indicators.extend(f"phishing keyword in body: {keyword}" for keyword in body_keywords)

        for pattern in SENSITIVE_INFO_PATTERNS:
            match = pattern.search(body)
            if match:
                score += SENSITIVE_REQUEST_SCORE
                indicators.append(f"request for sensitive information: {match.group(0)}")
                break

        exclamations = body.count("!")
        if exclamations > EXCLAMATION_LIMIT:
            score += EXCLAMATION_SCORE
            indicators.append(f"excessive exclamation marks in body ({exclamations})")

        run = UPPERCASE_RUN.search(body)
        if run:
            score += UPPERCASE_RUN_SCORE
            indicators.append(f"long run of capitals in body: {run.group(0)}")

        return self._result(score, indicators)
