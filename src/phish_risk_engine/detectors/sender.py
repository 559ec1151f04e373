"""Sender address heuristics."""

from __future__ import annotations

import re

from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory

SENDER_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@(.+)")
_DIGIT = re.compile(r"[0-9]")

MALFORMED_SENDER_SCORE = 50
SUSPICIOUS_DOMAIN_SCORE = 60
NUMERIC_DOMAIN_SCORE = 15
LONG_DOMAIN_SCORE = 10
LONG_DOMAIN_LENGTH = 30


class SenderAnalyzer(Detector):
    category = DetectorCategory.SENDER

    def analyze(self, email: EmailView) -> DetectionResult:
        sender = email.sender
        if SENDER_PATTERN.fullmatch(sender) is None:
            # A malformed address is a signal in itself; the domain checks need an address.
            return self._result(MALFORMED_SENDER_SCORE, [f"malformed sender address: {sender}"])

        domain = sender.rpartition("@")[2]
        lower = domain.lower()
        score = 0
        indicators: list[str] = []

        for suspicious in self.lexicon.suspicious_domains:
            if lower == suspicious or lower.endswith("." + suspicious):
                score += SUSPICIOUS_DOMAIN_SCORE
                indicators.append(f"known suspicious sender domain: {domain}")
                break

        if _DIGIT.search(domain):
            score += NUMERIC_DOMAIN_SCORE
            indicators.append(f"numeric characters in sender domain: {domain}")

        if len(domain) > LONG_DOMAIN_LENGTH:
            score += LONG_DOMAIN_SCORE
            indicators.append(f"unusually long sender domain: {domain}")

        return self._result(score, indicators)
