"""Subject line and display-name heuristics."""

from __future__ import annotations

from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory

SUBJECT_KEYWORD_SCORE = 15
EXCLAMATION_SCORE = 5
ALL_CAPS_SCORE = 20
ALL_CAPS_MIN_LENGTH = 10
DISPLAY_NAME_SPOOF_SCORE = 40
DISPLAY_NAME_DOMAIN_TOKENS = (".com", ".org", ".net")


def split_display_name(sender: str) -> tuple[str, str] | None:
    """Split ``"Name <addr>"`` into ``(name, addr)``; None for a bare address."""

    if "<" not in sender or ">" not in sender:
        return None
    start = sender.index("<")
    end = sender.index(">")
    return sender[:start].strip(), sender[start + 1 : end].strip()


class HeaderAnalyzer(Detector):
    category = DetectorCategory.HEADER

    def analyze(self, email: EmailView) -> DetectionResult:
        subject = email.subject
        lower_subject = subject.lower()
        score = 0
        indicators: list[str] = []

        for keyword in self.lexicon.phishing_keywords:
            if keyword in lower_subject:
                score += SUBJECT_KEYWORD_SCORE
                indicators.append(f"phishing keyword in subject: {keyword}")
                break

        exclamations = subject.count("!")
        if exclamations:
            score += EXCLAMATION_SCORE * exclamations
            indicators.append(f"urgency punctuation in subject ({exclamations} exclamation marks)")

        if subject == subject.upper() and len(subject) > ALL_CAPS_MIN_LENGTH:
            score += ALL_CAPS_SCORE
            indicators.append("subject written entirely in capitals")

        spoofed_name = self._spoofed_display_name(email.sender)
        if spoofed_name is not None:
            score += DISPLAY_NAME_SPOOF_SCORE
            indicators.append(f"display name names a different domain: {spoofed_name}")

        return self._result(score, indicators)

    @staticmethod
    def _spoofed_display_name(sender: str) -> str | None:
        """Display name that mentions a domain the address does not belong to."""

        parts = split_display_name(sender)
        if parts is None:
            return None
        display_name, address = parts
        if "@" not in address:
            return None
        address_domain = address.rpartition("@")[2].lower()
        lower_name = display_name.lower()
        if not any(token in lower_name for token in DISPLAY_NAME_DOMAIN_TOKENS):
            return None
        if address_domain in lower_name:
            return None
        return display_name
