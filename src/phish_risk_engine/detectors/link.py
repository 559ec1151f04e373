"""Per-link heuristics; the detector reports its worst link."""

from __future__ import annotations

from phish_risk_engine.core.errors import MalformedLinkError
from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import DetectionResult, DetectorCategory
from phish_risk_engine.domain.url.extract import (
    contains_ipv4,
    is_plain_http,
    link_authority,
    special_character_count,
)

PLAIN_HTTP_SCORE = 25
IP_ADDRESS_SCORE = 50
MALFORMED_LINK_SCORE = 20
SUSPICIOUS_DOMAIN_SCORE = 25
LOOKALIKE_DOMAIN_SCORE = 40
LONG_DOMAIN_SCORE = 10
LONG_DOMAIN_LENGTH = 30
SPECIAL_CHARACTER_SCORE = 15
SPECIAL_CHARACTER_LIMIT = 5


class LinkAnalyzer(Detector):
    category = DetectorCategory.LINK

    def analyze(self, email: EmailView) -> DetectionResult:
        if not email.links:
            return self._result(0, [])

        best = 0
        indicators: list[str] = []
        for link in email.links:
            link_score, link_indicators = self.score_link(link)
            best = max(best, link_score)
            indicators.extend(link_indicators)
        return self._result(best, indicators)

    def score_link(self, link: str) -> tuple[int, list[str]]:
        score = 0
        indicators: list[str] = []

        if is_plain_http(link):
            score += PLAIN_HTTP_SCORE
            indicators.append(f"unencrypted http link: {link}")

        if contains_ipv4(link):
            score += IP_ADDRESS_SCORE
            indicators.append(f"ip address in link: {link}")

        try:
            authority = link_authority(link)
        except MalformedLinkError:
            score += MALFORMED_LINK_SCORE
            indicators.append(f"malformed link: {link}")
        else:
            domain_score, domain_indicators = self._score_authority(authority)
            score += domain_score
            indicators.extend(domain_indicators)

        if special_character_count(link) > SPECIAL_CHARACTER_LIMIT:
            score += SPECIAL_CHARACTER_SCORE
            indicators.append(f"unusual characters in link: {link}")

        return score, indicators

    def _score_authority(self, authority: str) -> tuple[int, list[str]]:
        score = 0
        indicators: list[str] = []

        for suspicious in self.lexicon.suspicious_domains:
            if suspicious in authority:
                score += SUSPICIOUS_DOMAIN_SCORE
                indicators.append(f"known suspicious domain in link: {authority}")
                break

        # Substring based, so short legitimate entries can over-match.
        for legitimate in self.lexicon.legitimate_domains:
            if (
                legitimate in authority
                and authority != legitimate
                and not authority.endswith("." + legitimate)
            ):
                score += LOOKALIKE_DOMAIN_SCORE
                indicators.append(f"possible look-alike of {legitimate}: {authority}")
                break

        if len(authority) > LONG_DOMAIN_LENGTH:
            score += LONG_DOMAIN_SCORE
            indicators.append(f"unusually long link domain: {authority}")

        return score, indicators
