"""Combination multipliers for co-occurring dangerous signals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from phish_risk_engine.domain.attachment.detect import has_double_extension
from phish_risk_engine.domain.email.models import EmailView
from phish_risk_engine.domain.results import CombinationMultiplier
from phish_risk_engine.domain.url.extract import contains_ipv4
from phish_risk_engine.orchestrator.fusion import bounded_score

DANGEROUS_ATTACHMENT_EXTENSIONS = (".exe", ".bat", ".js", ".vbs", ".scr", ".cmd")
SENSITIVE_ASK_PHRASES = (
    "password",
    "credit card",
    "social security",
    "bank account",
    "login",
    "verify your",
    "update your account",
)
SUSPICIOUS_LINK_TOKENS = ("verify", "secure", "login", "account")


@dataclass(frozen=True)
class CombinationSignals:
    dangerous_attachment: bool = False
    sensitive_ask: bool = False
    suspicious_link: bool = False

    @classmethod
    def from_email(cls, email: EmailView) -> "CombinationSignals":
        return cls(
            dangerous_attachment=any(_is_dangerous_attachment(name) for name in email.attachments),
            sensitive_ask=any(phrase in email.body.lower() for phrase in SENSITIVE_ASK_PHRASES),
            suspicious_link=any(_is_suspicious_link(link) for link in email.links),
        )


def _is_dangerous_attachment(name: str) -> bool:
    lower = name.lower()
    return lower.endswith(DANGEROUS_ATTACHMENT_EXTENSIONS) or has_double_extension(lower)


def _is_suspicious_link(link: str) -> bool:
    lower = link.lower()
    if any(token in lower for token in SUSPICIOUS_LINK_TOKENS):
        return True
    return contains_ipv4(lower) or not lower.startswith("https")


# Priority order; only the first matching rule applies. The last rule keeps its
# link+sensitive disjunct even though the second rule always claims that case first.
MULTIPLIER_RULES: tuple[tuple[CombinationMultiplier, Callable[[CombinationSignals], bool]], ...] = (
    (
        CombinationMultiplier(rule="dangerous_attachment_and_sensitive_ask", factor=1.4),
        lambda s: s.dangerous_attachment and s.sensitive_ask,
    ),
    (
        CombinationMultiplier(rule="suspicious_link_and_sensitive_ask", factor=1.3),
        lambda s: s.suspicious_link and s.sensitive_ask,
    ),
    (
        CombinationMultiplier(rule="dangerous_attachment", factor=1.2),
        lambda s: s.dangerous_attachment or (s.suspicious_link and s.sensitive_ask),
    ),
)


def select_multiplier(signals: CombinationSignals) -> CombinationMultiplier | None:
    for multiplier, predicate in MULTIPLIER_RULES:
        if predicate(signals):
            return multiplier
    return None


def apply_multiplier(score: int, multiplier: CombinationMultiplier | None) -> int:
    if multiplier is None:
        return bounded_score(score)
    return bounded_score(score * multiplier.factor)
