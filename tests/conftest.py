from __future__ import annotations

import pytest

from phish_risk_engine.domain.email.models import Email
from phish_risk_engine.lexicon.lexicon import Lexicon, reset_default_lexicon
from phish_risk_engine.lexicon.provider import StaticLexiconProvider
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator

TEST_LISTS = {
    "phishing_keywords": [
        "urgent",
        "verify",
        "account suspended",
        "click here",
        "immediately",
        "password expires",
    ],
    "suspicious_domains": ["bit.ly", "malicious-login.biz", "secure-login-verify.com"],
    "legitimate_domains": ["paypal.com", "google.com"],
    "high_risk_extensions": [".exe", ".bat", ".js", ".vbs", ".scr", ".cmd"],
    "medium_risk_extensions": [".zip", ".doc", ".xls", ".html"],
}


@pytest.fixture
def lexicon() -> Lexicon:
    return Lexicon.from_provider(StaticLexiconProvider(TEST_LISTS))


@pytest.fixture
def orchestrator(lexicon) -> PhishingOrchestrator:
    return PhishingOrchestrator(lexicon, parallel=False)


@pytest.fixture
def make_email():
    def _make(sender="", subject="", body="", attachments=()) -> Email:
        return Email.from_submission(
            sender=sender,
            subject=subject,
            body=body,
            attachments=list(attachments),
        )

    return _make


@pytest.fixture
def clean_default_lexicon(monkeypatch):
    for name in (
        "PHISH_RISK_DEFAULT_CONFIG_PATH",
        "PHISH_RISK_LEXICON_PATH",
        "PHISH_RISK_PARALLEL_DETECTORS",
        "PHISH_RISK_MAX_WORKERS",
        "PHISH_RISK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_default_lexicon()
    yield
    reset_default_lexicon()
