"""Deterministic phishing risk scoring for submitted emails."""

from phish_risk_engine.api.contracts import AnalysisRequest, AnalysisResponse, analyze_request
from phish_risk_engine.domain.email.models import Email
from phish_risk_engine.domain.results import AssessmentTier, CompositeResult, DetectorCategory
from phish_risk_engine.lexicon.lexicon import Lexicon, default_lexicon
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "analyze_request",
    "Email",
    "AssessmentTier",
    "CompositeResult",
    "DetectorCategory",
    "Lexicon",
    "default_lexicon",
    "PhishingOrchestrator",
]
