"""Domain models shared by detectors and the orchestrator."""

from phish_risk_engine.domain.email.models import Email, EmailSnapshot, EmailView
from phish_risk_engine.domain.results import (
    AssessmentTier,
    CombinationMultiplier,
    CompositeResult,
    DetectionResult,
    DetectorCategory,
    EscalationTier,
    Finding,
)

__all__ = [
    "Email",
    "EmailSnapshot",
    "EmailView",
    "AssessmentTier",
    "CombinationMultiplier",
    "CompositeResult",
    "DetectionResult",
    "DetectorCategory",
    "EscalationTier",
    "Finding",
]
