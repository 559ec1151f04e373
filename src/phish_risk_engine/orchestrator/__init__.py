"""Detector sequencing and score reduction."""

from phish_risk_engine.orchestrator.fusion import (
    ESCALATION_TIERS,
    DetectorWeights,
    escalate,
    round_half_up,
    weighted_score,
)
from phish_risk_engine.orchestrator.multipliers import (
    MULTIPLIER_RULES,
    CombinationSignals,
    apply_multiplier,
    select_multiplier,
)
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator
from phish_risk_engine.orchestrator.report import FINDING_SUMMARIES, build_findings

__all__ = [
    "ESCALATION_TIERS",
    "DetectorWeights",
    "escalate",
    "round_half_up",
    "weighted_score",
    "MULTIPLIER_RULES",
    "CombinationSignals",
    "apply_multiplier",
    "select_multiplier",
    "PhishingOrchestrator",
    "FINDING_SUMMARIES",
    "build_findings",
]
