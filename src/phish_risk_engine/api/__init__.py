"""Request/response contracts around the orchestrator."""

from phish_risk_engine.api.contracts import (
    AnalysisRequest,
    AnalysisResponse,
    FindingPayload,
    analyze_request,
    parse_request,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "FindingPayload",
    "analyze_request",
    "parse_request",
]
