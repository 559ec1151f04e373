"""Transport-agnostic request and response contracts."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from phish_risk_engine.core.errors import InvalidRequestError
from phish_risk_engine.domain.email.models import Email
from phish_risk_engine.domain.results import (
    AssessmentTier,
    CombinationMultiplier,
    CompositeResult,
    DetectorCategory,
    EscalationTier,
)
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator

REQUIRED_FIELDS = ("sender", "subject", "body")


class AnalysisRequest(BaseModel):
    """Submitted email. Text fields are trimmed and blank attachment names dropped."""

    sender: str = ""
    subject: str = ""
    body: str = ""
    attachments: list[str] = Field(default_factory=list)

    @field_validator("sender", "subject", "body", mode="before")
    @classmethod
    def _trim(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("attachments", mode="before")
    @classmethod
    def _clean_attachments(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            return value
        return [str(item).strip() for item in value if item is not None and str(item).strip()]

    def require_fields(self) -> "AnalysisRequest":
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                raise InvalidRequestError(name)
        return self

    def to_email(self) -> Email:
        return Email.from_submission(
            sender=self.sender,
            subject=self.subject,
            body=self.body,
            attachments=self.attachments,
        )


class FindingPayload(BaseModel):
    category: DetectorCategory
    score: int
    indicators: list[str] = Field(default_factory=list)


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender: str
    subject: str
    body_length: int = Field(alias="bodyLength")
    links: list[str] = Field(default_factory=list)
    attachments: list[str] = Field(default_factory=list)
    final_score: int = Field(alias="finalScore", ge=0, le=100)
    assessment_tier: AssessmentTier = Field(alias="assessmentTier")
    assessment: str
    findings: list[FindingPayload] = Field(default_factory=list)
    detector_scores: dict[DetectorCategory, int] = Field(default_factory=dict, alias="detectorScores")
    escalation_tier: EscalationTier | None = Field(default=None, alias="escalationTier")
    multiplier: CombinationMultiplier | None = None
    degradations: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, email: Email, result: CompositeResult) -> "AnalysisResponse":
        return cls(
            sender=email.sender,
            subject=email.subject,
            body_length=len(email.body),
            links=list(email.links),
            attachments=list(email.attachments),
            final_score=result.final_score,
            assessment_tier=result.assessment,
            assessment=result.assessment.message,
            findings=[
                FindingPayload(category=item.category, score=item.score, indicators=item.indicators)
                for item in result.findings
            ],
            detector_scores=result.detector_scores,
            escalation_tier=result.escalation,
            multiplier=result.multiplier,
            degradations=result.degradations,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def parse_request(payload: Mapping[str, Any]) -> AnalysisRequest:
    try:
        request = AnalysisRequest.model_validate(dict(payload))
    except ValidationError as exc:
        errors = exc.errors()
        location = errors[0].get("loc", ("request",)) if errors else ("request",)
        raise InvalidRequestError(str(location[0]), str(exc)) from exc
    return request.require_fields()


def analyze_request(
    payload: Mapping[str, Any] | AnalysisRequest,
    orchestrator: PhishingOrchestrator | None = None,
) -> AnalysisResponse:
    """Validate ``payload``, run the pipeline and build the response."""

    if isinstance(payload, AnalysisRequest):
        request = payload.require_fields()
    else:
        request = parse_request(payload)
    engine = orchestrator or PhishingOrchestrator()
    email = request.to_email()
    result = engine.analyze(email)
    return AnalysisResponse.from_result(email, result)
