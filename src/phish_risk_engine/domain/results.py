"""Detector outputs and the composite analysis result."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DetectorCategory(str, Enum):
    """The closed set of detectors. Declaration order is report order."""

    SENDER = "sender"
    HEADER = "header"
    CONTENT = "content"
    BODY = "body"
    LINK = "link"
    ATTACHMENT = "attachment"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class AssessmentTier(str, Enum):
    SAFE = "SAFE"
    SUSPICIOUS = "SUSPICIOUS"
    MODERATE = "MODERATE"
    HIGH = "HIGH"

    @classmethod
    def from_score(cls, score: int) -> "AssessmentTier":
        if score < 15:
            return cls.SAFE
        if score < 40:
            return cls.SUSPICIOUS
        if score < 60:
            return cls.MODERATE
        return cls.HIGH

    @property
    def message(self) -> str:
        return _ASSESSMENT_MESSAGES[self]


_ASSESSMENT_MESSAGES = {
    AssessmentTier.SAFE: "This email appears to be SAFE. No significant phishing indicators detected.",
    AssessmentTier.SUSPICIOUS: (
        "This email has SOME SUSPICIOUS elements but is likely legitimate. Proceed with caution."
    ),
    AssessmentTier.MODERATE: (
        "This email is MODERATELY SUSPICIOUS and may be a phishing attempt. "
        "Verify before taking any action."
    ),
    AssessmentTier.HIGH: (
        "This email is HIGHLY SUSPICIOUS and likely a phishing attempt. Do not click links, "
        "download attachments, or respond with personal information."
    ),
}


class DetectionResult(BaseModel):
    """Raw output of one detector."""

    category: DetectorCategory
    score: int = Field(default=0, ge=0, le=100)
    indicators: list[str] = Field(default_factory=list)


class Finding(BaseModel):
    category: DetectorCategory
    score: int = Field(ge=0, le=100)
    summary: str
    indicators: list[str] = Field(default_factory=list)


class EscalationTier(BaseModel):
    """Floor applied when the highest raw score reaches ``threshold``."""

    model_config = ConfigDict(frozen=True)

    threshold: int
    floor: int


class CombinationMultiplier(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule: str
    factor: float = Field(ge=1.0)


class CompositeResult(BaseModel):
    final_score: int = Field(ge=0, le=100)
    weighted_score: int = Field(ge=0, le=100)
    detector_scores: dict[DetectorCategory, int] = Field(default_factory=dict)
    results: list[DetectionResult] = Field(default_factory=list)
    escalation: EscalationTier | None = None
    multiplier: CombinationMultiplier | None = None
    findings: list[Finding] = Field(default_factory=list)
    assessment: AssessmentTier = AssessmentTier.SAFE
    degradations: list[str] = Field(default_factory=list)

    def result_for(self, category: DetectorCategory) -> DetectionResult | None:
        for result in self.results:
            if result.category == category:
                return result
        return None
