"""Weighted reduction of detector scores and risk escalation floors."""

from __future__ import annotations

from dataclasses import dataclass, fields
import math
from typing import Mapping

from phish_risk_engine.core.errors import ConfigError
from phish_risk_engine.domain.results import DetectorCategory, EscalationTier

# Evaluated top-down; the first tier whose threshold the highest raw score reaches wins.
ESCALATION_TIERS: tuple[EscalationTier, ...] = (
    EscalationTier(threshold=85, floor=75),
    EscalationTier(threshold=70, floor=60),
    EscalationTier(threshold=50, floor=45),
)


@dataclass(frozen=True)
class DetectorWeights:
    sender: float = 0.15
    header: float = 0.10
    body: float = 0.05
    link: float = 0.25
    content: float = 0.25
    attachment: float = 0.20

    def __post_init__(self) -> None:
        total = sum(getattr(self, item.name) for item in fields(self))
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigError(f"detector weights must sum to 1.0, got {total:.4f}")

    def for_category(self, category: DetectorCategory) -> float:
        return getattr(self, category.value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def bounded_score(raw: float) -> int:
    return max(0, min(100, round_half_up(raw)))


def weighted_score(
    scores: Mapping[DetectorCategory, int],
    weights: DetectorWeights | None = None,
) -> int:
    active = weights or DetectorWeights()
    total = sum(scores.get(category, 0) * active.for_category(category) for category in DetectorCategory)
    return bounded_score(total)


def escalation_tier(max_raw_score: int) -> EscalationTier | None:
    for tier in ESCALATION_TIERS:
        if max_raw_score >= tier.threshold:
            return tier
    return None


def escalate(score: int, max_raw_score: int) -> tuple[int, EscalationTier | None]:
    """Raise ``score`` to the floor of the highest tier ``max_raw_score`` reaches."""

    tier = escalation_tier(max_raw_score)
    if tier is None:
        return score, None
    return max(score, tier.floor), tier
