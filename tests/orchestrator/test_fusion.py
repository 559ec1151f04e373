import pytest

from phish_risk_engine.core.errors import ConfigError
from phish_risk_engine.domain.results import DetectorCategory
from phish_risk_engine.orchestrator.fusion import (
    DetectorWeights,
    escalate,
    round_half_up,
    weighted_score,
)


def test_default_weights():
    weights = DetectorWeights()
    assert weights.for_category(DetectorCategory.LINK) == 0.25
    assert weights.for_category(DetectorCategory.BODY) == 0.05


def test_weights_must_sum_to_one():
    with pytest.raises(ConfigError):
        DetectorWeights(sender=0.5)


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2
    assert round_half_up(0.5) == 1


def test_weighted_score():
    assert weighted_score({category: 100 for category in DetectorCategory}) == 100
    assert weighted_score({DetectorCategory.LINK: 40, DetectorCategory.CONTENT: 20}) == 15
    assert weighted_score({}) == 0


@pytest.mark.parametrize(
    ("score", "max_raw", "expected", "threshold"),
    [
        (10, 90, 75, 85),
        (80, 90, 80, 85),
        (10, 70, 60, 70),
        (10, 50, 45, 50),
        (10, 49, 10, None),
    ],
)
def test_escalation_tiers(score, max_raw, expected, threshold):
    floored, tier = escalate(score, max_raw)
    assert floored == expected
    assert (tier.threshold if tier else None) == threshold
