import pytest
from pydantic import ValidationError

from phish_risk_engine.domain.email.models import Email
from phish_risk_engine.domain.results import AssessmentTier


def test_attachments_are_deduplicated_on_insert():
    email = Email.from_submission(
        sender="a@b.com",
        subject="s",
        body="b",
        attachments=["a.pdf", "a.pdf", "A.pdf"],
    )
    assert email.attachments == ["a.pdf", "A.pdf"]
    assert email.add_attachment("a.pdf") is False


def test_links_keep_duplicates():
    email = Email()
    email.add_link("https://x.com")
    email.add_link("https://x.com")
    assert email.links == ["https://x.com", "https://x.com"]


def test_snapshot_is_frozen():
    snapshot = Email(sender="a@b.com", links=["https://x.com"]).snapshot()
    assert snapshot.links == ("https://x.com",)
    with pytest.raises(ValidationError):
        snapshot.sender = "other@b.com"


@pytest.mark.parametrize(
    ("score", "tier"),
    [
        (0, AssessmentTier.SAFE),
        (14, AssessmentTier.SAFE),
        (15, AssessmentTier.SUSPICIOUS),
        (39, AssessmentTier.SUSPICIOUS),
        (40, AssessmentTier.MODERATE),
        (59, AssessmentTier.MODERATE),
        (60, AssessmentTier.HIGH),
        (100, AssessmentTier.HIGH),
    ],
)
def test_assessment_tiers(score, tier):
    assert AssessmentTier.from_score(score) is tier
    assert tier.value in tier.message
