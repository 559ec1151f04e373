from phish_risk_engine.domain.results import AssessmentTier, DetectorCategory
from phish_risk_engine.orchestrator.pipeline import PhishingOrchestrator

SCENARIO_A = dict(
    sender="Bank <scam@malicious-login.biz>",
    subject="URGENT!!! Verify Your Account Now!!!",
    body="Please verify your password at http://192.168.1.5/login today",
    attachments=["invoice.pdf.exe"],
)


def test_bank_impersonation_with_executable(orchestrator, make_email):
    result = orchestrator.analyze(make_email(**SCENARIO_A))
    scores = result.detector_scores
    assert scores[DetectorCategory.SENDER] == 50
    assert scores[DetectorCategory.HEADER] == 45
    assert scores[DetectorCategory.BODY] == 0
    assert scores[DetectorCategory.CONTENT] == 43
    assert scores[DetectorCategory.LINK] == 75
    assert scores[DetectorCategory.ATTACHMENT] == 95
    assert result.escalation.threshold == 85
    assert result.multiplier.factor == 1.4
    assert result.final_score == 100
    assert result.assessment is AssessmentTier.HIGH


def test_indicators_only_quote_email_data(orchestrator, make_email):
    email = make_email(**SCENARIO_A)
    result = orchestrator.analyze(email)
    haystack = " ".join(
        [email.sender, email.subject, email.body, *email.links, *email.attachments]
    ).lower()
    for finding in result.findings:
        for indicator in finding.indicators:
            if ": " in indicator:
                assert indicator.rsplit(": ", 1)[1].lower() in haystack


def test_meeting_notes_are_safe(orchestrator, make_email):
    email = make_email(
        sender="alice@uncw.edu",
        subject="Project meeting notes",
        body="See attached notes.docx",
    )
    result = orchestrator.analyze(email)
    assert email.links == []
    assert email.attachments == []
    assert all(score == 0 for score in result.detector_scores.values())
    assert result.final_score == 0
    assert result.findings == []
    assert result.assessment is AssessmentTier.SAFE


def test_meeting_notes_are_safe_with_packaged_lexicon(clean_default_lexicon, make_email):
    result = PhishingOrchestrator(parallel=True).analyze(
        make_email(
            sender="alice@uncw.edu",
            subject="Project meeting notes",
            body="See attached notes.docx",
        )
    )
    assert result.final_score == 0


def test_empty_collections_score_zero(orchestrator, make_email):
    result = orchestrator.analyze(make_email(sender="alice@uncw.edu", subject="hi", body="thanks"))
    assert result.detector_scores[DetectorCategory.LINK] == 0
    assert result.detector_scores[DetectorCategory.ATTACHMENT] == 0
    assert result.degradations == []
