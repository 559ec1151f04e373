from phish_risk_engine.detectors.attachment import AttachmentAnalyzer
from phish_risk_engine.domain.email.models import EmailSnapshot


def test_high_risk_double_extension(lexicon):
    score, indicators = AttachmentAnalyzer(lexicon).score_attachment("invoice.pdf.exe")
    assert score == 95
    assert indicators == [
        "high-risk file type (.exe): invoice.pdf.exe",
        "double extension: invoice.pdf.exe",
    ]


def test_risk_levels(lexicon):
    analyzer = AttachmentAnalyzer(lexicon)
    assert analyzer.score_attachment("INVOICE.EXE")[0] == 80
    assert analyzer.score_attachment("report.zip")[0] == 40
    assert analyzer.score_attachment("archive.tar.zip")[0] == 55
    assert analyzer.score_attachment("photo.jpg")[0] == 0


def test_detector_reports_worst_attachment(lexicon):
    snapshot = EmailSnapshot(attachments=("photo.jpg", "report.zip"))
    assert AttachmentAnalyzer(lexicon).analyze(snapshot).score == 40


def test_no_attachments_scores_zero(lexicon):
    assert AttachmentAnalyzer(lexicon).analyze(EmailSnapshot()).score == 0
