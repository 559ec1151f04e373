from phish_risk_engine.detectors.body import BodyAnalyzer, BodyExtractor


def test_generic_wording_rules(lexicon, make_email):
    email = make_email(body="Dear Customer, your account needs updates. Use _this_ and *that*")
    result = BodyAnalyzer(lexicon).analyze(email)
    assert result.score == 35
    assert "generic salutation: Dear Customer" in result.indicators


def test_wording_rules_are_case_sensitive_on_raw_body(lexicon, make_email):
    analyzer = BodyAnalyzer(lexicon)
    assert analyzer.analyze(make_email(body="  dear user, hello")).score == 0
    assert analyzer.analyze(make_email(body="  Dear User, hello")).score == 0
    assert analyzer.analyze(make_email(body="YOUR ACCOUNT NEEDS UPDATES")).score == 0
    assert analyzer.analyze(make_email(body="Dear User, hello")).score == 15


def test_scoring_does_not_touch_collections(lexicon, make_email):
    email = make_email(body="Visit https://example.com/path and the attached report.zip now")
    BodyAnalyzer(lexicon).analyze(email)
    assert email.links == []
    assert email.attachments == []


def test_extractor_keeps_duplicate_links(make_email):
    email = make_email(
        body="Go to http://192.168.1.5/login or www.example.com/path then http://192.168.1.5/login again"
    )
    extracted = BodyExtractor().extract(email)
    assert email.links == [
        "http://192.168.1.5/login",
        "www.example.com/path",
        "http://192.168.1.5/login",
    ]
    assert len(extracted.links) == 3


def test_extractor_adds_mentioned_attachments_once(make_email):
    email = make_email(
        body="Open the attached invoice.pdf and the attached file report.zip.",
        attachments=["invoice.pdf"],
    )
    extracted = BodyExtractor().extract(email)
    assert email.attachments == ["invoice.pdf", "report.zip"]
    assert extracted.attachments == ("report.zip",)


def test_extractor_skips_unrecognised_extensions(make_email):
    email = make_email(body="See attached notes.docx")
    BodyExtractor().extract(email)
    assert email.attachments == []
    assert email.links == []
