from phish_risk_engine.detectors.sender import SenderAnalyzer


def test_known_suspicious_domain(lexicon, make_email):
    result = SenderAnalyzer(lexicon).analyze(make_email(sender="scam@malicious-login.biz"))
    assert result.score == 60
    assert result.indicators == ["known suspicious sender domain: malicious-login.biz"]


def test_suspicious_subdomain_matches_but_lookalike_prefix_does_not(lexicon, make_email):
    analyzer = SenderAnalyzer(lexicon)
    assert analyzer.analyze(make_email(sender="x@mail.secure-login-verify.com")).score == 60
    assert analyzer.analyze(make_email(sender="x@notmalicious-login.biz")).score == 0


def test_display_name_form_is_treated_as_malformed(lexicon, make_email):
    sender = "Bank <scam@malicious-login.biz>"
    result = SenderAnalyzer(lexicon).analyze(make_email(sender=sender))
    assert result.score == 50
    assert result.indicators == [f"malformed sender address: {sender}"]


def test_empty_sender_is_malformed(lexicon, make_email):
    assert SenderAnalyzer(lexicon).analyze(make_email(sender="")).score == 50


def test_numeric_and_long_domains(lexicon, make_email):
    analyzer = SenderAnalyzer(lexicon)
    assert analyzer.analyze(make_email(sender="bob@m4il-service.net")).score == 15
    assert analyzer.analyze(make_email(sender="a@averyveryverylongcompanydomainname.org")).score == 10


def test_ordinary_sender_scores_zero(lexicon, make_email):
    result = SenderAnalyzer(lexicon).analyze(make_email(sender="alice@uncw.edu"))
    assert result.score == 0
    assert result.indicators == []
