import itertools

import pytest

from phish_risk_engine.domain.email.models import EmailSnapshot
from phish_risk_engine.domain.results import CombinationMultiplier
from phish_risk_engine.orchestrator.multipliers import (
    CombinationSignals,
    apply_multiplier,
    select_multiplier,
)


def test_signals_from_email():
    signals = CombinationSignals.from_email(
        EmailSnapshot(
            body="Please confirm your Password",
            links=("https://example.com/home",),
            attachments=("report.pdf.zip",),
        )
    )
    assert signals == CombinationSignals(
        dangerous_attachment=True,
        sensitive_ask=True,
        suspicious_link=False,
    )


def test_link_signals():
    assert CombinationSignals.from_email(EmailSnapshot(links=("http://example.com",))).suspicious_link
    assert CombinationSignals.from_email(EmailSnapshot(links=("https://10.0.0.1/x",))).suspicious_link
    assert CombinationSignals.from_email(EmailSnapshot(links=("https://shop.com/account",))).suspicious_link


def test_rule_priority():
    both = CombinationSignals(dangerous_attachment=True, sensitive_ask=True, suspicious_link=True)
    assert select_multiplier(both).factor == 1.4
    link_ask = CombinationSignals(sensitive_ask=True, suspicious_link=True)
    assert select_multiplier(link_ask).factor == 1.3
    attachment_only = CombinationSignals(dangerous_attachment=True)
    assert select_multiplier(attachment_only).factor == 1.2
    assert select_multiplier(CombinationSignals(sensitive_ask=True)) is None
    assert select_multiplier(CombinationSignals(suspicious_link=True)) is None


EXPECTED_RULES = {
    (False, False, False): None,
    (False, False, True): None,
    (False, True, False): None,
    (False, True, True): ("suspicious_link_and_sensitive_ask", 1.3),
    (True, False, False): ("dangerous_attachment", 1.2),
    (True, False, True): ("dangerous_attachment", 1.2),
    (True, True, False): ("dangerous_attachment_and_sensitive_ask", 1.4),
    (True, True, True): ("dangerous_attachment_and_sensitive_ask", 1.4),
}


@pytest.mark.parametrize("flags", list(itertools.product([False, True], repeat=3)))
def test_first_matching_rule_wins(flags):
    multiplier = select_multiplier(CombinationSignals(*flags))
    expected = EXPECTED_RULES[flags]
    if expected is None:
        assert multiplier is None
    else:
        assert (multiplier.rule, multiplier.factor) == expected


def test_apply_multiplier_rounds_and_caps():
    assert apply_multiplier(80, CombinationMultiplier(rule="r", factor=1.4)) == 100
    assert apply_multiplier(45, CombinationMultiplier(rule="r", factor=1.3)) == 59
    assert apply_multiplier(40, None) == 40
