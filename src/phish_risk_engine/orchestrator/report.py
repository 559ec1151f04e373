"""Findings assembly straight from detector results."""

from __future__ import annotations

from typing import Iterable

from phish_risk_engine.domain.results import DetectionResult, DetectorCategory, Finding

FINDING_SUMMARIES = {
    DetectorCategory.SENDER: "Sender issues detected",
    DetectorCategory.HEADER: "Subject line contains suspicious language",
    DetectorCategory.CONTENT: "Content contains suspicious language or requests",
    DetectorCategory.BODY: "Body wording or formatting looks generic",
    DetectorCategory.LINK: "Suspicious links detected",
    DetectorCategory.ATTACHMENT: "Potentially dangerous attachments detected",
}


def build_findings(results: Iterable[DetectionResult]) -> list[Finding]:
    """One finding per detector that scored, in category order, indicators de-duplicated."""

    by_category = {result.category: result for result in results}
    findings: list[Finding] = []
    for category in DetectorCategory:
        result = by_category.get(category)
        if result is None or result.score <= 0:
            continue
        findings.append(
            Finding(
                category=category,
                score=result.score,
                summary=FINDING_SUMMARIES[category],
                indicators=list(dict.fromkeys(result.indicators)),
            )
        )
    return findings
