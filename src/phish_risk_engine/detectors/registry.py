"""Fixed detector set keyed by category."""

from __future__ import annotations

from phish_risk_engine.detectors.attachment import AttachmentAnalyzer
from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.detectors.body import BodyAnalyzer
from phish_risk_engine.detectors.content import ContentAnalyzer
from phish_risk_engine.detectors.header import HeaderAnalyzer
from phish_risk_engine.detectors.link import LinkAnalyzer
from phish_risk_engine.detectors.sender import SenderAnalyzer
from phish_risk_engine.domain.results import DetectorCategory
from phish_risk_engine.lexicon.lexicon import Lexicon

DETECTOR_TYPES: dict[DetectorCategory, type[Detector]] = {
    DetectorCategory.SENDER: SenderAnalyzer,
    DetectorCategory.HEADER: HeaderAnalyzer,
    DetectorCategory.CONTENT: ContentAnalyzer,
    DetectorCategory.BODY: BodyAnalyzer,
    DetectorCategory.LINK: LinkAnalyzer,
    DetectorCategory.ATTACHMENT: AttachmentAnalyzer,
}


def build_detectors(lexicon: Lexicon) -> dict[DetectorCategory, Detector]:
    return {category: detector_cls(lexicon) for category, detector_cls in DETECTOR_TYPES.items()}
