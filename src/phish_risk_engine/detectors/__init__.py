"""The six phishing detectors and the body extraction step."""

from phish_risk_engine.detectors.attachment import AttachmentAnalyzer
from phish_risk_engine.detectors.base import Detector
from phish_risk_engine.detectors.body import BodyAnalyzer, BodyExtractor, ExtractionResult
from phish_risk_engine.detectors.content import ContentAnalyzer
from phish_risk_engine.detectors.header import HeaderAnalyzer
from phish_risk_engine.detectors.link import LinkAnalyzer
from phish_risk_engine.detectors.registry import DETECTOR_TYPES, build_detectors
from phish_risk_engine.detectors.sender import SenderAnalyzer

__all__ = [
    "Detector",
    "SenderAnalyzer",
    "HeaderAnalyzer",
    "ContentAnalyzer",
    "BodyAnalyzer",
    "BodyExtractor",
    "ExtractionResult",
    "LinkAnalyzer",
    "AttachmentAnalyzer",
    "DETECTOR_TYPES",
    "build_detectors",
]
