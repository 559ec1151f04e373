"""Attachment filename heuristics and extraction."""

from phish_risk_engine.domain.attachment.detect import has_double_extension, matching_extension
from phish_risk_engine.domain.attachment.extract import (
    EXTRACTABLE_EXTENSIONS,
    extract_attachment_mentions,
)

__all__ = [
    "EXTRACTABLE_EXTENSIONS",
    "extract_attachment_mentions",
    "has_double_extension",
    "matching_extension",
]
