"""Attachment mentions discovered in free text."""

from __future__ import annotations

import re

MENTION_KEYWORDS = ("attached", "attachment", "file", "document", "pdf", "doc", "xlsx", "zip")
EXTRACTABLE_EXTENSIONS = (".pdf", ".doc", ".xls", ".zip", ".exe")

_KEYWORDS = "|".join(MENTION_KEYWORDS)
# A keyword (optionally chained, e.g. "attached file"), whitespace, then a short filename token.
MENTION_PATTERN = re.compile(
    rf"\b(?:{_KEYWORDS})\s+(?:(?:{_KEYWORDS})\s+)*(?P<name>[^\s,;:!?]{{1,50}})",
    re.IGNORECASE,
)
_WRAPPING = "\"'()[]<>"


def extract_attachment_mentions(text: str) -> list[str]:
    """Filenames mentioned in ``text`` that end with a recognised extension."""

    names: list[str] = []
    for match in MENTION_PATTERN.finditer(text or ""):
        name = match.group("name").strip(_WRAPPING + ".")
        if name and name.lower().endswith(EXTRACTABLE_EXTENSIONS):
            names.append(name)
    return names
