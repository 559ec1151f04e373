"""Attachment filename heuristics."""

from __future__ import annotations

from typing import Iterable


def matching_extension(filename: str, extensions: Iterable[str]) -> str | None:
    """First entry of ``extensions`` the filename ends with, case-insensitively."""

    lower = (filename or "").lower()
    for ext in extensions:
        if ext and lower.endswith(ext.lower()):
            return ext
    return None


def has_double_extension(filename: str) -> bool:
    """True for names like ``invoice.pdf.exe`` where the stem still holds a dot."""

    lower = (filename or "").lower()
    last_dot = lower.rfind(".")
    if last_dot <= 0:
        return False
    return "." in lower[:last_dot]
