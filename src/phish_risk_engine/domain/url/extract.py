"""Link extraction and lexical link helpers."""

from __future__ import annotations

import re

from phish_risk_engine.core.errors import MalformedLinkError

# Scheme or bare "www.", a dotted host with a short final label, then an optional path tail.
URL_PATTERN = re.compile(
    r"(?:https?://|www\.)[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*"
)
IPV4_PATTERN = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}")
_OUTSIDE_URL_ALPHABET = re.compile(r"[^A-Za-z0-9:/.-]")


def extract_links(text: str) -> list[str]:
    """Every URL-looking run in ``text``, in order, duplicates kept."""

    return [match.group(0) for match in URL_PATTERN.finditer(text or "")]


def contains_ipv4(text: str) -> bool:
    return IPV4_PATTERN.search(text or "") is not None


def is_plain_http(link: str) -> bool:
    lower = (link or "").lower()
    return lower.startswith("http:") and not lower.startswith("https:")


def link_authority(link: str) -> str:
    """Host part of a link: scheme removed, path dropped, port stripped."""

    raw = (link or "").strip()
    remainder = raw.split("://", 1)[1] if "://" in raw else raw
    authority = remainder.split("/", 1)[0]
    if ":" in authority:
        authority = authority.split(":", 1)[0]
    if not authority:
        raise MalformedLinkError(link)
    return authority.lower()


def special_character_count(link: str) -> int:
    return len(_OUTSIDE_URL_ALPHABET.findall(link or ""))
