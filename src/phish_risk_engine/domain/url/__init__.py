"""URL extraction helpers."""

from phish_risk_engine.domain.url.extract import (
    IPV4_PATTERN,
    URL_PATTERN,
    contains_ipv4,
    extract_links,
    is_plain_http,
    link_authority,
    special_character_count,
)

__all__ = [
    "URL_PATTERN",
    "IPV4_PATTERN",
    "extract_links",
    "contains_ipv4",
    "is_plain_http",
    "link_authority",
    "special_character_count",
]
