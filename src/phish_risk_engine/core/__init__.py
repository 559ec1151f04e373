"""Cross-cutting primitives."""

from phish_risk_engine.core.errors import (
    ConfigError,
    InvalidRequestError,
    MalformedLinkError,
    PhishRiskError,
)

__all__ = ["PhishRiskError", "ConfigError", "InvalidRequestError", "MalformedLinkError"]
