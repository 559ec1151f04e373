"""Custom exceptions for the phishing risk engine."""


class PhishRiskError(Exception):
    """Base exception for application-level errors."""


class ConfigError(PhishRiskError):
    """Raised when configuration cannot be loaded or validated."""


class InvalidRequestError(PhishRiskError):
    """Raised when an analysis request is missing a required field."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"required field is empty: {field}")


class MalformedLinkError(PhishRiskError, ValueError):
    """Raised when a link has no recoverable host part."""

    def __init__(self, link: str) -> None:
        self.link = link
        super().__init__(f"cannot extract host from link: {link!r}")
