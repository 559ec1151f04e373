"""Email domain models."""

from phish_risk_engine.domain.email.models import Email, EmailSnapshot, EmailView

__all__ = ["Email", "EmailSnapshot", "EmailView"]
