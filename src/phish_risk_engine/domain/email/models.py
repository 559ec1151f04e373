"""Email domain models."""

from __future__ import annotations

from typing import Iterable, Union

from pydantic import BaseModel, ConfigDict, Field


class Email(BaseModel):
    """Email under analysis.

    ``links`` and ``attachments`` are append-only for the length of one
    analysis pass: extraction adds to them, nothing removes from them.
    """

    sender: str = ""
    subject: str = ""
    body: str = ""
    links: list[str] = Field(default_factory=list)
    attachments: list[str] = Field(default_factory=list)

    @classmethod
    def from_submission(
        cls,
        *,
        sender: str,
        subject: str,
        body: str,
        attachments: Iterable[str] | None = None,
    ) -> "Email":
        email = cls(sender=sender, subject=subject, body=body)
        for name in attachments or ():
            email.add_attachment(name)
        return email

    def add_link(self, link: str) -> None:
        self.links.append(link)

    def add_attachment(self, attachment: str) -> bool:
        """Append unless the exact filename is already present."""

        if attachment in self.attachments:
            return False
        self.attachments.append(attachment)
        return True

    def snapshot(self) -> "EmailSnapshot":
        return EmailSnapshot(
            sender=self.sender,
            subject=self.subject,
            body=self.body,
            links=tuple(self.links),
            attachments=tuple(self.attachments),
        )


class EmailSnapshot(BaseModel):
    """Read-only view of an email taken once extraction has finished."""

    model_config = ConfigDict(frozen=True)

    sender: str = ""
    subject: str = ""
    body: str = ""
    links: tuple[str, ...] = ()
    attachments: tuple[str, ...] = ()


EmailView = Union[Email, EmailSnapshot]
