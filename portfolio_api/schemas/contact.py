"""Contact message schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ContactInput(BaseModel):
    """Public contact form submission.

    Blank values are accepted here and rejected by the contact service so
    the client receives a 400 with a readable reason.
    """

    name: str = ""
    message: str = ""

    @field_validator("name", "message", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def is_complete(self) -> bool:
        return bool(self.name.strip()) and bool(self.message.strip())


class ContactAck(BaseModel):
    """Acknowledgement returned after a successful submission."""

    success: bool
    message: str


class ContactMessageRead(BaseModel):
    """Stored contact message as returned to the admin."""

    id: int
    name: str
    message: str
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
