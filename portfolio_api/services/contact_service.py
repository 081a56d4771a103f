"""Contact message services."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session

from portfolio_api.core.constants import CONTACT_REQUIRED_MESSAGE
from portfolio_api.models.contact_message import ContactMessage
from portfolio_api.repositories import contact_repo
from portfolio_api.schemas.contact import ContactInput


def submit_contact_message(
    session: Session,
    input_data: ContactInput,
) -> tuple[ContactMessage | None, str | None]:
    """Store a contact message or return a validation error message."""

    if not input_data.is_complete:
        return None, CONTACT_REQUIRED_MESSAGE

    contact_message = contact_repo.create_contact_message(
        session,
        name=input_data.name,
        message=input_data.message,
    )
    return contact_message, None


def list_contact_messages(session: Session) -> Sequence[ContactMessage]:
    """Return all contact messages for the admin."""

    return contact_repo.list_contact_messages(session)


def delete_contact_message(session: Session, message_id: int) -> bool:
    """Delete a contact message; ``False`` means it was not found."""

    return contact_repo.delete_contact_message(session, message_id)
