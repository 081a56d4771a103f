"""Database access helpers for contact messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlmodel import Session, col, select

from portfolio_api.core.constants import utcnow
from portfolio_api.db.session import transaction
from portfolio_api.models.contact_message import ContactMessage


def list_contact_messages(session: Session) -> Sequence[ContactMessage]:
    """Return all contact messages in storage order."""

    return session.exec(select(ContactMessage).order_by(col(ContactMessage.id).asc())).all()


def create_contact_message(session: Session, name: str, message: str) -> ContactMessage:
    """Persist a new contact message stamped with the current time."""

    contact_message = ContactMessage(name=name, message=message, created_at=utcnow())
    with transaction(session):
        session.add(contact_message)
    session.refresh(contact_message)
    return contact_message


def delete_contact_message(session: Session, message_id: int) -> bool:
    """Hard-delete a contact message. Returns ``False`` when it does not exist."""

    with transaction(session):
        contact_message = session.get(ContactMessage, message_id, with_for_update=True)
        if contact_message is None:
            return False
        session.delete(contact_message)
    return True
