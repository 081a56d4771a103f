"""Contact routes. Submission is public; reading and deleting are admin-only."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from portfolio_api.core.constants import CONTACT_RECEIVED_MESSAGE
from portfolio_api.db.session import get_session
from portfolio_api.schemas.contact import ContactAck, ContactInput, ContactMessageRead
from portfolio_api.services import contact_service

router = APIRouter(prefix="/contact")


@router.post("", response_model=ContactAck)
def submit_contact(
    contact_input: ContactInput,
    session: Annotated[Session, Depends(get_session)],
):
    _, error_message = contact_service.submit_contact_message(session, contact_input)
    if error_message is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_message)
    return ContactAck(success=True, message=CONTACT_RECEIVED_MESSAGE)


@router.get("", response_model=list[ContactMessageRead])
def list_contact_messages(session: Annotated[Session, Depends(get_session)]):
    return contact_service.list_contact_messages(session)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact_message(id: int, session: Annotated[Session, Depends(get_session)]):
    if not contact_service.delete_contact_message(session, id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
