"""Contact router - contact form intake."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ecolife.models.contact import ContactCreate, ContactList, ContactReceipt
from ecolife.services.contact_service import ContactService
from ecolife.state import get_state


router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=ContactReceipt, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    contact: Optional[ContactCreate] = None,
    state=Depends(get_state),
):
    """
    Submit a contact message.

    Raises:
        HTTPException: If name, email or message is missing (400)
    """
    service = ContactService(state)

    try:
        entry = service.submit_message(contact or ContactCreate())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return ContactReceipt(
        message="Message received. Thank you for reaching out!",
        entry=entry,
    )


@router.get("", response_model=ContactList)
async def list_contacts(state=Depends(get_state)):
    """List all contact messages (no pagination)."""
    service = ContactService(state)
    return service.list_messages()
