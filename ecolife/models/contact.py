"""Contact message model definitions."""
from datetime import datetime
from typing import Optional

from ecolife.models.common import CamelModel


class ContactCreate(CamelModel):
    """Contact form submission. Required fields are checked by the service."""

    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactMessage(CamelModel):
    """Stored contact message."""

    id: str
    name: str
    email: str
    subject: str = ""
    message: str
    created_at: datetime


class ContactReceipt(CamelModel):
    """Response to a successful contact submission."""

    success: bool = True
    message: str
    entry: ContactMessage


class ContactList(CamelModel):
    """All stored contact messages."""

    count: int
    items: list[ContactMessage]
