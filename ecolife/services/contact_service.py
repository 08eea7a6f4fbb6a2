"""Contact service - intake of contact form messages."""
import logging
from datetime import datetime, timezone

from ecolife.models.contact import ContactCreate, ContactList, ContactMessage
from ecolife.state import InMemoryState
from ecolife.utils.ids import generate_id

logger = logging.getLogger(__name__)


class ContactService:
    """Service for storing and listing contact messages."""

    def __init__(self, state: InMemoryState):
        self.state = state

    def submit_message(self, contact: ContactCreate) -> ContactMessage:
        """
        Store a contact message.

        Raises:
            ValueError: If name, email or message is missing
        """
        if not (contact.name and contact.email and contact.message):
            raise ValueError("Name, email, and message are required.")

        with self.state.lock:
            entry = ContactMessage(
                id=generate_id(m.id for m in self.state.contact_messages),
                name=contact.name,
                email=contact.email,
                subject=contact.subject or "",
                message=contact.message,
                created_at=datetime.now(timezone.utc),
            )
            self.state.contact_messages.append(entry)

        logger.info("Contact message %s received from %s", entry.id, entry.email)
        return entry

    def list_messages(self) -> ContactList:
        with self.state.lock:
            items = list(self.state.contact_messages)
        return ContactList(count=len(items), items=items)
