"""
Abstract CRM interface used by the transcript processor.

Every CRM backend implements this interface. Implementations raise
CrmApiError (carrying an HTTP-like status code) on failure; the processor
treats every such failure as local to the contact, deal or note it was
working on.
"""

from abc import ABC, abstractmethod

from ..models.crm import CrmContact, CrmDeal, NoteTarget
from ..models.extraction import ExtractedContact, ExtractedDeal


class CrmClient(ABC):
    """Contact, deal and note operations needed to sync one call."""

    @abstractmethod
    async def find_contact_by_email(self, email: str) -> CrmContact | None:
        """Exact (case-insensitive) email search. First result wins."""
        ...

    @abstractmethod
    async def find_contact_by_name(self, first_name: str, last_name: str) -> CrmContact | None:
        """Token-containment search on first and/or last name. First result wins."""
        ...

    @abstractmethod
    async def create_contact(self, contact: ExtractedContact) -> CrmContact:
        """Create a contact from whatever fields are present."""
        ...

    @abstractmethod
    async def update_contact(self, contact_id: str, contact: ExtractedContact) -> CrmContact:
        """Overwrite non-empty fields. Never changes the stored email."""
        ...

    @abstractmethod
    async def find_deal_by_name(self, name: str) -> CrmDeal | None:
        """Token-containment search on deal name. First result wins."""
        ...

    @abstractmethod
    async def create_deal(self, deal: ExtractedDeal, contact_id: str | None = None) -> CrmDeal:
        """Create a deal, optionally associated with a contact."""
        ...

    @abstractmethod
    async def add_note(self, target: NoteTarget, target_id: str, body: str) -> str:
        """Attach a note to a contact or deal, return the note ID."""
        ...

    @abstractmethod
    def contact_url(self, contact_id: str) -> str:
        """Browser URL for a contact record."""
        ...

    @abstractmethod
    def deal_url(self, deal_id: str) -> str:
        """Browser URL for a deal record."""
        ...
