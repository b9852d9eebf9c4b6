"""
Contact resolution strategies.

A resolver decides which existing CRM contact (if any) an extracted
contact refers to. The processor takes one resolver; the default chain
tries an exact email match, then a name-token match.

The name-token strategy is a heuristic: two different people sharing a
first and last name resolve to the same record.
"""

from abc import ABC, abstractmethod

from ..clients.crm import CrmClient
from ..logging import get_logger
from ..models.crm import CrmContact
from ..models.extraction import ExtractedContact

logger = get_logger(__name__)


class ContactResolver(ABC):
    """Maps an extracted contact to an existing CRM record."""

    @abstractmethod
    async def resolve(self, crm: CrmClient, contact: ExtractedContact) -> CrmContact | None:
        """Return the matching CRM contact, or None when nothing matches."""
        ...


class EmailContactResolver(ContactResolver):
    """Exact email match. No-op for contacts without an email."""

    async def resolve(self, crm: CrmClient, contact: ExtractedContact) -> CrmContact | None:
        if not contact.email:
            return None
        return await crm.find_contact_by_email(contact.email)


class NameTokenContactResolver(ContactResolver):
    """Token match on whichever of first and last name is present."""

    async def resolve(self, crm: CrmClient, contact: ExtractedContact) -> CrmContact | None:
        if not (contact.first_name or contact.last_name):
            return None
        return await crm.find_contact_by_name(contact.first_name or '', contact.last_name or '')


class ChainedContactResolver(ContactResolver):
    """Tries each resolver in order; the first non-None result wins."""

    def __init__(self, *resolvers: ContactResolver):
        self.resolvers = list(resolvers)

    async def resolve(self, crm: CrmClient, contact: ExtractedContact) -> CrmContact | None:
        for resolver in self.resolvers:
            found = await resolver.resolve(crm, contact)
            if found is not None:
                logger.debug(
                    'resolver.matched',
                    strategy=type(resolver).__name__,
                    contact_id=found.id,
                )
                return found
        return None


def default_resolver() -> ContactResolver:
    """Email first, then name."""
    return ChainedContactResolver(EmailContactResolver(), NameTokenContactResolver())
