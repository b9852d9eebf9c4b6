"""
HubSpot CRM client.

Handles:
- Contact search (exact email, name token) and create/update
- Deal search by name token, create, and contact association
- Call notes attached to contacts or deals
- Retry with exponential backoff on rate limits and transport failures
"""

import os
import time
from typing import Any

import httpx
import structlog
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..errors import CrmApiError, CrmConnectionError, CrmRateLimitError
from ..models.crm import CrmContact, CrmDeal, NoteTarget
from ..models.extraction import DealStage, ExtractedContact, ExtractedDeal
from .crm import CrmClient

logger = structlog.get_logger(__name__)

DEFAULT_API_BASE = 'https://api.hubapi.com'

CONTACT_PROPERTIES = ['firstname', 'lastname', 'email', 'phone', 'company', 'jobtitle']
DEAL_PROPERTIES = ['dealname', 'dealstage', 'amount', 'closedate']

# Internal stage -> HubSpot default pipeline stage
DEAL_STAGE_MAPPING: dict[DealStage, str] = {
    DealStage.DISCOVERY: 'appointmentscheduled',
    DealStage.QUALIFICATION: 'qualifiedtobuy',
    DealStage.PROPOSAL: 'presentationscheduled',
    DealStage.NEGOTIATION: 'decisionmakerboughtin',
    DealStage.CLOSED_WON: 'closedwon',
    DealStage.CLOSED_LOST: 'closedlost',
}

# HUBSPOT_DEFINED association type IDs
NOTE_ASSOCIATION_TYPES: dict[NoteTarget, int] = {
    NoteTarget.CONTACT: 202,
    NoteTarget.DEAL: 214,
}


# =============================================================================
# Property Builders
# =============================================================================


def to_crm_stage(stage: DealStage | None) -> str | None:
    """Map an internal deal stage to HubSpot's vocabulary."""
    if stage is None:
        return None
    return DEAL_STAGE_MAPPING.get(stage)


def contact_properties(contact: ExtractedContact, include_email: bool = True) -> dict[str, str]:
    """
    HubSpot contact properties for the non-empty fields of a contact.

    Args:
        contact: Extracted contact
        include_email: False for updates; email is the identity key and never overwritten

    Returns:
        Property dict, possibly empty
    """
    fields = {
        'firstname': contact.first_name,
        'lastname': contact.last_name,
        'phone': contact.phone,
        'company': contact.company,
        'jobtitle': contact.job_title,
    }
    if include_email:
        fields['email'] = contact.email
    return {name: value for name, value in fields.items() if value}


def deal_properties(deal: ExtractedDeal) -> dict[str, Any]:
    """HubSpot deal properties. Unset or unmapped stage is left out entirely."""
    properties: dict[str, Any] = {}
    if deal.name:
        properties['dealname'] = deal.name
    stage = to_crm_stage(deal.stage)
    if stage:
        properties['dealstage'] = stage
    if deal.amount is not None:
        properties['amount'] = deal.amount
    if deal.close_date:
        properties['closedate'] = deal.close_date
    return properties


# =============================================================================
# Client
# =============================================================================


class HubSpotClient(CrmClient):
    """
    Async HubSpot CRM v3 client.

    Configuration via environment variables:
    - HUBSPOT_ACCESS_TOKEN: Private app token (required)
    - HUBSPOT_PORTAL_ID: Portal (hub) ID used to build record URLs (required)
    - HUBSPOT_API_BASE: API base URL (default: https://api.hubapi.com)
    """

    def __init__(
        self,
        access_token: str | None = None,
        portal_id: str | None = None,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the HubSpot client.

        Args:
            access_token: Private app token (defaults to HUBSPOT_ACCESS_TOKEN env var)
            portal_id: Portal ID (defaults to HUBSPOT_PORTAL_ID env var)
            base_url: API base URL (defaults to HUBSPOT_API_BASE or the public API)
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.access_token = access_token or os.getenv('HUBSPOT_ACCESS_TOKEN')
        if not self.access_token:
            raise ValueError('HUBSPOT_ACCESS_TOKEN environment variable is required')

        self.portal_id = portal_id or os.getenv('HUBSPOT_PORTAL_ID')
        if not self.portal_id:
            raise ValueError('HUBSPOT_PORTAL_ID environment variable is required')

        self.base_url = base_url or os.getenv('HUBSPOT_API_BASE', DEFAULT_API_BASE)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                'Authorization': f"Bearer {self.access_token}",
                'Content-Type': 'application/json',
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP connection pool."""
        await self._client.aclose()

    @retry(
        retry=retry_if_exception_type((CrmRateLimitError, CrmConnectionError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Send one API request and decode the JSON body.

        Raises:
            CrmRateLimitError: 429 response (retried)
            CrmConnectionError: Transport failure (retried)
            CrmApiError: Any other non-2xx response
        """
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.TransportError as e:
            raise CrmConnectionError(
                f"HubSpot API unreachable: {e}",
                context={'method': method, 'path': path},
            ) from e

        if response.status_code == 429:
            raise CrmRateLimitError(
                'HubSpot API error: 429 - rate limit exceeded',
                status_code=429,
                context={'method': method, 'path': path},
            )
        if response.is_error:
            logger.error(
                'hubspot.api_error',
                method=method,
                path=path,
                status=response.status_code,
                error=response.text,
            )
            raise CrmApiError(
                f"HubSpot API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
                context={'method': method, 'path': path},
            )

        if not response.content:
            return {}
        return response.json()

    async def _search_first(
        self,
        object_type: str,
        filters: list[dict[str, str]],
        properties: list[str],
    ) -> dict[str, Any] | None:
        """Run a CRM search with one filter group and return the first hit."""
        result = await self._request(
            'POST',
            f"/crm/v3/objects/{object_type}/search",
            json={
                'filterGroups': [{'filters': filters}],
                'properties': properties,
                'limit': 1,
            },
        )
        results = result.get('results') or []
        return results[0] if results else None

    # =========================================================================
    # Contacts
    # =========================================================================

    async def find_contact_by_email(self, email: str) -> CrmContact | None:
        if not email:
            return None
        hit = await self._search_first(
            'contacts',
            [{'propertyName': 'email', 'operator': 'EQ', 'value': email.strip()}],
            CONTACT_PROPERTIES,
        )
        return CrmContact.model_validate(hit) if hit else None

    async def find_contact_by_name(self, first_name: str, last_name: str) -> CrmContact | None:
        filters = []
        if first_name:
            filters.append(
                {'propertyName': 'firstname', 'operator': 'CONTAINS_TOKEN', 'value': first_name}
            )
        if last_name:
            filters.append(
                {'propertyName': 'lastname', 'operator': 'CONTAINS_TOKEN', 'value': last_name}
            )
        if not filters:
            return None

        hit = await self._search_first('contacts', filters, CONTACT_PROPERTIES)
        return CrmContact.model_validate(hit) if hit else None

    async def create_contact(self, contact: ExtractedContact) -> CrmContact:
        result = await self._request(
            'POST',
            '/crm/v3/objects/contacts',
            json={'properties': contact_properties(contact)},
        )
        created = CrmContact.model_validate(result)
        logger.info('hubspot.contact_created', contact_id=created.id)
        return created

    async def update_contact(self, contact_id: str, contact: ExtractedContact) -> CrmContact:
        properties = contact_properties(contact, include_email=False)
        if not properties:
            logger.info('hubspot.contact_update_skipped', contact_id=contact_id)
            return CrmContact(id=contact_id)

        result = await self._request(
            'PATCH',
            f"/crm/v3/objects/contacts/{contact_id}",
            json={'properties': properties},
        )
        updated = CrmContact.model_validate(result)
        logger.info('hubspot.contact_updated', contact_id=updated.id, fields=sorted(properties))
        return updated

    # =========================================================================
    # Deals
    # =========================================================================

    async def find_deal_by_name(self, name: str) -> CrmDeal | None:
        if not name:
            return None
        hit = await self._search_first(
            'deals',
            [{'propertyName': 'dealname', 'operator': 'CONTAINS_TOKEN', 'value': name}],
            DEAL_PROPERTIES,
        )
        return CrmDeal.model_validate(hit) if hit else None

    async def create_deal(self, deal: ExtractedDeal, contact_id: str | None = None) -> CrmDeal:
        result = await self._request(
            'POST',
            '/crm/v3/objects/deals',
            json={'properties': deal_properties(deal)},
        )
        created = CrmDeal.model_validate(result)

        if contact_id:
            try:
                await self._request(
                    'PUT',
                    f"/crm/v3/objects/deals/{created.id}/associations/contacts/{contact_id}/deal_to_contact",
                )
            except CrmApiError as e:
                # Deal exists either way; association is best-effort
                logger.warning(
                    'hubspot.deal_association_failed',
                    deal_id=created.id,
                    contact_id=contact_id,
                    error=e.message,
                )

        logger.info('hubspot.deal_created', deal_id=created.id)
        return created

    # =========================================================================
    # Notes
    # =========================================================================

    async def add_note(self, target: NoteTarget, target_id: str, body: str) -> str:
        result = await self._request(
            'POST',
            '/crm/v3/objects/notes',
            json={
                'properties': {
                    'hs_timestamp': int(time.time() * 1000),
                    'hs_note_body': body,
                },
                'associations': [
                    {
                        'to': {'id': target_id},
                        'types': [
                            {
                                'associationCategory': 'HUBSPOT_DEFINED',
                                'associationTypeId': NOTE_ASSOCIATION_TYPES[target],
                            }
                        ],
                    }
                ],
            },
        )
        note_id = str(result.get('id', ''))
        logger.info('hubspot.note_added', target=target.value, target_id=target_id, note_id=note_id)
        return note_id

    # =========================================================================
    # URLs
    # =========================================================================

    def contact_url(self, contact_id: str) -> str:
        return f"https://app.hubspot.com/contacts/{self.portal_id}/contact/{contact_id}"

    def deal_url(self, deal_id: str) -> str:
        return f"https://app.hubspot.com/contacts/{self.portal_id}/deal/{deal_id}"
