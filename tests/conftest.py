"""
Pytest configuration and shared fixtures.

Key fixtures:
- fake_crm: In-memory CrmClient with per-operation failure injection
- make_extracted: Factory for ExtractedData with sensible defaults
- sample_transcript: Short two-speaker sales call

No test here talks to a live service.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

# Load environment variables
from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)

from transcript_crm.clients.crm import CrmClient
from transcript_crm.clients.hubspot_client import contact_properties, deal_properties
from transcript_crm.errors import CrmApiError
from transcript_crm.models.crm import CrmContact, CrmDeal, NoteTarget
from transcript_crm.models.extraction import ExtractedContact, ExtractedData, ExtractedDeal


class FakeCrm(CrmClient):
    """
    In-memory CRM.

    Failures are injected by key, e.g. ``fail('create_contact', 'b@x.com')``
    or ``fail('add_note', 'deal')``. Every call is recorded in ``calls``.
    """

    def __init__(self):
        self.contacts: dict[str, dict[str, str]] = {}
        self.deals: dict[str, dict] = {}
        self.notes: list[tuple[NoteTarget, str, str]] = []
        self.deal_associations: list[tuple[str, str]] = []
        self.calls: list[tuple] = []
        self._failures: dict[tuple[str, str], Exception] = {}
        self._next_id = 100

    # -- test helpers ---------------------------------------------------------

    def fail(self, operation: str, key: str, error: Exception | None = None) -> None:
        self._failures[(operation, key)] = error or CrmApiError(
            f"HubSpot API error: 500 - {operation} broke", status_code=500
        )

    def seed_contact(self, **properties: str) -> str:
        contact_id = self._new_id()
        self.contacts[contact_id] = dict(properties)
        return contact_id

    def seed_deal(self, name: str, **properties) -> str:
        deal_id = self._new_id()
        self.deals[deal_id] = {'dealname': name, **properties}
        return deal_id

    def notes_for(self, target: NoteTarget, target_id: str) -> list[str]:
        return [body for t, i, body in self.notes if t is target and i == target_id]

    def _new_id(self) -> str:
        self._next_id += 1
        return str(self._next_id)

    def _check(self, operation: str, key: str) -> None:
        self.calls.append((operation, key))
        error = self._failures.get((operation, key))
        if error is not None:
            raise error

    # -- CrmClient ------------------------------------------------------------

    async def find_contact_by_email(self, email: str) -> CrmContact | None:
        self._check('find_contact_by_email', email)
        for contact_id, props in self.contacts.items():
            if (props.get('email') or '').lower() == email.lower():
                return CrmContact(id=contact_id, properties=dict(props))
        return None

    async def find_contact_by_name(self, first_name: str, last_name: str) -> CrmContact | None:
        self._check('find_contact_by_name', f"{first_name} {last_name}".strip())
        for contact_id, props in self.contacts.items():
            first_ok = not first_name or first_name.lower() in (props.get('firstname') or '').lower()
            last_ok = not last_name or last_name.lower() in (props.get('lastname') or '').lower()
            if first_ok and last_ok:
                return CrmContact(id=contact_id, properties=dict(props))
        return None

    async def create_contact(self, contact: ExtractedContact) -> CrmContact:
        self._check('create_contact', contact.identifier)
        contact_id = self._new_id()
        self.contacts[contact_id] = contact_properties(contact)
        return CrmContact(id=contact_id, properties=dict(self.contacts[contact_id]))

    async def update_contact(self, contact_id: str, contact: ExtractedContact) -> CrmContact:
        self._check('update_contact', contact_id)
        self.contacts[contact_id].update(contact_properties(contact, include_email=False))
        return CrmContact(id=contact_id, properties=dict(self.contacts[contact_id]))

    async def find_deal_by_name(self, name: str) -> CrmDeal | None:
        self._check('find_deal_by_name', name)
        for deal_id, props in self.deals.items():
            if name.lower() in props.get('dealname', '').lower():
                return CrmDeal(id=deal_id, properties=dict(props))
        return None

    async def create_deal(self, deal: ExtractedDeal, contact_id: str | None = None) -> CrmDeal:
        self._check('create_deal', deal.name or '')
        deal_id = self._new_id()
        self.deals[deal_id] = deal_properties(deal)
        if contact_id:
            self.deal_associations.append((deal_id, contact_id))
        return CrmDeal(id=deal_id, properties={'dealname': deal.name})

    async def add_note(self, target: NoteTarget, target_id: str, body: str) -> str:
        self._check('add_note', target.value if target is NoteTarget.DEAL else target_id)
        self.notes.append((target, target_id, body))
        return self._new_id()

    def contact_url(self, contact_id: str) -> str:
        return f"https://crm.test/contact/{contact_id}"

    def deal_url(self, deal_id: str) -> str:
        return f"https://crm.test/deal/{deal_id}"


@pytest.fixture
def fake_crm() -> FakeCrm:
    return FakeCrm()


@pytest.fixture
def make_extracted():
    """Build ExtractedData; keyword overrides replace the defaults."""

    def _make(**overrides) -> ExtractedData:
        data = {
            'contacts': [],
            'deal': {},
            'call_summary': 'Discussed a spring merch drop.',
            'action_items': [],
            'next_steps': [],
            'sentiment': 'positive',
        }
        data.update(overrides)
        return ExtractedData.model_validate(data)

    return _make


@pytest.fixture
def sample_transcript() -> str:
    """Sample transcript for testing extraction."""
    return """
Sarah (Merch Co): Thanks for joining, Jordan. Let's talk about the spring drop.

Jordan Lee (Northwind Studios): Great. We're thinking 500 hoodies and 300 mugs,
mostly in forest green. Budget is around fifteen thousand.

Sarah: Perfect. I'll send over a proposal with mockups by Friday.

Jordan: Sounds good. Loop in our designer, Priya, at priya@northwind.example.
"""
