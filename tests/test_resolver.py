"""
Tests for contact resolution strategies.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from transcript_crm.models.crm import CrmContact
from transcript_crm.models.extraction import ExtractedContact
from transcript_crm.pipeline.resolver import (
    ChainedContactResolver,
    EmailContactResolver,
    NameTokenContactResolver,
    default_resolver,
)


def _make_crm(by_email=None, by_name=None) -> MagicMock:
    crm = MagicMock()
    crm.find_contact_by_email = AsyncMock(return_value=by_email)
    crm.find_contact_by_name = AsyncMock(return_value=by_name)
    return crm


class TestEmailResolver:
    @pytest.mark.asyncio
    async def test_no_email_is_noop(self):
        crm = _make_crm()

        assert await EmailContactResolver().resolve(crm, ExtractedContact(first_name='Ann')) is None
        crm.find_contact_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_searches_by_email(self):
        found = CrmContact(id='7', properties={'email': 'a@x.com'})
        crm = _make_crm(by_email=found)

        assert await EmailContactResolver().resolve(crm, ExtractedContact(email='a@x.com')) is found
        crm.find_contact_by_email.assert_awaited_once_with('a@x.com')


class TestNameTokenResolver:
    @pytest.mark.asyncio
    async def test_no_name_is_noop(self):
        crm = _make_crm()

        assert await NameTokenContactResolver().resolve(crm, ExtractedContact(email='a@x.com')) is None
        crm.find_contact_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_single_name_part_is_searched(self):
        crm = _make_crm()

        await NameTokenContactResolver().resolve(crm, ExtractedContact(last_name='Lee'))

        crm.find_contact_by_name.assert_awaited_once_with('', 'Lee')

    @pytest.mark.asyncio
    async def test_full_name_is_searched(self):
        found = CrmContact(id='9')
        crm = _make_crm(by_name=found)

        result = await NameTokenContactResolver().resolve(
            crm, ExtractedContact(first_name='Jordan', last_name='Lee')
        )

        assert result is found
        crm.find_contact_by_name.assert_awaited_once_with('Jordan', 'Lee')


class TestChainedResolver:
    @pytest.mark.asyncio
    async def test_email_match_short_circuits(self):
        found = CrmContact(id='1')
        crm = _make_crm(by_email=found, by_name=CrmContact(id='2'))

        result = await default_resolver().resolve(
            crm, ExtractedContact(email='a@x.com', first_name='Ann', last_name='Lee')
        )

        assert result.id == '1'
        crm.find_contact_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_through_to_name(self):
        crm = _make_crm(by_email=None, by_name=CrmContact(id='2'))

        result = await default_resolver().resolve(
            crm, ExtractedContact(email='a@x.com', first_name='Ann', last_name='Lee')
        )

        assert result.id == '2'

    @pytest.mark.asyncio
    async def test_nothing_found(self):
        crm = _make_crm()

        assert await ChainedContactResolver().resolve(crm, ExtractedContact(email='a@x.com')) is None

    @pytest.mark.asyncio
    async def test_errors_propagate(self):
        crm = _make_crm()
        crm.find_contact_by_email.side_effect = RuntimeError('search down')

        with pytest.raises(RuntimeError):
            await default_resolver().resolve(crm, ExtractedContact(email='a@x.com'))
