"""
Tests for the follow-up export builders.
"""

from urllib.parse import parse_qs, urlsplit

import pytest

from transcript_crm.config import config
from transcript_crm.exports import (
    build_exports,
    build_ticket_description,
    email_draft_url,
    jira_issue_url,
    trello_card_url,
)
from transcript_crm.models.social import SocialProfile


@pytest.fixture
def extracted(make_extracted):
    return make_extracted(
        meeting_title='Spring drop',
        call_summary='Northwind wants hoodies.',
        contacts=[
            {'first_name': 'Jordan', 'last_name': 'Lee', 'email': 'jordan@northwind.example'},
            {'email': 'priya@northwind.example'},
        ],
        action_items=['Send mockups'],
        next_steps=['Review Friday'],
        manufacturing={'products': ['hoodies', 'mugs'], 'quantities': '500'},
        creative_info={'colors': ['forest green']},
    )


PROFILES = [SocialProfile(platform='YouTube', url='https://youtube.com/@northwind')]


def _query(url: str) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}


class TestTicketDescription:
    def test_full_description(self, extracted):
        assert build_ticket_description(extracted, PROFILES) == (
            '**Summary:**\nNorthwind wants hoodies.\n\n'
            '**Contacts:** Jordan Lee, priya@northwind.example\n\n'
            '**Action Items:**\n- Send mockups\n\n'
            '**Next Steps:**\n- Review Friday\n\n'
            '**Products / Manufacturing:**\n- Products: hoodies, mugs\n- Quantities: 500\n\n'
            '**Creative Direction:**\n- Colors: forest green\n\n'
            '**Social Profiles:**\n- YouTube: https://youtube.com/@northwind'
        )

    def test_empty_sections_omitted(self, make_extracted):
        description = build_ticket_description(
            make_extracted(call_summary='Short call.', manufacturing={}, creative_info=None)
        )

        assert description == '**Summary:**\nShort call.'


class TestJiraUrl:
    def test_unconfigured_returns_none(self, extracted, monkeypatch):
        monkeypatch.setattr(config, 'JIRA_BASE_URL', '')

        assert jira_issue_url(extracted, project_id='10001', issue_type_id='10002') is None

    def test_prefilled_url(self, extracted):
        url = jira_issue_url(
            extracted,
            PROFILES,
            base_url='https://acme.atlassian.net/',
            project_id='10001',
            issue_type_id='10002',
        )

        assert url.startswith('https://acme.atlassian.net/secure/CreateIssueDetails!init.jspa?')
        query = _query(url)
        assert query['pid'] == '10001'
        assert query['issuetype'] == '10002'
        assert query['summary'] == 'Spring drop'
        assert query['description'] == build_ticket_description(extracted, PROFILES)
        assert '+' not in urlsplit(url).query


class TestTrelloUrl:
    def test_unknown_board(self, extracted):
        with pytest.raises(ValueError, match='Unknown Trello board'):
            trello_card_url(extracted, 'backlog')

    def test_unconfigured_board_returns_none(self, extracted):
        assert trello_card_url(extracted, 'themes', board_ids={'themes': ''}) is None

    def test_prefilled_url(self, extracted):
        url = trello_card_url(extracted, 'artwork', board_ids={'artwork': 'b123'})

        assert url.startswith('https://trello.com/add-card?')
        query = _query(url)
        assert query['name'] == 'Spring drop'
        assert query['idBoard'] == 'b123'
        assert query['mode'] == 'popup'


class TestEmailDraft:
    def test_mailto_addresses_contacts(self, extracted):
        url = email_draft_url(extracted)

        recipients, _, query_string = url.removeprefix('mailto:').partition('?')
        assert recipients == 'jordan@northwind.example,priya@northwind.example'
        query = {k: v[0] for k, v in parse_qs(query_string).items()}
        assert query['subject'] == 'Follow-up: Spring drop'
        assert query['body'] == 'Summary:\nNorthwind wants hoodies.\n\nNext steps:\n- Review Friday'

    def test_default_title(self, make_extracted):
        url = email_draft_url(make_extracted())

        assert 'subject=Follow-up%3A%20Meeting%20Follow-up' in url


class TestBuildExports:
    def test_all_targets_present(self, extracted):
        exports = build_exports(extracted, PROFILES)

        assert set(exports) == {'description', 'jira', 'trello', 'email'}
        assert set(exports['trello']) == {'themes', 'artwork'}
        assert exports['email'].startswith('mailto:')
        assert 'YouTube' in exports['description']
