"""
Follow-up export builders.

Pure functions that turn ExtractedData (plus optional social profiles)
into a markdown ticket description and one-click URLs for Jira, Trello
and an email draft. Nothing here talks to the network.
"""

from typing import Any, Iterable
from urllib.parse import quote, urlencode

from .config import config
from .models.extraction import ExtractedData
from .models.social import SocialProfile

DEFAULT_TICKET_TITLE = 'Meeting Follow-up'
TRELLO_BOARDS = ('themes', 'artwork')

# encodeURIComponent-compatible
_URI_SAFE = "-_.!~*'()"


def _encode(params: dict[str, str]) -> str:
    return urlencode(params, quote_via=quote, safe=_URI_SAFE)


def _bullets(items: Iterable[str]) -> str:
    return '\n'.join(f"- {item}" for item in items)


def _labelled(pairs: list[tuple[str, Any]]) -> str:
    """'- Label: value' lines for the non-empty values; lists are comma-joined."""
    lines = []
    for label, value in pairs:
        if not value:
            continue
        text = ', '.join(value) if isinstance(value, list) else str(value)
        lines.append(f"- {label}: {text}")
    return '\n'.join(lines)


# =============================================================================
# Ticket Description
# =============================================================================


def ticket_title(extracted: ExtractedData) -> str:
    return extracted.meeting_title or DEFAULT_TICKET_TITLE


def build_ticket_description(
    extracted: ExtractedData,
    profiles: Iterable[SocialProfile] = (),
) -> str:
    """
    Markdown ticket body.

    Sections, in order, each omitted when empty: Summary, Contacts,
    Action Items, Next Steps, Products / Manufacturing, Creative Direction,
    Social Profiles.
    """
    sections: list[str] = []

    if extracted.call_summary:
        sections.append(f"**Summary:**\n{extracted.call_summary}")

    contact_names = [c.display_name or c.email for c in extracted.contacts]
    contact_names = [name for name in contact_names if name]
    if contact_names:
        sections.append(f"**Contacts:** {', '.join(contact_names)}")

    if extracted.action_items:
        sections.append(f"**Action Items:**\n{_bullets(extracted.action_items)}")

    if extracted.next_steps:
        sections.append(f"**Next Steps:**\n{_bullets(extracted.next_steps)}")

    manufacturing = extracted.manufacturing
    if manufacturing is not None and not manufacturing.is_empty:
        lines = _labelled([
            ('Products', manufacturing.products),
            ('Quantities', manufacturing.quantities),
            ('Materials', manufacturing.materials),
            ('Timeline', manufacturing.timeline),
            ('Requirements', manufacturing.requirements),
            ('Concerns', manufacturing.concerns),
        ])
        sections.append(f"**Products / Manufacturing:**\n{lines}")

    creative = extracted.creative_info
    if creative is not None and not creative.is_empty:
        lines = _labelled([
            ('Themes', creative.themes),
            ('Inspiration', creative.inspiration),
            ('Colors', creative.colors),
            ('Brand Elements', creative.brand_elements),
            ('Social Links', creative.social_links),
            ('Website Links', creative.website_links),
        ])
        sections.append(f"**Creative Direction:**\n{lines}")

    profile_list = list(profiles)
    if profile_list:
        sections.append(
            f"**Social Profiles:**\n{_bullets(f'{p.platform}: {p.url}' for p in profile_list)}"
        )

    return '\n\n'.join(sections).strip()


# =============================================================================
# Export URLs
# =============================================================================


def jira_issue_url(
    extracted: ExtractedData,
    profiles: Iterable[SocialProfile] = (),
    base_url: str | None = None,
    project_id: str | None = None,
    issue_type_id: str | None = None,
) -> str | None:
    """Pre-filled Jira create-issue URL, or None when Jira is not configured."""
    base_url = base_url or config.JIRA_BASE_URL
    project_id = project_id or config.JIRA_PROJECT_ID
    issue_type_id = issue_type_id or config.JIRA_ISSUE_TYPE_ID
    if not (base_url and project_id and issue_type_id):
        return None

    query = _encode({
        'pid': project_id,
        'issuetype': issue_type_id,
        'summary': ticket_title(extracted),
        'description': build_ticket_description(extracted, profiles),
    })
    return f"{base_url.rstrip('/')}/secure/CreateIssueDetails!init.jspa?{query}"


def trello_card_url(
    extracted: ExtractedData,
    board: str,
    profiles: Iterable[SocialProfile] = (),
    board_ids: dict[str, str] | None = None,
) -> str | None:
    """
    Pre-filled Trello add-card URL for one of the known boards.

    Returns:
        URL, or None when the board has no configured ID

    Raises:
        ValueError: Unknown board name
    """
    if board not in TRELLO_BOARDS:
        raise ValueError(f"Unknown Trello board: {board}")

    board_ids = board_ids or {
        'themes': config.TRELLO_THEMES_BOARD_ID,
        'artwork': config.TRELLO_ARTWORK_BOARD_ID,
    }
    board_id = board_ids.get(board)
    if not board_id:
        return None

    query = _encode({
        'name': ticket_title(extracted),
        'desc': build_ticket_description(extracted, profiles),
        'idBoard': board_id,
        'mode': 'popup',
    })
    return f"https://trello.com/add-card?{query}"


def email_draft_url(extracted: ExtractedData) -> str:
    """mailto: link addressed to every contact with an email."""
    recipients = list(dict.fromkeys(c.email for c in extracted.contacts if c.email))

    body_parts = []
    if extracted.call_summary:
        body_parts.append(f"Summary:\n{extracted.call_summary}")
    if extracted.next_steps:
        body_parts.append(f"Next steps:\n{_bullets(extracted.next_steps)}")

    query = _encode({
        'subject': f"Follow-up: {ticket_title(extracted)}",
        'body': '\n\n'.join(body_parts),
    })
    return f"mailto:{','.join(recipients)}?{query}"


def build_exports(
    extracted: ExtractedData,
    profiles: Iterable[SocialProfile] = (),
) -> dict[str, Any]:
    """Every export target for one result, as returned by the exports endpoint."""
    profile_list = list(profiles)
    return {
        'description': build_ticket_description(extracted, profile_list),
        'jira': jira_issue_url(extracted, profile_list),
        'trello': {
            board: trello_card_url(extracted, board, profile_list) for board in TRELLO_BOARDS
        },
        'email': email_draft_url(extracted),
    }
