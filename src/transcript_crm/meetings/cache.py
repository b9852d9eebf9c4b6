"""
Granola desktop cache reader.

The desktop app keeps its state in a JSON file whose "cache" key holds a
second, string-encoded JSON document. Meetings, transcripts and extra
attendee metadata all live under that inner document's "state".
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import config
from ..errors import MeetingSourceError
from ..logging import get_logger
from ..models.meeting import Meeting, Participant

logger = get_logger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def _email_local_part(email: str | None) -> str | None:
    return email.split('@')[0] if email else None


def merge_participants(document: dict[str, Any], metadata: dict[str, Any] | None) -> list[Participant]:
    """
    Collect attendees from the calendar event, the people block and meeting metadata.

    Calendar attendees come first (the user's own entry is skipped); later
    sources only add people whose email has not been seen.
    """
    participants: list[Participant] = []
    seen_emails: set[str] = set()

    def add(name: str, email: str | None, is_host: bool | None = None) -> None:
        if email and email in seen_emails:
            return
        if email:
            seen_emails.add(email)
        participants.append(Participant(name=name, email=email, is_host=is_host))

    calendar_event = document.get('google_calendar_event') or {}
    for attendee in calendar_event.get('attendees') or []:
        if attendee.get('self'):
            continue
        email = attendee.get('email')
        add(
            attendee.get('displayName') or _email_local_part(email) or 'Unknown',
            email,
            attendee.get('organizer'),
        )

    people = document.get('people') or {}
    for attendee in people.get('attendees') or []:
        full_name = (((attendee.get('details') or {}).get('person') or {}).get('name') or {}).get(
            'fullName'
        )
        add(attendee.get('name') or full_name or 'Unknown', attendee.get('email'))

    for attendee in (metadata or {}).get('attendees') or []:
        email = attendee.get('email')
        add(attendee.get('name') or _email_local_part(email) or 'Unknown', email)

    return participants


def join_transcript(entries: list[dict[str, Any]]) -> str:
    """'speaker: text' per non-blank entry, one per line."""
    lines = []
    for entry in entries:
        text = entry.get('text') or ''
        if not text.strip():
            continue
        speaker = entry.get('speaker')
        lines.append(f"{speaker}: {text}" if speaker else text)
    return '\n'.join(lines)


class GranolaCacheReader:
    """Reads meetings from the Granola desktop cache file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path or config.GRANOLA_CACHE_PATH).expanduser()

    def _load_state(self) -> dict[str, Any]:
        try:
            outer = json.loads(self.path.read_text(encoding='utf-8'))
            inner = json.loads(outer['cache'])
            state = inner['state']
        except FileNotFoundError as e:
            raise MeetingSourceError(
                'Granola cache file not found',
                context={'path': str(self.path)},
            ) from e
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise MeetingSourceError(
                f"Granola cache file is unreadable: {e}",
                context={'path': str(self.path)},
            ) from e

        if not isinstance(state, dict):
            raise MeetingSourceError('Granola cache has no state', context={'path': str(self.path)})
        return state

    def list_meetings(self, limit: int = 50) -> list[Meeting]:
        """
        Non-deleted meetings, newest first.

        Raises:
            MeetingSourceError: Cache missing or malformed
        """
        state = self._load_state()
        documents = state.get('documents')
        if not isinstance(documents, dict):
            return []

        meetings = [
            doc
            for doc in documents.values()
            if isinstance(doc, dict) and not doc.get('deleted_at') and doc.get('type') == 'meeting'
        ]
        meetings.sort(key=lambda doc: _parse_timestamp(doc.get('created_at')) or _EPOCH, reverse=True)

        logger.debug('granola_cache.listed', count=min(len(meetings), limit))
        return [self._to_meeting(doc, state) for doc in meetings[:limit]]

    def get_meeting(self, meeting_id: str) -> Meeting | None:
        """
        One meeting with its transcript, or None if absent or deleted.

        Raises:
            MeetingSourceError: Cache missing or malformed
        """
        state = self._load_state()
        document = (state.get('documents') or {}).get(meeting_id)
        if not document or document.get('deleted_at'):
            return None
        return self._to_meeting(document, state, include_transcript=True)

    def _to_meeting(
        self,
        document: dict[str, Any],
        state: dict[str, Any],
        include_transcript: bool = False,
    ) -> Meeting:
        meeting_id = document['id']
        calendar_event = document.get('google_calendar_event') or {}
        metadata = (state.get('meetingsMetadata') or {}).get(meeting_id)
        entries = (state.get('transcripts') or {}).get(meeting_id) or []

        start_raw = (calendar_event.get('start') or {}).get('dateTime')
        start = _parse_timestamp(start_raw)
        end = _parse_timestamp((calendar_event.get('end') or {}).get('dateTime'))
        duration = round((end - start).total_seconds() / 60) if start and end else None

        return Meeting(
            id=meeting_id,
            title=document.get('title') or calendar_event.get('summary') or 'Untitled Meeting',
            date=start_raw or document.get('created_at') or datetime.now(timezone.utc).isoformat(),
            duration=duration,
            participants=merge_participants(document, metadata),
            transcript=join_transcript(entries) if include_transcript and entries else None,
            summary=document.get('notes_markdown') or document.get('notes_plain'),
            has_transcript=bool(entries),
        )
