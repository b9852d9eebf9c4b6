"""
Meeting models produced by the meeting sources (local cache or API).
"""

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Participant(BaseModel):
    """A meeting attendee."""

    name: str
    email: str | None = None
    is_host: bool | None = None

    model_config = {'alias_generator': to_camel, 'populate_by_name': True}


class Meeting(BaseModel):
    """A recorded meeting. transcript is only populated on detail reads."""

    id: str
    title: str
    date: str
    duration: int | None = Field(default=None, description='Length in minutes')
    participants: list[Participant] = Field(default_factory=list)
    transcript: str | None = None
    summary: str | None = None
    has_transcript: bool = True

    model_config = {'alias_generator': to_camel, 'populate_by_name': True}

    @property
    def participant_emails(self) -> list[str]:
        return [p.email for p in self.participants if p.email]

    def to_summary(self) -> dict[str, Any]:
        """List-view shape: no transcript body."""
        return {
            'id': self.id,
            'title': self.title,
            'date': self.date,
            'duration': self.duration,
            'participantCount': len(self.participants),
            'participants': [{'name': p.name, 'email': p.email} for p in self.participants],
            'hasSummary': bool(self.summary),
            'hasTranscript': self.has_transcript,
        }

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
