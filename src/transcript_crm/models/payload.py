"""
Pipeline input model.

A TranscriptPayload is what the upload form, the webhook and the meeting
picker all hand to the processor.
"""

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


class TranscriptPayload(BaseModel):
    """
    A single transcript submitted for processing.

    Attendees may be names or emails; only entries containing '@' are
    treated as emails. Form submissions send attendees as one comma-separated
    string, which is split here.
    """

    transcript: str = Field(..., description='Raw call transcript (REQUIRED)')
    title: str | None = Field(default=None, description='Meeting title')
    date: str | None = Field(default=None, description='Meeting date (ISO-ish)')
    attendees: list[str] | None = Field(
        default=None, description='Attendee emails or names'
    )
    creator_name: str | None = Field(
        default=None,
        description='Creator/brand name for the social profile lookup',
    )

    model_config = {
        'frozen': True,
        'alias_generator': to_camel,
        'populate_by_name': True,
    }

    @field_validator('transcript')
    @classmethod
    def transcript_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Transcript is required')
        return value

    @field_validator('attendees', mode='before')
    @classmethod
    def split_attendees(cls, value):
        if value is None:
            return None
        if isinstance(value, str):
            value = value.split(',')
        cleaned = [a.strip() for a in value if isinstance(a, str) and a.strip()]
        return cleaned or None

    @property
    def attendee_emails(self) -> list[str]:
        """Attendee entries that look like email addresses."""
        return [a for a in self.attendees or [] if '@' in a]
