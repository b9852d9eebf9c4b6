"""
Structured call data extracted from a transcript by the language model.

These models are the validation target for the model's JSON response and
the shape returned to the presentation layer (camelCase on the wire).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {
    'alias_generator': to_camel,
    'populate_by_name': True,
}


def _none_to_list(value: Any) -> Any:
    """Models answer null where an empty array was asked for."""
    return [] if value is None else value


class DealStage(str, Enum):
    """Internal deal stage vocabulary."""

    DISCOVERY = 'discovery'
    QUALIFICATION = 'qualification'
    PROPOSAL = 'proposal'
    NEGOTIATION = 'negotiation'
    CLOSED_WON = 'closed_won'
    CLOSED_LOST = 'closed_lost'


class Sentiment(str, Enum):
    """Overall tone of the call."""

    POSITIVE = 'positive'
    NEUTRAL = 'neutral'
    NEGATIVE = 'negative'


class ExtractedContact(BaseModel):
    """An external attendee identified in the transcript."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    job_title: str | None = None

    model_config = _CAMEL_CONFIG

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to identify this person by."""
        return not (self.email or self.first_name or self.last_name)

    @property
    def display_name(self) -> str | None:
        name = ' '.join(part for part in (self.first_name, self.last_name) if part)
        return name or None

    @property
    def identifier(self) -> str:
        """Email if known, else the display name."""
        return self.email or self.display_name or 'unknown contact'


class ExtractedDeal(BaseModel):
    """The deal discussed on the call, if any. A deal is only synced when named."""

    name: str | None = None
    stage: DealStage | None = None
    amount: float | None = None
    close_date: str | None = None
    notes: str | None = None

    model_config = _CAMEL_CONFIG

    @field_validator('stage', mode='before')
    @classmethod
    def unknown_stage_to_none(cls, value: Any) -> Any:
        if isinstance(value, DealStage) or value is None:
            return value
        normalized = str(value).strip().lower().replace(' ', '_')
        try:
            return DealStage(normalized)
        except ValueError:
            return None


class ManufacturingInfo(BaseModel):
    """Product and production details, used for ticket descriptions only."""

    products: list[str] = Field(default_factory=list)
    quantities: str | None = None
    materials: list[str] = Field(default_factory=list)
    timeline: str | None = None
    requirements: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)

    model_config = _CAMEL_CONFIG

    @field_validator('products', 'materials', 'requirements', 'concerns', mode='before')
    @classmethod
    def null_lists(cls, value: Any) -> Any:
        return _none_to_list(value)

    @property
    def is_empty(self) -> bool:
        return not (
            self.products
            or self.quantities
            or self.materials
            or self.timeline
            or self.requirements
            or self.concerns
        )


class CreativeInfo(BaseModel):
    """Design direction and brand references, used for ticket descriptions only."""

    themes: list[str] = Field(default_factory=list)
    inspiration: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    brand_elements: list[str] = Field(default_factory=list)
    social_links: list[str] = Field(default_factory=list)
    website_links: list[str] = Field(default_factory=list)

    model_config = _CAMEL_CONFIG

    @field_validator(
        'themes',
        'inspiration',
        'colors',
        'brand_elements',
        'social_links',
        'website_links',
        mode='before',
    )
    @classmethod
    def null_lists(cls, value: Any) -> Any:
        return _none_to_list(value)

    @property
    def is_empty(self) -> bool:
        return not (
            self.themes
            or self.inspiration
            or self.colors
            or self.brand_elements
            or self.social_links
            or self.website_links
        )


class ExtractedData(BaseModel):
    """
    Full extraction result for one transcript.

    meeting_date and meeting_title are copied from the payload by the
    processor; the model never supplies them.
    """

    contacts: list[ExtractedContact] = Field(default_factory=list)
    deal: ExtractedDeal = Field(default_factory=ExtractedDeal)
    call_summary: str
    action_items: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    sentiment: Sentiment
    meeting_date: str | None = None
    meeting_title: str | None = None
    manufacturing: ManufacturingInfo | None = None
    creative_info: CreativeInfo | None = None

    model_config = _CAMEL_CONFIG

    @field_validator('contacts', 'action_items', 'next_steps', mode='before')
    @classmethod
    def null_lists(cls, value: Any) -> Any:
        return _none_to_list(value)

    @field_validator('deal', mode='before')
    @classmethod
    def null_deal(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator('sentiment', mode='before')
    @classmethod
    def lowercase_sentiment(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @classmethod
    def empty(cls) -> 'ExtractedData':
        """Extraction-shaped placeholder returned when extraction fails."""
        return cls(call_summary='', sentiment=Sentiment.NEUTRAL)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, dropping unset optionals."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
