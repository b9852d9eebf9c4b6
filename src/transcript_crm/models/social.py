"""
Social profile lookup models.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class SocialProfile(BaseModel):
    """One verified profile or website for a creator."""

    platform: str
    url: str


class SocialLookupResult(BaseModel):
    """Profiles found for a creator name. An empty list means none could be verified."""

    creator_name: str
    profiles: list[SocialProfile] = Field(default_factory=list)
    searched_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {'alias_generator': to_camel, 'populate_by_name': True}

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True)
