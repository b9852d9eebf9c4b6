"""
CRM record models as returned by the CRM search/create endpoints.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class NoteTarget(str, Enum):
    """Kind of CRM record a call note is attached to."""

    CONTACT = 'contact'
    DEAL = 'deal'


class CrmContact(BaseModel):
    """A contact record in the CRM."""

    id: str
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def email(self) -> str | None:
        return self.properties.get('email')


class CrmDeal(BaseModel):
    """A deal record in the CRM."""

    id: str
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.properties.get('dealname')
