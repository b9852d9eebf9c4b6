"""
Processor output models.

ProcessingResult is the only thing the processor returns. Its to_dict()
is the JSON contract consumed by the presentation layer.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from .extraction import ExtractedData


@dataclass
class ContactSyncResult:
    """Outcome of syncing one extracted contact to the CRM."""

    id: str
    action: Literal['created', 'updated']
    url: str
    email: str | None = None
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {'id': self.id, 'action': self.action, 'url': self.url}
        if self.email:
            data['email'] = self.email
        if self.name:
            data['name'] = self.name
        return data


@dataclass
class DealSyncResult:
    """Outcome of syncing the extracted deal to the CRM."""

    id: str
    action: Literal['created', 'found']
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {'id': self.id, 'action': self.action, 'url': self.url}


@dataclass
class CrmSyncSummary:
    """Everything written to the CRM during one run."""

    # Same relative order as ExtractedData.contacts; skipped/failed contacts have no entry
    contacts: list[ContactSyncResult] = field(default_factory=list)
    deal: DealSyncResult | None = None
    note_added: bool = False

    @property
    def contact_ids(self) -> list[str]:
        return [c.id for c in self.contacts]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'contacts': [c.to_dict() for c in self.contacts],
            'noteAdded': self.note_added,
        }
        if self.deal is not None:
            data['deal'] = self.deal.to_dict()
        return data


@dataclass
class ProcessingResult:
    """
    Result of processing one transcript.

    success is False when extraction failed, or when nothing at all reached
    the CRM. errors may be non-empty while success is True; they describe
    partial failures and are advisory.
    """

    success: bool
    extracted: ExtractedData
    hubspot: CrmSyncSummary = field(default_factory=CrmSyncSummary)
    errors: list[str] = field(default_factory=list)

    @classmethod
    def extraction_failed(cls, message: str) -> 'ProcessingResult':
        return cls(
            success=False,
            extracted=ExtractedData.empty(),
            errors=[f"Extraction failed: {message}"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {
            'success': self.success,
            'extracted': self.extracted.to_dict(),
            'hubspot': self.hubspot.to_dict(),
        }
        if self.errors:
            data['errors'] = list(self.errors)
        return data
