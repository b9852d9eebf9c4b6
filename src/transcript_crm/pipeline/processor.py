"""
Transcript processor: the end-to-end orchestrator.

Provides best-effort processing of one transcript:
1. Extract structured call data (the only fatal step)
2. Reconcile attendee email hints into the contact list
3. Resolve and upsert every contact, in order
4. Find or create the deal
5. Attach the call note to every synced contact and the deal
6. Return a ProcessingResult with partial failures listed in errors

process() never raises. Later failures never undo earlier CRM writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from ..clients.crm import CrmClient
from ..clients.hubspot_client import HubSpotClient
from ..clients.openai_client import OpenAIClient
from ..errors import error_message
from ..logging import PipelineTimer, get_logger, logging_context
from ..models.crm import NoteTarget
from ..models.extraction import ExtractedContact, ExtractedData
from ..models.payload import TranscriptPayload
from ..models.result import (
    ContactSyncResult,
    CrmSyncSummary,
    DealSyncResult,
    ProcessingResult,
)
from .extractor import CallDataExtractor
from .notes import build_call_note
from .resolver import ContactResolver, default_resolver

logger = get_logger(__name__)


@dataclass
class ContactStep:
    """Outcome of one contact in the sync fold: a result, an error, or neither (skipped)."""

    result: ContactSyncResult | None = None
    error: str | None = None


@dataclass
class ContactFold:
    """Accumulator for the sequential contact sync."""

    results: list[ContactSyncResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add(self, step: ContactStep) -> ContactFold:
        if step.result is not None:
            self.results.append(step.result)
        if step.error is not None:
            self.errors.append(step.error)
        return self


def reconcile_attendee_hints(
    contacts: list[ExtractedContact],
    attendee_emails: list[str],
) -> list[ExtractedContact]:
    """
    Append a bare contact for every hinted email the model did not return.

    Matching is case-insensitive. Existing contacts keep their order.
    """
    known = {c.email.lower() for c in contacts if c.email}
    reconciled = list(contacts)
    for email in attendee_emails:
        if email.lower() not in known:
            reconciled.append(ExtractedContact(email=email))
            known.add(email.lower())
    return reconciled


class TranscriptProcessor:
    """
    Turns a transcript into CRM contacts, a deal and call notes.

    Orchestrates:
    - CallDataExtractor: transcript -> ExtractedData
    - ContactResolver: extracted contact -> existing CRM record (or None)
    - CrmClient: contact/deal upserts and note attachment

    Usage:
        processor = TranscriptProcessor(extractor, hubspot)
        result = await processor.process(payload)
    """

    def __init__(
        self,
        extractor: CallDataExtractor,
        crm: CrmClient,
        resolver: ContactResolver | None = None,
    ):
        """
        Initialize the processor with its collaborators.

        Args:
            extractor: Call data extractor
            crm: CRM client used for all reads and writes
            resolver: Contact resolution strategy (default: email, then name)
        """
        self.extractor = extractor
        self.crm = crm
        self.resolver = resolver or default_resolver()

    @classmethod
    def from_env(cls) -> TranscriptProcessor:
        """
        Create a processor from environment variables.

        Expects:
            OPENAI_API_KEY: OpenAI API key
            HUBSPOT_ACCESS_TOKEN: HubSpot private app token
            HUBSPOT_PORTAL_ID: HubSpot portal ID

        Returns:
            Processor owning its own clients (call close() when done)
        """
        return cls(CallDataExtractor(OpenAIClient()), HubSpotClient())

    async def close(self) -> None:
        """Close client connections owned by this processor."""
        await self.extractor.openai_client.close()
        if isinstance(self.crm, HubSpotClient):
            await self.crm.close()

    async def process(
        self,
        payload: TranscriptPayload,
        trace_id: str | None = None,
    ) -> ProcessingResult:
        """
        Process one transcript through the full pipeline.

        Args:
            payload: Validated transcript payload
            trace_id: Optional request trace ID for log correlation

        Returns:
            ProcessingResult. success=False when extraction failed or nothing
            reached the CRM; errors lists every partial failure.
        """
        timer = PipelineTimer()
        hints = payload.attendee_emails

        with logging_context(trace_id=trace_id, run_id=uuid4().hex):
            logger.info(
                'processor.started',
                transcript_length=len(payload.transcript),
                attendee_count=len(payload.attendees or []),
                hint_count=len(hints),
            )

            # Step 1: Extraction (fatal on failure)
            try:
                with timer.stage('extraction'):
                    extracted = await self.extractor.extract(
                        payload.transcript,
                        hints,
                        title=payload.title,
                        date=payload.date,
                    )
            except Exception as e:
                message = error_message(e)
                logger.error('processor.extraction_failed', error=message, **timer.summary())
                return ProcessingResult.extraction_failed(message)

            # Step 2: Meeting metadata and hint reconciliation
            extracted = extracted.model_copy(
                update={
                    'contacts': reconcile_attendee_hints(extracted.contacts, hints),
                    'meeting_title': payload.title,
                    'meeting_date': payload.date,
                }
            )

            summary = CrmSyncSummary()
            errors: list[str] = []

            # Step 3: Contacts, one at a time in extraction order
            with timer.stage('contact_sync'):
                fold = await self._sync_contacts(extracted.contacts)
            summary.contacts = fold.results
            errors.extend(fold.errors)

            # Step 4: Deal
            if extracted.deal.name:
                with timer.stage('deal_sync'):
                    summary.deal, deal_error = await self._sync_deal(extracted, summary)
                if deal_error:
                    errors.append(deal_error)

            # Step 5: Notes
            with timer.stage('notes'):
                errors.extend(await self._attach_notes(extracted, summary))

            success = bool(summary.contacts) or summary.deal is not None
            logger.info(
                'processor.completed',
                success=success,
                contacts_synced=len(summary.contacts),
                deal_action=summary.deal.action if summary.deal else None,
                note_added=summary.note_added,
                error_count=len(errors),
                **timer.summary(),
            )

            return ProcessingResult(
                success=success,
                extracted=extracted,
                hubspot=summary,
                errors=errors,
            )

    # =========================================================================
    # Contacts
    # =========================================================================

    async def _sync_contacts(self, contacts: list[ExtractedContact]) -> ContactFold:
        """Fold the contact list into (results, errors), strictly sequentially."""
        fold = ContactFold()
        for contact in contacts:
            fold = fold.add(await self._contact_step(contact))
        return fold

    async def _contact_step(self, contact: ExtractedContact) -> ContactStep:
        """Sync one contact. Contacts with nothing to identify them by are skipped."""
        if contact.is_empty:
            logger.debug('processor.contact_skipped')
            return ContactStep()

        try:
            existing = await self.resolver.resolve(self.crm, contact)
            if existing is not None:
                record = await self.crm.update_contact(existing.id, contact)
                action = 'updated'
            else:
                record = await self.crm.create_contact(contact)
                action = 'created'
        except Exception as e:
            message = error_message(e)
            logger.warning(
                'processor.contact_sync_failed',
                contact=contact.identifier,
                error=message,
            )
            return ContactStep(error=f"Contact sync failed for {contact.identifier}: {message}")

        logger.info('processor.contact_synced', contact_id=record.id, action=action)
        return ContactStep(
            result=ContactSyncResult(
                id=record.id,
                action=action,
                url=self.crm.contact_url(record.id),
                email=contact.email,
                name=contact.display_name,
            )
        )

    # =========================================================================
    # Deal
    # =========================================================================

    async def _sync_deal(
        self,
        extracted: ExtractedData,
        summary: CrmSyncSummary,
    ) -> tuple[DealSyncResult | None, str | None]:
        """Reuse a deal found by name as-is, otherwise create one linked to the first contact."""
        deal = extracted.deal
        try:
            existing = await self.crm.find_deal_by_name(deal.name)
            if existing is not None:
                record = existing
                action = 'found'
            else:
                contact_ids = summary.contact_ids
                record = await self.crm.create_deal(
                    deal,
                    contact_id=contact_ids[0] if contact_ids else None,
                )
                action = 'created'
        except Exception as e:
            message = error_message(e)
            logger.warning('processor.deal_sync_failed', deal_name=deal.name, error=message)
            return None, f"Deal sync failed: {message}"

        logger.info('processor.deal_synced', deal_id=record.id, action=action)
        return DealSyncResult(id=record.id, action=action, url=self.crm.deal_url(record.id)), None

    # =========================================================================
    # Notes
    # =========================================================================

    async def _attach_notes(
        self,
        extracted: ExtractedData,
        summary: CrmSyncSummary,
    ) -> list[str]:
        """Attach one identical note per target; each target fails independently."""
        targets = [(NoteTarget.CONTACT, cid) for cid in dict.fromkeys(summary.contact_ids)]
        if summary.deal is not None:
            targets.append((NoteTarget.DEAL, summary.deal.id))
        if not targets:
            return []

        body = build_call_note(extracted)
        errors: list[str] = []
        for target, target_id in targets:
            try:
                await self.crm.add_note(target, target_id, body)
                summary.note_added = True
            except Exception as e:
                message = error_message(e)
                logger.warning(
                    'processor.note_failed',
                    target=target.value,
                    target_id=target_id,
                    error=message,
                )
                if target is NoteTarget.DEAL:
                    errors.append(f"Failed to add note to deal: {message}")
                else:
                    errors.append(f"Failed to add note to contact {target_id}: {message}")
        return errors
