"""
Call data extraction service.

Turns a transcript into ExtractedData with one chat completion and a
strict parse/validate step. Every failure surfaces as ExtractionError.
"""

import json

import pydantic

from ..clients.openai_client import OpenAIClient
from ..config import config
from ..errors import ExtractionError, wrap_openai_error
from ..logging import get_logger
from ..models.extraction import ExtractedData
from ..prompts.extract_call_data import build_extraction_messages
from .parsing import parse_model_response

logger = get_logger(__name__)


class CallDataExtractor:
    """
    Extracts contacts, deal, summary and follow-ups from a call transcript.

    Uses OpenAI at temperature 0. Transport retries live in the client;
    a response that cannot be parsed is not retried.
    """

    def __init__(
        self,
        openai_client: OpenAIClient,
        company_name: str | None = None,
        max_tokens: int | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            openai_client: Configured OpenAI client
            company_name: Internal company whose employees are not contacts
            max_tokens: Response token cap (defaults to OPENAI_MAX_TOKENS)
        """
        self.openai_client = openai_client
        self.company_name = company_name or config.INTERNAL_COMPANY_NAME
        self.max_tokens = max_tokens or config.OPENAI_MAX_TOKENS

    async def extract(
        self,
        transcript: str,
        attendee_email_hints: list[str] | None = None,
        title: str | None = None,
        date: str | None = None,
    ) -> ExtractedData:
        """
        Extract structured call data from a transcript.

        Args:
            transcript: The call transcript
            attendee_email_hints: Known attendee emails for the prompt
            title: Optional meeting title for prompt context
            date: Optional meeting date for prompt context

        Returns:
            Validated ExtractedData (meeting_title/meeting_date left unset)

        Raises:
            ExtractionError: Upstream failure, empty response, invalid JSON or schema mismatch
        """
        hints = attendee_email_hints or []
        log = logger.bind(transcript_length=len(transcript), hint_count=len(hints))
        log.info('extractor.started')

        messages = build_extraction_messages(
            transcript=transcript,
            attendee_emails=hints,
            title=title,
            date=date,
            company_name=self.company_name,
        )

        try:
            raw = await self.openai_client.chat_completion(
                messages=messages,
                temperature=0.0,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            wrapped = wrap_openai_error(e, context={'stage': 'extraction'})
            raise ExtractionError(wrapped.message, context=wrapped.context) from e

        try:
            extracted = parse_model_response(raw, ExtractedData)
        except json.JSONDecodeError as e:
            raise ExtractionError(
                f"Model returned invalid JSON: {e.msg}",
                context={'response_preview': raw[:200]},
            ) from e
        except pydantic.ValidationError as e:
            raise ExtractionError(
                f"Model response did not match schema: {e.error_count()} validation error(s)",
                context={'errors': e.errors(include_url=False)},
            ) from e
        except ValueError as e:
            raise ExtractionError(str(e)) from e

        log.info(
            'extractor.completed',
            contact_count=len(extracted.contacts),
            has_deal=bool(extracted.deal.name),
            action_items=len(extracted.action_items),
            sentiment=extracted.sentiment.value,
        )
        return extracted
