"""
Custom exceptions for the transcript-to-CRM pipeline.

Provides:
- Typed exception hierarchy for different failure modes
- Error context preservation for debugging
- Classification helpers for upstream client errors
"""

from typing import Any


class TranscriptCrmError(Exception):
    """Base exception for all transcript-crm errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Client Errors
# =============================================================================


class ClientError(TranscriptCrmError):
    """Base class for client-related errors."""

    pass


class OpenAIError(ClientError):
    """Error from OpenAI API calls."""

    pass


class OpenAIRateLimitError(OpenAIError):
    """Rate limit exceeded on OpenAI API."""

    pass


class OpenAIModelError(OpenAIError):
    """Model refused request or returned invalid response."""

    pass


class CrmApiError(ClientError):
    """Error returned by the CRM HTTP API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        self.status_code = status_code


class CrmRateLimitError(CrmApiError):
    """CRM API answered 429 Too Many Requests."""

    pass


class CrmConnectionError(CrmApiError):
    """CRM API could not be reached (timeout, DNS, refused connection)."""

    pass


class MeetingSourceError(ClientError):
    """No meeting data could be read from the cache or the meeting API."""

    pass


# =============================================================================
# Pipeline Errors
# =============================================================================


class PipelineError(TranscriptCrmError):
    """Base class for pipeline-related errors."""

    pass


class ExtractionError(PipelineError):
    """Structured data could not be extracted from the transcript."""

    pass


# =============================================================================
# Error Handling Utilities
# =============================================================================


def error_message(exc: BaseException) -> str:
    """Human-readable message for an exception, without debug context."""
    if isinstance(exc, TranscriptCrmError):
        return exc.message
    return str(exc) or type(exc).__name__


def wrap_openai_error(exc: Exception, context: dict[str, Any] | None = None) -> OpenAIError:
    """
    Wrap an OpenAI exception in our typed error hierarchy.

    Args:
        exc: The original exception
        context: Additional context for debugging

    Returns:
        Typed OpenAIError subclass
    """
    error_str = str(exc).lower()
    ctx = context or {}
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    if 'rate limit' in error_str or 'rate_limit' in error_str:
        return OpenAIRateLimitError(
            f"OpenAI rate limit exceeded: {exc}",
            context=ctx,
        )
    elif 'content policy' in error_str or 'refused' in error_str:
        return OpenAIModelError(
            f"OpenAI model refused request: {exc}",
            context=ctx,
        )
    else:
        return OpenAIError(
            f"OpenAI API error: {exc}",
            context=ctx,
        )
