"""
Parsing adapter for free-text model responses.

Models asked for "JSON only" still wrap their answer in markdown code
fences now and then. Everything downstream of this module sees parsed,
validated data, never raw response text.
"""

import json
import re
from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar('ModelT', bound=BaseModel)

_OPENING_FENCE = re.compile(r'^```(?:json)?\s*\n?', re.IGNORECASE)
_CLOSING_FENCE = re.compile(r'\n?```\s*$')


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ```json / ``` fence, if any."""
    cleaned = _OPENING_FENCE.sub('', raw.strip())
    cleaned = _CLOSING_FENCE.sub('', cleaned.strip())
    return cleaned.strip()


def parse_json_response(raw: str) -> Any:
    """
    Decode a model response as JSON.

    Raises:
        ValueError: Empty response
        json.JSONDecodeError: Not valid JSON after fence stripping
    """
    cleaned = strip_code_fences(raw or '')
    if not cleaned:
        raise ValueError('Empty response from model')
    return json.loads(cleaned)


def parse_model_response(raw: str, model_cls: type[ModelT]) -> ModelT:
    """
    Decode a model response and validate it into a pydantic model.

    Raises:
        ValueError: Empty response
        json.JSONDecodeError: Not valid JSON after fence stripping
        pydantic.ValidationError: JSON does not match the model
    """
    return model_cls.model_validate(parse_json_response(raw))
