"""Tolerant decoding of model output into validated records."""

from __future__ import annotations

import json
import re
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import MalformedResponseError, SchemaViolationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_OPENING_FENCE = re.compile(r"^```[A-Za-z0-9_+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapped around a payload.

    Handles ```` ```json ```` and bare ```` ``` ```` fences. Text without a
    leading fence is returned trimmed and otherwise untouched, so the
    function is idempotent.
    """
    stripped = (text or "").strip()
    if not stripped.startswith("```"):
        return stripped
    stripped = _OPENING_FENCE.sub("", stripped, count=1)
    stripped = _CLOSING_FENCE.sub("", stripped, count=1)
    return stripped.strip()


def decode_json_object(text: str) -> Any:
    """Decode fence-stripped model output as JSON."""
    payload = strip_code_fences(text)
    if not payload:
        raise MalformedResponseError(
            "Failed to parse JSON response: empty response content from model",
            {"decode_error": "empty content"},
        )
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            f"Failed to parse JSON response: {e}",
            {"decode_error": str(e), "excerpt": payload[:200]},
        ) from e


def parse_model_output(text: str, model: Type[ModelT]) -> ModelT:
    """Decode ``text`` and validate it against ``model``.

    The wire shape is always a single flat JSON object; arrays, strings and
    numbers at the top level are schema violations.
    """
    data = decode_json_object(text)
    if not isinstance(data, dict):
        raise SchemaViolationError(
            f"Invalid response structure from AI: expected a JSON object, got {type(data).__name__}",
            {"errors": [{"loc": [], "msg": "expected a JSON object"}]},
        )
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SchemaViolationError(
            f"Invalid response structure from AI: {_summarize_validation_error(e)}",
            {"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        ) from e


def _summarize_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors(include_url=False):
        location = ".".join(str(p) for p in item.get("loc", ())) or "<root>"
        parts.append(f"{location}: {item.get('msg', 'invalid')}")
    return "; ".join(parts)
