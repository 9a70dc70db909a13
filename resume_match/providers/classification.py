"""Normalize provider failures into the shared error taxonomy."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..errors import (
    AuthenticationError,
    ModelUnavailableError,
    RateLimitedError,
    ResumeMatchError,
    UpstreamError,
)
from .types import ProviderInfo

_AUTH_STATUS_CODES = {401}
_AUTH_STATUS_TEXT = {"UNAUTHENTICATED"}
_RATE_LIMIT_STATUS_CODES = {429}
_RATE_LIMIT_STATUS_TEXT = {"RESOURCE_EXHAUSTED"}
_NOT_FOUND_STATUS_CODES = {404}
_NOT_FOUND_STATUS_TEXT = {"NOT_FOUND"}

_AUTH_PATTERNS = [
    "401",
    "unauthorized",
    "unauthenticated",
    "api key",
    "api_key",
    "authentication",
    "credential",
]
_RATE_LIMIT_PATTERNS = [
    "429",
    "quota",
    "rate limit",
    "rate_limit",
    "too many requests",
    "resource exhausted",
    "resource_exhausted",
    "exceeded",
]
_MODEL_MISSING_PATTERNS = [
    "not found",
    "does not exist",
    "decommissioned",
    "not supported",
]


def classify_failure(
    info: ProviderInfo,
    model: str,
    message: str,
    status_code: Optional[int] = None,
    status_text: Optional[str] = None,
) -> ResumeMatchError:
    """Map a provider failure to an error kind.

    The structured status is checked first; the message text is the
    fallback because providers are inconsistent about which they populate.
    """
    status_text_upper = (status_text or "").upper()
    details: Dict[str, Any] = {
        "provider": info.name,
        "model": model,
        "status": status_code if status_code is not None else (status_text or None),
        "provider_message": message,
    }

    if status_code in _AUTH_STATUS_CODES or status_text_upper in _AUTH_STATUS_TEXT:
        return _authentication_error(info, details)
    if status_code in _RATE_LIMIT_STATUS_CODES or status_text_upper in _RATE_LIMIT_STATUS_TEXT:
        return _rate_limited_error(info, details)
    if status_code in _NOT_FOUND_STATUS_CODES or status_text_upper in _NOT_FOUND_STATUS_TEXT:
        return _model_unavailable_error(info, model, details)

    lowered = (message or "").lower()
    # Quota messages often mention the key, so rate limits win over auth.
    if any(pattern in lowered for pattern in _RATE_LIMIT_PATTERNS):
        return _rate_limited_error(info, details)
    if any(pattern in lowered for pattern in _AUTH_PATTERNS):
        return _authentication_error(info, details)
    if "model" in lowered and any(pattern in lowered for pattern in _MODEL_MISSING_PATTERNS):
        return _model_unavailable_error(info, model, details)

    status = details["status"] if details["status"] is not None else "unknown"
    return UpstreamError(f"{info.display_name} API error ({status}): {message or 'Unknown error'}", details)


def alternative_models(info: ProviderInfo, model: str) -> List[str]:
    return [name for name in info.alternative_models if name != model]


def _authentication_error(info: ProviderInfo, details: Dict[str, Any]) -> AuthenticationError:
    message = (
        f"{info.display_name} API authentication failed. "
        f"Please check that your {info.env_key} is valid."
    )
    if info.key_url:
        message += f" Get an API key at {info.key_url}"
    return AuthenticationError(message, details)


def _rate_limited_error(info: ProviderInfo, details: Dict[str, Any]) -> RateLimitedError:
    message = (
        f"{info.display_name} API rate limit or quota exceeded. "
        "Please wait a moment and try again, or upgrade your plan for higher limits."
    )
    if info.usage_url:
        message += f" Check your usage at {info.usage_url}"
    return RateLimitedError(message, details)


def _model_unavailable_error(info: ProviderInfo, model: str, details: Dict[str, Any]) -> ModelUnavailableError:
    alternatives = alternative_models(info, model)
    message = f'{info.display_name} model "{model}" is not available for your account/region.'
    if alternatives:
        message += f" Try one of: {', '.join(alternatives)}"
    return ModelUnavailableError(message, {**details, "alternatives": alternatives})
