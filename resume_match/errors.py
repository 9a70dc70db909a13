"""Error taxonomy shared by the extraction and analysis stages."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    CONFIGURATION_ERROR = "ConfigurationError"
    AUTHENTICATION_ERROR = "AuthenticationError"
    RATE_LIMITED = "RateLimited"
    MODEL_UNAVAILABLE = "ModelUnavailable"
    MALFORMED_RESPONSE = "MalformedResponse"
    SCHEMA_VIOLATION = "SchemaViolation"
    UPSTREAM_ERROR = "UpstreamError"


class ResumeMatchError(Exception):
    """Base error carrying a stable kind, a readable message and diagnostics."""

    kind: ErrorKind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvalidInputError(ResumeMatchError):
    kind = ErrorKind.INVALID_INPUT


class DocumentError(InvalidInputError):
    """Uploaded document could not be turned into text."""


class ConfigurationError(ResumeMatchError):
    kind = ErrorKind.CONFIGURATION_ERROR


class AuthenticationError(ResumeMatchError):
    kind = ErrorKind.AUTHENTICATION_ERROR


class RateLimitedError(ResumeMatchError):
    kind = ErrorKind.RATE_LIMITED


class ModelUnavailableError(ResumeMatchError):
    kind = ErrorKind.MODEL_UNAVAILABLE


class MalformedResponseError(ResumeMatchError):
    kind = ErrorKind.MALFORMED_RESPONSE


class SchemaViolationError(ResumeMatchError):
    kind = ErrorKind.SCHEMA_VIOLATION


class UpstreamError(ResumeMatchError):
    kind = ErrorKind.UPSTREAM_ERROR

