"""API error helpers and exception handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ErrorKind, ResumeMatchError

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.CONFIGURATION_ERROR: 500,
    ErrorKind.AUTHENTICATION_ERROR: 502,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.MODEL_UNAVAILABLE: 502,
    ErrorKind.MALFORMED_RESPONSE: 502,
    ErrorKind.SCHEMA_VIOLATION: 502,
    ErrorKind.UPSTREAM_ERROR: 502,
}


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }

    @classmethod
    def from_pipeline_error(cls, exc: ResumeMatchError) -> "APIError":
        return cls(STATUS_BY_KIND.get(exc.kind, 500), exc.kind.value, exc.message, exc.details)


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def pipeline_error_handler(request: Request, exc: ResumeMatchError) -> JSONResponse:
    """Render a pipeline error using its kind as the error code."""
    return await api_error_handler(request, APIError.from_pipeline_error(exc))


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to API contract shape."""
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "BAD_REQUEST",
                "message": "Invalid request payload",
                "details": {"errors": _jsonable_errors(exc)},
            }
        },
    )


def _jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(item.get("loc", ())), "msg": item.get("msg", ""), "type": item.get("type", "")}
        for item in exc.errors()
    ]
