"""Tests for the shared provider failure classification."""

import pytest

from resume_match.errors import ErrorKind
from resume_match.providers import PROVIDER_DEFAULTS
from resume_match.providers.classification import classify_failure

GROQ = PROVIDER_DEFAULTS["groq"]
GEMINI = PROVIDER_DEFAULTS["gemini"]


@pytest.mark.parametrize(
    "status_code,status_text,expected",
    [
        (401, None, ErrorKind.AUTHENTICATION_ERROR),
        (None, "UNAUTHENTICATED", ErrorKind.AUTHENTICATION_ERROR),
        (429, None, ErrorKind.RATE_LIMITED),
        (None, "RESOURCE_EXHAUSTED", ErrorKind.RATE_LIMITED),
        (404, None, ErrorKind.MODEL_UNAVAILABLE),
        (None, "NOT_FOUND", ErrorKind.MODEL_UNAVAILABLE),
        (500, None, ErrorKind.UPSTREAM_ERROR),
    ],
)
def test_structured_status_wins(status_code, status_text, expected):
    error = classify_failure(GROQ, "llama-3.3-70b-versatile", "something failed", status_code, status_text)
    assert error.kind == expected


@pytest.mark.parametrize(
    "message,expected",
    [
        ("Incorrect API key provided: sk-****", ErrorKind.AUTHENTICATION_ERROR),
        ("API key not valid. Please pass a valid API key.", ErrorKind.AUTHENTICATION_ERROR),
        ("Request failed with 401 Unauthorized", ErrorKind.AUTHENTICATION_ERROR),
        ("You exceeded your current quota, please check your plan", ErrorKind.RATE_LIMITED),
        ("429 Too Many Requests", ErrorKind.RATE_LIMITED),
        ("Resource exhausted (e.g. check quota).", ErrorKind.RATE_LIMITED),
        ("models/gemini-9 is not found for API version v1beta", ErrorKind.MODEL_UNAVAILABLE),
        ("The model `gpt-9` does not exist or you do not have access to it.", ErrorKind.MODEL_UNAVAILABLE),
        ("Connection reset by peer", ErrorKind.UPSTREAM_ERROR),
        ("Rate limit reached: quota exceeded for this API key", ErrorKind.RATE_LIMITED),
    ],
)
def test_message_fallback(message, expected):
    assert classify_failure(GEMINI, "gemini-9", message).kind == expected


def test_authentication_error_has_remediation():
    error = classify_failure(GEMINI, "gemini-1.5-flash", "denied", status_code=401)
    assert "GEMINI_API_KEY" in error.message
    assert "https://makersuite.google.com/app/apikey" in error.message


def test_rate_limit_preserves_provider_message():
    error = classify_failure(GROQ, "llama-3.3-70b-versatile", "Rate limit reached for model", status_code=429)
    assert error.details["provider_message"] == "Rate limit reached for model"
    assert error.details["status"] == 429
    assert "wait" in error.message


def test_model_unavailable_lists_alternatives():
    error = classify_failure(GEMINI, "gemini-1.5-flash", "not found", status_code=404)
    assert error.details["alternatives"] == ["gemini-1.5-pro", "gemini-pro"]
    assert "gemini-1.5-pro" in error.message


def test_upstream_error_keeps_status_and_message():
    error = classify_failure(GROQ, "llama-3.3-70b-versatile", "Internal server error", status_code=503)
    assert error.kind == ErrorKind.UPSTREAM_ERROR
    assert error.details["status"] == 503
    assert "(503)" in error.message
    assert "Internal server error" in error.message
