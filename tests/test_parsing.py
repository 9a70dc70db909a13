"""Tests for fence stripping and tolerant JSON decoding."""

import json

import pytest

from resume_match.errors import ErrorKind, MalformedResponseError, SchemaViolationError
from resume_match.parsing import decode_json_object, parse_model_output, strip_code_fences
from resume_match.schemas import MatchAnalysis, StructuredResume

PAYLOAD = '{"skills": ["Python"], "experience": [], "education": [], "contact": "x@y.z"}'


class TestStripCodeFences:
    def test_plain_payload_is_untouched(self):
        assert strip_code_fences(PAYLOAD) == PAYLOAD

    def test_json_tagged_fence(self):
        assert strip_code_fences(f"```json\n{PAYLOAD}\n```") == PAYLOAD

    def test_bare_fence(self):
        assert strip_code_fences(f"```\n{PAYLOAD}\n```") == PAYLOAD

    def test_fence_on_single_line(self):
        assert strip_code_fences(f"```json{PAYLOAD}```") == PAYLOAD

    def test_surrounding_whitespace_and_crlf(self):
        assert strip_code_fences(f"  \r\n```JSON\r\n{PAYLOAD}\r\n```  \n") == PAYLOAD

    def test_idempotent(self):
        once = strip_code_fences(f"```json\n{PAYLOAD}\n```")
        assert strip_code_fences(once) == once

    def test_none_becomes_empty(self):
        assert strip_code_fences(None) == ""

    def test_fenced_and_unfenced_decode_equal(self):
        assert decode_json_object(f"```json\n{PAYLOAD}\n```") == decode_json_object(PAYLOAD)


class TestDecodeJsonObject:
    def test_prose_is_malformed(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_json_object("Sure! Here is the analysis you asked for.")
        error = exc_info.value
        assert error.kind == ErrorKind.MALFORMED_RESPONSE
        assert "Expecting value" in error.message
        assert "Expecting value" in error.details["decode_error"]

    def test_empty_content_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object("   ")

    def test_truncated_json_is_malformed(self):
        with pytest.raises(MalformedResponseError):
            decode_json_object('{"skills": ["Python"')


class TestParseModelOutput:
    def test_valid_resume(self):
        resume = parse_model_output(PAYLOAD, StructuredResume)
        assert resume.skills == ["Python"]
        assert resume.contact == "x@y.z"

    def test_top_level_array_is_schema_violation(self):
        with pytest.raises(SchemaViolationError):
            parse_model_output('["Python"]', StructuredResume)

    def test_validation_error_details_are_json_serializable(self):
        bad = json.dumps({"matchPercentage": "high", "matchedSkills": [], "missingSkills": [], "suggestions": []})
        with pytest.raises(SchemaViolationError) as exc_info:
            parse_model_output(bad, MatchAnalysis)
        assert "matchPercentage" in exc_info.value.message
        json.dumps(exc_info.value.to_dict())
