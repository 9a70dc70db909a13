"""Tests for the match analysis stage."""

import pytest

from resume_match.config import AnalyzerConfig
from resume_match.errors import (
    AuthenticationError,
    ConfigurationError,
    InvalidInputError,
    MalformedResponseError,
    SchemaViolationError,
)
from resume_match.pipeline import analyze_match
from resume_match.prompts import ANALYSIS_SYSTEM_PROMPT

RESUME = "Experienced Python developer with AWS and Docker skills"
JOB = "Looking for Python and Kubernetes expert"


@pytest.mark.asyncio
async def test_returns_validated_analysis(fake_backend, analysis_payload):
    backend = fake_backend(analysis_payload)
    analysis = await analyze_match(RESUME, JOB, backend)

    assert "Python" in analysis.matched_skills
    assert any("Kubernetes" in skill for skill in analysis.missing_skills)
    assert 0 < analysis.match_percentage < 100
    assert analysis.to_wire() == analysis_payload


@pytest.mark.asyncio
async def test_prompt_carries_both_texts_verbatim(fake_backend, analysis_payload):
    backend = fake_backend(analysis_payload)
    await analyze_match(RESUME, JOB, backend)

    call = backend.calls[0]
    assert call["system"] == ANALYSIS_SYSTEM_PROMPT
    assert f"Resume Text:\n{RESUME}" in call["user"]
    assert f"Job Description:\n{JOB}" in call["user"]
    assert call["config"].temperature == 0.3


@pytest.mark.asyncio
async def test_configured_temperature_is_used(fake_backend, analysis_payload):
    backend = fake_backend(analysis_payload)
    await analyze_match(RESUME, JOB, backend, config=AnalyzerConfig(analysis_temperature=0.1))
    assert backend.calls[0]["config"].temperature == 0.1


@pytest.mark.asyncio
@pytest.mark.parametrize("resume_text,job", [("", JOB), (RESUME, ""), (RESUME, "   ")])
async def test_empty_inputs_fail_before_any_call(fake_backend, analysis_payload, resume_text, job):
    backend = fake_backend(analysis_payload)
    with pytest.raises(InvalidInputError):
        await analyze_match(resume_text, job, backend)
    assert backend.calls == []


@pytest.mark.asyncio
async def test_empty_job_description_checked_before_credential():
    with pytest.raises(InvalidInputError) as exc_info:
        await analyze_match(RESUME, "")
    assert exc_info.value.message == "Job description is required"


@pytest.mark.asyncio
async def test_no_credential_is_configuration_error():
    with pytest.raises(ConfigurationError):
        await analyze_match(RESUME, JOB)


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [-5, 101, "80%", None])
async def test_bad_match_percentage_is_schema_violation(fake_backend, analysis_payload, value):
    analysis_payload["matchPercentage"] = value
    with pytest.raises(SchemaViolationError):
        await analyze_match(RESUME, JOB, fake_backend(analysis_payload))


@pytest.mark.asyncio
async def test_missing_field_is_schema_violation(fake_backend, analysis_payload):
    del analysis_payload["missingSkills"]
    with pytest.raises(SchemaViolationError):
        await analyze_match(RESUME, JOB, fake_backend(analysis_payload))


@pytest.mark.asyncio
async def test_prose_response_is_malformed(fake_backend):
    backend = fake_backend("The candidate is a strong match for this role.")
    with pytest.raises(MalformedResponseError) as exc_info:
        await analyze_match(RESUME, JOB, backend)
    assert "Expecting value" in exc_info.value.message


@pytest.mark.asyncio
async def test_unauthorized_is_authentication_error(fake_backend):
    error = RuntimeError("Invalid API Key")
    error.status_code = 401
    backend = fake_backend(error=error)
    with pytest.raises(AuthenticationError) as exc_info:
        await analyze_match(RESUME, JOB, backend)
    assert "GROQ_API_KEY" in exc_info.value.message
    assert len(backend.calls) == 1
