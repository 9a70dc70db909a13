"""Structured extraction stage: raw resume text to StructuredResume."""

from __future__ import annotations

import time
from typing import Optional

from ..config import AnalyzerConfig
from ..errors import ResumeMatchError
from ..observability import PipelineObserver
from ..parsing import parse_model_output
from ..prompts import EXTRACTION_SYSTEM_PROMPT, build_extraction_user_prompt
from ..providers import BackendAdapter
from ..providers.types import GenerationConfig
from ..schemas import StructuredResume
from .stage import BackendFactory, call_backend, input_sizes, require_text, resolve_backend

STAGE = "extraction"


async def extract_structured_resume(
    raw_text: str,
    backend: Optional[BackendAdapter] = None,
    *,
    config: Optional[AnalyzerConfig] = None,
    timeout: Optional[float] = None,
    observer: Optional[PipelineObserver] = None,
    backend_factory: Optional[BackendFactory] = None,
) -> StructuredResume:
    """Extract skills, experience, education and contact from resume text.

    Args:
        raw_text: Text extracted from the uploaded document
        backend: Backend to use; built from ``config`` if omitted
        config: Analyzer settings (temperature, token limit, default timeout)
        timeout: Seconds to wait for the provider, overriding ``config.timeout_seconds``
        observer: Per-request observer for logging
        backend_factory: Builds the backend from ``config`` when ``backend`` is omitted

    Raises:
        InvalidInputError: ``raw_text`` is empty
        ConfigurationError: no credential for the selected provider
        MalformedResponseError: the model output is not JSON
        SchemaViolationError: a field has the wrong type
        AuthenticationError, RateLimitedError, ModelUnavailableError, UpstreamError:
            the provider call failed
    """
    config = config or AnalyzerConfig()
    start = time.perf_counter()
    try:
        require_text(raw_text, "Resume text is required")
        backend = resolve_backend(backend, config, backend_factory)
        if observer:
            observer.log_stage_start(STAGE, input_sizes(resume_text=raw_text))

        raw = await call_backend(
            backend,
            STAGE,
            EXTRACTION_SYSTEM_PROMPT,
            build_extraction_user_prompt(raw_text),
            GenerationConfig(temperature=config.extraction_temperature, max_tokens=config.max_tokens),
            timeout=timeout if timeout is not None else config.timeout_seconds,
            observer=observer,
        )
        resume = parse_model_output(raw, StructuredResume)
    except ResumeMatchError as e:
        if observer:
            observer.log_error(STAGE, e.kind.value, e.message, e.details)
        raise

    if observer:
        observer.log_stage_end(STAGE, (time.perf_counter() - start) * 1000)
    return resume
