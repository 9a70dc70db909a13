"""Match analysis stage: resume text and job description to MatchAnalysis."""

from __future__ import annotations

import time
from typing import Optional

from ..config import AnalyzerConfig
from ..errors import ResumeMatchError
from ..observability import PipelineObserver
from ..parsing import parse_model_output
from ..prompts import ANALYSIS_SYSTEM_PROMPT, build_analysis_user_prompt
from ..providers import BackendAdapter
from ..providers.types import GenerationConfig
from ..schemas import MatchAnalysis
from .stage import BackendFactory, call_backend, input_sizes, require_text, resolve_backend

STAGE = "analysis"


async def analyze_match(
    resume_text: str,
    job_description: str,
    backend: Optional[BackendAdapter] = None,
    *,
    config: Optional[AnalyzerConfig] = None,
    timeout: Optional[float] = None,
    observer: Optional[PipelineObserver] = None,
    backend_factory: Optional[BackendFactory] = None,
) -> MatchAnalysis:
    """Compare formatted resume text against a job description.

    The validated record is returned as-is: every field is required and
    ``matchPercentage`` outside [0, 100] is a ``SchemaViolationError``,
    never clamped.
    """
    config = config or AnalyzerConfig()
    start = time.perf_counter()
    try:
        require_text(resume_text, "Resume text is required")
        require_text(job_description, "Job description is required")
        backend = resolve_backend(backend, config, backend_factory)
        if observer:
            observer.log_stage_start(
                STAGE,
                input_sizes(resume_text=resume_text, job_description=job_description),
            )

        raw = await call_backend(
            backend,
            STAGE,
            ANALYSIS_SYSTEM_PROMPT,
            build_analysis_user_prompt(resume_text, job_description),
            GenerationConfig(temperature=config.analysis_temperature, max_tokens=config.max_tokens),
            timeout=timeout if timeout is not None else config.timeout_seconds,
            observer=observer,
        )
        analysis = parse_model_output(raw, MatchAnalysis)
    except ResumeMatchError as e:
        if observer:
            observer.log_error(STAGE, e.kind.value, e.message, e.details)
        raise

    if observer:
        observer.log_stage_end(STAGE, (time.perf_counter() - start) * 1000)
    return analysis
