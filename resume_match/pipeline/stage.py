"""Shared plumbing for the extraction and analysis stages."""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Dict, Optional

from ..config import AnalyzerConfig
from ..errors import InvalidInputError, ResumeMatchError, UpstreamError
from ..observability import PipelineObserver
from ..providers import BackendAdapter, create_backend
from ..providers.types import GenerationConfig


def require_text(value: Optional[str], message: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidInputError(message)
    return value


BackendFactory = Callable[[AnalyzerConfig], BackendAdapter]


def resolve_backend(
    backend: Optional[BackendAdapter],
    config: AnalyzerConfig,
    backend_factory: Optional[BackendFactory] = None,
) -> BackendAdapter:
    """Return ``backend`` or build one from ``config`` with ``backend_factory``.

    Building reads the credential from the environment, so a missing key
    fails here with ``ConfigurationError`` before any network call.
    """
    if backend is not None:
        return backend
    if backend_factory is not None:
        return backend_factory(config)
    return create_backend(provider=config.provider, model=config.model, api_base=config.api_base)


async def call_backend(
    backend: BackendAdapter,
    stage: str,
    system_prompt: str,
    user_prompt: str,
    generation: GenerationConfig,
    timeout: Optional[float] = None,
    observer: Optional[PipelineObserver] = None,
) -> str:
    """Submit one request and normalize any failure into the error taxonomy.

    There is no retry: one call, one outcome.
    """
    provider = backend.info.name
    start = time.perf_counter()
    submission = _submit(backend, system_prompt, user_prompt, generation)
    try:
        if timeout:
            try:
                raw = await asyncio.wait_for(submission, timeout)
            except asyncio.TimeoutError as e:
                # Backend failures are already classified, so this is the stage deadline.
                raise UpstreamError(
                    f"{backend.info.display_name} did not respond within {timeout:g} seconds",
                    {"provider": provider, "model": backend.model, "timeout_seconds": timeout},
                ) from e
        else:
            raw = await submission
    except ResumeMatchError:
        _log_failed_request(observer, stage, backend, start)
        raise

    if observer:
        observer.log_llm_request(
            stage=stage,
            provider=provider,
            model=backend.model,
            duration_ms=(time.perf_counter() - start) * 1000,
            response_chars=len(raw or ""),
        )
    return raw or ""


async def _submit(
    backend: BackendAdapter,
    system_prompt: str,
    user_prompt: str,
    generation: GenerationConfig,
) -> str:
    try:
        return await backend.submit(system_prompt, user_prompt, generation)
    except ResumeMatchError:
        raise
    except Exception as e:
        raise backend.classify_failure(e) from e


def _log_failed_request(
    observer: Optional[PipelineObserver],
    stage: str,
    backend: BackendAdapter,
    start: float,
) -> None:
    if observer:
        observer.log_llm_request(
            stage=stage,
            provider=backend.info.name,
            model=backend.model,
            duration_ms=(time.perf_counter() - start) * 1000,
            response_chars=0,
            success=False,
        )


def input_sizes(**texts: str) -> Dict[str, int]:
    return {name: len(text) for name, text in texts.items()}
