"""Observability for pipeline runs - logging and per-request event records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class PipelineEvent:
    """A single event in a pipeline run."""

    timestamp: datetime
    event_type: str  # "stage_start", "llm_request", "stage_end", "error"
    stage: str
    data: Dict[str, Any]
    duration_ms: Optional[float] = None


class PipelineObserver:
    """
    Per-request observability layer for the extraction and analysis stages.

    Collects events and logs them on the ``resume_match`` logger. Raw
    resume text and credentials are never logged, only their sizes.
    """

    def __init__(self, request_id: Optional[str] = None, verbose: bool = False):
        self.events: List[PipelineEvent] = []
        self.logger = logging.getLogger("resume_match")
        self.request_id = request_id
        self.verbose = verbose
        self._setup_logging()

    def _prefix(self) -> str:
        return f"[{self.request_id}] " if self.request_id else ""

    def _setup_logging(self):
        """Configure logging format and handlers."""
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO if self.verbose else logging.WARNING)

    def _record(self, event_type: str, stage: str, data: Dict[str, Any], duration_ms: Optional[float] = None):
        event = PipelineEvent(
            timestamp=datetime.now(),
            event_type=event_type,
            stage=stage,
            data=data,
            duration_ms=duration_ms,
        )
        self.events.append(event)
        return event

    def log_stage_start(self, stage: str, input_sizes: Dict[str, int]):
        """
        Log the start of a stage.

        Args:
            stage: "extraction" or "analysis"
            input_sizes: Character counts of the stage inputs
        """
        self._record("stage_start", stage, {"input_chars": dict(input_sizes)})
        sizes = " ".join(f"{name}={size}" for name, size in input_sizes.items())
        self.logger.info(f"{self._prefix()}Stage {stage} started ({sizes})")

    def log_llm_request(
        self,
        stage: str,
        provider: str,
        model: str,
        duration_ms: float,
        response_chars: int,
        success: bool = True,
    ):
        """Log a provider call made on behalf of ``stage``."""
        self._record(
            "llm_request",
            stage,
            {
                "provider": provider,
                "model": model,
                "response_chars": response_chars,
                "success": success,
            },
            duration_ms=duration_ms,
        )
        status = "ok" if success else "failed"
        self.logger.info(
            f"{self._prefix()}LLM: {provider}/{model} | {stage} | {status} | "
            f"{response_chars} chars | {duration_ms:.2f}ms"
        )

    def log_stage_end(self, stage: str, duration_ms: float):
        self._record("stage_end", stage, {}, duration_ms=duration_ms)
        self.logger.info(f"{self._prefix()}Stage {stage} completed ({duration_ms:.2f}ms)")

    def log_error(self, stage: str, kind: str, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Log a failed stage.

        Args:
            stage: Stage that failed
            kind: Error kind from the shared taxonomy
            message: Human-readable error message
            context: Additional diagnostics
        """
        self._record("error", stage, {"kind": kind, "message": message, "context": context or {}})
        self.logger.error(f"{self._prefix()}Stage {stage} failed ({kind}): {message}")

    def get_stats(self) -> Dict[str, Any]:
        """Aggregate statistics for the recorded events."""
        llm_requests = [e for e in self.events if e.event_type == "llm_request"]
        errors = [e for e in self.events if e.event_type == "error"]
        return {
            "event_count": len(self.events),
            "llm_requests": len(llm_requests),
            "errors": len(errors),
            "llm_duration_ms": sum(e.duration_ms or 0 for e in llm_requests),
        }
