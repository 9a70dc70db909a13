"""ResumeAnalyzer - runs the document -> extraction -> analysis pipeline."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional

from .config import AnalyzerConfig
from .documents import extract_text
from .errors import InvalidInputError
from .observability import PipelineObserver
from .pipeline import analyze_match, extract_structured_resume, format_for_analysis
from .pipeline.stage import BackendFactory
from .providers import BackendAdapter, create_backend
from .schemas import MatchAnalysis, StructuredResume

logger = logging.getLogger(__name__)


def default_backend_factory(config: AnalyzerConfig) -> BackendAdapter:
    return create_backend(provider=config.provider, model=config.model, api_base=config.api_base)


@dataclass
class MatchReport:
    """Result of a full pipeline run."""

    resume: StructuredResume
    analysis: MatchAnalysis

    def to_dict(self) -> dict:
        return {
            "parsedResume": self.resume.model_dump(),
            "analysis": self.analysis.to_wire(),
        }


class ResumeAnalyzer:
    """Sequence the pipeline stages for one user request at a time.

    Every call builds its own backend and observer, so one analyzer can
    serve concurrent requests without coordination.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        backend_factory: BackendFactory = default_backend_factory,
    ):
        self.config = config or AnalyzerConfig()
        self.backend_factory = backend_factory

    def _observer(self) -> PipelineObserver:
        return PipelineObserver(request_id=f"req_{uuid.uuid4().hex[:8]}", verbose=self.config.verbose)

    async def parse_resume(self, data: bytes, filename: Optional[str] = None) -> StructuredResume:
        """Extract text from a document and structure it.

        A resume without any skills, experience or education is rejected
        as ``InvalidInputError``.
        """
        text = extract_text(data, filename)
        return await self.parse_text(text)

    async def parse_text(self, text: str) -> StructuredResume:
        resume = await extract_structured_resume(
            text,
            config=self.config,
            observer=self._observer(),
            backend_factory=self.backend_factory,
        )
        if resume.is_empty():
            raise InvalidInputError(
                "Could not extract meaningful data from resume. Please ensure the resume "
                "contains skills, experience, or education information."
            )
        return resume

    async def analyze(self, resume: StructuredResume, job_description: str) -> MatchAnalysis:
        """Format ``resume`` and compare it with ``job_description``."""
        return await analyze_match(
            format_for_analysis(resume),
            job_description,
            config=self.config,
            observer=self._observer(),
            backend_factory=self.backend_factory,
        )

    async def run(self, data: bytes, filename: Optional[str], job_description: str) -> MatchReport:
        """Full pipeline: document bytes and job description to a report."""
        if not job_description or not job_description.strip():
            raise InvalidInputError("Job description is required")
        resume = await self.parse_resume(data, filename)
        analysis = await self.analyze(resume, job_description)
        logger.info("Match report ready: %.0f%%", analysis.match_percentage)
        return MatchReport(resume=resume, analysis=analysis)
