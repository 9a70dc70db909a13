"""Match analysis API: structured resume and job description to a report."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ..deps import get_analyzer
from .....analyzer import ResumeAnalyzer
from .....errors import InvalidInputError
from .....schemas import StructuredResume

router = APIRouter(prefix="/analyses", tags=["analyses"])


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    parsed_resume: Optional[StructuredResume] = Field(default=None, alias="parsedResume")
    job_description: str = Field(default="", alias="jobDescription")


@router.post("")
async def create_analysis(
    payload: AnalyzeRequest,
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
) -> Dict[str, Any]:
    if payload.parsed_resume is None:
        raise InvalidInputError("Parsed resume data is required. Please parse the resume first.")
    analysis = await analyzer.analyze(payload.parsed_resume, payload.job_description)
    return analysis.to_wire()
