"""Resume parsing API: uploaded document to structured resume."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from ..deps import get_analyzer
from ..upload import read_resume_upload
from .....analyzer import ResumeAnalyzer
from .....schemas import StructuredResume

router = APIRouter(prefix="/resumes", tags=["resumes"])


@router.post("/parse", response_model=StructuredResume)
async def parse_resume(
    resume_file: UploadFile = File(...),
    analyzer: ResumeAnalyzer = Depends(get_analyzer),
) -> StructuredResume:
    content = await read_resume_upload(resume_file, analyzer.config.max_upload_bytes)
    return await analyzer.parse_resume(content, filename=resume_file.filename)
