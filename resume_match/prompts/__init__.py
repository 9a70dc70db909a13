"""Instruction templates for the two pipeline stages."""

from .analysis_prompt import ANALYSIS_SYSTEM_PROMPT, build_analysis_user_prompt
from .extraction_prompt import EXTRACTION_SYSTEM_PROMPT, build_extraction_user_prompt

__all__ = [
    "ANALYSIS_SYSTEM_PROMPT",
    "EXTRACTION_SYSTEM_PROMPT",
    "build_analysis_user_prompt",
    "build_extraction_user_prompt",
]
