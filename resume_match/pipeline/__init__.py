"""Two-stage resume matching pipeline."""

from .analysis import analyze_match
from .extraction import extract_structured_resume
from .formatter import format_for_analysis

__all__ = ["analyze_match", "extract_structured_resume", "format_for_analysis"]
