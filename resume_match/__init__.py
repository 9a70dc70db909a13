"""Resume Match - AI-powered resume to job description matching."""

from .analyzer import MatchReport, ResumeAnalyzer
from .config import AnalyzerConfig, load_config
from .errors import ErrorKind, ResumeMatchError
from .pipeline import analyze_match, extract_structured_resume, format_for_analysis
from .schemas import MatchAnalysis, StructuredResume

__version__ = "0.1.0"

__all__ = [
    "AnalyzerConfig",
    "ErrorKind",
    "MatchAnalysis",
    "MatchReport",
    "ResumeAnalyzer",
    "ResumeMatchError",
    "StructuredResume",
    "analyze_match",
    "extract_structured_resume",
    "format_for_analysis",
    "load_config",
]
