"""Render a structured resume as plain text for match analysis."""

from __future__ import annotations

from ..schemas import StructuredResume


def format_for_analysis(resume: StructuredResume) -> str:
    """Build the analysis input from skills, experience and education.

    Empty sections are omitted and ``contact`` is never included.
    """
    sections = []

    if resume.skills:
        sections.append(f"Skills: {', '.join(resume.skills)}")

    if resume.experience:
        sections.append("Experience:\n" + "\n".join(resume.experience))

    if resume.education:
        sections.append("Education:\n" + "\n".join(resume.education))

    return "\n\n".join(sections)
