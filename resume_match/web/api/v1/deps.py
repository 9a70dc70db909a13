"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....analyzer import ResumeAnalyzer


def get_analyzer(request: Request) -> ResumeAnalyzer:
    """Access the shared (stateless) analyzer from app state."""
    return request.app.state.analyzer
