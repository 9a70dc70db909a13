"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest

from resume_match.providers import PROVIDER_DEFAULTS
from resume_match.providers.classification import classify_failure
from resume_match.providers.types import GenerationConfig


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local credentials and overrides that can leak into tests on developer machines."""
    for key in (
        "GROQ_API_KEY",
        "OPENAI_API_KEY",
        "GEMINI_API_KEY",
        "RESUME_MATCH_PROVIDER",
        "RESUME_MATCH_MODEL",
        "RESUME_MATCH_TIMEOUT",
        "RESUME_MATCH_CONFIG",
    ):
        monkeypatch.delenv(key, raising=False)


class FakeBackend:
    """In-memory backend returning a canned payload or raising a canned error."""

    def __init__(self, response: Any = "", error: Optional[BaseException] = None, provider: str = "groq"):
        self.info = PROVIDER_DEFAULTS[provider]
        self.model = self.info.default_model
        self.response = json.dumps(response) if isinstance(response, dict) else response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def submit(self, system_prompt: str, user_prompt: str, config: GenerationConfig) -> str:
        self.calls.append({"system": system_prompt, "user": user_prompt, "config": config})
        if self.error is not None:
            raise self.error
        return self.response

    def classify_failure(self, error: BaseException):
        return classify_failure(
            self.info,
            self.model,
            str(error),
            status_code=getattr(error, "status_code", None),
        )


@pytest.fixture
def fake_backend():
    """Factory for FakeBackend instances."""
    return FakeBackend


@pytest.fixture
def resume_payload() -> dict:
    return {
        "skills": ["Python", "AWS", "Docker"],
        "experience": ["Backend Engineer at Acme (2019-2023): Built Python services on AWS"],
        "education": ["BS in Computer Science from State University (2015-2019)"],
        "contact": "jane@example.com",
    }


@pytest.fixture
def analysis_payload() -> dict:
    return {
        "matchPercentage": 55,
        "matchedSkills": ["Python"],
        "missingSkills": ["Kubernetes"],
        "suggestions": [
            "Add any Kubernetes experience, even from side projects",
            "Quantify the scale of the AWS deployments you ran",
        ],
    }
