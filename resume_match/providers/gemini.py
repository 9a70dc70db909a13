"""Gemini backend implementation."""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from google import genai
from google.genai import types

from ..errors import ResumeMatchError
from ..parsing import strip_code_fences
from .classification import classify_failure
from .types import GenerationConfig, ProviderInfo

logger = logging.getLogger(__name__)


class GeminiBackend:
    """Google Gemini backend using google-genai SDK."""

    def __init__(
        self,
        info: ProviderInfo,
        api_key: str,
        model: str = "",
        api_base: str = "",
    ) -> None:
        self.info = info
        self.model = model or info.default_model
        self.api_base = api_base or info.api_base
        http_options = types.HttpOptions(base_url=self.api_base) if self.api_base else None
        self.client = genai.Client(api_key=api_key, http_options=http_options)

    async def submit(
        self,
        system_prompt: str,
        user_prompt: str,
        config: GenerationConfig,
    ) -> str:
        response = await asyncio.to_thread(
            self.client.models.generate_content,
            model=self.model,
            contents=user_prompt,
            config=self._build_generation_config(system_prompt, config),
        )
        # Gemini wraps JSON in markdown fences even in JSON mode.
        return strip_code_fences(self._from_gemini_response(response))

    def classify_failure(self, error: BaseException) -> ResumeMatchError:
        code = getattr(error, "code", None)
        status = getattr(error, "status", None)
        message = getattr(error, "message", None) or str(error)
        return classify_failure(
            self.info,
            self.model,
            message,
            status_code=code if isinstance(code, int) else None,
            status_text=status if isinstance(status, str) else None,
        )

    def _build_generation_config(
        self,
        system_prompt: str,
        config: GenerationConfig,
    ) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_prompt if system_prompt else None,
            max_output_tokens=config.max_tokens,
            temperature=config.temperature,
            response_mime_type="application/json" if config.json_output else None,
        )

    def _from_gemini_response(self, response) -> str:
        candidates = getattr(response, "candidates", None)
        if not candidates:
            logger.warning("Gemini returned a response without candidates")
            return ""

        candidate = candidates[0]
        content = getattr(candidate, "content", None)
        parts: Optional[List] = content.parts if content else None
        text_parts: List[str] = []
        for part in parts or []:
            text = getattr(part, "text", None)
            if text:
                text_parts.append(text)
        return "".join(text_parts).strip()
