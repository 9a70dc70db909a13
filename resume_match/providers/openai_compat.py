"""OpenAI-compatible backend (OpenAI, Groq)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from ..errors import ResumeMatchError
from .classification import classify_failure
from .types import GenerationConfig, ProviderInfo

logger = logging.getLogger(__name__)


class OpenAICompatibleBackend:
    """Backend for OpenAI-compatible chat completion APIs."""

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
        self.client = AsyncOpenAI(api_key=api_key, base_url=self.api_base or None)

    async def submit(
        self,
        system_prompt: str,
        user_prompt: str,
        config: GenerationConfig,
    ) -> str:
        kwargs = self._build_chat_kwargs(system_prompt, user_prompt, config)
        completion = await self.client.chat.completions.create(**kwargs)
        return self._from_openai_completion(completion)

    def classify_failure(self, error: BaseException) -> ResumeMatchError:
        status_code = getattr(error, "status_code", None)
        message = getattr(error, "message", None) or str(error)
        return classify_failure(
            self.info,
            self.model,
            message,
            status_code=status_code if isinstance(status_code, int) else None,
        )

    def _build_chat_kwargs(
        self,
        system_prompt: str,
        user_prompt: str,
        config: GenerationConfig,
    ) -> Dict[str, Any]:
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if config.max_tokens and config.max_tokens > 0:
            kwargs["max_tokens"] = config.max_tokens
        if config.temperature is not None:
            kwargs["temperature"] = config.temperature
        if config.json_output:
            kwargs["response_format"] = {"type": "json_object"}
        return kwargs

    def _from_openai_completion(self, completion) -> str:
        choices = getattr(completion, "choices", None) or []
        if not choices:
            logger.warning("%s returned a completion without choices", self.info.display_name)
            return ""

        message = getattr(choices[0], "message", None)
        return self._normalize_message_content(getattr(message, "content", None))

    def _normalize_message_content(self, content: Any) -> str:
        if content is None:
            return ""
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            text_chunks: List[str] = []
            for item in content:
                text = self._extract_text_from_content_item(item)
                if text:
                    text_chunks.append(text)
            return "".join(text_chunks)
        return str(content)

    def _extract_text_from_content_item(self, item: Any) -> str:
        if item is None:
            return ""
        if isinstance(item, str):
            return item
        if isinstance(item, dict):
            return str(item.get("text", "") or "")
        return str(getattr(item, "text", "") or "")

