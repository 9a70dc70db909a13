"""Backend factory and provider defaults."""

from __future__ import annotations

import os
from typing import Dict, List, Mapping, Optional

from ..errors import ConfigurationError
from .base import BackendAdapter
from .gemini import GeminiBackend
from .openai_compat import OpenAICompatibleBackend
from .types import GenerationConfig, ProviderInfo

AUTO_PROVIDER = "auto"

PROVIDER_DEFAULTS: Dict[str, ProviderInfo] = {
    "groq": ProviderInfo(
        name="groq",
        display_name="Groq",
        env_key="GROQ_API_KEY",
        default_model="llama-3.3-70b-versatile",
        api_base="https://api.groq.com/openai/v1",
        key_url="https://console.groq.com/keys",
        usage_url="https://console.groq.com",
        alternative_models=("llama-3.3-70b-versatile", "llama-3.1-8b-instant", "mixtral-8x7b-32768"),
    ),
    "openai": ProviderInfo(
        name="openai",
        display_name="OpenAI",
        env_key="OPENAI_API_KEY",
        default_model="gpt-4o-mini",
        key_url="https://platform.openai.com/api-keys",
        usage_url="https://platform.openai.com/account/billing",
        alternative_models=("gpt-4o-mini", "gpt-4o", "gpt-3.5-turbo"),
    ),
    "gemini": ProviderInfo(
        name="gemini",
        display_name="Gemini",
        env_key="GEMINI_API_KEY",
        default_model="gemini-1.5-flash",
        key_url="https://makersuite.google.com/app/apikey",
        usage_url="https://ai.google.dev/pricing",
        alternative_models=("gemini-1.5-flash", "gemini-1.5-pro", "gemini-pro"),
    ),
}

# Order in which "auto" looks for a configured credential.
AUTO_PROVIDER_ORDER = ("groq", "openai", "gemini")


def create_backend(
    provider: str = AUTO_PROVIDER,
    model: str = "",
    api_base: str = "",
    environ: Optional[Mapping[str, str]] = None,
) -> BackendAdapter:
    """Build a backend for ``provider``, reading its credential now.

    Raises ``ConfigurationError`` before any network traffic when the
    provider is unknown or its credential is not set.
    """
    env = os.environ if environ is None else environ
    provider_name = resolve_provider(provider, env)
    info = PROVIDER_DEFAULTS[provider_name]
    api_key = env.get(info.env_key, "").strip()
    if not api_key:
        message = f"{info.env_key} is not configured."
        if info.key_url:
            message += f" Get an API key at {info.key_url}"
        raise ConfigurationError(message, {"provider": provider_name, "env_key": info.env_key})

    if provider_name == "gemini":
        return GeminiBackend(info=info, api_key=api_key, model=model, api_base=api_base)
    return OpenAICompatibleBackend(info=info, api_key=api_key, model=model, api_base=api_base)


def resolve_provider(provider: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the concrete provider name for ``provider`` (which may be "auto")."""
    env = os.environ if environ is None else environ
    provider_name = (provider or AUTO_PROVIDER).strip().lower()

    if provider_name == AUTO_PROVIDER:
        for candidate in AUTO_PROVIDER_ORDER:
            if env.get(PROVIDER_DEFAULTS[candidate].env_key, "").strip():
                return candidate
        env_keys = configured_env_keys()
        raise ConfigurationError(
            f"No language model API key is configured. Set one of: {', '.join(env_keys)}",
            {"env_keys": env_keys},
        )

    if provider_name not in PROVIDER_DEFAULTS:
        raise ConfigurationError(
            f"Unknown provider '{provider_name}'. Expected one of: "
            f"{', '.join([AUTO_PROVIDER, *PROVIDER_DEFAULTS.keys()])}",
            {"provider": provider_name},
        )
    return provider_name


def configured_env_keys() -> List[str]:
    return [PROVIDER_DEFAULTS[name].env_key for name in AUTO_PROVIDER_ORDER]


__all__ = [
    "AUTO_PROVIDER",
    "AUTO_PROVIDER_ORDER",
    "BackendAdapter",
    "GeminiBackend",
    "GenerationConfig",
    "OpenAICompatibleBackend",
    "PROVIDER_DEFAULTS",
    "ProviderInfo",
    "create_backend",
    "resolve_provider",
]
