"""Provider-agnostic request settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GenerationConfig:
    """Common generation settings passed to backends."""

    temperature: Optional[float] = 0.2
    max_tokens: int = 2048
    json_output: bool = True


@dataclass
class ProviderInfo:
    """Static facts about a provider used for remediation messages."""

    name: str
    display_name: str
    env_key: str
    default_model: str
    api_base: str = ""
    key_url: str = ""
    usage_url: str = ""
    alternative_models: tuple = ()
