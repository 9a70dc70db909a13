"""Configuration validator for startup checks."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .providers import AUTO_PROVIDER, AUTO_PROVIDER_ORDER, PROVIDER_DEFAULTS


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigIssue:
    """A single configuration issue."""

    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any], environ: Optional[Mapping[str, str]] = None) -> List[ConfigIssue]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML
        environ: Environment to look up credentials in (defaults to os.environ)

    Returns:
        List of ConfigIssue (empty = valid)
    """
    env = os.environ if environ is None else environ
    issues: List[ConfigIssue] = []
    llm = raw_config.get("llm", {}) or {}

    # --- Provider ---
    provider = llm.get("provider", AUTO_PROVIDER)
    if not isinstance(provider, str) or not provider:
        issues.append(
            ConfigIssue(
                field="llm.provider",
                message="provider must be a non-empty string",
                severity=Severity.ERROR,
            )
        )
        provider = AUTO_PROVIDER
    provider = provider.lower()

    if provider != AUTO_PROVIDER and provider not in PROVIDER_DEFAULTS:
        issues.append(
            ConfigIssue(
                field="llm.provider",
                message=(
                    f"Unknown provider '{provider}'. Expected one of: "
                    f"{', '.join([AUTO_PROVIDER, *PROVIDER_DEFAULTS.keys()])}"
                ),
                severity=Severity.ERROR,
            )
        )

    # --- Credential ---
    if provider == AUTO_PROVIDER:
        env_keys = [PROVIDER_DEFAULTS[name].env_key for name in AUTO_PROVIDER_ORDER]
        if not any(env.get(key, "").strip() for key in env_keys):
            issues.append(
                ConfigIssue(
                    field="api_key",
                    message=f"No API key set. Set one of: {', '.join(env_keys)}",
                    severity=Severity.ERROR,
                )
            )
    elif provider in PROVIDER_DEFAULTS:
        env_key = PROVIDER_DEFAULTS[provider].env_key
        if not env.get(env_key, "").strip():
            issues.append(
                ConfigIssue(
                    field="api_key",
                    message=f"{env_key} not set. Set the env var before running an analysis",
                    severity=Severity.ERROR,
                )
            )

    # --- Model ---
    model = llm.get("model", "")
    if model is not None and not isinstance(model, str):
        issues.append(
            ConfigIssue(
                field="llm.model",
                message="model must be a string (leave empty for the provider default)",
                severity=Severity.ERROR,
            )
        )

    # --- Temperatures ---
    for name, default in (("extraction_temperature", 0.2), ("analysis_temperature", 0.3)):
        temperature = llm.get(name, default)
        if not _is_number(temperature) or temperature < 0 or temperature > 2:
            issues.append(
                ConfigIssue(
                    field=f"llm.{name}",
                    message=f"{name} must be a number between 0 and 2, got {temperature}",
                    severity=Severity.ERROR,
                )
            )
        elif temperature > 0.5:
            issues.append(
                ConfigIssue(
                    field=f"llm.{name}",
                    message=f"{name}={temperature} favors creativity; structured output is more reliable at 0.2-0.3",
                    severity=Severity.WARNING,
                )
            )

    # --- Max tokens ---
    max_tokens = llm.get("max_tokens", 2048)
    if not isinstance(max_tokens, int) or isinstance(max_tokens, bool) or max_tokens <= 0:
        issues.append(
            ConfigIssue(
                field="llm.max_tokens",
                message=f"max_tokens must be a positive integer, got {max_tokens}",
                severity=Severity.ERROR,
            )
        )

    # --- Timeout ---
    timeout = llm.get("timeout_seconds", 60)
    if timeout is not None and (not _is_number(timeout) or timeout < 0):
        issues.append(
            ConfigIssue(
                field="llm.timeout_seconds",
                message=f"timeout_seconds must be a non-negative number or null, got {timeout}",
                severity=Severity.ERROR,
            )
        )

    # --- Upload limit ---
    upload = raw_config.get("upload", {}) or {}
    max_bytes = upload.get("max_bytes", 10 * 1024 * 1024)
    if not isinstance(max_bytes, int) or isinstance(max_bytes, bool) or max_bytes <= 0:
        issues.append(
            ConfigIssue(
                field="upload.max_bytes",
                message=f"max_bytes must be a positive integer, got {max_bytes}",
                severity=Severity.ERROR,
            )
        )

    return issues


def has_errors(issues: List[ConfigIssue]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
