"""Analyzer configuration loaded from YAML with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.local.yaml"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024


@dataclass
class AnalyzerConfig:
    """Settings shared by both pipeline stages.

    Credentials are deliberately absent: backends read them from the
    process environment at call time.
    """

    provider: str = "auto"
    model: str = ""  # empty = provider default
    api_base: str = ""  # Custom API endpoint (proxy)
    max_tokens: int = 2048
    extraction_temperature: float = 0.2
    analysis_temperature: float = 0.3
    timeout_seconds: Optional[float] = 60.0
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    verbose: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalyzerConfig":
        llm = data.get("llm", {}) or {}
        upload = data.get("upload", {}) or {}
        timeout = llm.get("timeout_seconds", cls.timeout_seconds)
        return cls(
            provider=str(llm.get("provider", cls.provider) or cls.provider),
            model=str(llm.get("model", "") or ""),
            api_base=str(llm.get("api_base", "") or ""),
            max_tokens=int(llm.get("max_tokens", cls.max_tokens)),
            extraction_temperature=float(llm.get("extraction_temperature", cls.extraction_temperature)),
            analysis_temperature=float(llm.get("analysis_temperature", cls.analysis_temperature)),
            timeout_seconds=float(timeout) if timeout else None,
            max_upload_bytes=int(upload.get("max_bytes", cls.max_upload_bytes)),
            verbose=bool(data.get("verbose", False)),
        )


def load_raw_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """Load raw configuration dictionary from YAML files.

    Priority order:
    1. config.local.yaml (user's local overrides)
    2. config.yaml (template/defaults)

    Missing files are not an error: built-in defaults apply.
    """
    repo_root = Path(__file__).resolve().parents[1]

    def _resolve(candidate: str) -> Path:
        path = Path(candidate)
        if path.exists():
            return path
        alt = repo_root / candidate
        if alt.exists():
            return alt
        return path

    target = _resolve(config_path)
    if Path(config_path).name == "config.local.yaml":
        base = _load_yaml(_resolve("config/config.yaml"))
        return _deep_merge(base, _load_yaml(target))

    if not target.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return _load_yaml(target)


def load_config(
    config_path: str = DEFAULT_CONFIG_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> AnalyzerConfig:
    """Load configuration and apply ``RESUME_MATCH_*`` environment overrides."""
    env = os.environ if environ is None else environ
    config = AnalyzerConfig.from_dict(load_raw_config(config_path))

    if env.get("RESUME_MATCH_PROVIDER"):
        config.provider = env["RESUME_MATCH_PROVIDER"]
    if env.get("RESUME_MATCH_MODEL"):
        config.model = env["RESUME_MATCH_MODEL"]
    if env.get("RESUME_MATCH_TIMEOUT"):
        try:
            config.timeout_seconds = float(env["RESUME_MATCH_TIMEOUT"]) or None
        except ValueError:
            logger.warning("Ignoring non-numeric RESUME_MATCH_TIMEOUT=%r", env["RESUME_MATCH_TIMEOUT"])
    return config


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = value
    return merged
