"""Global configuration values."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

# SiliconFlow hosts DeepSeek behind an OpenAI-compatible API; the SDK appends /chat/completions
DEFAULT_BASE_URL = os.environ.get("DEEPSEEK_BASE_URL", "https://api.siliconflow.cn/v1")

# Default model (can be overridden via env)
DEFAULT_MODEL = os.environ.get("DEEPSEEK_MODEL", "deepseek-ai/DeepSeek-R1")

# Non-zero so repeated requests with the same profile get different names
DEFAULT_TEMPERATURE = 0.7

# Private name first, then the public-prefixed fallback
API_KEY_ENV_NAMES = ("DEEPSEEK_API_KEY", "NEXT_PUBLIC_DEEPSEEK_API_KEY")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the chat-completion gateway."""
    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    timeout: float | None = None


def _read_api_key(environ: Mapping[str, str]) -> str | None:
    for env_name in API_KEY_ENV_NAMES:
        value = (environ.get(env_name) or "").strip()
        if value:
            return value
    return None


def _read_timeout(environ: Mapping[str, str]) -> float | None:
    raw = (environ.get("DEEPSEEK_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"DEEPSEEK_TIMEOUT must be a number of seconds, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    The credential is looked up under ``DEEPSEEK_API_KEY`` first and
    ``NEXT_PUBLIC_DEEPSEEK_API_KEY`` second; the first non-empty value wins.
    """
    if environ is None:
        environ = os.environ
    return Settings(
        api_key=_read_api_key(environ),
        base_url=environ.get("DEEPSEEK_BASE_URL") or DEFAULT_BASE_URL,
        model=environ.get("DEEPSEEK_MODEL") or DEFAULT_MODEL,
        temperature=DEFAULT_TEMPERATURE,
        timeout=_read_timeout(environ),
    )
