"""Environment helpers (.env loading and completion-service settings)"""
from dataclasses import dataclass
from typing import Optional
import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_AI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_AI_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 700
DEFAULT_TIMEOUT = 60.0


def load_env_file(filepath: str = ".env") -> None:
    if not os.path.exists(filepath):
        logger.debug(".env file not found: %s", filepath)
        return
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("export "):
                line = line[len("export "):]
            if "=" not in line:
                continue
            key, val = line.split("=", 1)
            key = key.strip()
            val = val.strip()
            if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
                val = val[1:-1]
            # real environment wins over .env
            os.environ.setdefault(key, val)


"""Completion-service request settings."""
@dataclass(frozen=True)
class AISettings:
    endpoint: str = DEFAULT_AI_ENDPOINT
    model: str = DEFAULT_AI_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: Optional[float] = DEFAULT_TIMEOUT


def _env_number(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def get_ai_settings() -> AISettings:
    return AISettings(
        endpoint=os.environ.get("STYLIST_AI_ENDPOINT") or DEFAULT_AI_ENDPOINT,
        model=os.environ.get("STYLIST_AI_MODEL") or DEFAULT_AI_MODEL,
        temperature=_env_number("STYLIST_AI_TEMPERATURE", DEFAULT_TEMPERATURE, float),
        max_tokens=_env_number("STYLIST_AI_MAX_TOKENS", DEFAULT_MAX_TOKENS, int),
        timeout=_env_number("STYLIST_AI_TIMEOUT", DEFAULT_TIMEOUT, float),
    )
