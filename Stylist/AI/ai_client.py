"""
Handles the single outbound chat-completion request.
No retry or backoff: a failed call is reported once.
"""
from typing import Optional, Dict, Any
import logging
import requests

from Stylist.AI.prompt_builder import SYSTEM_PROMPT
from Stylist.Exception.StylistError import TransportError
from Stylist.Utility.env import AISettings, get_ai_settings

logger = logging.getLogger(__name__)


class AIClient:
    def __init__(self, api_key: str, settings: Optional[AISettings] = None, session: Optional[requests.Session] = None):
        self.api_key = (api_key or "").strip()
        self.settings = settings or get_ai_settings()
        self.session = session or requests.Session()

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    def generate(self, prompt: str) -> Dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        payload = self.build_payload(prompt)
        logger.info("Sending prompt to %s (model=%s)", self.settings.endpoint, self.settings.model)
        try:
            response = self.session.post(
                self.settings.endpoint, headers=headers, json=payload, timeout=self.settings.timeout
            )
        except requests.exceptions.RequestException as exc:
            logger.error("AI request failed: %s", exc)
            raise TransportError(f"Could not reach the AI service: {exc}")

        if not 200 <= response.status_code < 300:
            logger.error("AI service returned %s", response.status_code)
            raise TransportError(
                f"OpenAI error: {response.status_code} {response.text}",
                upstream_status=response.status_code,
                body=response.text,
            )
        return {"text": response.text, "status_code": response.status_code, "source": "OpenAI"}
