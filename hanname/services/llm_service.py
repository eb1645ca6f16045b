"""LLM Service - Chat-completion gateway.

This module performs the single outbound call to the DeepSeek chat-completion
endpoint (served through SiliconFlow's OpenAI-compatible API) and hands back
the response envelope as a plain dict.

Interface Contract:
- complete(messages) returns dict (the decoded envelope)
- All failures raise LLMServiceError or one of its subclasses
- Exactly one HTTP attempt per call, no retry
"""

from __future__ import annotations

import logging
from typing import Any

from openai import APIConnectionError, APIError, APIStatusError, OpenAI

from config import Settings, load_settings

logger = logging.getLogger(__name__)


class LLMServiceError(Exception):
    """Raised when the chat-completion call fails."""
    status_code = 500

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self)}


class ConfigurationError(LLMServiceError):
    """Raised when the API credential is not configured."""


class UpstreamAPIError(LLMServiceError):
    """Raised when the chat-completion API answers with a non-2xx status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__("DeepSeek API call failed")
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        return {"error": str(self), "detail": self.detail}


class ChatCompletionService:
    """Client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        """Get or create OpenAI client (lazy initialization)."""
        if self._client is None:
            if not self.settings.api_key:
                raise ConfigurationError("DeepSeek API key is not configured on the server")
            self._client = OpenAI(
                api_key=self.settings.api_key,
                base_url=self.settings.base_url,
                max_retries=0,
                timeout=self.settings.timeout,
            )
        return self._client

    def complete(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        """Send the messages and return the response envelope.

        Args:
            messages: Chat messages, system message first

        Returns:
            dict: The top-level envelope, provider-specific fields such as
            ``reasoning_content`` included

        Raises:
            ConfigurationError: If no API key is configured (no request is sent)
            UpstreamAPIError: If the API returns a non-2xx status
            LLMServiceError: If the request cannot be sent or the body is unusable
        """
        client = self._get_client()

        logger.info("[llm] POST %s/chat/completions model=%s", self.settings.base_url, self.settings.model)
        try:
            response = client.chat.completions.create(
                model=self.settings.model,
                messages=messages,
                temperature=self.settings.temperature,
            )
        except APIStatusError as e:
            logger.warning("[llm] HTTP %s: %s", e.status_code, e.response.text)
            raise UpstreamAPIError(e.status_code, e.response.text) from e
        except APIConnectionError as e:
            raise LLMServiceError(f"DeepSeek request failed: {e}") from e
        except APIError as e:
            raise LLMServiceError(f"DeepSeek call failed: {e}") from e

        return response.model_dump()


class LLMService:
    """Holder for the default gateway instance."""

    _instance: ChatCompletionService | None = None

    @classmethod
    def get_instance(cls) -> ChatCompletionService:
        """Get the configured gateway, built from the environment on first use."""
        if cls._instance is None:
            cls._instance = ChatCompletionService(load_settings())
        return cls._instance

    @classmethod
    def set_instance(cls, service: ChatCompletionService) -> None:
        """Set a custom gateway (useful for testing)."""
        cls._instance = service

    @classmethod
    def reset(cls) -> None:
        """Reset to default gateway."""
        cls._instance = None
