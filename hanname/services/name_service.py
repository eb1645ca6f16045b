"""Name Service - Chinese name generation from a user profile.

This module ties the pipeline together:
- Prompt building from the profile
- One chat-completion call
- Answer extraction, JSON recovery and validation

Interface Contract:
- generate(profile) -> NameSuggestion
- Raises ValueError for an empty name, LLMServiceError for gateway
  failures and AnswerParseError for unusable answers
"""

from __future__ import annotations

import logging

from hanname.models import NameProfile, NameSuggestion
from hanname.services.answer_parser import (
    extract_answer_text,
    parse_answer_json,
    validate_suggestion,
)
from hanname.services.prompt_builder import build_messages

logger = logging.getLogger(__name__)


class NameService:
    """Service for generating a Chinese name suggestion."""

    def __init__(self, llm_service=None):
        """Initialize with optional LLM service dependency.

        Args:
            llm_service: Chat-completion gateway. If None, uses default.
        """
        self._llm = llm_service

    @property
    def llm(self):
        """Lazy load LLM service."""
        if self._llm is None:
            from hanname.services.llm_service import LLMService
            self._llm = LLMService.get_instance()
        return self._llm

    def generate(self, profile: NameProfile) -> NameSuggestion:
        """Generate one name suggestion.

        Args:
            profile: The user's profile, name already trimmed

        Returns:
            NameSuggestion: Validated suggestion with all four fields
        """
        messages = build_messages(profile)
        logger.info(
            "[generate] name_len=%d gender=%s traits=%s style=%s phonetic=%s",
            len(profile.english_name),
            profile.gender,
            ",".join(profile.traits) or "-",
            profile.style,
            profile.phonetic,
        )

        envelope = self.llm.complete(messages)
        text = extract_answer_text(envelope)
        suggestion = validate_suggestion(parse_answer_json(text))

        logger.info("[generate] suggested name=%s", suggestion.name)
        return suggestion
