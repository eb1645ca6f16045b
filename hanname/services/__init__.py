"""Service layer - Business logic modules.

Each service module has a clear interface and can be developed/tested independently.
"""

from .llm_service import (
    ChatCompletionService,
    ConfigurationError,
    LLMService,
    LLMServiceError,
    UpstreamAPIError,
)
from .answer_parser import (
    AnswerParseError,
    EmptyAnswerError,
    IncompleteAnswerError,
    UnparsableAnswerError,
)
from .name_service import NameService

__all__ = [
    "ChatCompletionService",
    "ConfigurationError",
    "LLMService",
    "LLMServiceError",
    "UpstreamAPIError",
    "AnswerParseError",
    "EmptyAnswerError",
    "IncompleteAnswerError",
    "UnparsableAnswerError",
    "NameService",
]
