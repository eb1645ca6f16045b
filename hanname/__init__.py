"""Chinese name suggestion service package."""

from .models import NameProfile, NameSuggestion
from .services import NameService
from .services.prompt_builder import build_messages

__all__ = [
    "NameProfile",
    "NameSuggestion",
    "NameService",
    "build_messages",
]
