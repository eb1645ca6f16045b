"""Data models - Pure data structures with no business logic."""

from .profile import MAX_TRAITS, NameProfile
from .suggestion import NameSuggestion

__all__ = [
    "MAX_TRAITS",
    "NameProfile",
    "NameSuggestion",
]
