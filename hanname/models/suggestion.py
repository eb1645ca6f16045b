"""Suggestion data model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NameSuggestion:
    """A validated Chinese name suggestion."""
    name: str
    phonetic: str
    meaning: str
    rationale: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the response body."""
        return {
            "name": self.name,
            "phonetic": self.phonetic,
            "meaning": self.meaning,
            "rationale": self.rationale,
        }
