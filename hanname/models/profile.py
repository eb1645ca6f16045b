"""Profile data model.

Pure data structure with no business logic.
Mirrors the payload posted by the name form.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any

MAX_TRAITS = 3


@dataclass(frozen=True)
class NameProfile:
    """Profile collected by the form for one name request."""
    english_name: str
    gender: str = "neutral"
    traits: tuple[str, ...] = dataclass_field(default_factory=tuple)
    style: str = "modern"
    phonetic: str = "native-like"

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire payload."""
        return {
            "englishName": self.english_name,
            "gender": self.gender,
            "traits": list(self.traits),
            "style": self.style,
            "phonetic": self.phonetic,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NameProfile":
        """Create from the wire payload.

        The name is trimmed; traits are de-duplicated and capped at
        ``MAX_TRAITS``. Unknown option codes are kept as-is and missing ones
        become empty strings, so the prompt says "unspecified" for them.
        """
        return cls(
            english_name=str(data.get("englishName") or "").strip(),
            gender=str(data.get("gender") or ""),
            traits=_clean_traits(data.get("traits")),
            style=str(data.get("style") or ""),
            phonetic=str(data.get("phonetic") or ""),
        )


def _clean_traits(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    traits: list[str] = []
    for item in raw:
        trait = str(item).strip()
        if trait and trait not in traits:
            traits.append(trait)
    return tuple(traits[:MAX_TRAITS])
