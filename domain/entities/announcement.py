"""
Announcement Entity

Presentation-neutral event announcement: a title, a description line
and an ordered list of fields. Built once, handed to a delivery sink,
then discarded.
"""

from dataclasses import dataclass, field
from typing import List

# Shown in place of a translation the provider could not produce
TRANSLATION_UNAVAILABLE_MARKER = "⚠️ translation unavailable"


@dataclass(frozen=True)
class AnnouncementField:
    """Single named field of an announcement"""
    name: str
    value: str
    inline: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("Field name cannot be empty")
        if not isinstance(self.value, str):
            raise ValueError(f"Field value must be text, got {type(self.value).__name__}")


@dataclass(frozen=True)
class TranslationResult:
    """Translated name/description for one language"""
    language_code: str
    translated_name: str
    translated_description: str
    available: bool = True

    @classmethod
    def identity(cls, language_code: str, name: str, description: str) -> "TranslationResult":
        """Original text for the submission's own language"""
        return cls(language_code, name, description)

    @classmethod
    def unavailable(cls, language_code: str) -> "TranslationResult":
        """Placeholder for a language the provider failed on"""
        return cls(
            language_code,
            TRANSLATION_UNAVAILABLE_MARKER,
            TRANSLATION_UNAVAILABLE_MARKER,
            available=False,
        )


@dataclass
class Announcement:
    """Event announcement ready for delivery"""
    title: str
    description: str
    fields: List[AnnouncementField] = field(default_factory=list)

    def add_field(self, name: str, value: str, inline: bool = False) -> None:
        self.fields.append(AnnouncementField(name=name, value=value, inline=inline))
