"""Language value objects"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class LanguageEntry:
    """
    Value object representing an announcement language.

    `code` is the ISO 639-1 code used for display and lookups.
    `target_code` is the provider's target variant where the provider
    requires a regional one (e.g. EN-GB); defaults to the upper-cased code.
    """

    code: str
    display_name: str
    target_code: Optional[str] = None

    def __post_init__(self):
        if not self.code or len(self.code) != 2 or not self.code.islower():
            raise ValueError(f"Invalid language code: {self.code!r}")
        if not self.display_name:
            raise ValueError("Language display name cannot be empty")

    @property
    def source_code(self) -> str:
        """Provider code when this language is the source"""
        return self.code.upper()

    @property
    def provider_target_code(self) -> str:
        """Provider code when this language is a translation target"""
        return self.target_code or self.code.upper()


# Fixed order of the announcement language listings
LANGUAGES: Tuple[LanguageEntry, ...] = (
    LanguageEntry("en", "English", target_code="EN-GB"),
    LanguageEntry("fr", "French"),
    LanguageEntry("pt", "Portuguese", target_code="PT-PT"),
    LanguageEntry("es", "Spanish"),
    LanguageEntry("de", "German"),
    LanguageEntry("zh", "Chinese"),
)


class SourceLanguage(Enum):
    """Languages an event can be written in"""
    FRENCH = "fr"
    ENGLISH = "en"
    PORTUGUESE = "pt"

    @property
    def entry(self) -> LanguageEntry:
        return get_language(self.value)

    @property
    def display_name(self) -> str:
        return self.entry.display_name

    @classmethod
    def default(cls) -> "SourceLanguage":
        return cls.FRENCH

    @classmethod
    def parse(cls, value: str) -> "SourceLanguage":
        """
        Resolve a source language from a code or display name.

        Args:
            value: "fr", "FR", "French", ...

        Raises:
            ValueError: If the value names no supported source language
        """
        key = (value or "").strip().lower()
        for member in cls:
            if key in (member.value, member.display_name.lower()):
                return member
        choices = ", ".join(m.display_name for m in cls)
        raise ValueError(f"Unsupported language: {value!r} (choose one of {choices})")


def get_language(code: str) -> LanguageEntry:
    """Look up a configured language by code"""
    for language in LANGUAGES:
        if language.code == code:
            return language
    raise KeyError(f"Unknown language code: {code}")
