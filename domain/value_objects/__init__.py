"""Domain value objects"""

from domain.value_objects.chat_reference import ChatReference
from domain.value_objects.language import LANGUAGES, LanguageEntry, SourceLanguage, get_language
from domain.value_objects.time_zone import TIME_ZONES, TimeZoneEntry

__all__ = [
    "ChatReference",
    "LANGUAGES",
    "LanguageEntry",
    "SourceLanguage",
    "get_language",
    "TIME_ZONES",
    "TimeZoneEntry",
]
