"""Domain services"""

from domain.services.time_converter import TimeConversion, convert, parse_utc
from domain.services.translation_service import ITranslationService

__all__ = [
    "TimeConversion",
    "convert",
    "parse_utc",
    "ITranslationService",
]
