from abc import ABC, abstractmethod
from typing import List

from domain.value_objects.language import LanguageEntry


class ITranslationService(ABC):
    """Interface for a remote translation provider (DeepL, etc.)

    Implementations raise TranslationUnavailable on any provider failure
    and never return an empty or missing translation.
    """

    @abstractmethod
    async def translate_batch(
        self,
        texts: List[str],
        target_language: LanguageEntry,
        source_language: LanguageEntry,
    ) -> List[str]:
        """Translate several texts in one provider call, preserving order"""
        pass

    async def translate(
        self,
        text: str,
        target_language: LanguageEntry,
        source_language: LanguageEntry,
    ) -> str:
        """Translate a single text"""
        translations = await self.translate_batch([text], target_language, source_language)
        return translations[0]

    async def close(self) -> None:
        """Release provider resources"""
        pass
