"""Translation provider adapters"""

from infrastructure.translation.deepl_client import DeepLTranslationClient

__all__ = ["DeepLTranslationClient"]
