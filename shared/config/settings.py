from dataclasses import dataclass, field
from typing import List, Optional
import os
from dotenv import load_dotenv

from domain.value_objects.language import SourceLanguage
from shared.constants import TRANSLATION_TIMEOUT_SECONDS

load_dotenv()

DEFAULT_DEEPL_API_URL = "https://api-free.deepl.com/v2/translate"


class ConfigurationError(ValueError):
    """Raised when required process configuration is missing or invalid"""
    pass


@dataclass
class TelegramConfig:
    """Telegram bot configuration"""
    token: str
    allowed_user_ids: List[int] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "TelegramConfig":
        token = os.getenv("TELEGRAM_TOKEN")
        if not token:
            raise ConfigurationError("TELEGRAM_TOKEN is required")
        allowed_ids_str = os.getenv("ALLOWED_USER_ID", "")
        try:
            allowed_user_ids = [int(id.strip()) for id in allowed_ids_str.split(",") if id.strip()]
        except ValueError:
            raise ConfigurationError(f"ALLOWED_USER_ID must be comma-separated integers, got {allowed_ids_str!r}")
        return cls(token=token, allowed_user_ids=allowed_user_ids)


@dataclass
class DeepLConfig:
    """DeepL translation API configuration

    The free and pro plans use different hosts; set DEEPL_API_URL to
    https://api.deepl.com/v2/translate for a pro key.
    """
    api_key: str
    api_url: str = DEFAULT_DEEPL_API_URL
    timeout_seconds: float = TRANSLATION_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "DeepLConfig":
        api_key = os.getenv("DEEPL_API_KEY")
        if not api_key:
            raise ConfigurationError("DEEPL_API_KEY is required")
        try:
            timeout_seconds = float(os.getenv("TRANSLATION_TIMEOUT", str(TRANSLATION_TIMEOUT_SECONDS)))
        except ValueError:
            raise ConfigurationError("TRANSLATION_TIMEOUT must be a number of seconds")
        if timeout_seconds <= 0:
            raise ConfigurationError("TRANSLATION_TIMEOUT must be positive")
        return cls(
            api_key=api_key,
            api_url=os.getenv("DEEPL_API_URL", DEFAULT_DEEPL_API_URL),
            timeout_seconds=timeout_seconds,
        )


@dataclass
class EventConfig:
    """Event announcement configuration"""
    default_source_language: SourceLanguage = SourceLanguage.FRENCH

    @classmethod
    def from_env(cls) -> "EventConfig":
        raw = os.getenv("DEFAULT_SOURCE_LANGUAGE", SourceLanguage.FRENCH.value)
        try:
            language = SourceLanguage.parse(raw)
        except ValueError as e:
            raise ConfigurationError(f"DEFAULT_SOURCE_LANGUAGE: {e}")
        return cls(default_source_language=language)


@dataclass
class Settings:
    """Application settings"""
    telegram: TelegramConfig
    deepl: DeepLConfig
    event: EventConfig
    debug: bool = False
    log_level: str = "INFO"
    log_dir: Optional[str] = "logs"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from the process environment (and .env).

        Raises:
            ConfigurationError: If a required secret is missing
        """
        return cls(
            telegram=TelegramConfig.from_env(),
            deepl=DeepLConfig.from_env(),
            event=EventConfig.from_env(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("LOG_DIR", "logs") or None,
        )
