"""
Pytest configuration and shared fixtures for the test suite.
"""

import os
import pytest
from typing import List
from unittest.mock import Mock, AsyncMock

# Set required environment variables BEFORE any application imports
os.environ.setdefault("TELEGRAM_TOKEN", "123456:test-telegram-token")
os.environ.setdefault("DEEPL_API_KEY", "test-deepl-key:fx")

from aiogram.enums import ChatMemberStatus
from aiogram.filters import CommandObject

from application.services.announcement_service import AnnouncementService
from domain.entities.event_submission import EventSubmission
from domain.exceptions import TranslationUnavailable
from domain.services.translation_service import ITranslationService
from domain.value_objects.language import LanguageEntry


# ============================================================================
# Test doubles
# ============================================================================

class FakeTranslator(ITranslationService):
    """Deterministic translator that records every provider call."""

    def __init__(self, failing=()):
        self.calls = []
        self.failing = set(failing)

    async def translate_batch(
        self,
        texts: List[str],
        target_language: LanguageEntry,
        source_language: LanguageEntry,
    ) -> List[str]:
        self.calls.append((tuple(texts), target_language.code, source_language.code))
        if target_language.code in self.failing:
            raise TranslationUnavailable(target_language.code, "quota exceeded")
        return [f"[{target_language.code}] {text}" for text in texts]

    @property
    def target_codes(self) -> List[str]:
        return [code for _, code, _ in self.calls]


# ============================================================================
# Domain fixtures
# ============================================================================

@pytest.fixture
def submission() -> EventSubmission:
    """The Raid Night submission in the default language."""
    return EventSubmission.create(
        name="Raid Night",
        description="Bring potions",
        date="2025-03-01",
        time="18:00",
    )


@pytest.fixture
def translator() -> FakeTranslator:
    """Translator that succeeds for every language."""
    return FakeTranslator()


@pytest.fixture
def announcement_service(translator) -> AnnouncementService:
    """AnnouncementService over the fake translator."""
    return AnnouncementService(translator)


# ============================================================================
# Telegram fixtures
# ============================================================================

@pytest.fixture
def status_message():
    """Acknowledgment message returned by message.answer."""
    status = Mock()
    status.edit_text = AsyncMock()
    return status


@pytest.fixture
def message(status_message):
    """Incoming /event message in an alliance supergroup."""
    msg = Mock()
    msg.chat = Mock(id=-1001234567890, type="supergroup")
    msg.from_user = Mock(id=42, username="officer")
    msg.answer = AsyncMock(return_value=status_message)
    return msg


@pytest.fixture
def mock_bot():
    """Bot whose invoker is an administrator everywhere."""
    bot = Mock()
    bot.get_chat_member = AsyncMock(return_value=Mock(status=ChatMemberStatus.ADMINISTRATOR))
    bot.send_message = AsyncMock(return_value=Mock(message_id=1))
    bot.set_my_commands = AsyncMock()
    return bot


@pytest.fixture
def mock_sender():
    """Announcement sender that accepts everything."""
    sender = Mock()
    sender.send = AsyncMock(return_value=[1])
    return sender


def event_command(args):
    """CommandObject for /event with the given argument string."""
    return CommandObject(prefix="/", command="event", args=args)


@pytest.fixture
def make_translator():
    """Factory for FakeTranslator, e.g. make_translator(failing={"de"})."""
    return FakeTranslator


@pytest.fixture
def make_command():
    """Factory for /event CommandObjects."""
    return event_command
