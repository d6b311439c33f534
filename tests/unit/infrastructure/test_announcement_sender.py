"""Unit tests for TelegramAnnouncementSender"""

import pytest
from unittest.mock import Mock, AsyncMock

from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramBadRequest

from domain.entities.announcement import Announcement
from domain.exceptions import DeliveryError
from domain.value_objects.chat_reference import ChatReference
from infrastructure.telegram.announcement_sender import TelegramAnnouncementSender


@pytest.fixture
def announcement():
    announcement = Announcement(title="🌍 Alliance Event: Raid Night", description="Original (French): Bring potions")
    announcement.add_field("📅 Event Date & Time (UTC)", "2025-03-01 18:00")
    announcement.add_field("Pacific", "2025-03-01 10:00 PST (Saturday)", inline=True)
    return announcement


class TestTelegramAnnouncementSender:
    """Tests for TelegramAnnouncementSender"""

    @pytest.mark.asyncio
    async def test_send_to_channel(self, mock_bot, announcement):
        sender = TelegramAnnouncementSender(mock_bot)

        result = await sender.send(ChatReference("@alliance_news"), announcement)

        assert result == [1]
        mock_bot.send_message.assert_awaited_once()
        kwargs = mock_bot.send_message.call_args.kwargs
        assert kwargs["chat_id"] == "@alliance_news"
        assert kwargs["parse_mode"] == ParseMode.HTML
        assert "<b>🌍 Alliance Event: Raid Night</b>" in kwargs["text"]

    @pytest.mark.asyncio
    async def test_long_announcement_sent_in_parts(self, mock_bot, announcement):
        for i in range(20):
            announcement.add_field(f"Notes {i}", "x" * 600)
        mock_bot.send_message = AsyncMock(side_effect=[Mock(message_id=i) for i in range(10)])
        sender = TelegramAnnouncementSender(mock_bot)

        result = await sender.send(ChatReference(-100123), announcement)

        assert len(result) > 1
        for call in mock_bot.send_message.call_args_list:
            assert len(call.kwargs["text"]) <= 4096

    @pytest.mark.asyncio
    async def test_rejected_send_raises_delivery_error(self, mock_bot, announcement):
        mock_bot.send_message = AsyncMock(
            side_effect=TelegramBadRequest(method=Mock(), message="Bad Request: chat not found")
        )
        sender = TelegramAnnouncementSender(mock_bot)

        with pytest.raises(DeliveryError, match="chat not found") as exc_info:
            await sender.send(ChatReference("@missing_chat"), announcement)

        assert exc_info.value.destination == ChatReference("@missing_chat")
