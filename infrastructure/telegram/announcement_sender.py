"""
Telegram delivery of event announcements.
"""

import logging
from typing import List

from aiogram import Bot
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.types import LinkPreviewOptions

from domain.entities.announcement import Announcement
from domain.exceptions import DeliveryError
from domain.value_objects.chat_reference import ChatReference
from shared.message_formatters import format_announcement

logger = logging.getLogger(__name__)


class TelegramAnnouncementSender:
    """Sends a built announcement to a Telegram chat"""

    def __init__(self, bot: Bot):
        self.bot = bot

    async def send(self, destination: ChatReference, announcement: Announcement) -> List[int]:
        """
        Post the announcement to the destination chat.

        Returns:
            Ids of the sent messages

        Raises:
            DeliveryError: If Telegram rejects any part of the announcement
        """
        message_ids = []
        for text in format_announcement(announcement):
            try:
                sent = await self.bot.send_message(
                    chat_id=destination.chat_id,
                    text=text,
                    parse_mode=ParseMode.HTML,
                    link_preview_options=LinkPreviewOptions(is_disabled=True),
                )
            except TelegramAPIError as e:
                logger.error("Failed to send announcement to %s: %s", destination, e)
                raise DeliveryError(destination, str(e)) from e
            message_ids.append(sent.message_id)

        logger.info("Announcement sent to %s (%d message(s))", destination, len(message_ids))
        return message_ids
