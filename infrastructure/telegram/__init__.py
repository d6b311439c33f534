"""Telegram delivery adapters"""

from infrastructure.telegram.announcement_sender import TelegramAnnouncementSender

__all__ = ["TelegramAnnouncementSender"]
