import html
import logging
from typing import Iterable, Optional

from aiogram import Bot, Router
from aiogram.enums import ChatMemberStatus, ChatType, ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command, CommandObject
from aiogram.types import Message

from application.services.announcement_service import AnnouncementService
from domain.exceptions import EventBotError, ValidationError
from domain.value_objects.chat_reference import ChatReference
from domain.value_objects.language import SourceLanguage
from infrastructure.telegram.announcement_sender import TelegramAnnouncementSender
from presentation.handlers.event_command import EVENT_COMMAND, parse_event_command
from shared.constants import ACK_TEXT, FAILURE_TEXT, FORBIDDEN_TEXT, SUCCESS_TEXT
from shared.message_formatters import format_event_usage, format_validation_error

logger = logging.getLogger(__name__)

ANNOUNCER_STATUSES = (ChatMemberStatus.CREATOR, ChatMemberStatus.ADMINISTRATOR)


class CommandHandlers:
    """Bot command handlers for event announcements"""

    def __init__(
        self,
        announcement_service: AnnouncementService,
        sender: TelegramAnnouncementSender,
        allowed_user_ids: Optional[Iterable[int]] = None,
        default_language: SourceLanguage = SourceLanguage.FRENCH,
    ):
        self.announcement_service = announcement_service
        self.sender = sender
        self.allowed_user_ids = set(allowed_user_ids or ())
        self.default_language = default_language

    async def event(self, message: Message, command: CommandObject, bot: Bot) -> None:
        """Handle /event command - build and post an announcement"""
        # Acknowledge first; translation can take several seconds
        status = await message.answer(ACK_TEXT)

        try:
            submission = parse_event_command(command.args, self.default_language)
        except ValidationError as e:
            logger.info("Rejected /event from %s: %s", _user_id(message), e)
            await status.edit_text(
                format_validation_error(str(e), EVENT_COMMAND.usage),
                parse_mode=ParseMode.HTML,
            )
            return

        destination = submission.destination or ChatReference.from_int(message.chat.id)

        if not await self.can_announce(bot, message, destination):
            logger.warning("User %s may not announce in %s", _user_id(message), destination)
            await status.edit_text(FORBIDDEN_TEXT)
            return

        try:
            announcement = await self.announcement_service.build(submission)
            await self.sender.send(destination, announcement)
        except EventBotError as e:
            logger.error("Error creating event %r: %s", submission.name, e, exc_info=True)
            await status.edit_text(FAILURE_TEXT)
            return
        except Exception as e:
            logger.error("Unexpected error creating event %r: %s", submission.name, e, exc_info=True)
            await status.edit_text(FAILURE_TEXT)
            return

        text = SUCCESS_TEXT
        if destination.chat_id != message.chat.id:
            text += f"\n📢 {html.escape(str(destination))}"
        await status.edit_text(text, parse_mode=ParseMode.HTML)

    async def help(self, message: Message) -> None:
        """Handle /help command"""
        await message.answer(
            format_event_usage(EVENT_COMMAND.usage, EVENT_COMMAND.help_lines()),
            parse_mode=ParseMode.HTML,
        )

    async def can_announce(self, bot: Bot, message: Message, destination: ChatReference) -> bool:
        """
        Whether the invoker may post an announcement to the destination.

        Allowed users may post anywhere the bot can. Everyone else must be
        an administrator of the destination chat, except when announcing
        back into their own private chat with the bot.
        """
        user_id = _user_id(message)
        if user_id is None:
            return False
        if user_id in self.allowed_user_ids:
            return True
        if destination.chat_id == message.chat.id and message.chat.type == ChatType.PRIVATE:
            return True

        try:
            member = await bot.get_chat_member(chat_id=destination.chat_id, user_id=user_id)
        except TelegramAPIError as e:
            logger.warning("Cannot check membership of %s in %s: %s", user_id, destination, e)
            return False
        return member.status in ANNOUNCER_STATUSES


def _user_id(message: Message) -> Optional[int]:
    return message.from_user.id if message.from_user else None


def register_handlers(router: Router, handlers: CommandHandlers) -> None:
    """Register command handlers."""
    router.message.register(handlers.event, Command(EVENT_COMMAND.name))
    router.message.register(handlers.help, Command("help", "start"))
