#!/usr/bin/env python3
"""
Alliance Event Bot - Multilingual event announcements for Telegram

Listens for /event, converts the event time into a fixed set of time
zones, translates the name and description with DeepL and posts one
announcement into the chosen chat.

Architecture:
- Domain: Submission, announcement, time conversion, translation contract
- Application: Announcement building
- Infrastructure: DeepL client, Telegram delivery
- Presentation: Telegram command handlers
"""

import asyncio
import logging
import signal
import sys
from typing import Optional

from aiogram import Bot, Dispatcher, Router
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

from application.services.announcement_service import AnnouncementService
from domain.services.translation_service import ITranslationService
from infrastructure.telegram.announcement_sender import TelegramAnnouncementSender
from infrastructure.translation.deepl_client import DeepLTranslationClient
from presentation.handlers.commands import CommandHandlers, register_handlers
from presentation.handlers.event_command import EVENT_COMMAND, HELP_COMMAND
from presentation.middleware.correlation import CorrelationIdMiddleware
from shared.config.settings import ConfigurationError, Settings
from shared.logging.config import setup_logging

logger = logging.getLogger(__name__)


class Application:
    """Main application class"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.bot: Optional[Bot] = None
        self.dp: Optional[Dispatcher] = None
        self.translator: Optional[ITranslationService] = None
        self.announcement_service: Optional[AnnouncementService] = None
        self._shutdown_event = asyncio.Event()

    async def setup(self):
        """Initialize application components"""
        logger.info("Initializing Alliance Event Bot...")

        self.translator = DeepLTranslationClient(self.settings.deepl)
        self.announcement_service = AnnouncementService(self.translator)
        logger.info("✓ Translation client ready (%s)", self.settings.deepl.api_url)

        self.bot = Bot(
            token=self.settings.telegram.token,
            default=DefaultBotProperties(parse_mode=ParseMode.HTML)
        )
        self.dp = Dispatcher()
        self.dp.update.outer_middleware(CorrelationIdMiddleware())

        self._register_handlers()
        await self._register_bot_commands()

        logger.info("Bot initialized successfully")
        logger.info("Default event language: %s", self.settings.event.default_source_language.display_name)

    def _register_handlers(self):
        """Register all handlers"""
        router = Router(name="events")
        handlers = CommandHandlers(
            announcement_service=self.announcement_service,
            sender=TelegramAnnouncementSender(self.bot),
            allowed_user_ids=self.settings.telegram.allowed_user_ids,
            default_language=self.settings.event.default_source_language,
        )
        register_handlers(router, handlers)
        self.dp.include_router(router)

    async def _register_bot_commands(self):
        """Register bot commands in Telegram menu"""
        commands = [EVENT_COMMAND.bot_command(), HELP_COMMAND]

        try:
            await self.bot.set_my_commands(commands)
            logger.info("✓ Registered %d bot commands in Telegram menu", len(commands))
        except Exception as e:
            logger.warning("⚠ Failed to register bot commands: %s", e)

    async def start(self):
        """Start the bot"""
        await self.setup()

        logger.info("Starting bot polling...")
        info = await self.bot.get_me()
        logger.info("Logged in as @%s (ID: %s)", info.username, info.id)

        # Set up signal handlers (Unix only)
        if sys.platform != "win32":
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, lambda: asyncio.create_task(self.shutdown()))

        # Start polling
        await self.dp.start_polling(
            self.bot,
            handle_signals=sys.platform == "win32"  # Let aiogram handle signals on Windows
        )

    async def shutdown(self):
        """Graceful shutdown"""
        if self._shutdown_event.is_set():
            return

        logger.info("Shutting down...")
        self._shutdown_event.set()

        # Stop polling
        if self.dp:
            try:
                await self.dp.stop_polling()
            except RuntimeError:
                # Polling never started
                pass

        if self.translator:
            await self.translator.close()

        # Close bot session
        if self.bot:
            await self.bot.session.close()

        logger.info("Shutdown complete")


async def main():
    """Main entry point"""
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        setup_logging(log_dir=None)
        logger.critical("Configuration error: %s", e)
        raise SystemExit(1)

    setup_logging(settings.log_level, settings.log_dir)
    app = Application(settings)

    try:
        await app.start()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
    finally:
        await app.shutdown()


def run():
    """Console script entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
