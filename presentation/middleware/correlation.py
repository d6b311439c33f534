"""
Correlation ID Middleware for aiogram.

Assigns a unique correlation_id to every incoming Telegram update and
stores it in contextvars for the duration of the handler call.
"""

from typing import Callable, Awaitable, Any, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from shared.constants import TELEGRAM_CORRELATION_PREFIX
from shared.logging.correlation import (
    generate_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


class CorrelationIdMiddleware(BaseMiddleware):
    """
    Assigns a correlation_id to each incoming update.

    Format: tg-{8hex}. The ID is picked up by the JSON log formatter
    and is also passed to handlers as `correlation_id`.
    """

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        cid = generate_correlation_id(TELEGRAM_CORRELATION_PREFIX)
        token = set_correlation_id(cid)
        data["correlation_id"] = cid
        try:
            return await handler(event, data)
        finally:
            reset_correlation_id(token)
