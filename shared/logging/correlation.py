"""
Correlation ID context for update tracing.

Uses contextvars to propagate correlation_id across the async call chain.
Every incoming Telegram update gets a unique ID that appears in all log
lines produced while its /event command is processed, including the
translation calls made on its behalf.
"""

import uuid
from contextvars import ContextVar, Token
from typing import Optional

# Context variable, automatically propagated through asyncio tasks
_correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation_id (or None if not set)."""
    return _correlation_id_var.get()


def set_correlation_id(cid: Optional[str]) -> Token:
    """Set correlation_id for the current async context."""
    return _correlation_id_var.set(cid)


def reset_correlation_id(token: Token) -> None:
    """Restore the correlation_id that was active before set_correlation_id."""
    _correlation_id_var.reset(token)


def generate_correlation_id(prefix: str = "") -> str:
    """
    Generate a new correlation_id.

    Format: {prefix}{short_uuid}
    Example: tg-a1b2c3d4
    """
    short = uuid.uuid4().hex[:8]
    return f"{prefix}{short}" if prefix else short
