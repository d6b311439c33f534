"""
Telegram message formatting utilities.

Renders announcements and command texts as Telegram HTML.
"""

import html
from typing import Iterable, List

from domain.entities.announcement import Announcement, AnnouncementField
from shared.constants import TELEGRAM_MESSAGE_CHAR_LIMIT


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _field_lines(field: AnnouncementField) -> List[str]:
    if field.inline:
        return [f"<b>{_escape(field.name)}</b>: {_escape(field.value)}"]
    lines = [f"<b>{_escape(field.name)}</b>"]
    lines.extend(_escape(line) for line in field.value.split("\n"))
    return lines


def announcement_lines(announcement: Announcement) -> List[str]:
    """
    Render an announcement as HTML lines.

    Consecutive inline fields are listed without blank lines between them,
    every other field is separated by a blank line. Text is never shortened.
    """
    lines = [f"<b>{_escape(announcement.title)}</b>"]
    lines.extend(_escape(line) for line in announcement.description.split("\n"))

    previous_inline = False
    for field in announcement.fields:
        if not (field.inline and previous_inline):
            lines.append("")
        lines.extend(_field_lines(field))
        previous_inline = field.inline
    return lines


def break_line(line: str, limit: int = TELEGRAM_MESSAGE_CHAR_LIMIT) -> List[str]:
    """
    Cut an HTML line into pieces of at most `limit` characters.

    A cut never falls inside an entity (&amp;) or a tag.
    """
    pieces = []
    while len(line) > limit:
        cut = limit
        opener = max(line.rfind("&", 0, cut), line.rfind("<", 0, cut))
        closer = max(line.rfind(";", 0, cut), line.rfind(">", 0, cut))
        if closer < opener > 0:
            cut = opener
        pieces.append(line[:cut])
        line = line[cut:]
    pieces.append(line)
    return pieces


def split_lines(lines: Iterable[str], limit: int = TELEGRAM_MESSAGE_CHAR_LIMIT) -> List[str]:
    """
    Pack lines into messages of at most `limit` characters.

    Messages break between lines so HTML tags are never split. A line
    longer than a whole message is cut with break_line and continues
    at the start of the next message.
    """
    messages = []
    current: List[str] = []
    size = 0

    def flush():
        nonlocal current, size
        if current:
            messages.append("\n".join(current).strip("\n"))
        current, size = [], 0

    for line in lines:
        pieces = break_line(line, limit)
        for index, piece in enumerate(pieces):
            added = len(piece) + (1 if current else 0)
            if current and size + added > limit:
                flush()
                added = len(piece)
            current.append(piece)
            size += added
            if index < len(pieces) - 1:
                flush()
    flush()
    return [m for m in messages if m]


def format_announcement(announcement: Announcement) -> List[str]:
    """
    Format an announcement as one or more Telegram HTML messages.

    Args:
        announcement: Built announcement.

    Returns:
        Message texts in display order; usually exactly one.
    """
    return split_lines(announcement_lines(announcement))


def format_event_usage(usage: str, options: Iterable[str]) -> str:
    """Format the /event usage help."""
    text = f"<b>Usage:</b>\n<code>{html.escape(usage)}</code>\n\n"
    text += "\n".join(f"• {html.escape(option)}" for option in options)
    return text


def format_validation_error(reason: str, usage: str) -> str:
    """Format a rejected /event invocation."""
    return f"❌ {html.escape(reason)}\n\n<code>{html.escape(usage)}</code>"
