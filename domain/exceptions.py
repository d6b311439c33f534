"""
Domain exceptions for event announcements.

Every per-invocation failure derives from EventBotError so the command
handler can catch the whole family at its boundary.
"""

from typing import Optional


class EventBotError(Exception):
    """Base exception for event bot errors"""
    pass


class ValidationError(EventBotError):
    """Raised when a command field is missing or malformed.

    The message is safe to show to the invoker.
    """
    pass


class InvalidTimestamp(ValidationError):
    """Raised when a UTC timestamp cannot be parsed as a calendar date-time"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid UTC date/time: {value!r}")


class TranslationUnavailable(EventBotError):
    """Raised when the translation provider cannot translate a text"""

    def __init__(self, target_language: str, reason: Optional[str] = None):
        self.target_language = target_language
        self.reason = reason
        message = f"Translation to {target_language} unavailable"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class BuildFailed(EventBotError):
    """Raised when a required announcement build step fails"""
    pass


class DeliveryError(EventBotError):
    """Raised when the destination chat rejects the announcement"""

    def __init__(self, destination, reason: str):
        self.destination = destination
        self.reason = reason
        super().__init__(f"Cannot deliver announcement to {destination}: {reason}")
