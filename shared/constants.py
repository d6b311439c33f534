"""
Application Constants

Central location for all magic numbers and constants.
"""

# === Telegram ===
TELEGRAM_MESSAGE_CHAR_LIMIT = 4096

# === Translation ===
TRANSLATION_TIMEOUT_SECONDS = 10.0
DEEPL_MAX_ERROR_BODY = 200  # chars of provider error body to log

# === Correlation ===
TELEGRAM_CORRELATION_PREFIX = "tg-"

# === User-facing texts ===
ACK_TEXT = "⏳ Creating event..."
SUCCESS_TEXT = "✅ Event created and notification sent with all translations!"
FAILURE_TEXT = "❌ Failed to create event. Please check your input and try again."
FORBIDDEN_TEXT = "❌ Only chat administrators can announce events there."
