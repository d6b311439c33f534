"""
EventSubmission Entity

One /event invocation's validated input. Created per invocation and
discarded once the announcement is sent or the attempt fails.
"""

import re
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ValidationError
from domain.value_objects.chat_reference import ChatReference
from domain.value_objects.language import SourceLanguage

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


class EventSubmission(BaseModel):
    """Validated event details from a single command invocation"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    description: str
    date: str
    time: str
    source_language: SourceLanguage = Field(default_factory=SourceLanguage.default)
    destination: Optional[ChatReference] = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def validate_text(cls, v: Any, info: ValidationInfo) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty")
        v = v.strip()
        limit = MAX_NAME_LENGTH if info.field_name == "name" else MAX_DESCRIPTION_LENGTH
        if len(v) > limit:
            raise ValueError(f"{info.field_name} too long (max {limit} characters)")
        if "\x00" in v:
            raise ValueError("Null bytes detected")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("date cannot be empty")
        v = v.strip()
        try:
            parsed = datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError(f"date must be a calendar date in YYYY-MM-DD format, got {v!r}")
        return parsed.strftime("%Y-%m-%d")

    @field_validator("time", mode="before")
    @classmethod
    def validate_time(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("time cannot be empty")
        v = v.strip()
        match = _TIME_RE.match(v)
        if not match:
            raise ValueError(f"time must be HH:MM (24h, UTC), got {v!r}")
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            raise ValueError(f"time must be HH:MM (24h, UTC), got {v!r}")
        return f"{hours:02d}:{minutes:02d}"

    @field_validator("source_language", mode="before")
    @classmethod
    def validate_source_language(cls, v: Any) -> SourceLanguage:
        if v is None:
            return SourceLanguage.default()
        if isinstance(v, SourceLanguage):
            return v
        return SourceLanguage.parse(str(v))

    @field_validator("destination", mode="before")
    @classmethod
    def validate_destination(cls, v: Any) -> Optional[ChatReference]:
        if v is None or isinstance(v, ChatReference):
            return v
        if isinstance(v, int):
            return ChatReference.from_int(v)
        return ChatReference.from_str(str(v))

    @property
    def utc_timestamp(self) -> str:
        """Event start as a zone-less UTC date-time string"""
        return f"{self.date} {self.time}"

    @classmethod
    def create(cls, **fields: Any) -> "EventSubmission":
        """
        Build a submission from raw command options.

        Raises:
            ValidationError: With a message naming the offending field
        """
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            raise ValidationError(_describe(e)) from e


def _describe(error: PydanticValidationError) -> str:
    """First pydantic error as a short, user-facing sentence"""
    first = error.errors()[0]
    field_name = ".".join(str(part) for part in first.get("loc", ())) or "input"
    if first.get("type") == "missing":
        return f"Missing required field: {field_name}"
    message = first.get("msg", "invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return message
