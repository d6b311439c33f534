import re
from dataclasses import dataclass
from typing import Union

_USERNAME_RE = re.compile(r"^@[A-Za-z][A-Za-z0-9_]{3,31}$")
_CHAT_ID_RE = re.compile(r"^-?\d+$")


@dataclass(frozen=True)
class ChatReference:
    """Value object representing a destination chat (@username or numeric id)"""

    value: Union[int, str]

    def __post_init__(self):
        if isinstance(self.value, bool):
            raise ValueError("ChatReference must be a chat id or @username")
        if isinstance(self.value, int):
            if self.value == 0:
                raise ValueError("Chat id cannot be zero")
        elif not isinstance(self.value, str) or not _USERNAME_RE.match(self.value):
            raise ValueError(f"Invalid channel reference: {self.value!r}")

    @staticmethod
    def looks_like(value: str) -> bool:
        """Whether a raw command option has the shape of a chat reference"""
        value = value.strip()
        return bool(_USERNAME_RE.match(value) or _CHAT_ID_RE.match(value))

    @classmethod
    def from_int(cls, value: int) -> "ChatReference":
        """Create ChatReference from a chat id"""
        return cls(value)

    @classmethod
    def from_str(cls, value: str) -> "ChatReference":
        """Create ChatReference from "@channel" or "-100123..." """
        value = value.strip()
        if _CHAT_ID_RE.match(value):
            return cls(int(value))
        return cls(value)

    @property
    def chat_id(self) -> Union[int, str]:
        """Value accepted by Bot API chat_id parameters"""
        return self.value

    def __str__(self) -> str:
        return str(self.value)
