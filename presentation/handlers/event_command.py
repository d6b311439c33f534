"""
/event command schema and argument parsing.

Telegram commands carry a single free-text argument, so options are
pipe-separated:

    /event <name> | <description> | <YYYY-MM-DD> | <HH:MM> [| <language>] [| <channel>]

The trailing optional options are told apart by kind: a chat reference
(@username or numeric id) fills the channel option, anything else the
string option (the language).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from aiogram.types import BotCommand

from domain.entities.event_submission import EventSubmission
from domain.exceptions import ValidationError
from domain.value_objects.chat_reference import ChatReference
from domain.value_objects.language import SourceLanguage

OPTION_SEPARATOR = "|"
STRING_KIND = "string"
CHANNEL_KIND = "channel"


@dataclass(frozen=True)
class CommandOption:
    """Typed option of a bot command"""
    name: str
    description: str
    kind: str = STRING_KIND
    required: bool = True
    choices: Tuple[str, ...] = ()

    def help_line(self) -> str:
        line = f"{self.name}: {self.description}"
        if self.choices:
            line += f" ({', '.join(self.choices)})"
        if not self.required:
            line += " [optional]"
        return line


@dataclass(frozen=True)
class CommandSchema:
    """Bot command declaration: the single source for registration, help and parsing"""
    name: str
    description: str
    options: Tuple[CommandOption, ...]

    @property
    def required_options(self) -> List[CommandOption]:
        return [o for o in self.options if o.required]

    @property
    def optional_options(self) -> List[CommandOption]:
        return [o for o in self.options if not o.required]

    @property
    def usage(self) -> str:
        parts = [f"<{o.name}>" for o in self.required_options]
        parts += [f"[{o.name}]" for o in self.optional_options]
        return f"/{self.name} " + f" {OPTION_SEPARATOR} ".join(parts)

    def help_lines(self) -> List[str]:
        return [o.help_line() for o in self.options]

    def bot_command(self) -> BotCommand:
        return BotCommand(command=self.name, description=self.description)


EVENT_COMMAND = CommandSchema(
    name="event",
    description="Create a new alliance event",
    options=(
        CommandOption("name", "Event name"),
        CommandOption("description", "Event description"),
        CommandOption("date", "Event date (YYYY-MM-DD)"),
        CommandOption("time", "Event time in UTC (HH:MM)"),
        CommandOption(
            "language",
            "Language the event is written in",
            required=False,
            choices=tuple(language.display_name for language in SourceLanguage),
        ),
        CommandOption(
            "channel",
            "Channel to send the event notification to",
            kind=CHANNEL_KIND,
            required=False,
        ),
    ),
)

HELP_COMMAND = BotCommand(command="help", description="How to announce an event")


def split_event_args(args: Optional[str], schema: CommandSchema = EVENT_COMMAND) -> Dict[str, str]:
    """
    Split a raw /event argument string into named options.

    Missing required options are left out so validation can name them.

    Raises:
        ValidationError: If there are too many options, or an optional one
            repeats or matches no option kind
    """
    if not args or not args.strip():
        return {}

    parts = [part.strip() for part in args.split(OPTION_SEPARATOR)]
    required = schema.required_options
    if len(parts) > len(schema.options):
        raise ValidationError(
            f"Too many options: expected at most {len(schema.options)}, got {len(parts)}"
        )

    fields = {option.name: value for option, value in zip(required, parts)}

    for value in parts[len(required):]:
        if not value:
            continue
        key = _optional_slot(value, schema.optional_options).name
        if key in fields:
            raise ValidationError(f"Option given twice: {key}")
        fields[key] = value
    return fields


def _optional_slot(value: str, options: List[CommandOption]) -> CommandOption:
    """Match a trailing value to the optional option of its kind"""
    kind = CHANNEL_KIND if ChatReference.looks_like(value) else STRING_KIND
    for option in options:
        if option.kind == kind:
            return option
    raise ValidationError(f"Unexpected option: {value}")


def parse_event_command(
    args: Optional[str],
    default_language: SourceLanguage = SourceLanguage.FRENCH,
) -> EventSubmission:
    """
    Turn /event arguments into a validated submission.

    Raises:
        ValidationError: With a user-facing reason
    """
    fields = split_event_args(args)
    submission_fields = {
        option.name: fields[option.name]
        for option in EVENT_COMMAND.required_options
        if option.name in fields
    }
    return EventSubmission.create(
        **submission_fields,
        source_language=fields.get("language") or default_language,
        destination=fields.get("channel"),
    )
