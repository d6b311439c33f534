"""Unit tests for EventSubmission entity."""

import pytest

from domain.entities.event_submission import EventSubmission, MAX_NAME_LENGTH
from domain.exceptions import ValidationError
from domain.value_objects.chat_reference import ChatReference
from domain.value_objects.language import SourceLanguage


def make(**overrides):
    fields = {
        "name": "Raid Night",
        "description": "Bring potions",
        "date": "2025-03-01",
        "time": "18:00",
    }
    fields.update(overrides)
    return EventSubmission.create(**fields)


class TestEventSubmission:
    """Tests for EventSubmission validation."""

    def test_defaults(self):
        """Source language defaults to French, destination to none."""
        submission = make()

        assert submission.source_language is SourceLanguage.FRENCH
        assert submission.destination is None

    def test_utc_timestamp(self):
        """Date and time are joined into a zone-less UTC timestamp."""
        assert make().utc_timestamp == "2025-03-01 18:00"

    def test_text_is_stripped(self):
        submission = make(name="  Raid Night  ", description="\tBring potions\n")

        assert submission.name == "Raid Night"
        assert submission.description == "Bring potions"

    def test_single_digit_hour_normalised(self):
        assert make(time="9:05").time == "09:05"

    @pytest.mark.parametrize("missing", ["name", "description", "date", "time"])
    def test_missing_required_field(self, missing):
        """Missing fields are named in the error."""
        fields = {
            "name": "Raid Night",
            "description": "Bring potions",
            "date": "2025-03-01",
            "time": "18:00",
        }
        del fields[missing]

        with pytest.raises(ValidationError, match=f"Missing required field: {missing}"):
            EventSubmission.create(**fields)

    def test_empty_name_raises(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            make(name="   ")

    def test_name_too_long_raises(self):
        with pytest.raises(ValidationError, match="too long"):
            make(name="x" * (MAX_NAME_LENGTH + 1))

    @pytest.mark.parametrize("date", ["2025/03/01", "01-03-2025", "2025-02-30", "tomorrow"])
    def test_invalid_date_raises(self, date):
        with pytest.raises(ValidationError, match="YYYY-MM-DD"):
            make(date=date)

    @pytest.mark.parametrize("time", ["24:00", "18:60", "6pm", "18.00", "1800"])
    def test_invalid_time_raises(self, time):
        with pytest.raises(ValidationError, match="HH:MM"):
            make(time=time)

    @pytest.mark.parametrize("value,expected", [
        ("fr", SourceLanguage.FRENCH),
        ("EN", SourceLanguage.ENGLISH),
        ("Portuguese", SourceLanguage.PORTUGUESE),
        (SourceLanguage.ENGLISH, SourceLanguage.ENGLISH),
        (None, SourceLanguage.FRENCH),
    ])
    def test_source_language(self, value, expected):
        assert make(source_language=value).source_language is expected

    def test_unsupported_language_raises(self):
        with pytest.raises(ValidationError, match="Unsupported language"):
            make(source_language="Klingon")

    def test_destination_from_username(self):
        assert make(destination="@alliance_news").destination == ChatReference("@alliance_news")

    def test_destination_from_chat_id(self):
        assert make(destination="-1001234567890").destination == ChatReference(-1001234567890)

    def test_invalid_destination_raises(self):
        with pytest.raises(ValidationError, match="Invalid channel reference"):
            make(destination="#general")

    def test_is_frozen(self):
        submission = make()

        with pytest.raises(Exception):
            submission.name = "Other"
