"""
Announcement Service

Builds an event announcement from one submission: the time-zone table
plus every language's name and description.
"""

import logging
from typing import Dict, Sequence, Tuple

from domain.entities.announcement import Announcement, TranslationResult
from domain.entities.event_submission import EventSubmission
from domain.exceptions import BuildFailed, InvalidTimestamp, TranslationUnavailable
from domain.services.time_converter import convert
from domain.services.translation_service import ITranslationService
from domain.value_objects.language import LANGUAGES, LanguageEntry
from domain.value_objects.time_zone import TIME_ZONES, TimeZoneEntry

logger = logging.getLogger(__name__)

# Field titles
UTC_FIELD = "📅 Event Date & Time (UTC)"
NAMES_FIELD = "🌐 Event Name Translations"
DESCRIPTIONS_FIELD = "📝 Event Description Translations"


class AnnouncementService:
    """
    Application service for building event announcements.

    Performs no chat I/O: the only side effects are the translation
    provider calls, issued one language at a time in table order.
    """

    def __init__(
        self,
        translator: ITranslationService,
        languages: Sequence[LanguageEntry] = LANGUAGES,
        time_zones: Sequence[TimeZoneEntry] = TIME_ZONES,
    ):
        self.translator = translator
        self.languages = tuple(languages)
        self.time_zones = tuple(time_zones)

    async def build(self, submission: EventSubmission) -> Announcement:
        """
        Build the announcement for a validated submission.

        Raises:
            BuildFailed: If the event time cannot be converted
        """
        source = submission.source_language.entry
        logger.info(
            "Building announcement %r (%s, %s UTC)",
            submission.name, source.code, submission.utc_timestamp,
        )

        try:
            conversions = convert(submission.utc_timestamp, self.time_zones)
        except InvalidTimestamp as e:
            raise BuildFailed(str(e)) from e

        translations = await self.translate_all(submission)
        missing = [code for code, result in translations.items() if not result.available]
        if missing:
            logger.warning(
                "Announcement %r built without translations for: %s",
                submission.name, ", ".join(missing),
            )

        announcement = Announcement(
            title=f"🌍 Alliance Event: {submission.name}",
            description=f"Original ({source.display_name}): {submission.description}",
        )
        announcement.add_field(UTC_FIELD, submission.utc_timestamp)
        for conversion in conversions:
            announcement.add_field(conversion.zone_name, conversion.display(), inline=True)

        names, descriptions = self._language_listings(translations)
        announcement.add_field(NAMES_FIELD, names)
        announcement.add_field(DESCRIPTIONS_FIELD, descriptions)
        return announcement

    async def translate_all(self, submission: EventSubmission) -> Dict[str, TranslationResult]:
        """
        Translate name and description into every configured language.

        The source language gets the original text with no provider call.
        A language the provider fails on gets an explicit unavailable
        result; the remaining languages are still translated.
        """
        source = submission.source_language.entry
        results: Dict[str, TranslationResult] = {}

        for language in self.languages:
            if language.code == source.code:
                results[language.code] = TranslationResult.identity(
                    language.code, submission.name, submission.description
                )
                continue

            try:
                name, description = await self.translator.translate_batch(
                    [submission.name, submission.description], language, source
                )
            except TranslationUnavailable as e:
                logger.warning("Using placeholder for %s: %s", language.display_name, e)
                results[language.code] = TranslationResult.unavailable(language.code)
                continue

            results[language.code] = TranslationResult(language.code, name, description)

        return results

    def _language_listings(self, translations: Dict[str, TranslationResult]) -> Tuple[str, str]:
        name_lines = []
        description_lines = []
        for language in self.languages:
            result = translations.get(language.code)
            if result is None:
                continue
            name_lines.append(f"{language.display_name}: {result.translated_name}")
            description_lines.append(f"{language.display_name}: {result.translated_description}")
        return "\n".join(name_lines), "\n\n".join(description_lines)

