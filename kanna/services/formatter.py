"""
Word Formatter

Renders lookup results as plain text for the output sink. The provider
payload is decoded here, at render time, through TranslationPayload; any
field it lacks is simply left out.
"""

import logging
from typing import IO, Iterable, List, Optional

from kanna.schemas.translation import TranslationPayload
from kanna.schemas.word import WordRecord
from kanna.services.exceptions import MalformedPayloadError
from kanna.services.protocols import PronunciationProtocol

logger = logging.getLogger(__name__)

LIST_SEPARATOR = "-" * 38


def _join(items: List[str]) -> str:
    return "; ".join(items)


class WordFormatter:
    """Renders WordRecords to a text writer."""

    def __init__(self, writer: IO[str], speech: Optional[PronunciationProtocol] = None):
        self.writer = writer
        self._speech = speech

    def _parse(self, record: WordRecord) -> Optional[TranslationPayload]:
        try:
            return TranslationPayload.parse(record.translations)
        except MalformedPayloadError as e:
            logger.warning(f"Cannot render payload for {record.word!r}: {e}")
            return None

    def render_translations(self, record: WordRecord) -> str:
        """Render one lookup result, phonetics included."""
        return self._render_translations(record, self._parse(record))

    def _render_translations(self, record: WordRecord, payload: Optional[TranslationPayload]) -> str:
        lines = [f"----  {record.word}  ----"]
        if payload is None:
            lines.append("(translation payload could not be parsed)")
            return "\n".join(lines) + "\n"

        if payload.translation:
            lines.append(f"Translation: {_join(payload.translation)}")
        if record.english_explanation:
            lines.append(f"English: {record.english_explanation}")
        if payload.us_phonetic:
            lines.append(f"US phonetic: [{payload.us_phonetic}]")
        if payload.uk_phonetic:
            lines.append(f"UK phonetic: [{payload.uk_phonetic}]")
        if payload.explains:
            lines.append(f"Explains: {_join(payload.explains)}")
        return "\n".join(lines) + "\n"

    def render_list_item(self, index: int, record: WordRecord) -> str:
        """Render one numbered word list entry; no phonetics."""
        payload = self._parse(record)
        if payload is None:
            lines = [f"{index} ---- {record.word} ----", "(translation payload could not be parsed)"]
        else:
            header = f"{index} ---- {record.word}"
            if payload.translation:
                header += f" -- {payload.translation[0]}"
            lines = [header + " ----"]
            if record.english_explanation:
                lines.append(f"English: {record.english_explanation}")
            if payload.explains:
                lines.append(f"Explains: {_join(payload.explains)}")
        lines.append(LIST_SEPARATOR)
        return "\n".join(lines) + "\n"

    def render_word_list(self, records: Iterable[WordRecord]) -> str:
        """Render a word list numbered from 1 in the given order."""
        return "".join(
            self.render_list_item(index, record)
            for index, record in enumerate(records, start=1)
        )

    def format_translations(self, record: WordRecord) -> None:
        """Write a lookup result and start its pronunciation in the background."""
        payload = self._parse(record)
        self.writer.write(self._render_translations(record, payload))
        self.writer.flush()

        if self._speech is None:
            return
        url = payload.us_speech if payload else None
        if url:
            self._speech.schedule(record.word, url)

    def format_word_list(self, records: List[WordRecord]) -> None:
        if not records:
            self.writer.write("No words looked up yet.\n")
        else:
            self.writer.write(self.render_word_list(records))
        self.writer.flush()

    def write_not_found(self, word: str) -> None:
        self.writer.write(f"No translation found for {word!r}.\n")
        self.writer.flush()
