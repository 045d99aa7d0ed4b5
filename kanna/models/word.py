"""
Word Models - Vocabulary Cache

Purpose: Persist every word the user has looked up together with the raw
provider payload, and hold the English-English reference dictionary.

Key Fields:
- `translations`: Provider response body stored verbatim; only the formatter parses it
- `appear_time`: Starts at 1 on insert, incremented on every cache hit
- `last_appear`: Time of the most recent hit, drives the "recent words" list
"""
from sqlalchemy import Column, DateTime, Integer, String, Text
from datetime import datetime, UTC

from kanna.config.constants import WORD_MAX_LENGTH
from .database import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in DateTime columns without time zone."""
    return datetime.now(UTC).replace(tzinfo=None)


class NotebookWord(Base):
    """A looked-up word and its cached translation payload"""
    __tablename__ = "notebook_word"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Natural key, case-sensitive as entered
    word = Column(String(WORD_MAX_LENGTH), unique=True, nullable=False, index=True)
    translations = Column(Text, nullable=False)

    created_on = Column(DateTime, default=utcnow, nullable=False)
    appear_time = Column(Integer, default=1, nullable=False)
    last_appear = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<NotebookWord(id={self.id}, word={self.word!r}, appear_time={self.appear_time})>"


class EnglishDefinition(Base):
    """English-English reference entry, joined to words by exact match"""
    __tablename__ = "english_to_english_dictionary"

    id = Column(Integer, primary_key=True, autoincrement=True)
    word = Column(String(WORD_MAX_LENGTH), nullable=False, index=True)
    translation = Column(Text, nullable=False)
