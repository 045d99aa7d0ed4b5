"""
Repository Layer - Word cache queries.

This module is the only place that talks to the word tables. It runs
parameterized statements and converts rows to WordRecord; it never looks
inside the translation payload.

Usage:
    repository = WordRepository(session_factory)

    record = await repository.get_word("serendipity")
    # Returns: WordRecord or None on a cache miss
"""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from kanna.models.word import EnglishDefinition, NotebookWord, utcnow
from kanna.schemas.word import WordRecord
from kanna.services.exceptions import PersistenceError

logger = logging.getLogger(__name__)

LIST_ORDERS = ("recent", "frequent")


def _to_record(row: NotebookWord, english_explanation: Optional[str]) -> WordRecord:
    return WordRecord(
        id=row.id,
        word=row.word,
        translations=row.translations,
        english_explanation=english_explanation or "",
        created_on=row.created_on,
        appearance_count=row.appear_time,
        last_appeared_on=row.last_appear,
    )


class WordRepository:
    """
    Repository for word cache queries.

    Each operation opens its own session from the shared factory, so the
    repository can be used concurrently by the lookup path and detached
    update tasks.
    """

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def get_word(self, word: str) -> Optional[WordRecord]:
        """
        Get a cached word by exact match, with its English gloss.

        Args:
            word: The lookup key, case-sensitive

        Returns:
            WordRecord if cached, None otherwise

        Raises:
            PersistenceError: if the store cannot be read
        """
        stmt = (
            select(NotebookWord, EnglishDefinition.translation)
            .outerjoin(EnglishDefinition, EnglishDefinition.word == NotebookWord.word)
            .where(NotebookWord.word == word)
            .order_by(EnglishDefinition.id)
            .limit(1)
        )
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                row = result.first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read word {word!r}: {e}") from e

        if row is None:
            logger.debug(f"Cache MISS for {word!r}")
            return None

        logger.debug(f"Cache HIT for {word!r}")
        return _to_record(row[0], row[1])

    async def get_english_definition(self, word: str) -> str:
        """
        Get the English-English gloss for a word.

        Returns:
            The gloss, or an empty string when the reference table has none
            or cannot be read
        """
        stmt = (
            select(EnglishDefinition.translation)
            .where(EnglishDefinition.word == word)
            .order_by(EnglishDefinition.id)
            .limit(1)
        )
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                gloss = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.warning(f"English gloss for {word!r} unavailable: {e}")
            return ""
        return gloss or ""

    async def add_word(self, record: WordRecord) -> WordRecord:
        """
        Insert a freshly fetched word with count 1 and both timestamps now.

        Args:
            record: The record to persist; its id and counters are ignored

        Returns:
            The persisted record, with its store-assigned id

        Raises:
            PersistenceError: if the insert fails, including when the word
                is already cached
        """
        now = utcnow()
        row = NotebookWord(
            word=record.word,
            translations=record.translations,
            created_on=now,
            appear_time=1,
            last_appear=now,
        )
        try:
            async with self._session_factory() as db:
                db.add(row)
                await db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to insert word {record.word!r}: {e}") from e

        logger.info(f"Cached new word {record.word!r} (id={row.id})")
        return record.model_copy(update={
            "id": row.id,
            "created_on": now,
            "appearance_count": 1,
            "last_appeared_on": now,
        })

    async def touch_word(self, word_id: int) -> None:
        """
        Count one more appearance of a cached word.

        Raises:
            PersistenceError: if the update fails
        """
        stmt = (
            update(NotebookWord)
            .where(NotebookWord.id == word_id)
            .values(
                appear_time=NotebookWord.appear_time + 1,
                last_appear=utcnow(),
            )
        )
        try:
            async with self._session_factory() as db:
                await db.execute(stmt)
                await db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to update word id={word_id}: {e}") from e

    async def list_words(self, limit: int, order: str = "recent") -> List[WordRecord]:
        """
        List cached words.

        Args:
            limit: Maximum number of records
            order: "recent" - last appearance first;
                   "frequent" - highest appearance count first, ties by recency

        Returns:
            Up to ``limit`` records with their English glosses
        """
        if order not in LIST_ORDERS:
            raise ValueError(f"Unknown word list order: {order!r}")

        if order == "frequent":
            ordering = (
                NotebookWord.appear_time.desc(),
                NotebookWord.last_appear.desc(),
                NotebookWord.id.desc(),
            )
        else:
            ordering = (NotebookWord.last_appear.desc(), NotebookWord.id.desc())

        async with self._session_factory() as db:
            result = await db.execute(
                select(NotebookWord).order_by(*ordering).limit(limit)
            )
            rows = result.scalars().all()

            glosses = {}
            if rows:
                gloss_result = await db.execute(
                    select(EnglishDefinition.word, EnglishDefinition.translation)
                    .where(EnglishDefinition.word.in_([r.word for r in rows]))
                    .order_by(EnglishDefinition.id.desc())
                )
                # Descending id so the lowest id wins, matching get_word
                for word, gloss in gloss_result.all():
                    glosses[word] = gloss

        return [_to_record(r, glosses.get(r.word)) for r in rows]
