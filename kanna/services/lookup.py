"""
Lookup Orchestrator

Resolves a word with cache-aside semantics:

1. Read the word cache (joined with the English gloss table)
2. Hit  -> count the appearance in the background, return the cached record
3. Miss -> ask the provider, attach the English gloss, backfill the cache

A cache that cannot be read counts as a miss.

The cache is not the source of truth: a provider result always reaches the
caller, even when writing it back fails.
"""

import logging
from typing import List, Optional

from kanna.schemas.word import WordRecord
from kanna.services.core.repositories import WordRepository
from kanna.services.exceptions import PersistenceError
from kanna.services.protocols import TranslationProviderProtocol
from kanna.services.tasks import BackgroundTaskGroup

logger = logging.getLogger(__name__)


class LookupOrchestrator:
    """Cache-aside word lookup over the repository and the provider."""

    def __init__(
        self,
        repository: WordRepository,
        provider: TranslationProviderProtocol,
        tasks: BackgroundTaskGroup,
        list_order: str = "recent",
    ):
        self.repository = repository
        self.provider = provider
        self.tasks = tasks
        self.list_order = list_order

    async def query_word(self, word: str) -> WordRecord:
        """
        Resolve one word.

        Args:
            word: Non-empty lookup key

        Returns:
            The cached record on a hit, otherwise the freshly fetched one

        Raises:
            ProviderError: on a cache miss when the provider lookup fails
        """
        try:
            cached = await self.repository.get_word(word)
        except PersistenceError as e:
            logger.warning(f"Cache read failed, treating {word!r} as a miss: {e}")
            cached = None

        if cached is not None:
            self.tasks.spawn(self._record_appearance(cached), name=f"touch:{cached.word}")
            return cached

        translations = await self.provider.fetch(word)

        english = await self.repository.get_english_definition(word)
        record = WordRecord(word=word, translations=translations, english_explanation=english)

        try:
            record = await self.repository.add_word(record)
        except PersistenceError as e:
            logger.error(f"Backfill failed, returning uncached result for {word!r}: {e}")

        return record

    async def _record_appearance(self, record: WordRecord) -> None:
        try:
            await self.repository.touch_word(record.id)
        except PersistenceError as e:
            logger.error(f"Appearance count for {record.word!r} not updated: {e}")

    async def list_words(self, limit: int, order: Optional[str] = None) -> List[WordRecord]:
        """List up to ``limit`` cached words in the configured order."""
        return await self.repository.list_words(limit, order or self.list_order)
