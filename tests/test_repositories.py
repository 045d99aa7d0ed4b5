"""
Tests for the word cache repository
"""
from datetime import datetime

import pytest

from kanna.models import EnglishDefinition, NotebookWord, reset_db
from kanna.schemas.word import WordRecord
from kanna.services.exceptions import PersistenceError
from tests.helpers import youdao_payload

pytestmark = pytest.mark.asyncio


async def _add_definition(session_factory, word: str, translation: str) -> None:
    async with session_factory() as db:
        db.add(EnglishDefinition(word=word, translation=translation))
        await db.commit()


async def _add_row(session_factory, word: str, appear_time: int, last_appear: datetime) -> None:
    async with session_factory() as db:
        db.add(NotebookWord(
            word=word,
            translations=youdao_payload(word),
            created_on=last_appear,
            appear_time=appear_time,
            last_appear=last_appear,
        ))
        await db.commit()


async def test_get_word_miss_returns_none(repository):
    assert await repository.get_word("absent") is None


async def test_add_word_assigns_id_and_initial_counters(repository):
    payload = youdao_payload("cat")

    stored = await repository.add_word(WordRecord(word="cat", translations=payload, appearance_count=7))

    assert stored.id is not None
    assert stored.appearance_count == 1
    assert stored.created_on is not None
    assert stored.created_on == stored.last_appeared_on

    fetched = await repository.get_word("cat")
    assert fetched.id == stored.id
    assert fetched.translations == payload
    assert fetched.appearance_count == 1


async def test_get_word_is_case_sensitive(repository):
    await repository.add_word(WordRecord(word="Polish", translations=youdao_payload("Polish")))

    assert await repository.get_word("polish") is None
    assert (await repository.get_word("Polish")).word == "Polish"


async def test_get_word_joins_english_definition(repository, session_factory):
    await _add_definition(session_factory, "cat", "a small domesticated carnivore")
    await repository.add_word(WordRecord(word="cat", translations=youdao_payload("cat")))

    record = await repository.get_word("cat")

    assert record.english_explanation == "a small domesticated carnivore"


async def test_get_english_definition_absent_is_empty(repository, session_factory):
    await _add_definition(session_factory, "dog", "a domesticated canid")

    assert await repository.get_english_definition("dog") == "a domesticated canid"
    assert await repository.get_english_definition("cat") == ""


async def test_add_word_duplicate_raises_persistence_error(repository):
    await repository.add_word(WordRecord(word="cat", translations=youdao_payload("cat")))

    with pytest.raises(PersistenceError):
        await repository.add_word(WordRecord(word="cat", translations=youdao_payload("cat")))


async def test_touch_word_increments_count_and_timestamp(repository):
    stored = await repository.add_word(WordRecord(word="cat", translations=youdao_payload("cat")))

    await repository.touch_word(stored.id)
    await repository.touch_word(stored.id)

    record = await repository.get_word("cat")
    assert record.appearance_count == 3
    assert record.last_appeared_on >= stored.last_appeared_on.replace(tzinfo=None)
    assert record.created_on == stored.created_on.replace(tzinfo=None)


async def test_writes_raise_persistence_error_when_store_unavailable(repository, engine):
    stored = await repository.add_word(WordRecord(word="cat", translations=youdao_payload("cat")))
    await reset_db(engine)

    with pytest.raises(PersistenceError):
        await repository.touch_word(stored.id)
    with pytest.raises(PersistenceError):
        await repository.add_word(WordRecord(word="dog", translations=youdao_payload("dog")))


async def test_reads_when_store_unavailable(repository, engine):
    await reset_db(engine)

    with pytest.raises(PersistenceError):
        await repository.get_word("cat")
    assert await repository.get_english_definition("cat") == ""


async def test_list_words_orders_by_recency(repository, session_factory):
    # a: count 3, b: count 1, c: count 2; b seen most recently, then c, then a
    await _add_row(session_factory, "a", 3, datetime(2026, 1, 1, 10, 0))
    await _add_row(session_factory, "b", 1, datetime(2026, 1, 1, 12, 0))
    await _add_row(session_factory, "c", 2, datetime(2026, 1, 1, 11, 0))

    records = await repository.list_words(2)

    assert [r.word for r in records] == ["b", "c"]


async def test_list_words_orders_by_frequency(repository, session_factory):
    await _add_row(session_factory, "a", 3, datetime(2026, 1, 1, 10, 0))
    await _add_row(session_factory, "b", 1, datetime(2026, 1, 1, 12, 0))
    await _add_row(session_factory, "c", 2, datetime(2026, 1, 1, 11, 0))

    records = await repository.list_words(2, order="frequent")

    assert [r.word for r in records] == ["a", "c"]
    assert [r.appearance_count for r in records] == [3, 2]


async def test_list_words_includes_definitions(repository, session_factory):
    await _add_row(session_factory, "a", 1, datetime(2026, 1, 1, 10, 0))
    await _add_definition(session_factory, "a", "the first letter")

    records = await repository.list_words(5)

    assert len(records) == 1
    assert records[0].english_explanation == "the first letter"


async def test_list_words_rejects_unknown_order(repository):
    with pytest.raises(ValueError):
        await repository.list_words(5, order="alphabetical")
