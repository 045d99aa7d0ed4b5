"""
Application Context

Everything a lookup needs, constructed once at startup and passed
explicitly to the orchestrator and dispatcher.
"""

from dataclasses import dataclass
from typing import IO

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from kanna.config.settings import Settings
from kanna.services.audio.speech import SpeechService
from kanna.services.core.repositories import WordRepository
from kanna.services.dispatcher import CommandDispatcher
from kanna.services.formatter import WordFormatter
from kanna.services.lookup import LookupOrchestrator
from kanna.services.tasks import BackgroundTaskGroup
from kanna.services.translation.youdao import YoudaoClient


@dataclass
class AppContext:
    """Wired application services."""
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker
    http_client: httpx.AsyncClient
    tasks: BackgroundTaskGroup
    repository: WordRepository
    provider: YoudaoClient
    speech: SpeechService
    orchestrator: LookupOrchestrator
    formatter: WordFormatter
    dispatcher: CommandDispatcher

    @classmethod
    def build(
        cls,
        settings: Settings,
        engine: AsyncEngine,
        session_factory: async_sessionmaker,
        http_client: httpx.AsyncClient,
        writer: IO[str],
        player_command=None,
    ) -> "AppContext":
        tasks = BackgroundTaskGroup()
        repository = WordRepository(session_factory)
        provider = YoudaoClient(settings, http_client)
        speech = SpeechService(settings, http_client, tasks, player_command=player_command)
        orchestrator = LookupOrchestrator(
            repository, provider, tasks, list_order=settings.WORD_LIST_ORDER
        )
        formatter = WordFormatter(writer, speech=speech)
        dispatcher = CommandDispatcher(orchestrator, formatter)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            http_client=http_client,
            tasks=tasks,
            repository=repository,
            provider=provider,
            speech=speech,
            orchestrator=orchestrator,
            formatter=formatter,
            dispatcher=dispatcher,
        )
