"""
Kanna - Application lifespan

Builds the application context and tears it down again:
- Project and speech cache directories
- Log file
- Database engine and tables
- Shared HTTP client
- Command dispatcher and background task group
"""
from contextlib import asynccontextmanager
import logging
import sys
from typing import AsyncIterator, IO, Optional

from kanna.config.logging_config import configure_logging
from kanna.config.settings import Settings, get_settings
from kanna.models.database import create_engine, create_session_factory, init_db
from kanna.services.audio.speech import resolve_player_command
from kanna.services.context import AppContext
from kanna.services.translation.youdao import create_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(
    settings: Optional[Settings] = None,
    writer: Optional[IO[str]] = None,
    *,
    setup_logging: bool = True,
    wait_for_background: bool = True,
) -> AsyncIterator[AppContext]:
    """
    Application lifespan manager.

    Yields a started AppContext. On exit, queued commands are finished and
    in-flight background work (counter updates, pronunciation) is awaited
    or, with ``wait_for_background=False``, cancelled.
    """
    # === STARTUP ===
    settings = settings or get_settings()
    settings.ensure_directories()
    if setup_logging:
        configure_logging(settings)
    logger.info("Starting Kanna...")

    if not settings.YOUDAO_KEY:
        logger.warning("YOUDAO_KEY is not set; uncached lookups will be rejected by the provider")

    engine = create_engine(settings)
    await init_db(engine)

    http_client = create_http_client()
    player_command = resolve_player_command(settings.AUDIO_PLAYER) if settings.AUDIO_ENABLED else None

    context = AppContext.build(
        settings,
        engine,
        create_session_factory(engine),
        http_client,
        writer or sys.stdout,
        player_command=player_command,
    )
    await context.dispatcher.start()

    try:
        yield context  # Application runs here
    finally:
        # === SHUTDOWN ===
        logger.info("Shutting down...")
        await context.dispatcher.stop()
        await context.tasks.shutdown(wait=wait_for_background)
        await http_client.aclose()
        await engine.dispose()
