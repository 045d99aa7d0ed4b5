"""
Logging setup.

All modules log through ``logging.getLogger(__name__)``; this module only
decides where records end up. Rendered lookups go to the output sink, never
to the log.
"""
import logging
import sys

from kanna.config.settings import Settings

LOG_FORMAT = "%(asctime)s - [kanna] %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Send log records to the log file, and to stderr in debug mode."""
    handlers: list[logging.Handler] = []

    settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))

    if settings.DEBUG:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
