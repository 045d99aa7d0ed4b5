"""
Command Dispatcher

Single point of serialization between front ends and the lookup path.
Producers submit lookup ("w") and list ("wl") commands; one worker task
executes them strictly one at a time in arrival order, so output for one
command is always complete before the next begins.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Optional

from kanna.config.constants import (
    COMMAND_QUEUE_MAXSIZE,
    DEFAULT_WORD_LIST_SIZE,
    GRACEFUL_SHUTDOWN_TIMEOUT_SEC,
    LIST_COMMAND,
    LOOKUP_COMMAND,
)
from kanna.services.exceptions import ProviderError
from kanna.services.formatter import WordFormatter
from kanna.services.lookup import LookupOrchestrator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Command:
    """A queued command: its kind key and raw string argument."""
    kind: str
    argument: str


def parse_list_size(argument: str) -> int:
    """Count for a list command; DEFAULT_WORD_LIST_SIZE if not a positive integer."""
    try:
        size = int(argument.strip())
    except (AttributeError, ValueError):
        return DEFAULT_WORD_LIST_SIZE
    return size if size > 0 else DEFAULT_WORD_LIST_SIZE


class CommandDispatcher:
    """
    Runs lookup and list commands one at a time.

    Handles:
    - Bounded command queue (producers wait when it is full)
    - Worker loop lifecycle (start / stop)
    - Routing each command to the orchestrator and formatter
    """

    def __init__(
        self,
        orchestrator: LookupOrchestrator,
        formatter: WordFormatter,
        maxsize: int = COMMAND_QUEUE_MAXSIZE,
    ):
        self._orchestrator = orchestrator
        self._formatter = formatter
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=maxsize)
        self._task: Optional[asyncio.Task] = None
        self._running = False
        self._handlers: Dict[str, Callable[[str], Awaitable[None]]] = {
            LOOKUP_COMMAND: self._handle_lookup,
            LIST_COMMAND: self._handle_list,
        }

    @property
    def running(self) -> bool:
        return self._running

    def register_flags(self) -> Dict[str, Callable[[str], Awaitable[None]]]:
        """Map each command key to the coroutine a front end calls to submit it."""
        return {kind: (lambda argument, kind=kind: self.submit(kind, argument)) for kind in self._handlers}

    async def submit(self, kind: str, argument: str) -> None:
        """
        Queue a command, waiting while the queue is full.

        Raises:
            ValueError: for an unknown command kind
        """
        if kind not in self._handlers:
            raise ValueError(f"Unknown command {kind!r}")
        await self._queue.put(Command(kind, argument))

    async def lookup(self, word: str) -> None:
        await self.submit(LOOKUP_COMMAND, word)

    async def list_words(self, count: str) -> None:
        await self.submit(LIST_COMMAND, count)

    async def start(self) -> None:
        """Start the worker loop."""
        if self._running:
            logger.warning("CommandDispatcher already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run(), name="command-dispatcher")
        logger.info("Command dispatcher started")

    async def join(self) -> None:
        """Wait until every command submitted so far has been executed."""
        await self._queue.join()

    async def stop(self, timeout: float = GRACEFUL_SHUTDOWN_TIMEOUT_SEC) -> None:
        """Finish queued commands (up to ``timeout`` seconds), then stop the loop."""
        if not self._running:
            return

        try:
            await asyncio.wait_for(self._queue.join(), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Dropping {self._queue.qsize()} pending command(s) on shutdown")

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("Command dispatcher stopped")

    async def _run(self) -> None:
        while True:
            command = await self._queue.get()
            try:
                await self._handlers[command.kind](command.argument)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception(f"Command {command.kind} {command.argument!r} failed")
            finally:
                self._queue.task_done()

    async def _handle_lookup(self, word: str) -> None:
        if not word:
            return

        try:
            record = await self._orchestrator.query_word(word)
        except ProviderError as e:
            logger.error(f"Lookup for {word!r} failed: {e}")
            self._formatter.write_not_found(word)
            return

        self._formatter.format_translations(record)

    async def _handle_list(self, argument: str) -> None:
        records = await self._orchestrator.list_words(parse_list_size(argument))
        self._formatter.format_word_list(records)
