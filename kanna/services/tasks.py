"""
Background Task Group

Tracks fire-and-forget work (cache-hit counter updates, pronunciation
downloads) so it can be awaited or cancelled when the process shuts down
instead of leaking.
"""

import asyncio
import logging
from typing import Coroutine, Optional, Set

from kanna.config.constants import GRACEFUL_SHUTDOWN_TIMEOUT_SEC

logger = logging.getLogger(__name__)


class BackgroundTaskGroup:
    """Set of detached tasks scoped to the application lifetime."""

    def __init__(self):
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    def __len__(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Coroutine, name: Optional[str] = None) -> Optional[asyncio.Task]:
        """
        Start ``coro`` detached from the caller.

        Returns:
            The task, or None if the group is already shut down
        """
        if self._closed:
            logger.warning(f"Task group closed, dropping background task {name}")
            coro.close()
            return None

        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                f"Background task {task.get_name()} failed: {exc}",
                exc_info=(type(exc), exc, exc.__traceback__),
            )

    async def drain(self) -> None:
        """Wait until every task spawned so far (and any they spawn) is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def shutdown(self, wait: bool = True, timeout: float = GRACEFUL_SHUTDOWN_TIMEOUT_SEC) -> None:
        """
        Stop accepting tasks, then await or cancel the ones in flight.

        Args:
            wait: Give running tasks up to ``timeout`` seconds before cancelling
            timeout: Seconds to wait when ``wait`` is True
        """
        self._closed = True
        if not self._tasks:
            return

        if wait:
            try:
                await asyncio.wait_for(self.drain(), timeout=timeout)
                return
            except asyncio.TimeoutError:
                logger.warning(f"{len(self._tasks)} background task(s) still running, cancelling")

        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
