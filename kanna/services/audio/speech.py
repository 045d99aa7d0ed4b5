"""
Speech Service - Pronunciation clips

Keeps one clip per word in the speech cache directory, downloading it the
first time the word's pronunciation URL is seen, and plays it through an
external player. Everything here is best effort: failures are logged and
never reach the lookup path.
"""

import asyncio
import logging
import shlex
import shutil
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from kanna.config.constants import (
    AUDIO_DOWNLOAD_CONCURRENCY,
    AUDIO_PLAYER_COMMANDS,
    SPEECH_FILE_EXTENSION,
)
from kanna.config.settings import Settings
from kanna.services.exceptions import AudioError
from kanna.services.tasks import BackgroundTaskGroup

logger = logging.getLogger(__name__)


def resolve_player_command(configured: Optional[str], platform: str = sys.platform) -> Optional[List[str]]:
    """
    Pick the player command for this machine.

    Args:
        configured: AUDIO_PLAYER setting, a shell-style command line
        platform: sys.platform value used for the built-in table

    Returns:
        Command argv without the clip path, or None when nothing can play
    """
    if configured:
        command = shlex.split(configured)
    else:
        command = AUDIO_PLAYER_COMMANDS.get(platform)
    if not command:
        return None
    if shutil.which(command[0]) is None:
        logger.info(f"Audio player {command[0]!r} not found, pronunciation disabled")
        return None
    return list(command)


class SpeechService:
    """
    Downloads and plays pronunciation clips.

    Clip downloads share the application's HTTP client and are limited to
    AUDIO_DOWNLOAD_CONCURRENCY at a time.
    """

    def __init__(
        self,
        settings: Settings,
        client: httpx.AsyncClient,
        tasks: BackgroundTaskGroup,
        player_command: Optional[List[str]] = None,
    ):
        self.speech_dir = Path(settings.SPEECH_DIR)
        self.enabled = settings.AUDIO_ENABLED
        self._client = client
        self._tasks = tasks
        self._player_command = player_command
        self._download_slots = asyncio.Semaphore(AUDIO_DOWNLOAD_CONCURRENCY)

    def speech_path(self, word: str) -> Path:
        """
        Local clip path for a word.

        Raises:
            AudioError: if the word cannot be used as a file name
        """
        if not word or word in (".", "..") or "/" in word or "\\" in word or "\x00" in word:
            raise AudioError(f"Word {word!r} cannot be used as a clip file name")
        return self.speech_dir / f"{word}{SPEECH_FILE_EXTENSION}"

    def schedule(self, word: str, url: str) -> Optional[asyncio.Task]:
        """Fetch (if needed) and play the clip for ``word`` without waiting."""
        if not self.enabled:
            return None
        return self._tasks.spawn(self.fetch_and_play(word, url), name=f"speech:{word}")

    async def fetch_and_play(self, word: str, url: str) -> None:
        """Ensure the clip exists locally, then play it. Never raises AudioError."""
        try:
            path = self.speech_path(word)
            if not path.is_file():
                await self.download(url, path)
            await self.play(path)
        except AudioError as e:
            logger.warning(f"Pronunciation for {word!r} unavailable: {e}")

    async def download(self, url: str, path: Path) -> None:
        """
        Download a clip to ``path``.

        The body is written to a ``.part`` file next to ``path`` and moved
        into place only when complete.

        Raises:
            AudioError: on HTTP or filesystem errors; the partial file is removed
        """
        partial = path.with_suffix(path.suffix + ".part")
        async with self._download_slots:
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                async with self._client.stream("GET", url) as response:
                    if response.status_code != httpx.codes.OK:
                        raise AudioError(f"Clip download returned status {response.status_code}")
                    with open(partial, "wb") as f:
                        async for chunk in response.aiter_bytes():
                            f.write(chunk)
                partial.replace(path)
            except (httpx.HTTPError, OSError, AudioError) as e:
                partial.unlink(missing_ok=True)
                if isinstance(e, AudioError):
                    raise
                raise AudioError(f"Clip download from {url} failed: {e}") from e

        logger.debug(f"Downloaded pronunciation clip to {path}")

    async def play(self, path: Path) -> None:
        """
        Play a clip and wait for the player to exit.

        No-op when no player is configured for this platform.

        Raises:
            AudioError: if the clip is missing or the player cannot run
        """
        if not self._player_command:
            return
        if not path.is_file():
            raise AudioError(f"Clip {path} does not exist")

        try:
            process = await asyncio.create_subprocess_exec(
                *self._player_command,
                str(path),
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
        except OSError as e:
            raise AudioError(f"Could not start audio player: {e}") from e

        returncode = await process.wait()
        if returncode != 0:
            raise AudioError(f"Audio player exited with status {returncode}")
