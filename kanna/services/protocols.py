"""
Protocol definitions for lookup collaborators.

This module defines interfaces (Python Protocols) that allow:
- Swapping the translation provider (Youdao -> another dictionary API)
- Testing the orchestrator without network access
- Clear contracts between the lookup path and its collaborators

Usage:
    from kanna.services.protocols import TranslationProviderProtocol

    async def lookup(provider: TranslationProviderProtocol, word: str) -> str:
        return await provider.fetch(word)
"""

from typing import Optional, Protocol


class TranslationProviderProtocol(Protocol):
    """
    Interface for translation providers.

    Implementations return the provider's response body verbatim; the
    payload is only interpreted when it is rendered.
    """

    async def fetch(self, word: str) -> str:
        """
        Fetch translation data for one word.

        Args:
            word: Non-empty word to look up

        Returns:
            Raw payload text

        Raises:
            ProviderError: if the lookup fails for any reason
        """
        ...


class PronunciationProtocol(Protocol):
    """
    Interface for pronunciation playback.

    Implementations must not block the caller and must not raise.
    """

    def schedule(self, word: str, url: str) -> Optional[object]:
        """Fetch and play the clip for ``word`` in the background."""
        ...
