"""
Audio Module

- SpeechService: Pronunciation clip cache, download and playback

Usage:
    from kanna.services.audio import SpeechService, resolve_player_command
"""

from kanna.services.audio.speech import SpeechService, resolve_player_command

__all__ = [
    "SpeechService",
    "resolve_player_command",
]
