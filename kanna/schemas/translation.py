"""
Translation Payload View

The provider returns a JSON document whose shape is not guaranteed. Records
keep it as raw text; this view decodes it lazily when rendering. Each
accessor returns None when its field is missing or has an unexpected type,
so one odd field never hides the others.

Youdao layout:
    {
        "translation": ["..."],
        "basic": {
            "us-phonetic": "...", "uk-phonetic": "...",
            "explains": ["..."], "us-speech": "http://..."
        }
    }
"""
import json
from typing import Any, List, Optional

from kanna.services.exceptions import MalformedPayloadError


class TranslationPayload:
    """Loosely-typed accessors over a decoded provider payload."""

    def __init__(self, data: dict):
        self._data = data

    @classmethod
    def parse(cls, raw: str) -> "TranslationPayload":
        """
        Decode a raw payload.

        Raises:
            MalformedPayloadError: if ``raw`` is not a JSON object
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedPayloadError(f"Payload is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedPayloadError(
                f"Payload is a JSON {type(data).__name__}, expected an object"
            )
        return cls(data)

    def _basic(self) -> dict:
        basic = self._data.get("basic")
        return basic if isinstance(basic, dict) else {}

    @staticmethod
    def _string(value: Any) -> Optional[str]:
        return value if isinstance(value, str) and value else None

    @staticmethod
    def _string_list(value: Any) -> Optional[List[str]]:
        if not isinstance(value, list):
            return None
        items = [str(item) for item in value if item is not None]
        return items or None

    @property
    def translation(self) -> Optional[List[str]]:
        return self._string_list(self._data.get("translation"))

    @property
    def us_phonetic(self) -> Optional[str]:
        return self._string(self._basic().get("us-phonetic"))

    @property
    def uk_phonetic(self) -> Optional[str]:
        return self._string(self._basic().get("uk-phonetic"))

    @property
    def explains(self) -> Optional[List[str]]:
        return self._string_list(self._basic().get("explains"))

    @property
    def us_speech(self) -> Optional[str]:
        return self._string(self._basic().get("us-speech"))
