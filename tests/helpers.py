import json
from typing import Dict, List, Optional

from kanna.services.exceptions import ProviderError


def youdao_payload(
    word: str,
    translation: Optional[List[str]] = None,
    us_phonetic: Optional[str] = "ˈtest",
    uk_phonetic: Optional[str] = None,
    explains: Optional[List[str]] = None,
    us_speech: Optional[str] = None,
) -> str:
    """Build a Youdao-style response body."""
    basic = {}
    if us_phonetic:
        basic["us-phonetic"] = us_phonetic
    if uk_phonetic:
        basic["uk-phonetic"] = uk_phonetic
    if explains:
        basic["explains"] = explains
    if us_speech:
        basic["us-speech"] = us_speech
    payload = {
        "query": word,
        "errorCode": 0,
        "translation": translation or [f"{word}-zh"],
    }
    if basic:
        payload["basic"] = basic
    return json.dumps(payload, ensure_ascii=False)


class FakeProvider:
    """In-memory translation provider that records every fetch."""

    def __init__(self, payloads: Optional[Dict[str, str]] = None, error: Optional[Exception] = None):
        self.payloads = payloads or {}
        self.error = error
        self.calls: List[str] = []

    async def fetch(self, word: str) -> str:
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return self.payloads.get(word) or youdao_payload(word)


class FailingProvider(FakeProvider):
    def __init__(self, status: int = 500):
        super().__init__(error=ProviderError(f"Translation request returned status {status}"))
