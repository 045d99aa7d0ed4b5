"""
Translation Provider Module

- YoudaoClient: One HTTP lookup per uncached word
- create_http_client: Pooled httpx client shared with the audio downloader

Usage:
    from kanna.services.translation import YoudaoClient, create_http_client
"""

from kanna.services.translation.youdao import YoudaoClient, create_http_client

__all__ = [
    "YoudaoClient",
    "create_http_client",
]
