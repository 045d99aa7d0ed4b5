"""
Schemas Package

Pydantic records and payload views passed between services.
"""

from kanna.schemas.word import WordRecord
from kanna.schemas.translation import TranslationPayload

__all__ = [
    "WordRecord",
    "TranslationPayload",
]
