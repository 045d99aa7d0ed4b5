"""
Core Infrastructure Module

- WordRepository: Parameterized queries against the word cache tables

Usage:
    from kanna.services.core import WordRepository
"""

from kanna.services.core.repositories import WordRepository

__all__ = [
    "WordRepository",
]
