"""
Database Models Package

Tables:
1. notebook_word - Looked-up words with cached provider payloads
2. english_to_english_dictionary - Reference glosses joined by word
"""

from .database import (
    Base,
    create_engine,
    create_session_factory,
    init_db,
    reset_db,
)

from .word import NotebookWord, EnglishDefinition

__all__ = [
    # Database utilities
    "Base",
    "create_engine",
    "create_session_factory",
    "init_db",
    "reset_db",

    # Models
    "NotebookWord",
    "EnglishDefinition",
]
