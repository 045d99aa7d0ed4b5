"""
Kanna Service Exceptions

Only ProviderError reaches the command layer. The others are raised by the
component that detects the failure and handled by its immediate caller.
"""


class KannaError(Exception):
    """Base exception for lookup errors"""
    pass


class ProviderError(KannaError):
    """Raised when the translation provider request fails (non-200 or network error)"""
    pass


class PersistenceError(KannaError):
    """Raised when a word cache write (insert or update) fails"""
    pass


class MalformedPayloadError(KannaError):
    """Raised when a cached translation payload cannot be decoded"""
    pass


class AudioError(KannaError):
    """Raised when a pronunciation clip cannot be downloaded or played"""
    pass
