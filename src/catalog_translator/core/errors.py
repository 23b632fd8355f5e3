"""Translation errors surfaced to callers once retries are exhausted."""

from typing import Optional


class TranslationError(Exception):
    """Base class for every failure raised by a translation service."""


class NoTranslationReturnedError(TranslationError):
    """The backend answered, but with empty or missing content."""

    def __init__(self, message: str = "No translation returned"):
        super().__init__(message)


class BackendTransportError(TranslationError):
    """
    A backend client call failed (network, auth, quota, timeout, protocol).

    The original exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, cause: BaseException, backend: Optional[str] = None):
        prefix = f"{backend} request failed" if backend else "Backend request failed"
        super().__init__(f"{prefix}: {type(cause).__name__}: {cause}")
        self.cause = cause
        self.backend = backend
        self.__cause__ = cause


class UnknownTranslationError(TranslationError):
    """Translation failed without any recorded cause."""

    def __init__(self, message: str = "Unknown translation failure"):
        super().__init__(message)
