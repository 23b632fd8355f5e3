"""Domain layer - languages, model identifiers and the error taxonomy."""

from .errors import (
    BackendTransportError,
    NoTranslationReturnedError,
    TranslationError,
    UnknownTranslationError,
)
from .language import Language, language_code
from .models import GeminiModel, OpenAIModel

__all__ = [
    "Language",
    "language_code",
    "OpenAIModel",
    "GeminiModel",
    "TranslationError",
    "NoTranslationReturnedError",
    "BackendTransportError",
    "UnknownTranslationError",
]
