"""Factory for picking a translation backend by name."""

from enum import Enum
from typing import Type, Union

from catalog_translator.core import GeminiModel, OpenAIModel
from catalog_translator.services.translation.gemini_translator import GeminiTranslator
from catalog_translator.services.translation.openai_translator import OpenAITranslator
from catalog_translator.services.translation.translation_service import (
    TranslationService,
    TranslatorConfig,
)


class Backend(str, Enum):
    """Available translation backends."""

    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def model_enum(self) -> Type[Union[OpenAIModel, GeminiModel]]:
        """Enum of the models this backend supports."""
        if self is Backend.GEMINI:
            return GeminiModel
        return OpenAIModel

    @property
    def default_model(self) -> Union[OpenAIModel, GeminiModel]:
        return self.model_enum.default()


_TRANSLATORS = {
    Backend.OPENAI: OpenAITranslator,
    Backend.GEMINI: GeminiTranslator,
}


def create_translation_service(
    backend: Union[Backend, str], config: TranslatorConfig
) -> TranslationService:
    """
    Build the translator for a backend.

    Raises:
        ValueError: If the backend name is unknown.
    """
    try:
        backend = Backend(backend)
    except ValueError:
        raise ValueError(f"Unknown translation backend: {backend!r}") from None
    return _TRANSLATORS[backend](config)
