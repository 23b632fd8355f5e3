"""Translation Service - backend-agnostic contract for translating catalog strings."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from catalog_translator.core import GeminiModel, Language, OpenAIModel


@dataclass(frozen=True)
class TranslatorConfig:
    """Settings owned by a single translator instance."""

    api_token: str
    model: Union[OpenAIModel, GeminiModel, str]
    timeout_seconds: int = 60
    retries: int = 1

    def __post_init__(self):
        if not self.api_token:
            raise ValueError("API token must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout_seconds}")
        if self.retries < 1:
            raise ValueError(f"Retries must be at least 1, got {self.retries}")

    @property
    def model_name(self) -> str:
        """The model identifier as sent to the backend."""
        if isinstance(self.model, (OpenAIModel, GeminiModel)):
            return self.model.value
        return self.model

    def __repr__(self) -> str:
        return (
            f"TranslatorConfig(api_token='***', model={self.model_name!r}, "
            f"timeout_seconds={self.timeout_seconds}, retries={self.retries})"
        )


class TranslationService(ABC):
    """
    Abstract service for translating English catalog strings.

    Implementations (e.g., OpenAITranslator) handle the backend calls.
    """

    @abstractmethod
    def translate(
        self,
        text: str,
        target_language: Union[Language, str],
        comment: Optional[str] = None,
    ) -> str:
        """
        Translate English text into the target language.

        Args:
            text: Source text. Empty text is returned as-is.
            target_language: Language (or ISO 639-1 code) to translate into.
            comment: Optional context from the catalog entry.

        Returns:
            The translated text, never empty for non-empty input.

        Raises:
            TranslationError: If no translation could be obtained.
        """
        pass
