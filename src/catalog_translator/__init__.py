"""
Catalog Translator - LLM-backed translation for localization catalogs.

This package provides the translation core used when filling in a string
catalog:
- A backend-agnostic TranslationService contract
- OpenAI and Gemini chat translators with bounded retries
- .env driven configuration
"""

__version__ = "0.1.0"

# Make key components available at package level
from catalog_translator.core import Language, OpenAIModel, GeminiModel, TranslationError
from catalog_translator.services import (
    SettingsManager,
    TranslationService,
    TranslatorConfig,
    create_translation_service,
)

__all__ = [
    "Language",
    "OpenAIModel",
    "GeminiModel",
    "TranslationError",
    "SettingsManager",
    "TranslationService",
    "TranslatorConfig",
    "create_translation_service",
]
