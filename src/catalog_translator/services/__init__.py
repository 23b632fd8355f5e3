"""Services layer - translation backends and configuration."""

# Text processing services
from catalog_translator.services.text_processing import truncate_removing_newlines

# Translation services
from catalog_translator.services.translation import (
    Backend,
    GeminiTranslator,
    LLMTranslator,
    OpenAITranslator,
    TranslationService,
    TranslatorConfig,
    build_system_prompt,
    create_translation_service,
)

from catalog_translator.services.settings_manager import SettingsManager

__all__ = [
    "truncate_removing_newlines",
    "Backend",
    "TranslationService",
    "TranslatorConfig",
    "LLMTranslator",
    "OpenAITranslator",
    "GeminiTranslator",
    "build_system_prompt",
    "create_translation_service",
    "SettingsManager",
]
