"""Translation services - abstract interface and LLM-backed implementations."""

from catalog_translator.services.translation.translation_service import TranslationService, TranslatorConfig
from catalog_translator.services.translation.llm_translator import LLMTranslator, build_system_prompt
from catalog_translator.services.translation.openai_translator import OpenAITranslator
from catalog_translator.services.translation.gemini_translator import GeminiTranslator
from catalog_translator.services.translation.factory import Backend, create_translation_service

__all__ = [
    "TranslationService",
    "TranslatorConfig",
    "LLMTranslator",
    "build_system_prompt",
    "OpenAITranslator",
    "GeminiTranslator",
    "Backend",
    "create_translation_service",
]
