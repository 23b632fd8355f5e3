"""Unit tests for create_translation_service."""

from unittest.mock import patch

import pytest

from catalog_translator.core import GeminiModel, OpenAIModel
from catalog_translator.services import (
    Backend,
    GeminiTranslator,
    OpenAITranslator,
    TranslationService,
    TranslatorConfig,
    create_translation_service,
)


@pytest.fixture
def config():
    return TranslatorConfig(api_token="key", model="model", timeout_seconds=10, retries=2)


def test_creates_openai_translator(config):
    with patch("catalog_translator.services.translation.openai_translator.OpenAI"):
        service = create_translation_service("openai", config)

    assert isinstance(service, OpenAITranslator)
    assert isinstance(service, TranslationService)
    assert service.retries == 2


def test_creates_gemini_translator(config):
    with patch("catalog_translator.services.translation.gemini_translator.genai.Client"):
        service = create_translation_service(Backend.GEMINI, config)

    assert isinstance(service, GeminiTranslator)


def test_unknown_backend_raises(config):
    with pytest.raises(ValueError, match="Unknown translation backend"):
        create_translation_service("deepl", config)


def test_default_models():
    assert Backend.OPENAI.default_model is OpenAIModel.GPT_4O
    assert Backend.GEMINI.default_model is GeminiModel.GEMINI_2_0_FLASH
