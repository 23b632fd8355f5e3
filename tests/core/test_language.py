"""Unit tests for Language and model identifiers."""

import pytest

from catalog_translator.core import GeminiModel, Language, OpenAIModel, language_code


class TestLanguage:
    """Tests for the Language enum."""

    def test_from_code_returns_member(self):
        assert Language.from_code("fr") is Language.FRENCH

    def test_from_code_supports_script_variants(self):
        assert Language.from_code("zh-Hans") is Language.CHINESE_SIMPLIFIED

    def test_from_code_rejects_unknown_code(self):
        with pytest.raises(ValueError, match="Unsupported language code"):
            Language.from_code("xx")

    def test_members_compare_equal_to_their_code(self):
        """Language is str-backed so catalog keys can be compared directly."""
        assert Language.GERMAN == "de"


class TestLanguageCode:
    """Tests for language_code()."""

    def test_member_yields_raw_code(self):
        assert language_code(Language.JAPANESE) == "ja"

    def test_plain_string_passes_through(self):
        assert language_code("fr") == "fr"


class TestModels:
    def test_openai_default(self):
        assert OpenAIModel.default() is OpenAIModel.GPT_4O
        assert OpenAIModel.default().value == "gpt-4o"

    def test_gemini_default(self):
        assert GeminiModel.default().value == "gemini-2.0-flash"
