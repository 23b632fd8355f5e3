"""Model identifiers supported by each translation backend."""

from enum import Enum


class OpenAIModel(str, Enum):
    """OpenAI chat models usable for translation."""

    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4_TURBO = "gpt-4-turbo"
    GPT_4 = "gpt-4"
    GPT_3_5_TURBO = "gpt-3.5-turbo"

    @classmethod
    def default(cls) -> "OpenAIModel":
        return cls.GPT_4O


class GeminiModel(str, Enum):
    """Gemini models usable for translation."""

    GEMINI_2_0_FLASH = "gemini-2.0-flash"
    GEMINI_1_5_PRO = "gemini-1.5-pro"
    GEMINI_1_5_FLASH = "gemini-1.5-flash"

    @classmethod
    def default(cls) -> "GeminiModel":
        return cls.GEMINI_2_0_FLASH
