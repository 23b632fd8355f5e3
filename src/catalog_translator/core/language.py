"""Language entity - ISO 639-1 codes used as translation targets."""

from enum import Enum
from typing import Union


class Language(str, Enum):
    """
    Target languages for catalog translation.

    Values are ISO 639-1 codes, with the script and region variants that
    string catalogs use for Chinese and Portuguese.
    """

    ARABIC = "ar"
    CATALAN = "ca"
    CHINESE_HONG_KONG = "zh-HK"
    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    CROATIAN = "hr"
    CZECH = "cs"
    DANISH = "da"
    DUTCH = "nl"
    ENGLISH = "en"
    FINNISH = "fi"
    FRENCH = "fr"
    GERMAN = "de"
    GREEK = "el"
    HEBREW = "he"
    HINDI = "hi"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    JAPANESE = "ja"
    KOREAN = "ko"
    MALAY = "ms"
    NORWEGIAN_BOKMAL = "nb"
    POLISH = "pl"
    PORTUGUESE_BRAZIL = "pt-BR"
    PORTUGUESE_PORTUGAL = "pt-PT"
    ROMANIAN = "ro"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SPANISH = "es"
    SWEDISH = "sv"
    THAI = "th"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    VIETNAMESE = "vi"

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """
        Look up a language by its code.

        Raises:
            ValueError: If the code is not a supported language.
        """
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unsupported language code: {code!r}") from None


def language_code(language: Union[Language, str]) -> str:
    """Return the raw code for a Language member or a plain code string."""
    if isinstance(language, Language):
        return language.value
    return language
