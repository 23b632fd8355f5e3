"""LLM Translator - prompt construction and bounded retries shared by chat backends."""

import logging
from abc import abstractmethod
from typing import Optional, Union

from catalog_translator.core import (
    BackendTransportError,
    Language,
    NoTranslationReturnedError,
    TranslationError,
    UnknownTranslationError,
    language_code,
)
from catalog_translator.services.text_processing import truncate_removing_newlines
from catalog_translator.services.translation.translation_service import (
    TranslationService,
    TranslatorConfig,
)

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 40

SYSTEM_PROMPT = (
    "You are a helpful professional translator designated to translate text "
    "from English to the language with ISO 639-1 code: {code}\n"
    "If the input text contains argument placeholders (%arg, @arg1, %lld, etc), "
    "it's important they are preserved in the translated text.\n"
    "You should not output anything other than the translated text.\n"
    "Avoid using the same word more than once in a row.\n"
    "Avoid using the same character more than 3 times in a row.\n"
    "Trim extra spaces and the beginning and end of the translated text.\n"
    "Do not provide blank translations. Do not hallucinate. "
    "Do not provide translations that are not faithful to the original text.\n"
    "Put particular attention to languages that use different characters "
    "and symbols than English."
)

CONTEXT_DIRECTIVE = (
    "\nTake into consideration the following context when translating, "
    "but do not completely change the translation because of it: {comment}\n"
)


def build_system_prompt(
    target_language: Union[Language, str], comment: Optional[str] = None
) -> str:
    """Build the instruction segment sent ahead of the source text."""
    prompt = SYSTEM_PROMPT.format(code=language_code(target_language))
    if comment is not None:
        prompt += CONTEXT_DIRECTIVE.format(comment=comment)
    return prompt


class LLMTranslator(TranslationService):
    """
    Translation service backed by a chat-style language model.

    Subclasses perform the single network call in ``_complete``; this class
    owns the request wording and the retry loop.
    """

    BACKEND_NAME = "llm"

    # Most negative values the chat APIs accept, to discourage repetition.
    FREQUENCY_PENALTY = -2.0
    PRESENCE_PENALTY = -2.0

    def __init__(self, config: TranslatorConfig):
        self.config = config
        self.model = config.model_name
        self.retries = config.retries

    @abstractmethod
    def _complete(self, system_prompt: str, text: str) -> Optional[str]:
        """
        Send one request and return the first choice's content.

        Returns None when the response carries no choice or no content.
        Any client failure is raised as-is.
        """
        pass

    def translate(
        self,
        text: str,
        target_language: Union[Language, str],
        comment: Optional[str] = None,
    ) -> str:
        """
        Translate text, retrying up to ``config.retries`` attempts in total.

        At least one attempt is always made. Every backend failure is wrapped
        in BackendTransportError and retried; only the most recent failure is
        raised once attempts run out.
        """
        if not text:
            return text

        system_prompt = build_system_prompt(target_language, comment)
        code = language_code(target_language)
        preview = truncate_removing_newlines(text, PREVIEW_LENGTH)

        last_error: Optional[TranslationError] = None
        attempt = 0
        while True:
            attempt += 1
            logger.debug(
                "%s translate attempt %d/%d to %s: %r",
                self.BACKEND_NAME, attempt, self.retries, code, preview,
            )
            try:
                translated = self._complete(system_prompt, text)
            except Exception as e:
                last_error = BackendTransportError(e, backend=self.BACKEND_NAME)
                logger.warning(
                    "%s attempt %d/%d failed for %r: %s",
                    self.BACKEND_NAME, attempt, self.retries, preview, last_error,
                )
            else:
                if translated:
                    return translated
                last_error = NoTranslationReturnedError()
                logger.warning(
                    "%s attempt %d/%d returned no translation for %r",
                    self.BACKEND_NAME, attempt, self.retries, preview,
                )

            if attempt >= self.retries:
                break

        logger.error(
            "Giving up on %r after %d attempt(s) to %s", preview, attempt, code
        )
        raise last_error or UnknownTranslationError()
