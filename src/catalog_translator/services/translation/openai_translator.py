"""OpenAI Translator - implements translation via the OpenAI chat completions API."""

from typing import Optional

from openai import OpenAI

from catalog_translator.services.translation.llm_translator import LLMTranslator
from catalog_translator.services.translation.translation_service import TranslatorConfig


class OpenAITranslator(LLMTranslator):
    """
    Translation service using the OpenAI chat completions API.

    The client is created once and reused across calls. Its built-in retries
    are disabled so that ``config.retries`` alone bounds the attempts.
    """

    BACKEND_NAME = "openai"

    def __init__(self, config: TranslatorConfig, client: Optional[OpenAI] = None):
        super().__init__(config)
        self.client = client or OpenAI(
            api_key=config.api_token,
            timeout=float(config.timeout_seconds),
            max_retries=0,
        )

    def build_request(self, system_prompt: str, text: str) -> dict:
        """Keyword arguments for ``chat.completions.create``."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": text},
            ],
            "frequency_penalty": self.FREQUENCY_PENALTY,
            "presence_penalty": self.PRESENCE_PENALTY,
            "response_format": {"type": "text"},
        }

    def _complete(self, system_prompt: str, text: str) -> Optional[str]:
        response = self.client.chat.completions.create(
            **self.build_request(system_prompt, text)
        )
        if not response.choices:
            return None
        return response.choices[0].message.content
