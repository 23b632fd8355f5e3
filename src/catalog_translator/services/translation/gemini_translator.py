"""Gemini Translator - implements translation via Google Gemini API."""

from typing import Optional

import google.genai as genai
from google.genai import types

from catalog_translator.services.translation.llm_translator import LLMTranslator
from catalog_translator.services.translation.translation_service import TranslatorConfig


class GeminiTranslator(LLMTranslator):
    """
    Translation service using Google Gemini API.

    Sends the same instructions as the OpenAI backend, as a system
    instruction, with the source text as the only content.
    """

    BACKEND_NAME = "gemini"

    def __init__(self, config: TranslatorConfig, client: Optional[genai.Client] = None):
        super().__init__(config)
        self.client = client or genai.Client(
            api_key=config.api_token,
            http_options=types.HttpOptions(timeout=config.timeout_seconds * 1000),
        )

    def build_config(self, system_prompt: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=system_prompt,
            frequency_penalty=self.FREQUENCY_PENALTY,
            presence_penalty=self.PRESENCE_PENALTY,
            response_mime_type="text/plain",
        )

    def _complete(self, system_prompt: str, text: str) -> Optional[str]:
        response = self.client.models.generate_content(
            model=self.model,
            contents=text,
            config=self.build_config(system_prompt),
        )
        if not response.candidates:
            return None
        content = response.candidates[0].content
        if content is None or not content.parts:
            return None
        return "".join(part.text for part in content.parts if part.text)
