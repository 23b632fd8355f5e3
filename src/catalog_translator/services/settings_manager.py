"""Settings Manager - Handles API keys and translator configuration."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from catalog_translator.core import GeminiModel, OpenAIModel
from catalog_translator.services.translation import Backend, TranslatorConfig

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_RETRIES = 1
DEFAULT_LOG_LEVEL = "INFO"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root, falling back to the
    process environment.
    """

    API_KEY_VARS = {
        Backend.OPENAI: "OPENAI_API_KEY",
        Backend.GEMINI: "GEMINI_API_KEY",
    }

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the current working directory.
        """
        if project_root is None:
            project_root = Path.cwd()

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

    def _get_int(self, name: str, default: int) -> int:
        value = self._get(name)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {value!r}") from None

    def get_api_key(self, backend: Union[Backend, str]) -> Optional[str]:
        """Get the API key for a backend from environment."""
        return self._get(self.API_KEY_VARS[Backend(backend)])

    def get_openai_api_key(self) -> Optional[str]:
        return self.get_api_key(Backend.OPENAI)

    def get_gemini_api_key(self) -> Optional[str]:
        return self.get_api_key(Backend.GEMINI)

    def get_backend(self) -> Backend:
        """Backend selected by TRANSLATOR_BACKEND, OpenAI when unset."""
        name = self._get("TRANSLATOR_BACKEND") or Backend.OPENAI.value
        try:
            return Backend(name.lower())
        except ValueError:
            raise ValueError(f"Unknown TRANSLATOR_BACKEND: {name!r}") from None

    def get_model(self, backend: Union[Backend, str]) -> Union[OpenAIModel, GeminiModel, str]:
        """
        Model selected by TRANSLATOR_MODEL, the backend default when unset.

        Names outside the backend's supported models are passed through
        with a warning.
        """
        backend = Backend(backend)
        name = self._get("TRANSLATOR_MODEL")
        if name is None:
            return backend.default_model
        try:
            return backend.model_enum(name)
        except ValueError:
            logger.warning(
                "TRANSLATOR_MODEL %r is not a supported %s model", name, backend.value
            )
            return name

    def get_log_level(self) -> str:
        return (self._get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    def translator_config(self, backend: Union[Backend, str, None] = None) -> TranslatorConfig:
        """
        Assemble the translator configuration for a backend.

        Raises:
            ValueError: If the API key is missing or a numeric setting is malformed.
        """
        backend = Backend(backend) if backend is not None else self.get_backend()
        api_key = self.get_api_key(backend)
        if api_key is None:
            raise ValueError(f"{self.API_KEY_VARS[backend]} is not set")

        return TranslatorConfig(
            api_token=api_key,
            model=self.get_model(backend),
            timeout_seconds=self._get_int("TRANSLATOR_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            retries=self._get_int("TRANSLATOR_RETRIES", DEFAULT_RETRIES),
        )

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
