"""Settings Manager - Handles API key and model configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ai_translator.errors import ConfigurationError, MissingApiKeyError


logger = logging.getLogger(__name__)

API_KEY_VARIABLES = ("GEMINI_API_KEY", "API_KEY")
DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.3


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values come from the process environment, with a .env file in the
    project root filling in anything not already set.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the repository root.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        self._project_root = project_root
        self._env_path = project_root / ".env"
        load_dotenv(dotenv_path=self._env_path)

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for variable in API_KEY_VARIABLES:
            key = os.getenv(variable)
            if key and key.strip():
                return key.strip()
        return None

    def require_gemini_api_key(self) -> str:
        """
        Return the API key or fail application startup.

        Raises:
            MissingApiKeyError: If no key is configured.
        """
        key = self.get_gemini_api_key()
        if key is None:
            raise MissingApiKeyError(API_KEY_VARIABLES[0])
        return key

    def get_model_name(self) -> str:
        """Get the Gemini model identifier."""
        model = os.getenv("GEMINI_MODEL", "").strip()
        return model or DEFAULT_MODEL_NAME

    def get_temperature(self) -> float:
        """
        Get the sampling temperature.

        Raises:
            ConfigurationError: If GEMINI_TEMPERATURE is not a number.
        """
        raw = os.getenv("GEMINI_TEMPERATURE", "").strip()
        if not raw:
            return DEFAULT_TEMPERATURE
        try:
            return float(raw)
        except ValueError as e:
            raise ConfigurationError(f"GEMINI_TEMPERATURE must be a number, got {raw!r}") from e

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        logger.debug("Reloading settings from %s", self._env_path)
        load_dotenv(dotenv_path=self._env_path, override=True)
