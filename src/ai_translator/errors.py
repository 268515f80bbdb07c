"""Exceptions raised during application startup and configuration."""


class TranslatorError(Exception):
    """Base class for errors raised by the translator application."""


class ConfigurationError(TranslatorError):
    """A setting is present but unusable."""


class MissingApiKeyError(ConfigurationError):
    """No Gemini API key is configured; the application cannot start."""

    def __init__(self, variable: str = "GEMINI_API_KEY"):
        super().__init__(f"{variable} environment variable is not set.")
        self.variable = variable
