"""Translation Service - Request/result types and the abstract translator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ai_translator.core import AUTO_DETECT_NAME


ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class TranslationRequest:
    """One translation job, built fresh for each user action."""

    text: str
    source_language_name: str
    target_language_name: str

    @property
    def source_is_auto_detect(self) -> bool:
        return self.source_language_name == AUTO_DETECT_NAME


@dataclass(frozen=True)
class TranslationResult:
    """
    Result of a translation request.

    Exactly one of `text` (success) or `error` (failure) is meaningful.
    Use the `success` / `failure` constructors rather than inspecting text:
    a translation that happens to start with "Error:" is still a success.
    """

    text: str
    model: str
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str, model: str) -> "TranslationResult":
        return cls(text=text, model=model)

    @classmethod
    def failure(cls, message: str, model: str) -> "TranslationResult":
        return cls(text="", model=model, error=message)

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None

    @property
    def display_text(self) -> str:
        """Text for display: the translation, or the error with an "Error: " prefix."""
        if self.is_error:
            return f"{ERROR_PREFIX}{self.error}"
        return self.text


class TranslationService(ABC):
    """
    Abstract service for translating text between languages.

    Implementations (e.g., GeminiTranslationService) handle API calls and
    must report per-request failures through the returned result instead
    of raising.
    """

    @abstractmethod
    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request text.

        Args:
            request: Text plus source and target language display names.

        Returns:
            TranslationResult with text or error message.
        """
        pass

    def translate_text(
        self,
        text: str,
        source_language_name: str,
        target_language_name: str,
    ) -> str:
        """Translate and return a display string ("Error: ..." on failure)."""
        request = TranslationRequest(
            text=text,
            source_language_name=source_language_name,
            target_language_name=target_language_name,
        )
        return self.translate(request).display_text
