"""Translation services - abstract interface and Gemini implementation."""

from ai_translator.services.translation.translation_service import (
    ERROR_PREFIX,
    TranslationRequest,
    TranslationResult,
    TranslationService,
)
from ai_translator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "ERROR_PREFIX",
    "TranslationRequest",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
]
