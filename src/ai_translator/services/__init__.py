"""Services layer - configuration and external integrations."""

from ai_translator.services.settings_manager import SettingsManager

# Translation services
from ai_translator.services.translation import (
    ERROR_PREFIX,
    GeminiTranslationService,
    TranslationRequest,
    TranslationResult,
    TranslationService,
)

from ai_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "ERROR_PREFIX",
    "TranslationRequest",
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
    "TranslationWorker",
    "WorkerSignals",
]
