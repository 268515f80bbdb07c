"""Main entry point for the translator application."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from ai_translator.coordinators import TranslatorCoordinator
from ai_translator.errors import ConfigurationError
from ai_translator.services import GeminiTranslationService, SettingsManager
from ai_translator.ui import MainWindow


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_translation_service(settings: SettingsManager) -> GeminiTranslationService:
    """
    Initialize the Gemini service from settings.

    Raises:
        ConfigurationError: If the API key is missing or a setting is invalid.
    """
    api_key = settings.require_gemini_api_key()
    return GeminiTranslationService(
        api_key=api_key,
        model_name=settings.get_model_name(),
        temperature=settings.get_temperature(),
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    configure_logging()

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("AI Language Translator")

    # 2. Initialize Infrastructure; a missing credential stops startup here
    settings = SettingsManager()
    try:
        translation_service = create_translation_service(settings)
    except ConfigurationError as e:
        logger.error("Startup failed: %s", e)
        QMessageBox.critical(None, "Configuration Error", str(e))
        return 1

    # 3. Construct UI and coordinator
    main_window = MainWindow()
    coordinator = TranslatorCoordinator(translation_service=translation_service)
    main_window.set_controller(coordinator)

    # 4. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
