"""Tests for application startup wiring."""

from unittest.mock import MagicMock, patch

import pytest

from ai_translator.errors import ConfigurationError, MissingApiKeyError
from ai_translator.main import create_translation_service, main


def make_settings(api_key=None, model="gemini-2.5-flash", temperature=0.3):
    settings = MagicMock()
    if api_key is None:
        settings.require_gemini_api_key.side_effect = MissingApiKeyError()
    else:
        settings.require_gemini_api_key.return_value = api_key
    settings.get_model_name.return_value = model
    settings.get_temperature.return_value = temperature
    return settings


def test_missing_api_key_stops_initialization():
    with patch("ai_translator.services.translation.gemini_translation_service.genai.Client") as MockClient:
        with pytest.raises(MissingApiKeyError):
            create_translation_service(make_settings(api_key=None))
    MockClient.assert_not_called()


def test_invalid_setting_stops_initialization():
    settings = make_settings(api_key="key")
    settings.get_temperature.side_effect = ConfigurationError("bad temperature")

    with patch("ai_translator.services.translation.gemini_translation_service.genai.Client"):
        with pytest.raises(ConfigurationError):
            create_translation_service(settings)


def test_service_built_from_settings():
    with patch("ai_translator.services.translation.gemini_translation_service.genai.Client") as MockClient:
        service = create_translation_service(make_settings(api_key="key", model="gemini-2.0-flash", temperature=0.0))

    MockClient.assert_called_once_with(api_key="key")
    assert service.model_name == "gemini-2.0-flash"
    assert service.temperature == 0.0


def test_main_exits_with_status_one_without_api_key():
    settings = make_settings(api_key=None)

    with patch("ai_translator.main.QApplication"), \
         patch("ai_translator.main.QMessageBox") as MockMessageBox, \
         patch("ai_translator.main.SettingsManager", return_value=settings), \
         patch("ai_translator.main.MainWindow") as MockWindow, \
         patch("ai_translator.services.translation.gemini_translation_service.genai.Client") as MockClient:
        exit_code = main()

    assert exit_code == 1
    MockMessageBox.critical.assert_called_once()
    assert "GEMINI_API_KEY" in MockMessageBox.critical.call_args.args[2]
    MockClient.assert_not_called()
    MockWindow.assert_not_called()
