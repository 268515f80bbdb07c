"""Unit tests for TranslatorCoordinator."""

from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

from ai_translator.coordinators import TranslatorCoordinator
from ai_translator.services import TranslationRequest, TranslationResult


class ImmediateThreadPool:
    """Runs workers inline so results arrive before start() returns."""

    def start(self, worker):
        worker.run()


class DeferredThreadPool:
    """Holds workers until the test releases them."""

    def __init__(self):
        self.workers = []

    def start(self, worker):
        self.workers.append(worker)

    def run_all(self):
        workers, self.workers = self.workers, []
        for worker in workers:
            worker.run()


@pytest.fixture(autouse=True)
def qt_app():
    """Timers need an application instance."""
    return QApplication.instance() or QApplication([])


@pytest.fixture
def mock_translation_service():
    """Provide a mocked TranslationService."""
    service = MagicMock()
    service.translate.return_value = TranslationResult.success("Hola", model="gemini-2.5-flash")
    return service


@pytest.fixture
def coordinator(mock_translation_service):
    return TranslatorCoordinator(
        translation_service=mock_translation_service,
        thread_pool=ImmediateThreadPool(),
    )


class TestTranslatorCoordinatorInitialization:
    """Tests for default state."""

    def test_defaults(self, coordinator):
        assert coordinator.source_code == "auto"
        assert coordinator.target_code == "es"
        assert coordinator.source_text == ""
        assert coordinator.translated_text == ""
        assert coordinator.error is None
        assert not coordinator.is_loading
        assert not coordinator.is_copied

    def test_cannot_translate_blank_input(self, coordinator):
        assert not coordinator.can_translate()
        coordinator.set_source_text("hi")
        assert coordinator.can_translate()


class TestTranslationRequest:
    """Tests for the translate workflow."""

    def test_blank_input_makes_no_call(self, coordinator, mock_translation_service):
        coordinator.set_source_language("en")
        coordinator.set_target_language("fr")
        coordinator.translated_text = "old output"

        for text in ("", "   \n\t"):
            coordinator.set_source_text(text)
            coordinator.request_translation()

        mock_translation_service.translate.assert_not_called()
        assert coordinator.translated_text == ""
        assert not coordinator.is_loading

    def test_request_resolves_language_names(self, coordinator, mock_translation_service):
        coordinator.set_source_text("Hello, world!")

        coordinator.request_translation()

        mock_translation_service.translate.assert_called_once_with(
            TranslationRequest("Hello, world!", "Auto-Detect", "Spanish")
        )

    def test_success_updates_state(self, coordinator):
        completed_spy = MagicMock()
        coordinator.translation_completed.connect(completed_spy)
        coordinator.set_source_text("Hello")

        coordinator.request_translation()

        assert coordinator.translated_text == "Hola"
        assert coordinator.error is None
        assert not coordinator.is_loading
        completed_spy.assert_called_once_with("Hola")

    def test_failure_sets_error(self, coordinator, mock_translation_service):
        mock_translation_service.translate.return_value = TranslationResult.failure(
            "Translation failed. timeout", model="gemini-2.5-flash"
        )
        failed_spy = MagicMock()
        coordinator.translation_failed.connect(failed_spy)
        coordinator.set_source_text("Hello")

        coordinator.request_translation()

        assert coordinator.error == "Error: Translation failed. timeout"
        assert coordinator.translated_text == ""
        assert not coordinator.is_loading
        failed_spy.assert_called_once_with("Error: Translation failed. timeout")

    def test_error_looking_translation_is_shown_as_output(self, coordinator, mock_translation_service):
        mock_translation_service.translate.return_value = TranslationResult.success(
            "Error: disk full", model="gemini-2.5-flash"
        )
        coordinator.set_source_text("Fehler: Festplatte voll")

        coordinator.request_translation()

        assert coordinator.translated_text == "Error: disk full"
        assert coordinator.error is None

    def test_new_request_clears_previous_error(self, coordinator, mock_translation_service):
        coordinator.error = "Error: previous"
        coordinator.set_source_text("Hello")

        coordinator.request_translation()

        assert coordinator.error is None

    def test_worker_crash_sets_error(self, coordinator, mock_translation_service):
        mock_translation_service.translate.side_effect = RuntimeError("bug")
        coordinator.set_source_text("Hello")

        coordinator.request_translation()

        assert coordinator.error == "Error: Unexpected translation error: bug"
        assert not coordinator.is_loading


class TestInFlightRequests:
    """Only one request is in flight per user action."""

    @pytest.fixture
    def pool(self):
        return DeferredThreadPool()

    @pytest.fixture
    def deferred_coordinator(self, mock_translation_service, pool):
        return TranslatorCoordinator(translation_service=mock_translation_service, thread_pool=pool)

    def test_loading_while_request_pending(self, deferred_coordinator, pool):
        started_spy = MagicMock()
        deferred_coordinator.translation_started.connect(started_spy)
        deferred_coordinator.set_source_text("Hello")

        deferred_coordinator.request_translation()

        assert deferred_coordinator.is_loading
        assert not deferred_coordinator.can_translate()
        started_spy.assert_called_once()

        pool.run_all()
        assert not deferred_coordinator.is_loading
        assert deferred_coordinator.translated_text == "Hola"

    def test_second_request_ignored_while_loading(self, deferred_coordinator, pool):
        deferred_coordinator.set_source_text("Hello")

        deferred_coordinator.request_translation()
        deferred_coordinator.request_translation()

        assert len(pool.workers) == 1

    def test_stale_result_is_ignored(self, deferred_coordinator, pool):
        deferred_coordinator.set_source_text("Hello")
        deferred_coordinator.request_translation()

        deferred_coordinator._handle_translation_result(
            TranslationResult.success("stale", model="m"), worker_id=99
        )

        assert deferred_coordinator.translated_text == ""
        assert deferred_coordinator.is_loading

        pool.run_all()
        assert deferred_coordinator.translated_text == "Hola"


class TestSwapLanguages:
    """Tests for the swap action."""

    def test_swap_disabled_for_auto_detect(self, coordinator):
        coordinator.set_source_text("Hello")
        coordinator.translated_text = "Hola"

        assert not coordinator.can_swap()
        coordinator.swap_languages()

        assert coordinator.source_code == "auto"
        assert coordinator.target_code == "es"
        assert coordinator.source_text == "Hello"

    def test_swap_exchanges_languages_and_texts(self, coordinator):
        coordinator.set_source_language("en")
        coordinator.set_target_language("fr")
        coordinator.set_source_text("Hello")
        coordinator.request_translation()

        coordinator.swap_languages()

        assert coordinator.source_code == "fr"
        assert coordinator.target_code == "en"
        assert coordinator.source_text == "Hola"
        assert coordinator.translated_text == "Hello"

    def test_swap_emits_state_changed(self, coordinator):
        coordinator.set_source_language("en")
        spy = MagicMock()
        coordinator.state_changed.connect(spy)

        coordinator.swap_languages()

        spy.assert_called_once()


class TestCopyTranslation:
    """Tests for copy-to-clipboard."""

    def test_copy_writes_clipboard_and_sets_flag(self, coordinator):
        clipboard = MagicMock()
        coordinator.translated_text = "Hola"

        coordinator.copy_translation(clipboard)

        clipboard.setText.assert_called_once_with("Hola")
        assert coordinator.is_copied
        assert coordinator._copied_timer.isActive()
        assert coordinator._copied_timer.interval() == 2000

    def test_copy_without_output_does_nothing(self, coordinator):
        clipboard = MagicMock()

        coordinator.copy_translation(clipboard)

        clipboard.setText.assert_not_called()
        assert not coordinator.is_copied

    def test_reset_copied_clears_flag(self, coordinator):
        coordinator.translated_text = "Hola"
        coordinator.copy_translation(MagicMock())

        coordinator.reset_copied()

        assert not coordinator.is_copied
