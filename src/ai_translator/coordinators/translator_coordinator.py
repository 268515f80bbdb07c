"""Translator Coordinator - Owns translator form state and the translate workflow."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from ai_translator.core import (
    DEFAULT_SOURCE_CODE,
    DEFAULT_TARGET_CODE,
    is_auto_detect,
    source_language_name,
    target_language_name,
)
from ai_translator.services import ERROR_PREFIX, TranslationRequest, TranslationService, TranslationWorker


logger = logging.getLogger(__name__)

COPIED_RESET_MS = 2000


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslatorCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.worker_id)
            except RuntimeError:
                pass


class TranslatorCoordinator(QObject):
    """
    Orchestrates the translate workflow for a single user session.

    Responsibilities:
    - Hold the form state (languages, input, output, error, loading, copied).
    - Guard against blank input and overlapping requests before calling the service.
    - Run the service call on a worker thread and fold the result back into state.
    - Swap languages and copy the output.
    """

    state_changed = Signal()
    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self.source_code: str = DEFAULT_SOURCE_CODE
        self.target_code: str = DEFAULT_TARGET_CODE
        self.source_text: str = ""
        self.translated_text: str = ""
        self.error: Optional[str] = None
        self.is_loading: bool = False
        self.is_copied: bool = False

        # Results from superseded workers are dropped
        self._active_worker_id: Optional[int] = None
        self._worker_counter = 0
        self._request_helper: Optional[_TranslationRequest] = None

        self._copied_timer = QTimer(self)
        self._copied_timer.setSingleShot(True)
        self._copied_timer.setInterval(COPIED_RESET_MS)
        self._copied_timer.timeout.connect(self.reset_copied)

    def set_source_language(self, code: str) -> None:
        self.source_code = code
        self.state_changed.emit()

    def set_target_language(self, code: str) -> None:
        self.target_code = code
        self.state_changed.emit()

    def set_source_text(self, text: str) -> None:
        self.source_text = text
        self.state_changed.emit()

    def can_translate(self) -> bool:
        return not self.is_loading and bool(self.source_text.strip())

    def can_swap(self) -> bool:
        return not is_auto_detect(self.source_code)

    def request_translation(self) -> None:
        """Translate the current input. Blank input clears the output and makes no API call."""
        if not self.source_text.strip():
            self.translated_text = ""
            self.state_changed.emit()
            return

        if self.is_loading:
            logger.debug("Translation already in progress, ignoring request")
            return

        request = TranslationRequest(
            text=self.source_text,
            source_language_name=source_language_name(self.source_code),
            target_language_name=target_language_name(self.target_code),
        )

        self.is_loading = True
        self.error = None
        self.translated_text = ""
        self.translation_started.emit()
        self.state_changed.emit()

        self._worker_counter += 1
        worker_id = self._worker_counter
        self._active_worker_id = worker_id

        worker = TranslationWorker(translation_service=self.translation_service, request=request)

        # Keep a reference so the helper outlives the background call
        request_helper = _TranslationRequest(worker_id, self)
        self._request_helper = request_helper

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, worker_id: int) -> None:
        """Fold a worker's TranslationResult into state (runs in main thread)."""
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale translation result (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        self._active_worker_id = None
        self.is_loading = False

        if result.is_error:
            self.error = result.display_text
            self.state_changed.emit()
            self.translation_failed.emit(self.error)
            return

        self.translated_text = result.text
        self.state_changed.emit()
        self.translation_completed.emit(result.text)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_worker_id:
            logger.debug("Ignoring stale translation error (worker %s, current %s)", worker_id, self._active_worker_id)
            return

        self._active_worker_id = None
        self.is_loading = False
        self.error = f"{ERROR_PREFIX}{error}"
        self.state_changed.emit()
        self.translation_failed.emit(self.error)

    def swap_languages(self) -> None:
        """Swap source and target languages along with their texts. No-op for auto-detect."""
        if not self.can_swap():
            return

        self.source_code, self.target_code = self.target_code, self.source_code
        self.source_text, self.translated_text = self.translated_text, self.source_text
        self.state_changed.emit()

    def copy_translation(self, clipboard=None) -> None:
        """Copy the translated text to the clipboard and flag it as copied for two seconds."""
        if not self.translated_text:
            return

        if clipboard is None:
            clipboard = QGuiApplication.clipboard()
        clipboard.setText(self.translated_text)

        self.is_copied = True
        self._copied_timer.start()
        self.state_changed.emit()

    @Slot()
    def reset_copied(self) -> None:
        self.is_copied = False
        self.state_changed.emit()
