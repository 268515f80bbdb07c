"""Main Window - Translator form with language pickers, input and output panes."""

from typing import Iterable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from ai_translator.core import SOURCE_LANGUAGES, TARGET_LANGUAGES, Language


SWAP_DISABLED_TOOLTIP = "Select a specific source language to swap"


class MainWindow(QMainWindow):
    """Provides the translator form and mirrors coordinator state into widgets."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("AI Language Translator")
        self.setGeometry(100, 100, 1000, 560)

        self._controller = None
        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(12)

        title = QLabel("AI Language Translator")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 24px; font-weight: bold;")
        main_layout.addWidget(title)

        grid = QGridLayout()
        self.source_combo = self._build_language_combo(SOURCE_LANGUAGES)
        self.target_combo = self._build_language_combo(TARGET_LANGUAGES)

        self.swap_button = QPushButton("⇄")
        self.swap_button.setFixedWidth(48)
        self.swap_button.setToolTip("Swap languages")

        self.source_text = QTextEdit()
        self.source_text.setAcceptRichText(False)
        self.source_text.setPlaceholderText("Enter text to translate...")

        self.translated_text = QTextEdit()
        self.translated_text.setReadOnly(True)
        self.translated_text.setPlaceholderText("Translation")

        grid.addWidget(self.source_combo, 0, 0)
        grid.addWidget(self.swap_button, 0, 1)
        grid.addWidget(self.target_combo, 0, 2)
        grid.addWidget(self.source_text, 1, 0)
        grid.addWidget(self.translated_text, 1, 2)
        main_layout.addLayout(grid, 1)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #b91c1c;")
        self.error_label.hide()
        main_layout.addWidget(self.error_label)

        actions_layout = QHBoxLayout()
        actions_layout.addStretch()
        self.copy_button = QPushButton("Copy")
        self.translate_button = QPushButton("Translate")
        self.translate_button.setDefault(True)
        actions_layout.addWidget(self.copy_button)
        actions_layout.addWidget(self.translate_button)
        main_layout.addLayout(actions_layout)

        self.translate_shortcut = QShortcut(QKeySequence("Ctrl+Return"), self)

    def _build_language_combo(self, languages: Iterable[Language]) -> QComboBox:
        combo = QComboBox()
        for language in languages:
            combo.addItem(language.name, language.code)
        return combo

    def set_controller(self, controller):
        """Inject the coordinator and wire widget signals to it.

        The controller is expected to expose:
        - set_source_language(str), set_target_language(str), set_source_text(str)
        - request_translation(), swap_languages(), copy_translation()
        - state_changed signal plus the state attributes read in render()
        """
        self._controller = controller

        self.source_combo.currentIndexChanged.connect(
            lambda _: controller.set_source_language(self.source_combo.currentData())
        )
        self.target_combo.currentIndexChanged.connect(
            lambda _: controller.set_target_language(self.target_combo.currentData())
        )
        self.source_text.textChanged.connect(
            lambda: controller.set_source_text(self.source_text.toPlainText())
        )
        self.translate_button.clicked.connect(controller.request_translation)
        self.translate_shortcut.activated.connect(controller.request_translation)
        self.swap_button.clicked.connect(controller.swap_languages)
        self.copy_button.clicked.connect(lambda: controller.copy_translation())
        controller.state_changed.connect(self.render)

        self.render()

    def render(self):
        """Mirror coordinator state into the widgets without re-triggering edits."""
        controller = self._controller
        if controller is None:
            return

        self._select_code(self.source_combo, controller.source_code)
        self._select_code(self.target_combo, controller.target_code)

        if self.source_text.toPlainText() != controller.source_text:
            self.source_text.blockSignals(True)
            self.source_text.setPlainText(controller.source_text)
            self.source_text.blockSignals(False)
        if self.translated_text.toPlainText() != controller.translated_text:
            self.translated_text.setPlainText(controller.translated_text)

        self.translate_button.setEnabled(controller.can_translate())
        self.translate_button.setText("Translating..." if controller.is_loading else "Translate")

        can_swap = controller.can_swap()
        self.swap_button.setEnabled(can_swap)
        self.swap_button.setToolTip("Swap languages" if can_swap else SWAP_DISABLED_TOOLTIP)

        self.copy_button.setEnabled(bool(controller.translated_text))
        self.copy_button.setText("Copied!" if controller.is_copied else "Copy")

        self._show_error(controller.error)

    def _select_code(self, combo: QComboBox, code: str):
        index = combo.findData(code)
        if index >= 0 and index != combo.currentIndex():
            combo.blockSignals(True)
            combo.setCurrentIndex(index)
            combo.blockSignals(False)

    def _show_error(self, error: Optional[str]):
        if error:
            self.error_label.setText(error)
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()
