"""
Qt GUI for the Random Password Generator.

A single window: password field with a copy button, a length slider and
two toggles for digits and symbols. All state lives in SessionController;
the window only forwards input and renders what the controller emits.
"""

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSlider,
    QLineEdit,
    QCheckBox,
    QGroupBox,
)

from .config import PasswordConfig, MIN_LENGTH, MAX_LENGTH
from .controller import SessionController, CopyState


# ---------- Generator widget ----------


class GeneratorWidget(QWidget):
    """
    Controls + password display bound to a SessionController.
    """

    def __init__(
        self,
        controller: Optional[SessionController] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller or SessionController(parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        title = QLabel("Password generator")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_status_label())
        layout.addStretch()

        # Wiring: controller -> view
        self.controller.passwordChanged.connect(self.on_password_changed)
        self.controller.copyStateChanged.connect(self.on_copy_state_changed)
        self.controller.copyFailed.connect(self._show_error)

        self.on_password_changed(self.controller.password)

    # -- groups --

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QHBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(0)

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        self.password_field.setPlaceholderText("Password")
        pw_font = QFont("Consolas")
        pw_font.setPointSize(12)
        self.password_field.setFont(pw_font)

        self.copy_button = QPushButton(self.controller.copy_label)
        self.copy_button.setCursor(Qt.PointingHandCursor)
        self.copy_button.clicked.connect(self.on_copy_clicked)

        layout.addWidget(self.password_field, 1)
        layout.addWidget(self.copy_button)

        group.setLayout(layout)
        return group

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Configuration")
        layout = QHBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        cfg = self.controller.config

        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_slider.setValue(cfg.length)
        self.length_slider.setCursor(Qt.PointingHandCursor)

        self.length_label = QLabel(f"Length : {cfg.length}")
        self.length_slider.valueChanged.connect(self.on_length_changed)

        self.digits_check = QCheckBox("Numbers")
        self.digits_check.setChecked(cfg.include_digits)
        self.digits_check.toggled.connect(self.controller.set_include_digits)

        self.symbols_check = QCheckBox("Characters")
        self.symbols_check.setChecked(cfg.include_symbols)
        self.symbols_check.toggled.connect(self.controller.set_include_symbols)

        layout.addWidget(self.length_slider, 1)
        layout.addWidget(self.length_label)
        layout.addWidget(self.digits_check)
        layout.addWidget(self.symbols_check)

        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    # -- slots --

    @Slot(int)
    def on_length_changed(self, value: int) -> None:
        self.length_label.setText(f"Length : {value}")
        self.controller.set_length(value)

    @Slot(str)
    def on_password_changed(self, password: str) -> None:
        self.password_field.setText(password)

    @Slot()
    def on_copy_clicked(self) -> None:
        if self.controller.copy_to_clipboard():
            self.password_field.selectAll()
            self.status_label.setText("")

    @Slot(str)
    def on_copy_state_changed(self, label: str) -> None:
        self.copy_button.setText(label)
        if label == CopyState.IDLE.value:
            self.password_field.deselect()

    @Slot(str)
    def _show_error(self, message: str) -> None:
        self.status_label.setText(message)


class PasswordGeneratorWindow(QMainWindow):
    def __init__(self, controller: Optional[SessionController] = None) -> None:
        super().__init__()

        self.setWindowTitle("Password generator")
        self.setMinimumSize(520, 260)

        self._apply_base_style()

        self.generator_widget = GeneratorWidget(controller)
        self.setCentralWidget(self.generator_widget)

        controller = self.generator_widget.controller

        # Regenerate with the same settings
        self.regenerate_shortcut = QShortcut(QKeySequence("Ctrl+R"), self)
        self.regenerate_shortcut.activated.connect(controller.regenerate)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #1f2937;
            }
            QWidget {
                color: #f97316;
                background-color: #1f2937;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #374151;
                border-radius: 8px;
                margin-top: 16px;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #ffffff;
            }
            QLineEdit {
                border: none;
                border-top-left-radius: 6px;
                border-bottom-left-radius: 6px;
                padding: 4px 12px;
                color: #111827;
                background-color: #ffffff;
            }
            QPushButton {
                border-top-right-radius: 6px;
                border-bottom-right-radius: 6px;
                padding: 4px 12px;
                background-color: #3b82f6;
                color: #ffffff;
            }
            QPushButton:hover {
                background-color: #2563eb;
            }
            """
        )

    def closeEvent(self, event) -> None:
        self.generator_widget.controller.shutdown()
        super().closeEvent(event)


def main(config: PasswordConfig | None = None) -> None:
    app = QApplication.instance() or QApplication(sys.argv)
    window = PasswordGeneratorWindow(SessionController(config=config))
    window.show()
    sys.exit(app.exec())
