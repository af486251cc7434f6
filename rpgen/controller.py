"""
Session controller: owns the current configuration, the generated
password and the copy-button indicator.

Every setter regenerates the password immediately. Copying starts a
single-shot QTimer that flips the indicator back to "Copy"; copying again
while it is pending restarts the same timer, so only one reset is ever
scheduled.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import replace
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from .config import PasswordConfig, DEFAULT_CONFIG, COPY_RESET_MS, clamp_length
from .generator import generate_password

logger = logging.getLogger(__name__)


class CopyState(enum.Enum):
    IDLE = "Copy"
    COPIED = "Copied!"


def _system_clipboard_writer(text: str) -> None:
    clipboard = QGuiApplication.clipboard()
    clipboard.setText(text)


class SessionController(QObject):
    """
    Process-local state behind the generator window.
    """

    passwordChanged = Signal(str)
    configChanged = Signal()
    copyStateChanged = Signal(str)
    copyFailed = Signal(str)

    def __init__(
        self,
        config: PasswordConfig | None = None,
        clipboard_writer: Optional[Callable[[str], None]] = None,
        reset_ms: int = COPY_RESET_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        # Own a copy so DEFAULT_CONFIG is never mutated.
        self._config = replace(config or DEFAULT_CONFIG)
        self._clipboard_writer = clipboard_writer or _system_clipboard_writer
        self._password = ""
        self._copy_state = CopyState.IDLE

        self._reset_timer = QTimer(self)
        self._reset_timer.setSingleShot(True)
        self._reset_timer.setInterval(reset_ms)
        self._reset_timer.timeout.connect(self._on_reset_timeout)

        self.regenerate()

    # ---- read-only state ----

    @property
    def config(self) -> PasswordConfig:
        return replace(self._config)

    @property
    def password(self) -> str:
        return self._password

    @property
    def copy_state(self) -> CopyState:
        return self._copy_state

    @property
    def copy_label(self) -> str:
        return self._copy_state.value

    @property
    def reset_ms(self) -> int:
        return self._reset_timer.interval()

    @property
    def reset_pending(self) -> bool:
        return self._reset_timer.isActive()

    # ---- configuration ----

    @Slot(int)
    def set_length(self, length: int) -> None:
        self._config.length = clamp_length(length)
        self._config_updated()

    @Slot(bool)
    def set_include_digits(self, enabled: bool) -> None:
        self._config.include_digits = bool(enabled)
        self._config_updated()

    @Slot(bool)
    def set_include_symbols(self, enabled: bool) -> None:
        self._config.include_symbols = bool(enabled)
        self._config_updated()

    def _config_updated(self) -> None:
        self.configChanged.emit()
        self.regenerate()

    # ---- actions ----

    @Slot()
    def regenerate(self) -> str:
        self._password = generate_password(self._config)
        logger.debug(
            "Regenerated password (length=%d, digits=%s, symbols=%s)",
            self._config.length,
            self._config.include_digits,
            self._config.include_symbols,
        )
        self.passwordChanged.emit(self._password)
        return self._password

    @Slot()
    def copy_to_clipboard(self) -> bool:
        """
        Put the current password on the clipboard and show "Copied!".

        Returns False (and emits copyFailed) if there is nothing to copy
        or the clipboard write raises; the indicator is left unchanged.
        """
        if not self._password:
            self.copyFailed.emit("No password to copy.")
            return False

        try:
            self._clipboard_writer(self._password)
        except Exception as exc:  # noqa: BLE001
            # Windows clipboard can be temporarily locked by other apps
            logger.warning("Clipboard write failed: %s", exc)
            self.copyFailed.emit(f"Could not copy to clipboard: {exc}")
            return False

        self._set_copy_state(CopyState.COPIED)
        # start() on an active timer restarts it.
        self._reset_timer.start()
        return True

    def shutdown(self) -> None:
        """
        Stop any pending indicator reset.
        """
        self._reset_timer.stop()

    # ---- internal ----

    def _set_copy_state(self, state: CopyState) -> None:
        self._copy_state = state
        self.copyStateChanged.emit(state.value)

    def _on_reset_timeout(self) -> None:
        self._set_copy_state(CopyState.IDLE)
