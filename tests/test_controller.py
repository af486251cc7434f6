"""
Tests for SessionController: regeneration and the copy indicator.
"""

from PySide6.QtGui import QGuiApplication

from rpgen.config import COPY_RESET_MS, DEFAULT_CONFIG, DIGITS, LETTERS, SYMBOLS, PasswordConfig
from rpgen.controller import CopyState, SessionController


def test_initial_state(controller):
    assert controller.config == PasswordConfig()
    assert len(controller.password) == 8
    assert all(ch in LETTERS for ch in controller.password)
    assert controller.copy_state is CopyState.IDLE
    assert controller.copy_label == "Copy"
    assert not controller.reset_pending


def test_default_reset_delay(qtbot):
    ctrl = SessionController(clipboard_writer=lambda text: None)
    assert ctrl.reset_ms == COPY_RESET_MS == 2000


def test_controller_does_not_mutate_given_config(qtbot):
    cfg = PasswordConfig(length=12)
    ctrl = SessionController(config=cfg, clipboard_writer=lambda text: None)
    ctrl.set_length(40)
    assert cfg.length == 12
    assert DEFAULT_CONFIG.length == 8
    assert len(ctrl.password) == 40


def test_set_length_regenerates(qtbot, controller):
    with qtbot.waitSignal(controller.passwordChanged) as blocker:
        controller.set_length(30)
    assert controller.config.length == 30
    assert len(controller.password) == 30
    assert blocker.args == [controller.password]


def test_set_length_clamps(controller):
    controller.set_length(500)
    assert controller.config.length == 100
    assert len(controller.password) == 100

    controller.set_length(1)
    assert controller.config.length == 6
    assert len(controller.password) == 6


def test_toggle_digits_regenerates(qtbot, controller):
    controller.set_length(100)
    with qtbot.waitSignals([controller.configChanged, controller.passwordChanged]):
        controller.set_include_digits(True)
    assert controller.config.include_digits

    seen = set()
    for _ in range(30):
        seen.update(controller.regenerate())
    assert seen & set(DIGITS)
    assert seen <= set(LETTERS + DIGITS)


def test_toggle_symbols_regenerates(qtbot, controller):
    controller.set_length(100)
    with qtbot.waitSignal(controller.passwordChanged):
        controller.set_include_symbols(True)
    assert controller.config.include_symbols

    seen = set()
    for _ in range(30):
        seen.update(controller.regenerate())
    assert seen & set(SYMBOLS)
    assert seen <= set(LETTERS + SYMBOLS)


def test_regenerate_keeps_config(controller):
    controller.set_length(64)
    passwords = {controller.regenerate() for _ in range(10)}
    assert all(len(p) == 64 for p in passwords)
    # Same configuration, fresh output.
    assert len(passwords) > 1


def test_copy_writes_clipboard_and_sets_copied(qtbot, controller, clipboard):
    with qtbot.waitSignal(controller.copyStateChanged) as blocker:
        assert controller.copy_to_clipboard() is True

    assert blocker.args == ["Copied!"]
    assert clipboard == [controller.password]
    assert controller.copy_state is CopyState.COPIED
    assert controller.copy_label == "Copied!"
    assert controller.reset_pending


def test_copy_indicator_resets_after_delay(qtbot, controller):
    controller.copy_to_clipboard()

    with qtbot.waitSignal(controller.copyStateChanged, timeout=1000) as blocker:
        pass

    assert blocker.args == ["Copy"]
    assert controller.copy_state is CopyState.IDLE
    assert not controller.reset_pending


def test_repeated_copy_schedules_single_reset(qtbot, controller, clipboard):
    labels = []
    controller.copyStateChanged.connect(labels.append)

    controller.copy_to_clipboard()
    qtbot.wait(20)
    controller.copy_to_clipboard()

    qtbot.waitUntil(lambda: controller.copy_state is CopyState.IDLE, timeout=1000)
    qtbot.wait(100)

    assert labels == ["Copied!", "Copied!", "Copy"]
    assert len(clipboard) == 2


def test_copy_copies_latest_password(controller, clipboard):
    controller.set_length(20)
    controller.copy_to_clipboard()
    assert clipboard[-1] == controller.password
    assert len(clipboard[-1]) == 20


def test_clipboard_failure_is_reported(qtbot):
    def broken_writer(text):
        raise RuntimeError("clipboard busy")

    ctrl = SessionController(clipboard_writer=broken_writer, reset_ms=50)

    with qtbot.waitSignal(ctrl.copyFailed) as blocker:
        assert ctrl.copy_to_clipboard() is False

    assert "clipboard busy" in blocker.args[0]
    assert ctrl.copy_state is CopyState.IDLE
    assert not ctrl.reset_pending


class _NeverGenerates(SessionController):
    def regenerate(self):
        return ""


def test_copy_without_password_fails(qtbot, clipboard):
    ctrl = _NeverGenerates(clipboard_writer=clipboard.append)
    assert ctrl.password == ""

    with qtbot.waitSignal(ctrl.copyFailed) as blocker:
        assert ctrl.copy_to_clipboard() is False

    assert blocker.args == ["No password to copy."]
    assert clipboard == []
    assert ctrl.copy_state is CopyState.IDLE


def test_default_writer_uses_system_clipboard(qtbot):
    ctrl = SessionController(reset_ms=50)

    assert ctrl.copy_to_clipboard() is True
    assert QGuiApplication.clipboard().text() == ctrl.password
    ctrl.shutdown()


def test_shutdown_cancels_pending_reset(qtbot, controller):
    controller.copy_to_clipboard()
    controller.shutdown()
    qtbot.wait(100)
    assert not controller.reset_pending
    assert controller.copy_state is CopyState.COPIED
