"""Tests for FieldBinding — attach/detach/rebind of field handlers.

Covers:
- Input write-back (sanitized text, cursor kept in place)
- Blur (FocusOut) and paste shortcut delivery
- Context-menu Paste and text drops routed to the paste handler
- Rebinding: old field goes silent, no duplicate handlers
- Field destruction returns the binding to Unbound
"""

import sys

from PyQt6 import sip
from PyQt6.QtCore import QEvent, QMimeData, QPoint, QPointF, Qt
from PyQt6.QtGui import QContextMenuEvent, QDropEvent, QFocusEvent, QGuiApplication, QKeyEvent
from PyQt6.QtWidgets import QApplication, QLineEdit

from currency_field.core.sanitizer import sanitize
from currency_field.ui.widgets.field_binding import PASTE_ACTION_NAME, FieldBinding

# QApplication instance needed for QObject / signals
_app = QApplication.instance() or QApplication(sys.argv)


class _Recorder:
    def __init__(self):
        self.inputs: list[str] = []
        self.blurs = 0
        self.pastes: list[str] = []

    def on_input(self, text: str) -> str:
        self.inputs.append(text)
        return sanitize(text)

    def on_blur(self) -> None:
        self.blurs += 1

    def on_paste(self, text: str) -> None:
        self.pastes.append(text)

    def binding(self) -> FieldBinding:
        return FieldBinding(self.on_input, self.on_blur, self.on_paste)


def _type(field: QLineEdit, text: str) -> None:
    """Simulate a user edit: new text + textEdited."""
    field.setText(text)
    field.textEdited.emit(text)


def _blur(field: QLineEdit) -> None:
    QApplication.sendEvent(field, QFocusEvent(QEvent.Type.FocusOut, Qt.FocusReason.OtherFocusReason))


def _paste_shortcut(field: QLineEdit) -> None:
    event = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_V, Qt.KeyboardModifier.ControlModifier)
    QApplication.sendEvent(field, event)


def _drop(field: QLineEdit, mime: QMimeData) -> QDropEvent:
    event = QDropEvent(
        QPointF(2, 2), Qt.DropAction.CopyAction, mime,
        Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier,
    )
    QApplication.sendEvent(field, event)
    return event


def _text_mime(text: str) -> QMimeData:
    mime = QMimeData()
    mime.setText(text)
    return mime


def _menu_paste(binding: FieldBinding) -> None:
    """Pick Paste from the field's context menu."""
    menu = binding.create_context_menu()
    action = next(a for a in menu.actions() if a.objectName() == PASTE_ACTION_NAME)
    action.trigger()
    menu.deleteLater()


# ===================================================================
# Unbound / bound state
# ===================================================================

class TestBindingState:

    def test_initially_unbound(self):
        binding = _Recorder().binding()
        assert not binding.is_bound
        assert binding.field is None

    def test_bind(self):
        field = QLineEdit()
        binding = _Recorder().binding()
        binding.bind(field)
        assert binding.is_bound
        assert binding.field is field

    def test_bind_none_unbinds(self):
        field = QLineEdit()
        binding = _Recorder().binding()
        binding.bind(field)
        binding.bind(None)
        assert not binding.is_bound

    def test_unbind_stops_delivery(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        binding.unbind()
        _type(field, "12")
        _blur(field)
        assert rec.inputs == []
        assert rec.blurs == 0

    def test_unbind_when_unbound_is_noop(self):
        binding = _Recorder().binding()
        binding.unbind()
        assert not binding.is_bound


# ===================================================================
# Event delivery
# ===================================================================

class TestEventDelivery:

    def test_input_forwarded(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        _type(field, "12,5")
        assert rec.inputs == ["12,5"]
        assert field.text() == "12,5"

    def test_input_written_back_sanitized(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        _type(field, "as12.3")
        assert field.text() == "12.3"

    def test_cursor_kept_after_write_back(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        field.setText("1x23")
        field.setCursorPosition(2)  # right after the typed 'x'
        field.textEdited.emit("1x23")
        assert field.text() == "123"
        assert field.cursorPosition() == 1

    def test_programmatic_set_text_not_forwarded(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        field.setText("99")
        assert rec.inputs == []

    def test_blur_forwarded_not_consumed(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        _blur(field)
        assert rec.blurs == 1

    def test_paste_shortcut_reads_clipboard(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        QGuiApplication.clipboard().setText("1.233.222,43")
        _paste_shortcut(field)
        assert rec.pastes == ["1.233.222,43"]
        # Consumed: raw clipboard text never lands in the field
        assert field.text() == ""

    def test_other_keys_pass_through(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        event = QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_5, Qt.KeyboardModifier.NoModifier, "5")
        QApplication.sendEvent(field, event)
        assert rec.pastes == []


# ===================================================================
# Paste sources other than the shortcut
# ===================================================================

class TestPasteSources:

    def test_context_menu_paste_routed(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        QGuiApplication.clipboard().setText("1.233.222,43")
        _menu_paste(binding)
        assert rec.pastes == ["1.233.222,43"]
        assert rec.inputs == []
        assert field.text() == ""

    def test_context_menu_keeps_other_actions(self):
        field = QLineEdit()
        binding = _Recorder().binding()
        binding.bind(field)
        menu = binding.create_context_menu()
        standard = field.createStandardContextMenu()
        assert len(menu.actions()) == len(standard.actions())
        standard.deleteLater()
        menu.deleteLater()

    def test_unbound_has_no_context_menu(self):
        assert _Recorder().binding().create_context_menu() is None

    def test_custom_context_menu_left_to_host(self):
        field = QLineEdit()
        field.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        requested = []
        field.customContextMenuRequested.connect(requested.append)
        binding = _Recorder().binding()
        binding.bind(field)
        QApplication.sendEvent(
            field, QContextMenuEvent(QContextMenuEvent.Reason.Mouse, QPoint(1, 1)),
        )
        assert len(requested) == 1

    def test_text_drop_routed(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        event = _drop(field, _text_mime("1.232.111"))
        assert rec.pastes == ["1.232.111"]
        assert event.isAccepted()
        assert field.text() == ""

    def test_drop_without_text_ignored(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        mime = QMimeData()
        mime.setData("application/octet-stream", b"\x00\x01")
        _drop(field, mime)
        assert rec.pastes == []

    def test_drop_on_replaced_field_ignored(self):
        rec = _Recorder()
        old, new = QLineEdit(), QLineEdit()
        binding = rec.binding()
        binding.bind(old)
        binding.bind(new)
        _drop(old, _text_mime("5"))
        assert rec.pastes == []


# ===================================================================
# Rebinding
# ===================================================================

class TestRebind:

    def test_old_field_goes_silent(self):
        rec = _Recorder()
        old, new = QLineEdit(), QLineEdit()
        binding = rec.binding()
        binding.bind(old)
        binding.bind(new)
        _type(old, "1")
        _blur(old)
        QGuiApplication.clipboard().setText("5")
        _paste_shortcut(old)
        assert rec.inputs == []
        assert rec.blurs == 0
        assert rec.pastes == []

    def test_new_field_receives_events(self):
        rec = _Recorder()
        old, new = QLineEdit(), QLineEdit()
        binding = rec.binding()
        binding.bind(old)
        binding.bind(new)
        _type(new, "7")
        _blur(new)
        assert rec.inputs == ["7"]
        assert rec.blurs == 1

    def test_rebinding_same_field_does_not_duplicate(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        binding.bind(field)
        _type(field, "3")
        _blur(field)
        assert rec.inputs == ["3"]
        assert rec.blurs == 1

    def test_many_swaps_single_handler(self):
        rec = _Recorder()
        fields = [QLineEdit() for _ in range(5)]
        binding = rec.binding()
        for field in fields + fields:
            binding.bind(field)
        for field in fields:
            _type(field, "1")
        assert rec.inputs == ["1"]  # only the last bound field delivers

    def test_swap_back_to_old_field(self):
        rec = _Recorder()
        a, b = QLineEdit(), QLineEdit()
        binding = rec.binding()
        binding.bind(a)
        binding.bind(b)
        binding.bind(a)
        _type(a, "4")
        _type(b, "8")
        assert rec.inputs == ["4"]


# ===================================================================
# Field lifetime
# ===================================================================

class TestFieldDestroyed:

    def test_destroyed_field_unbinds(self):
        field = QLineEdit()
        binding = _Recorder().binding()
        binding.bind(field)
        sip.delete(field)
        assert not binding.is_bound

    def test_rebind_after_destroy(self):
        rec = _Recorder()
        field = QLineEdit()
        binding = rec.binding()
        binding.bind(field)
        sip.delete(field)
        replacement = QLineEdit()
        binding.bind(replacement)
        _type(replacement, "2")
        assert rec.inputs == ["2"]
