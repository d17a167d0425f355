"""Field binding — keeps one input/blur/paste handler set on the live field.

The host may swap the QLineEdit that backs a currency field at any time.
``FieldBinding.bind(new_field)`` detaches every handler from the old
field before attaching to the new one, so each logical field has exactly
one active handler set and a replaced field never delivers events.

States::

    Unbound --bind(field)--> Bound(field) --bind(other)--> Bound(other)
       ^                         |
       +------ bind(None) / unbind() / field destroyed ------+

Every paste source of a QLineEdit (shortcut, context menu, drop,
middle-click selection) is intercepted and handed to ``on_paste``.
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtGui import QAction, QClipboard, QContextMenuEvent, QGuiApplication, QKeySequence
from PyQt6.QtWidgets import QLineEdit, QMenu

from currency_field.core.sanitizer import sanitized_cursor

logger = logging.getLogger(__name__)

# objectName Qt gives the Paste entry of a standard edit menu
PASTE_ACTION_NAME = "edit-paste"


class FieldBinding(QObject):
    """Observer that owns the handler registration for one field.

    Args:
        on_input: Called with the raw text after every user edit; returns
            the text the field should show (written back if different).
        on_blur: Called when the field loses focus.
        on_paste: Called with the pasted text for every paste source: the
            paste shortcut, the context menu's Paste action, a text drop
            and a middle-click selection paste. The triggering event is
            consumed so the raw text never lands in the field.
    """

    def __init__(
        self,
        on_input: Callable[[str], str],
        on_blur: Callable[[], None],
        on_paste: Callable[[str], None],
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._on_input = on_input
        self._on_blur = on_blur
        self._on_paste = on_paste
        self._field: QLineEdit | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def field(self) -> QLineEdit | None:
        """Currently bound field (None when unbound)."""
        return self._field

    @property
    def is_bound(self) -> bool:
        return self._field is not None

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, field: QLineEdit | None) -> None:
        """Bind to *field*, detaching from the previous one first.

        Binding the already-bound field is a no-op; ``None`` unbinds.
        """
        if field is self._field:
            return
        self._detach()
        if field is not None:
            self._attach(field)

    def unbind(self) -> None:
        self._detach()

    def _attach(self, field: QLineEdit) -> None:
        field.textEdited.connect(self._on_text_edited)
        field.destroyed.connect(self._on_field_destroyed)
        field.installEventFilter(self)
        self._field = field
        logger.debug("Bound to field %r", field.objectName())

    def _detach(self) -> None:
        field = self._field
        if field is None:
            return
        # Cleared first: nothing may reach the old field's handlers from here on
        self._field = None
        field.removeEventFilter(self)
        field.destroyed.disconnect(self._on_field_destroyed)
        field.textEdited.disconnect(self._on_text_edited)
        logger.debug("Detached from field %r", field.objectName())

    def _on_field_destroyed(self) -> None:
        # The C++ object is gone; Qt has already dropped its connections
        self._field = None
        logger.debug("Bound field destroyed, binding is now unbound")

    # ------------------------------------------------------------------
    # Paste sources
    # ------------------------------------------------------------------

    def create_context_menu(self) -> QMenu | None:
        """Standard edit menu of the bound field with Paste routed to ``on_paste``.

        The caller owns the returned menu.
        """
        field = self._field
        if field is None:
            return None
        menu = field.createStandardContextMenu()
        action = _find_paste_action(menu)
        if action is not None:
            action.triggered.disconnect()
            action.triggered.connect(self._paste_clipboard)
        return menu

    def _paste_clipboard(self) -> None:
        clipboard = QGuiApplication.clipboard()
        self._on_paste(clipboard.text() if clipboard is not None else "")

    def _paste_selection(self) -> None:
        self._on_paste(QGuiApplication.clipboard().text(QClipboard.Mode.Selection))

    def _show_context_menu(self, event: QContextMenuEvent) -> None:
        menu = self.create_context_menu()
        if menu is None:
            return
        menu.exec(event.globalPos())
        menu.deleteLater()

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def _on_text_edited(self, text: str) -> None:
        field = self._field
        if field is None:
            return
        clean = self._on_input(text)
        if clean != text:
            cursor = sanitized_cursor(text, field.cursorPosition())
            field.setText(clean)
            field.setCursorPosition(min(cursor, len(clean)))

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if self._field is None or obj is not self._field:
            return super().eventFilter(obj, event)

        kind = event.type()
        if kind == QEvent.Type.FocusOut:
            self._on_blur()
            return False

        if kind == QEvent.Type.KeyPress and event.matches(QKeySequence.StandardKey.Paste):
            self._paste_clipboard()
            return True

        if (
            kind == QEvent.Type.ContextMenu
            and self._field.contextMenuPolicy() == Qt.ContextMenuPolicy.DefaultContextMenu
        ):
            self._show_context_menu(event)
            return True

        if kind == QEvent.Type.Drop and event.mimeData().hasText():
            event.acceptProposedAction()
            self._on_paste(event.mimeData().text())
            return True

        if (
            kind == QEvent.Type.MouseButtonRelease
            and event.button() == Qt.MouseButton.MiddleButton
            and _supports_selection()
        ):
            self._paste_selection()
            return True

        return super().eventFilter(obj, event)


def _find_paste_action(menu: QMenu) -> QAction | None:
    for action in menu.actions():
        if action.objectName() == PASTE_ACTION_NAME:
            return action
    # Older Qt builds leave the standard actions unnamed
    for action in menu.actions():
        label = action.text().split("\t")[0].replace("&", "")
        if label == "Paste":
            action.setObjectName(PASTE_ACTION_NAME)
            return action
    return None


def _supports_selection() -> bool:
    clipboard = QGuiApplication.clipboard()
    return clipboard is not None and clipboard.supportsSelection()
