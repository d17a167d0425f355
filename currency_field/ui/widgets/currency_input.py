"""Currency input widget — line edit + step buttons around a CurrencyEngine.

The widget only hosts: it renders the engine's display string, forwards
input / paste / blur through a FieldBinding and step-button clicks
straight to the engine, and re-emits committed amounts.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QToolButton, QVBoxLayout, QWidget,
)

from currency_field.core.engine import CurrencyEngine
from currency_field.core.formatting import format_amount
from currency_field.core.i18n import TranslationManager, t
from currency_field.models.config import CurrencyInputConfig
from currency_field.ui.widgets.field_binding import FieldBinding


class CurrencyInput(QWidget):
    """Amount field with comma-decimal display and +/- step buttons.

    Signals:
        amount_committed(object): every commit (blur, paste, step); float or None.
        amount_changed(object): only when the committed amount differs
            from the previous one.
    """

    amount_committed = pyqtSignal(object)
    amount_changed = pyqtSignal(object)

    def __init__(
        self,
        label: str = "",
        config: CurrencyInputConfig | None = None,
        amount: float | int | str | None = None,
        step_up_label: str | None = None,
        step_down_label: str | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._engine = CurrencyEngine(config, amount)
        self._step_up_label = step_up_label
        self._step_down_label = step_down_label

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self._label = QLabel(label)
        self._label.setVisible(bool(label))
        layout.addWidget(self._label)

        self._row = QHBoxLayout()
        self._row.setContentsMargins(0, 0, 0, 0)
        self._row.setSpacing(2)
        layout.addLayout(self._row)

        self._line_edit = self._prepare_line_edit(QLineEdit())
        self._label.setBuddy(self._line_edit)
        self._row.addWidget(self._line_edit, 1)

        # StrongFocus: clicking a button blurs (commits) the line edit first
        self._btn_up = QToolButton()
        self._btn_up.setObjectName("currencyinput_arrowup")
        self._btn_up.setArrowType(Qt.ArrowType.UpArrow)
        self._btn_up.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self._btn_up.clicked.connect(self.step_up)
        self._row.addWidget(self._btn_up)

        self._btn_down = QToolButton()
        self._btn_down.setObjectName("currencyinput_arrowdown")
        self._btn_down.setArrowType(Qt.ArrowType.DownArrow)
        self._btn_down.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self._btn_down.clicked.connect(self.step_down)
        self._row.addWidget(self._btn_down)

        self._binding = FieldBinding(
            on_input=self._engine.edit,
            on_blur=self.commit,
            on_paste=self._handle_paste,
            parent=self,
        )
        self._binding.bind(self._line_edit)

        self.retranslate()
        self._refresh_display()

        TranslationManager.on_language_changed(self.retranslate)
        self.destroyed.connect(lambda: TranslationManager.remove_listener(self.retranslate))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def amount(self) -> float | None:
        return self._engine.amount

    @property
    def config(self) -> CurrencyInputConfig:
        return self._engine.config

    @property
    def line_edit(self) -> QLineEdit:
        """The editable surface currently bound to the engine."""
        return self._line_edit

    @property
    def binding(self) -> FieldBinding:
        return self._binding

    @property
    def step_up_button(self) -> QToolButton:
        return self._btn_up

    @property
    def step_down_button(self) -> QToolButton:
        return self._btn_down

    # ------------------------------------------------------------------
    # Host API
    # ------------------------------------------------------------------

    def set_amount(self, value: float | int | str | None) -> None:
        """Host-side amount update (no signal, no constraints until blur)."""
        self._engine.set_amount(value)
        self._refresh_display()

    def set_config(self, config: CurrencyInputConfig) -> None:
        self._engine.set_config(config)
        self.retranslate()
        self._refresh_display()

    def set_label(self, text: str) -> None:
        self._label.setText(text)
        self._label.setVisible(bool(text))

    def set_error(self, error: bool) -> None:
        """Toggle the ``error`` dynamic property used by the stylesheet."""
        self._line_edit.setProperty("error", error)
        style = self._line_edit.style()
        style.unpolish(self._line_edit)
        style.polish(self._line_edit)

    def replace_line_edit(self, line_edit: QLineEdit) -> QLineEdit:
        """Swap the editable surface; handlers move to *line_edit*.

        Returns:
            The previous line edit, detached from this widget. The caller
            owns it from now on.
        """
        old = self._line_edit
        if line_edit is old:
            return old
        self._binding.bind(line_edit)
        self._row.replaceWidget(old, self._prepare_line_edit(line_edit))
        old.setParent(None)
        self._line_edit = line_edit
        self._label.setBuddy(line_edit)
        self.retranslate()
        self._refresh_display()
        return old

    # ------------------------------------------------------------------
    # Commit events
    # ------------------------------------------------------------------

    def commit(self) -> None:
        """Blur: commit the live buffer."""
        previous = self._engine.amount
        self._emit(previous, self._engine.commit())

    def step_up(self) -> None:
        previous = self._engine.amount
        self._emit(previous, self._engine.step_up())

    def step_down(self) -> None:
        previous = self._engine.amount
        self._emit(previous, self._engine.step_down())

    def _handle_paste(self, text: str) -> None:
        previous = self._engine.amount
        self._emit(previous, self._engine.paste(text))

    def _emit(self, previous: float | None, value: float | None) -> None:
        self._refresh_display()
        self.amount_committed.emit(value)
        if value != previous:
            self.amount_changed.emit(value)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def retranslate(self) -> None:
        """Refresh labels that depend on language or step."""
        step = format_amount(self._engine.config.step)
        up = self._step_up_label or t("currency_input.step_up", "Increase by {step}", step=step)
        down = self._step_down_label or t("currency_input.step_down", "Decrease by {step}", step=step)
        self._btn_up.setToolTip(up)
        self._btn_up.setAccessibleName(up)
        self._btn_down.setToolTip(down)
        self._btn_down.setAccessibleName(down)
        self._line_edit.setPlaceholderText(t("currency_input.placeholder", "0,00"))

    def _prepare_line_edit(self, line_edit: QLineEdit) -> QLineEdit:
        line_edit.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        line_edit.setProperty("cssClass", "currency-input")
        return line_edit

    def _refresh_display(self) -> None:
        text = self._engine.display
        if self._line_edit.text() != text:
            self._line_edit.setText(text)
