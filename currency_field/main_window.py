"""Main window — demo host for a single CurrencyInput.

Layout:
  Center: CurrencyInput (label, line edit, step buttons)
  Footer: QStatusBar with the last committed amount
"""

from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from currency_field.constants import (
    APP_NAME, APP_VERSION, DEMO_MAX_AMOUNT, DEMO_MIN_AMOUNT, DEMO_STEP,
)
from currency_field.core.formatting import format_amount
from currency_field.core.i18n import TranslationManager, t
from currency_field.models.config import CurrencyInputConfig
from currency_field.ui.widgets.currency_input import CurrencyInput


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self._last_amount: float | None = None

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(24, 24, 24, 24)

        self._input = CurrencyInput(
            label=t("currency_input.label", "Amount"),
            config=CurrencyInputConfig(
                min_value=DEMO_MIN_AMOUNT,
                max_value=DEMO_MAX_AMOUNT,
                step=DEMO_STEP,
            ),
        )
        self._input.amount_committed.connect(self._on_amount_committed)
        layout.addWidget(self._input)
        layout.addStretch(1)
        self.setCentralWidget(central)

        TranslationManager.on_language_changed(self.retranslate_ui)
        self.retranslate_ui()

    @property
    def currency_input(self) -> CurrencyInput:
        return self._input

    def retranslate_ui(self) -> None:
        """Update all translatable UI strings on language change."""
        self.setWindowTitle(f"{t('app.window_title', APP_NAME)} v{APP_VERSION}")
        self._input.set_label(t("currency_input.label", "Amount"))
        self._show_amount()

    def _on_amount_committed(self, amount) -> None:
        self._last_amount = amount
        self._show_amount()

    def _show_amount(self) -> None:
        if self._last_amount is None:
            self.statusBar().showMessage(t("app.no_amount", "No amount"))
            return
        self.statusBar().showMessage(
            t("app.committed", "Committed amount: {amount}", amount=format_amount(self._last_amount))
        )
