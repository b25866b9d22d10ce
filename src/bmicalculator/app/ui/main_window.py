"""
Main Application Window
=======================
A single card holding the calculator: header, error banner, input form,
result and the category legend.
"""
from __future__ import annotations

from PySide6.QtWidgets import QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from bmicalculator.app.application import VISIBLE_APP_NAME
from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.form import FormPanel
from bmicalculator.app.ui.panels.legend import LegendPanel
from bmicalculator.app.ui.panels.result import ResultPanel
from bmicalculator.config import ERROR_COLOR


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 760)

        # Global store
        self.store = store if store is not None else Store(self)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        central = QWidget(scroll)
        v = QVBoxLayout(central)
        v.setContentsMargins(24, 24, 24, 24)
        v.setSpacing(16)
        scroll.setWidget(central)

        # ---- Header ----
        title = QLabel(self.tr("BMI Calculator"), central)
        title.setStyleSheet("font-size: 22px; font-weight: bold;")
        v.addWidget(title)

        description = QLabel(
            self.tr("Calculate your Body Mass Index to check if your weight is healthy."), central
        )
        description.setWordWrap(True)
        v.addWidget(description)

        # ---- General error banner ----
        self.banner = QLabel(central)
        self.banner.setObjectName("general-error")
        self.banner.setWordWrap(True)
        self.banner.setStyleSheet(
            f"QLabel {{ color: {ERROR_COLOR}; border: 1px solid {ERROR_COLOR}; border-radius: 6px; padding: 8px; }}"
        )
        v.addWidget(self.banner)

        # ---- Sections ----
        self.form_panel = FormPanel(self.store, parent=central)
        self.result_panel = ResultPanel(self.store, parent=central)
        self.legend_panel = LegendPanel(self.store, parent=central)
        for panel in (self.form_panel, self.result_panel, self.legend_panel):
            v.addWidget(panel)
        v.addStretch(1)

        self.store.errors_changed.connect(self._refresh_banner)
        self.store.mode_changed.connect(self._refresh_banner)
        self._refresh_banner()

    def _refresh_banner(self, *_) -> None:
        message = self.store.visible_errors().general
        self.banner.setText(message or "")
        self.banner.setVisible(bool(message))
