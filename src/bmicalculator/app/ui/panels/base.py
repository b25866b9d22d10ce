from __future__ import annotations

from PySide6.QtWidgets import QWidget

from bmicalculator.app.state import Store


class BasePanel(QWidget):
    """
    Base class for the sections of the calculator card.

    Every section renders from the one shared Store: it reads the store's
    current inputs, errors and result, and redraws itself when the store
    emits a change signal. Sections never keep their own copy of that state.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
