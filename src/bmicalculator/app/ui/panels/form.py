from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QGridLayout, QLabel, QLineEdit, QPushButton, QSizePolicy, QVBoxLayout, QWidget

from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.base import BasePanel
from bmicalculator.config import ERROR_COLOR
from bmicalculator.model.validation import Field

LABELS = {
    Field.HEIGHT: "Height (cm)",
    Field.WEIGHT: "Weight (kg)",
}


class FormPanel(BasePanel):
    """
    Height / weight inputs and the submit button.

    Every keystroke goes to the store; error labels only show what
    `Store.visible_errors()` allows, so nothing appears before the first submit.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.grid = QGridLayout()
        self.grid.setVerticalSpacing(4)
        root.addLayout(self.grid)

        self._labels: dict[Field, QLabel] = {}
        self._edits: dict[Field, QLineEdit] = {}
        self._error_labels: dict[Field, QLabel] = {}
        self._row = 0
        for field in Field:
            self._add_field(field)

        self.submit_button = QPushButton(self.tr("Calculate BMI"), self)
        self.submit_button.setDefault(True)
        self.submit_button.clicked.connect(self._on_submit)
        root.addWidget(self.submit_button)

        # wiring
        self.store.errors_changed.connect(self._refresh_errors)
        self.store.mode_changed.connect(self._refresh_errors)
        self.store.inputs_changed.connect(self._sync_inputs)
        self._refresh_errors()

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_field(self, field: Field) -> QLineEdit:
        label = QLabel(self.tr(LABELS[field]), self)
        self.grid.addWidget(label, self._next_row(), 0)

        edit = QLineEdit(self)
        edit.setObjectName(field.value)
        edit.setPlaceholderText(self.tr(f"Enter your {field.value}"))
        edit.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        edit.setText(self.store.inputs.text(field))
        edit.textEdited.connect(lambda text, f=field: self.store.set_field_text(f, text))
        edit.returnPressed.connect(self._on_submit)
        label.setBuddy(edit)
        self.grid.addWidget(edit, self._next_row(), 0)

        error = QLabel(self)
        error.setObjectName(f"{field.value}-error")
        error.setStyleSheet(f"color: {ERROR_COLOR}; font-size: 11px;")
        error.setVisible(False)
        self.grid.addWidget(error, self._next_row(), 0)

        self._labels[field] = label
        self._edits[field] = edit
        self._error_labels[field] = error
        return edit

    def edit(self, field: Field) -> QLineEdit:
        return self._edits[field]

    def error_label(self, field: Field) -> QLabel:
        return self._error_labels[field]

    # ---- slots ----

    @Slot()
    def _on_submit(self) -> None:
        self.store.submit()

    def _sync_inputs(self, *_) -> None:
        # setText does not emit textEdited, so this never feeds back into the store
        for field, edit in self._edits.items():
            text = self.store.inputs.text(field)
            if edit.text() != text:
                edit.setText(text)

    def _refresh_errors(self, *_) -> None:
        errors = self.store.visible_errors()
        for field in Field:
            message = errors.for_field(field)
            error = self._error_labels[field]
            error.setText(message or "")
            error.setVisible(bool(message))

            color = f"color: {ERROR_COLOR};" if message else ""
            self._labels[field].setStyleSheet(color)
            self._edits[field].setStyleSheet(f"border: 1px solid {ERROR_COLOR};" if message else "")
            self._edits[field].setToolTip(message or "")
