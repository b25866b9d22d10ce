from __future__ import annotations

from PySide6.QtWidgets import QFrame, QGroupBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.base import BasePanel
from bmicalculator.config import CATEGORY_COLORS
from bmicalculator.model.evaluator import Category

LEGEND_NAMES = {
    Category.UNDERWEIGHT: "Underweight",
    Category.NORMAL: "Normal",
    Category.OVERWEIGHT: "Overweight",
    Category.OBESE: "Obese",
}


class LegendPanel(BasePanel):
    """Static list of the four categories with their score ranges."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        box = QGroupBox(self.tr("BMI Categories"), self)
        root.addWidget(box)
        v = QVBoxLayout(box)

        self.entries: list[QLabel] = []
        for category in Category:
            row = QHBoxLayout()
            dot = QFrame(box)
            dot.setFixedSize(12, 12)
            dot.setStyleSheet(f"background-color: {CATEGORY_COLORS[category.value][0]}; border-radius: 6px;")
            row.addWidget(dot)

            text = QLabel(f"{self.tr(LEGEND_NAMES[category])}: {category.range_text}", box)
            row.addWidget(text, 1)
            v.addLayout(row)
            self.entries.append(text)
