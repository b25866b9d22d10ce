from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from bmicalculator.app.state import Store
from bmicalculator.app.ui.panels.base import BasePanel
from bmicalculator.app.ui.scale import ScaleWidget
from bmicalculator.config import CATEGORY_COLORS, NEUTRAL_COLORS
from bmicalculator.model.evaluator import Category, EvaluationResult


def card_style(category: Category | None, highlighted: bool = False) -> str:
    """Stylesheet of the result card, tinted by category."""
    fill, text = CATEGORY_COLORS[category.value] if category else NEUTRAL_COLORS
    border = 3 if highlighted else 1
    return (
        f"QFrame#result-card {{ border: {border}px solid {fill}; border-radius: 8px; }}"
        f"QFrame#result-card QLabel {{ color: {text}; }}"
    )


class ResultPanel(BasePanel):
    """
    Last computed BMI: score, category label and the position on the scale.

    Hidden until the first successful calculation, then always shows the
    latest result (a rejected submission leaves it untouched).
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.card = QFrame(self)
        self.card.setObjectName("result-card")
        root.addWidget(self.card)

        v = QVBoxLayout(self.card)
        heading = QLabel(self.tr("Your BMI Result"), self.card)
        heading.setStyleSheet("font-weight: 600;")
        v.addWidget(heading)

        self.score_label = QLabel(self.card)
        self.score_label.setStyleSheet("font-size: 28px; font-weight: bold;")
        v.addWidget(self.score_label)

        self.category_label = QLabel(self.card)
        self.category_label.setStyleSheet("font-weight: 600;")
        v.addWidget(self.category_label)

        self.scale = ScaleWidget(self.card)
        v.addWidget(self.scale)

        captions = QGridLayout()
        for col, category in enumerate(Category):
            name = QLabel(self.tr(category.short_label), self.card)
            name.setAlignment(Qt.AlignmentFlag.AlignCenter)
            value = QLabel(category.range_text.replace(" ", ""), self.card)
            value.setAlignment(Qt.AlignmentFlag.AlignCenter)
            captions.addWidget(name, 0, col)
            captions.addWidget(value, 1, col)
        v.addLayout(captions)

        # wiring
        self.store.result_changed.connect(self._on_result_changed)
        self.store.highlight_changed.connect(self._apply_style)
        self._on_result_changed(self.store.result)

    def _on_result_changed(self, result: EvaluationResult | None) -> None:
        self.setVisible(result is not None)
        if result is None:
            return
        self.score_label.setText(f"{result.score:.1f}")
        self.category_label.setText(self.tr(result.category.label))
        self.scale.set_score(result.score)
        self._apply_style()

    def _apply_style(self, *_) -> None:
        result = self.store.result
        category = result.category if result else None
        self.card.setStyleSheet(card_style(category, self.store.highlighted))
