from __future__ import annotations

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from bmicalculator.config import CATEGORY_COLORS
from bmicalculator.model.scale import scale_position, scale_segments


class ScaleWidget(pg.PlotWidget):
    """
    Horizontal BMI scale: one colored section per category and a marker
    at the position of the current score (0 - 100 %).
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="w")
        self.setFixedHeight(36)
        self.setMenuEnabled(False)
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.hideAxis("left")
        self.hideAxis("bottom")
        self.setXRange(0.0, 100.0, padding=0)
        self.setYRange(0.0, 1.0, padding=0)

        segments = scale_segments()
        self._bars = pg.BarGraphItem(
            x0=[s.start for s in segments],
            y0=[0.0] * len(segments),
            width=[s.width for s in segments],
            height=[1.0] * len(segments),
            brushes=[pg.mkBrush(CATEGORY_COLORS[s.category.value][0]) for s in segments],
            pen=None,
        )
        self.addItem(self._bars)

        self.indicator = pg.InfiniteLine(
            pos=0.0,
            angle=90,
            movable=False,
            pen=pg.mkPen("w", width=6),
        )
        self.addItem(self.indicator)

    def set_score(self, score: float) -> None:
        """Move the marker to the given score."""
        self.indicator.setValue(scale_position(score))

    def indicator_position(self) -> float:
        return float(self.indicator.value())
