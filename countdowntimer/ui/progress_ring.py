"""Circular countdown arc rendered with QPainter.

- A light grey full circle sits behind the arc.
- The green arc starts full and depletes clockwise from 12 o'clock.
- Arc changes are animated so half-second steps read as smooth motion.
- Child widgets laid out on the ring (the clock digits) are centred.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor
from PyQt6.QtWidgets import QWidget, QHBoxLayout

from .styles import RING_ARC, RING_TRACK


class ProgressRing(QWidget):
    """Custom-painted circular countdown ring."""

    RING_DIAMETER = 190
    RING_THICKNESS = 10

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 30, self.RING_DIAMETER + 30)

        self._fraction: float = 1.0
        self._display_fraction: float = 1.0
        self._track_color = QColor(RING_TRACK)
        self._arc_color = QColor(RING_ARC)

        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(400)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

        content = QHBoxLayout(self)
        content.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content.setSpacing(8)

    # ── public API ──────────────────────────────────────────────────────

    @property
    def fraction(self) -> float:
        return self._fraction

    def set_fraction(self, fraction: float, animate: bool = True) -> None:
        """Update the arc (1.0 = full circle)."""
        fraction = max(0.0, min(1.0, fraction))
        self._fraction = fraction
        self._arc_anim.stop()
        if not animate:
            self._display_fraction = fraction
            self.update()
            return
        self._arc_anim.setStartValue(self._display_fraction)
        self._arc_anim.setEndValue(fraction)
        self._arc_anim.start()

    def _on_arc_anim(self, value: object) -> None:
        self._display_fraction = float(value)  # type: ignore[arg-type]
        self.update()

    # ── painting ────────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(60, min(w, h) - 30)
        radius = diameter / 2
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        track_pen = QPen(self._track_color, self.RING_THICKNESS, Qt.PenStyle.SolidLine)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        if self._display_fraction > 0.001:
            arc_pen = QPen(self._arc_color, self.RING_THICKNESS, Qt.PenStyle.SolidLine)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            # Qt arcs: start at 12 o'clock (90*16), go clockwise (negative)
            span_angle = -int(self._display_fraction * 360 * 16)
            painter.drawArc(ring_rect, 90 * 16, span_angle)

        painter.end()
