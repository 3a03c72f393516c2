"""Countdown card: ring with MM / SS digits and the control buttons.

Layout (top → bottom):
    - ProgressRing with minute and second boxes in the centre
    - Button row: Reset (hidden while idle), Start / Pause / Resume

Button label, icon and colour are derived from ``engine.button_state``
on every ``state_changed``; the widget keeps no state of its own.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame, QSizePolicy,
)

from ..timer.engine import TimerEngine, TimerState, ThresholdState, ButtonState
from .progress_ring import ProgressRing
from .styles import (
    BUTTON_ICONS, BUTTON_LABELS,
    button_style, get_palette, threshold_color,
)


class TimerWidget(QWidget):
    """The countdown card shown in the main window."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._palette: dict[str, str] = get_palette("dark")
        self._build_ui()
        self._connect_signals()
        self._refresh_display(engine.value, animate=False)
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop)

        # ── ring with digits ─────────────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._ring = ProgressRing(card)
        self._ring.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self._ring.setFixedSize(220, 220)

        self._minutes_label = QLabel("03", self._ring)
        self._minutes_label.setObjectName("digitBox")
        self._minutes_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._seconds_label = QLabel("00", self._ring)
        self._seconds_label.setObjectName("digitBox")
        self._seconds_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring.layout().addWidget(self._minutes_label)
        self._ring.layout().addWidget(self._seconds_label)

        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        layout.addSpacing(80)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)

        self._reset_btn = QPushButton("↺  Reset", card)
        self._reset_btn.setObjectName("resetButton")

        self._primary_btn = QPushButton(card)
        self._primary_btn.setObjectName("primaryButton")

        btn_row.addWidget(self._reset_btn)
        btn_row.addStretch()
        btn_row.addWidget(self._primary_btn)
        layout.addLayout(btn_row)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._primary_btn.clicked.connect(self.click_primary)
        self._reset_btn.clicked.connect(self.click_reset)

        self._engine.tick.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.threshold_changed.connect(self._apply_threshold)

    # ── actions ───────────────────────────────────────────────────────────

    def click_primary(self) -> None:
        """Start, pause, or resume depending on the engine's state."""
        button = self._engine.button_state
        if button == ButtonState.PLAY:
            self._engine.play()
        elif button == ButtonState.PAUSE:
            self._engine.pause()
        else:
            self._engine.resume()

    def click_reset(self) -> None:
        self._engine.stop()

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: TimerState) -> None:
        button = self._engine.button_state
        self._primary_btn.setText(f"{BUTTON_ICONS[button]}  {BUTTON_LABELS[button]}")
        self._primary_btn.setStyleSheet(button_style(button))
        self._reset_btn.setVisible(button != ButtonState.PLAY)

    def _refresh_display(self, value: float, animate: bool = True) -> None:
        self._minutes_label.setText(f"{self._engine.minutes:02d}")
        self._seconds_label.setText(f"{self._engine.seconds:02d}")
        self._ring.set_fraction(self._engine.fraction, animate=animate)

    def _apply_threshold(self, threshold: ThresholdState) -> None:
        color = threshold_color(threshold, self._palette)
        for label in (self._minutes_label, self._seconds_label):
            label.setStyleSheet(f"color: {color};")

    # ── read-only views (shortcuts, tests) ───────────────────────────────

    @property
    def primary_text(self) -> str:
        return self._primary_btn.text()

    @property
    def reset_visible(self) -> bool:
        return not self._reset_btn.isHidden()

    @property
    def digits(self) -> tuple[str, str]:
        return (self._minutes_label.text(), self._seconds_label.text())

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._palette = palette
        self._apply_threshold(self._engine.threshold)
