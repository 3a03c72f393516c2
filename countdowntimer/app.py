"""Main application window for Countdown Timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QFrame, QStatusBar,
)

from .timer.engine import TimerEngine, TimerState
from .ui.timer_widget import TimerWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, THEMES, load_settings, save_settings


log = logging.getLogger(__name__)

_STATUS_TEXT: dict[TimerState, str] = {
    TimerState.IDLE:    "Ready",
    TimerState.RUNNING: "Counting down",
    TimerState.PAUSED:  "Paused",
}

FINISHED_TEXT = "Time's up"
FINISHED_MESSAGE_MS = 3000


class CountdownTimerApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Countdown Timer")
        self.setMinimumSize(360, 520)

        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        self._status_restore_timer = QTimer(self)
        self._status_restore_timer.setSingleShot(True)
        self._status_restore_timer.setInterval(FINISHED_MESSAGE_MS)
        self._status_restore_timer.timeout.connect(self._restore_status)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(self)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(12)

        root_layout.addWidget(self._build_app_bar(central))

        self._timer_widget = TimerWidget(self._timer_engine, central)
        root_layout.addWidget(self._timer_widget)
        root_layout.addStretch()

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._status_bar.showMessage(_STATUS_TEXT[TimerState.IDLE])

        # ── theme ─────────────────────────────────────────────────────
        self._apply_theme(self._settings.theme)

        # ── wire signals ──────────────────────────────────────────────
        self._timer_engine.state_changed.connect(self._on_state_changed)
        self._timer_engine.finished.connect(self._on_finished)

        # ── restore window state ───────────────────────────────────────
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

        self._setup_shortcuts()

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    # ══════════════════════════════════════════════════════════════════
    #  APP BAR
    # ══════════════════════════════════════════════════════════════════

    def _build_app_bar(self, parent: QWidget) -> QWidget:
        bar = QFrame(parent)
        bar.setObjectName("appBar")
        bar.setFixedHeight(56)
        layout = QHBoxLayout(bar)
        layout.setContentsMargins(16, 0, 16, 0)
        layout.setSpacing(24)

        icon = QLabel("☰", bar)
        icon.setObjectName("appBarIcon")
        icon.setToolTip("menu")
        title = QLabel("Countdown Timer", bar)
        title.setObjectName("appBarTitle")

        layout.addWidget(icon)
        layout.addWidget(title)
        layout.addStretch()
        return bar

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_state_changed(self, state: TimerState) -> None:
        self._status_restore_timer.stop()
        self._status_bar.showMessage(_STATUS_TEXT[state])

    def _on_finished(self) -> None:
        # Held until the restore timer puts the idle text back.
        self._status_bar.showMessage(FINISHED_TEXT)
        self._status_restore_timer.start()

    def _restore_status(self) -> None:
        self._status_bar.showMessage(_STATUS_TEXT[self._timer_engine.state])

    # ══════════════════════════════════════════════════════════════════
    #  THEME
    # ══════════════════════════════════════════════════════════════════

    @property
    def theme(self) -> str:
        return self._current_theme_key

    def _apply_theme(self, theme_key: str) -> None:
        self._current_theme_key = theme_key
        palette = get_palette(theme_key)
        self.setStyleSheet(build_stylesheet(palette))
        self._timer_widget.apply_palette(palette)

    def _toggle_theme(self) -> None:
        idx = THEMES.index(self._current_theme_key) if self._current_theme_key in THEMES else -1
        next_key = THEMES[(idx + 1) % len(THEMES)]
        self._apply_theme(next_key)
        self._settings.theme = next_key
        self._persist_settings()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE (geometry, always-on-top)
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        self._persist_settings()

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves — restart 500ms timer on each move/resize."""
        self._geometry_save_timer.start()

    def _persist_settings(self) -> None:
        try:
            save_settings(self._settings)
        except OSError as exc:
            log.error("Could not save settings: %s", exc)

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        self._persist_settings()
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        """Apply or remove WindowStaysOnTopHint."""
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        was_visible = self.isVisible()
        self.setWindowFlags(flags)
        if was_visible:
            self.show()  # Required: setWindowFlags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        """Register Ctrl+T / Ctrl+Shift+A (Space/Esc handled via keyPressEvent)."""
        toggle_theme = QAction("Toggle Theme", self)
        toggle_theme.setShortcut(QKeySequence("Ctrl+T"))
        toggle_theme.triggered.connect(self._toggle_theme)
        self.addAction(toggle_theme)

        on_top = QAction("Always on Top", self)
        on_top.setShortcut(QKeySequence("Ctrl+Shift+A"))
        on_top.triggered.connect(self._toggle_always_on_top)
        self.addAction(on_top)

    def _on_space(self) -> None:
        """Same as clicking the primary button."""
        self._timer_widget.click_primary()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when idle)."""
        if self._timer_engine.state != TimerState.IDLE:
            self._timer_widget.click_reset()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        self._timer_engine.stop()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause/resume) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
