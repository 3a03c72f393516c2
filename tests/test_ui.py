"""Tests for the countdown card and the main window.

Covers:
- Primary button label / icon derived from engine state
- Reset button visibility
- MM / SS digits and threshold colours
- Keyboard handlers (_on_space, _on_escape)
- Theme toggle and always-on-top persistence
"""

from __future__ import annotations

import json

import pytest
from PyQt6.QtTest import QTest

from countdowntimer.app import CountdownTimerApp, FINISHED_TEXT
from countdowntimer.settings import Settings
from countdowntimer.timer.engine import TimerState, ThresholdState, TIME_LIMIT
from countdowntimer.ui.progress_ring import ProgressRing
from countdowntimer.ui.styles import (
    PAUSE_COLORS, STOP_TEXT, get_palette, threshold_color, build_stylesheet,
)
from countdowntimer.ui.timer_widget import TimerWidget

from helpers import advance


@pytest.fixture
def widget(engine):
    return TimerWidget(engine)


@pytest.fixture
def window(qapp):
    win = CountdownTimerApp(Settings())
    yield win
    win.engine.stop()


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


class TestTimerWidget:

    def test_initial_display(self, widget):
        assert widget.digits == ("03", "00")
        assert widget.primary_text.endswith("Start")
        assert widget.reset_visible is False

    def test_button_cycle(self, widget, engine):
        widget.click_primary()
        assert engine.state == TimerState.RUNNING
        assert widget.primary_text.endswith("Pause")
        assert widget.reset_visible is True

        widget.click_primary()
        assert engine.state == TimerState.PAUSED
        assert widget.primary_text.endswith("Resume")
        assert widget.reset_visible is True

        widget.click_primary()
        assert engine.state == TimerState.RUNNING
        assert widget.primary_text.endswith("Pause")

    def test_reset_returns_to_start(self, widget, engine):
        widget.click_primary()
        advance(engine, 20)
        widget.click_reset()
        assert engine.state == TimerState.IDLE
        assert engine.value == TIME_LIMIT
        assert widget.primary_text.endswith("Start")
        assert widget.reset_visible is False
        assert widget.digits == ("03", "00")

    def test_digits_follow_ticks(self, widget, engine):
        widget.click_primary()
        advance(engine, 1)
        assert widget.digits == ("02", "59")
        advance(engine, 120)
        assert widget.digits == ("01", "59")

    def test_button_reflects_auto_reset(self, widget, engine):
        widget.click_primary()
        advance(engine, 360)
        assert widget.primary_text.endswith("Start")
        assert widget.reset_visible is False

    def test_engine_driven_externally_updates_button(self, widget, engine):
        engine.play()
        engine.pause()
        assert widget.primary_text.endswith("Resume")

    def test_threshold_colours(self, widget, engine):
        widget.click_primary()
        advance(engine, 350)
        assert PAUSE_COLORS[1] in widget._minutes_label.styleSheet()
        advance(engine, 6)
        assert STOP_TEXT in widget._seconds_label.styleSheet()
        advance(engine, 4)
        text = get_palette("dark")["text"]
        assert text in widget._minutes_label.styleSheet()


class TestStyles:

    def test_threshold_color(self):
        palette = get_palette("light")
        assert threshold_color(ThresholdState.NONE, palette) == palette["text"]
        assert threshold_color(ThresholdState.WARNING, palette) == PAUSE_COLORS[1]
        assert threshold_color(ThresholdState.ALERT, palette) == STOP_TEXT

    def test_unknown_theme_falls_back_to_dark(self):
        assert get_palette("nope") == get_palette("dark")

    @pytest.mark.parametrize("theme", ["dark", "light"])
    def test_stylesheet_builds(self, theme):
        qss = build_stylesheet(get_palette(theme))
        assert "QPushButton#resetButton" in qss


@pytest.mark.usefixtures("qapp")
class TestProgressRing:

    def test_set_fraction_clamps(self):
        ring = ProgressRing()
        ring.set_fraction(1.5, animate=False)
        assert ring.fraction == 1.0
        ring.set_fraction(-0.2, animate=False)
        assert ring.fraction == 0.0

    def test_repaint_does_not_raise(self):
        ring = ProgressRing()
        ring.resize(220, 220)
        for pct in (1.0, 0.5, 0.0):
            ring.set_fraction(pct, animate=False)
            ring.repaint()


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


class TestMainWindow:

    def test_title(self, window):
        assert window.windowTitle() == "Countdown Timer"

    def test_space_cycles_primary_button(self, window):
        window._on_space()
        assert window.engine.state == TimerState.RUNNING
        window._on_space()
        assert window.engine.state == TimerState.PAUSED
        window._on_space()
        assert window.engine.state == TimerState.RUNNING

    def test_escape_resets(self, window):
        window._on_space()
        advance(window.engine, 10)
        window._on_escape()
        assert window.engine.state == TimerState.IDLE
        assert window.engine.value == TIME_LIMIT

    def test_escape_noop_when_idle(self, window):
        window._on_escape()
        assert window.engine.state == TimerState.IDLE

    def test_toggle_theme_persists(self, window, settings_dir):
        assert window.theme == "dark"
        window._toggle_theme()
        assert window.theme == "light"
        data = json.loads((settings_dir / "settings.json").read_text())
        assert data["theme"] == "light"
        window._toggle_theme()
        assert window.theme == "dark"

    def test_toggle_always_on_top_persists(self, window, settings_dir):
        window._toggle_always_on_top()
        data = json.loads((settings_dir / "settings.json").read_text())
        assert data["always_on_top"] is True

    def test_status_shows_ready_after_finish(self, window):
        window._status_restore_timer.setInterval(50)
        window._on_space()
        advance(window.engine, 360)
        assert window.statusBar().currentMessage() == FINISHED_TEXT

        QTest.qWait(300)
        assert window.statusBar().currentMessage() == "Ready"

    def test_state_change_cancels_finished_message(self, window):
        window._status_restore_timer.setInterval(50)
        window._on_space()
        advance(window.engine, 360)
        window._on_space()
        assert window.statusBar().currentMessage() == "Counting down"

        QTest.qWait(300)
        assert window.statusBar().currentMessage() == "Counting down"

    def test_restores_size_from_settings(self, qapp):
        win = CountdownTimerApp(Settings(window_width=500, window_height=700))
        assert win.width() == 500
        assert win.height() == 700
