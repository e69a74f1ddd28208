"""Tests for the Qt layer — tick source, widgets, and main window binding.

Covers: cdt.core.ticker, cdt.ui.widgets, cdt.ui.app, cdt.util
"""

import unittest

from PySide6.QtWidgets import QApplication

from tests.fakes import ManualTickSource


def _app():
    return QApplication.instance() or QApplication([])


# ──────────────────────────────────────────────────────────────────────────
# util tests
# ──────────────────────────────────────────────────────────────────────────

class TestFormatTime(unittest.TestCase):

    def test_pads_minutes_and_seconds(self):
        from cdt.util import format_time
        self.assertEqual(format_time(0), "00:00")
        self.assertEqual(format_time(61), "01:01")
        self.assertEqual(format_time(599), "09:59")

    def test_minutes_not_wrapped_into_hours(self):
        from cdt.util import format_time
        self.assertEqual(format_time(100 * 60 + 5), "100:05")

    def test_util_exports_only_format_time(self):
        import cdt.util
        self.assertEqual(cdt.util.__all__, ["format_time"])
        self.assertFalse(hasattr(cdt.util, "now_iso"))

    def test_negative_clamps(self):
        from cdt.util import format_time
        self.assertEqual(format_time(-3), "00:00")


# ──────────────────────────────────────────────────────────────────────────
# ticker.py tests
# ──────────────────────────────────────────────────────────────────────────

class TestQtTickSource(unittest.TestCase):
    """Exercises QtTickSubscription without spinning the event loop."""

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def test_rejects_non_positive_interval(self):
        from cdt.core.ticker import QtTickSource
        with self.assertRaises(ValueError):
            QtTickSource(0)

    def test_subscription_starts_timer_with_interval(self):
        from cdt.core.ticker import QtTickSource
        sub = QtTickSource(250).subscribe(lambda: None, lambda exc: None)
        try:
            self.assertTrue(sub.active)
            self.assertTrue(sub._timer.isActive())
            self.assertEqual(sub._timer.interval(), 250)
        finally:
            sub.cancel()

    def test_timeout_delivers_tick(self):
        from cdt.core.ticker import QtTickSource
        ticks = []
        sub = QtTickSource().subscribe(lambda: ticks.append(1), lambda exc: None)
        sub._timer.timeout.emit()
        sub._timer.timeout.emit()
        sub.cancel()
        self.assertEqual(ticks, [1, 1])

    def test_cancel_is_idempotent_and_stops_delivery(self):
        from cdt.core.ticker import QtTickSource
        ticks = []
        sub = QtTickSource().subscribe(lambda: ticks.append(1), lambda exc: None)
        sub.cancel()
        sub.cancel()
        self.assertFalse(sub.active)
        sub._deliver()
        self.assertEqual(ticks, [])

    def test_failing_tick_reports_error_and_stops(self):
        from cdt.core.ticker import QtTickSource
        errors = []

        def boom():
            raise RuntimeError("boom")

        sub = QtTickSource().subscribe(boom, errors.append)
        sub._deliver()
        self.assertFalse(sub.active)
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], RuntimeError)

    def test_controller_pauses_when_qt_tick_fails(self):
        from cdt.core.ticker import QtTickSource
        from cdt.core.timer_state import TimerController, TimerState

        source = QtTickSource()
        ctl = TimerController(source)
        ctl.modify_time(True, 5)
        ctl.start()
        def broken():
            raise RuntimeError("broken")

        sub = ctl._subscription
        sub._on_tick = broken
        sub._deliver()
        self.assertEqual(ctl.current_state, TimerState.PAUSED)
        self.assertIsNone(ctl._subscription)
        self.assertEqual(ctl.remaining, 5)


# ──────────────────────────────────────────────────────────────────────────
# MainWindow tests
# ──────────────────────────────────────────────────────────────────────────

class TestMainWindow(unittest.TestCase):
    """Main window is a passive renderer of controller state."""

    @classmethod
    def setUpClass(cls):
        cls.app = _app()

    def setUp(self):
        from cdt.core.config import build_default_settings
        from cdt.ui.app import MainWindow
        self.ticks = ManualTickSource()
        self.win = MainWindow(settings=build_default_settings(), tick_source=self.ticks)

    def tearDown(self):
        self.win.close()
        self.win.deleteLater()

    def _shown_buttons(self):
        return [k for k in ("start", "pause", "resume", "reset")
                if not self.win._buttons[k].isHidden()]

    def test_initial_render(self):
        self.assertEqual(self.win._clock.text(), "00:00")
        self.assertEqual(self._shown_buttons(), ["start"])
        self.assertFalse(self.win._adjusters.isHidden())

    def test_adjuster_buttons_modify_time(self):
        self.win._minutes["up"].click()
        self.win._minutes["up"].click()
        self.win._seconds["up"].click()
        self.assertEqual(self.win.controller.remaining, 121)
        self.assertEqual(self.win._clock.text(), "02:01")
        self.win._minutes["down"].click()
        self.win._seconds["down"].click()
        self.assertEqual(self.win._clock.text(), "01:00")

    def test_running_hides_adjusters_and_shows_pause(self):
        self.win._seconds["up"].click()
        self.win._buttons["start"].click()
        self.assertEqual(self._shown_buttons(), ["pause"])
        self.assertTrue(self.win._adjusters.isHidden())

    def test_ticks_update_clock(self):
        self.win.controller.modify_time(True, 65)
        self.win._buttons["start"].click()
        self.ticks.tick(6)
        self.assertEqual(self.win._clock.text(), "00:59")

    def test_paused_shows_resume_and_reset(self):
        self.win.controller.modify_time(True, 10)
        self.win._buttons["start"].click()
        self.win._buttons["pause"].click()
        self.assertEqual(self._shown_buttons(), ["resume", "reset"])
        self.assertFalse(self.win._adjusters.isHidden())

    def test_resume_and_reset(self):
        from cdt.core.timer_state import TimerState
        self.win.controller.modify_time(True, 10)
        self.win._buttons["start"].click()
        self.win._buttons["pause"].click()
        self.win._buttons["resume"].click()
        self.assertEqual(self.win.controller.current_state, TimerState.RUNNING)
        self.win._buttons["pause"].click()
        self.win._buttons["reset"].click()
        self.assertEqual(self.win.controller.current_state, TimerState.CLEARED)
        self.assertEqual(self.win._clock.text(), "00:00")
        self.assertEqual(self._shown_buttons(), ["start"])

    def test_clock_colour_follows_running(self):
        from cdt.ui.theme import THEMES
        theme = THEMES["Light"]
        self.assertIn(theme["clock_idle"], self.win._clock.styleSheet())
        self.win._buttons["start"].click()
        self.assertIn(theme["clock_running"], self.win._clock.styleSheet())

    def test_default_tick_source_is_one_second(self):
        """Settings cannot change the tick rate; the window always ticks every 1000 ms."""
        from cdt.core.config import build_default_settings
        from cdt.ui.app import MainWindow
        s = build_default_settings()
        s["tick_interval_ms"] = 100
        win = MainWindow(settings=s)
        try:
            win.controller.modify_time(True, 5)
            win.controller.start()
            self.assertEqual(win.controller._subscription._timer.interval(), 1000)
        finally:
            win.close()
            win.deleteLater()

    def test_missing_theme_falls_back_to_light(self):
        """A settings dict without "theme" still builds a Light window."""
        from cdt.ui.app import MainWindow
        win = MainWindow(settings={}, tick_source=ManualTickSource())
        try:
            self.assertEqual(win.theme, "Light")
            self.assertEqual(win.font_family, "Segoe UI")
        finally:
            win.close()
            win.deleteLater()

    def test_close_releases_tick_subscription(self):
        self.win.controller.modify_time(True, 10)
        self.win._buttons["start"].click()
        self.win.show()
        self.win.close()
        self.assertEqual(self.ticks.active_subscriptions, [])


if __name__ == "__main__":
    unittest.main()
