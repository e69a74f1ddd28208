import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)
from cdt.common.logger import log
from cdt.core import config
from cdt.core.ticker import QtTickSource
from cdt.core.timer_state import TimerController, TimerState
from cdt.ui.theme import THEMES, build_stylesheet
from cdt.ui.widgets import (
    build_adjuster_card,
    build_button_row,
    build_clock,
    set_clock_running,
    show_buttons_for_state,
)
from cdt.util import format_time

MINUTE_IN_SECONDS = 60
SECOND = 1


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the countdown timer. It only renders controller state and forwards button clicks as commands; all
# countdown logic lives in TimerController.
class MainWindow(QMainWindow):

    def __init__(self, settings=None, tick_source=None):
        super().__init__()
        self.setWindowTitle("Countdown Timer")

        # -- Settings --
        s = settings if settings is not None else config.load_settings()
        self.theme = s.get("theme", "Light")
        if self.theme not in THEMES:
            self.theme = "Light"
        self.font_family = s.get("font", "Segoe UI")
        self.always_on_top = s.get("always_on_top", False)

        if self.always_on_top:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Controller --
        if tick_source is None:
            tick_source = QtTickSource(parent=self)
        self.controller = TimerController(tick_source)

        # -- Build UI --
        central = QWidget()
        self.setCentralWidget(central)
        main_lay = QVBoxLayout(central)
        main_lay.setContentsMargins(24, 24, 24, 24)
        main_lay.setSpacing(24)

        self._adjusters = QWidget()
        adj_lay = QHBoxLayout(self._adjusters)
        adj_lay.setContentsMargins(0, 0, 0, 0)
        adj_lay.setSpacing(24)
        minutes_card, self._minutes = build_adjuster_card(
            self.font_family, "Minutes",
            on_increment=lambda: self.controller.modify_time(True, MINUTE_IN_SECONDS),
            on_decrement=lambda: self.controller.modify_time(False, MINUTE_IN_SECONDS),
        )
        seconds_card, self._seconds = build_adjuster_card(
            self.font_family, "Seconds",
            on_increment=lambda: self.controller.modify_time(True, SECOND),
            on_decrement=lambda: self.controller.modify_time(False, SECOND),
        )
        adj_lay.addWidget(minutes_card)
        adj_lay.addWidget(seconds_card)
        main_lay.addWidget(self._adjusters, 0, Qt.AlignHCenter)

        self._clock, _ = build_clock(self.font_family, self.controller.remaining)
        main_lay.addWidget(self._clock)

        button_row, self._buttons = build_button_row(
            self.font_family,
            on_start=self.controller.start,
            on_pause=self.controller.pause,
            on_reset=self.controller.clear,
        )
        main_lay.addWidget(button_row, 0, Qt.AlignHCenter)

        self.setStyleSheet(build_stylesheet(self.theme))

        # -- Bind observables --
        self._unsubscribers = [
            self.controller.time.subscribe(self._on_time_changed),
            self.controller.state.subscribe(self._on_state_changed),
        ]
        self._on_state_changed(self.controller.current_state)
        QTimer.singleShot(0, self.adjustSize)

    # ------------------------------------------------------------------ #
    #  Rendering                                                           #
    # ------------------------------------------------------------------ #

    def _on_time_changed(self, seconds):
        self._clock.setText(format_time(seconds))

    def _on_state_changed(self, state):
        running = state == TimerState.RUNNING
        self._adjusters.setVisible(not running)
        set_clock_running(self._clock, THEMES[self.theme], running)
        show_buttons_for_state(self._buttons, state)

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self.controller.close()
        log.info("Main window closed")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
