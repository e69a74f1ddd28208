"""Widget builders — clock, time adjuster cards, and the command button row.

Each builder returns a (container, widget_dict) tuple.  The container is
a QWidget that can be inserted into a layout.  The widget_dict maps
logical names to sub-widgets for later updates.
"""

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from cdt.core.timer_state import TimerState
from cdt.util import format_time

CLOCK_PT = 64
LABEL_PT = 20
BUTTON_PT = 14

# Which buttons are visible in each state, in display order.
BUTTONS_BY_STATE = {
    TimerState.CLEARED: ("start",),
    TimerState.RUNNING: ("pause",),
    TimerState.PAUSED: ("resume", "reset"),
}


def build_clock(font_family, seconds):
    """Big MM:SS label.  Returns (container, widget_dict)."""
    clock_lbl = QLabel(format_time(seconds))
    clock_lbl.setObjectName("clock")
    clock_lbl.setFont(QFont(font_family, CLOCK_PT))
    clock_lbl.setAlignment(Qt.AlignCenter)
    return clock_lbl, {"clock": clock_lbl}


def set_clock_running(clock_lbl, theme, running):
    color = theme["clock_running"] if running else theme["clock_idle"]
    clock_lbl.setStyleSheet(f"color: {color};")


def build_adjuster_card(font_family, name, on_increment, on_decrement):
    """Card with an up arrow, a name, and a down arrow stacked vertically.

    Returns (container, widget_dict).
    """
    card = QWidget()
    card.setObjectName("adjusterCard")
    card.setAttribute(Qt.WA_StyledBackground, True)
    lay = QVBoxLayout(card)
    lay.setContentsMargins(8, 4, 8, 4)
    lay.setSpacing(4)

    up_btn = QToolButton()
    up_btn.setArrowType(Qt.UpArrow)
    up_btn.setToolTip("increment")
    up_btn.setAutoRaise(True)
    up_btn.clicked.connect(lambda _=False: on_increment())
    lay.addWidget(up_btn, 0, Qt.AlignHCenter)

    name_lbl = QLabel(name)
    name_lbl.setFont(QFont(font_family, LABEL_PT))
    name_lbl.setAlignment(Qt.AlignCenter)
    lay.addWidget(name_lbl)

    down_btn = QToolButton()
    down_btn.setArrowType(Qt.DownArrow)
    down_btn.setToolTip("decrement")
    down_btn.setAutoRaise(True)
    down_btn.clicked.connect(lambda _=False: on_decrement())
    lay.addWidget(down_btn, 0, Qt.AlignHCenter)

    return card, {"up": up_btn, "name": name_lbl, "down": down_btn, "container": card}


def build_button_row(font_family, on_start, on_pause, on_reset):
    """Start / Pause / Resume / Reset buttons in one row.

    All four are built once; ``show_buttons_for_state`` picks which are shown.
    Returns (container, widget_dict).
    """
    button_font = QFont(font_family, BUTTON_PT)

    row = QWidget()
    row.setObjectName("buttonRow")
    lay = QHBoxLayout(row)
    lay.setContentsMargins(0, 0, 0, 0)
    lay.setSpacing(32)

    buttons = {}
    for key, text, handler in (
            ("start", "Start", on_start),
            ("pause", "Pause", on_pause),
            ("resume", "Resume", on_start),
            ("reset", "Reset", on_reset),
    ):
        btn = QPushButton(text)
        btn.setFont(button_font)
        btn.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        btn.clicked.connect(lambda _=False, h=handler: h())
        lay.addWidget(btn)
        buttons[key] = btn

    buttons["container"] = row
    return row, buttons


def show_buttons_for_state(buttons, state):
    visible = BUTTONS_BY_STATE[state]
    for key in ("start", "pause", "resume", "reset"):
        buttons[key].setVisible(key in visible)
