"""Periodic tick sources that drive the countdown.

A tick source hands out subscriptions: each one calls ``on_tick()`` once per
interval until cancelled.  If delivering a tick fails, the subscription stops
itself and reports the exception through ``on_error(exc)`` — no further ticks
arrive after that.
"""

from collections.abc import Callable
from typing import Protocol

from PySide6.QtCore import QObject, Qt, QTimer
from cdt.common.logger import log

DEFAULT_INTERVAL_MS = 1000


class TickSubscription(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class TickSource(Protocol):
    def subscribe(self, on_tick: Callable[[], None],
                  on_error: Callable[[Exception], None]) -> TickSubscription: ...


class QtTickSubscription:
    """One QTimer-backed stream of ticks.  ``cancel()`` is safe to repeat."""

    def __init__(self, interval_ms, on_tick, on_error, parent=None):
        self._on_tick = on_tick
        self._on_error = on_error
        self._timer = QTimer(parent)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._deliver)
        self._timer.start()

    @property
    def active(self):
        return self._timer is not None

    def cancel(self):
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.timeout.disconnect(self._deliver)
        self._timer.deleteLater()
        self._timer = None

    def _deliver(self):
        if self._timer is None:
            return
        try:
            self._on_tick()
        except Exception as exc:
            log.warning("Tick delivery failed, terminating tick stream", exc_info=True)
            self.cancel()
            self._on_error(exc)


class QtTickSource:
    """Tick source running on the Qt event loop, so ticks land on the UI thread.

    The first tick fires one full interval after ``subscribe()``.
    """

    def __init__(self, interval_ms=DEFAULT_INTERVAL_MS, parent: QObject | None = None):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        self.interval_ms = int(interval_ms)
        self._parent = parent

    def subscribe(self, on_tick, on_error):
        log.debug(f"Subscribing to Qt tick source every {self.interval_ms} ms")
        return QtTickSubscription(self.interval_ms, on_tick, on_error, self._parent)
