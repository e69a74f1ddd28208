from enum import Enum
from cdt.common.logger import log
from cdt.core.observable import Observable


class TimerState(Enum):
    CLEARED = "Cleared"
    RUNNING = "Running"
    PAUSED = "Paused"


# This object owns the countdown: remaining whole seconds plus the Cleared/Running/Paused state. It never touches
# widgets, the UI just subscribes to `time` and `state`. Ticks come from an injected tick source, and at most one
# tick subscription is alive at any moment (only while RUNNING).
class TimerController:

    def __init__(self, tick_source):
        self._tick_source = tick_source
        self._subscription = None
        self.time = Observable(0)
        self.state = Observable(TimerState.CLEARED)
        log.debug("Initialized new countdown controller")

    @property
    def remaining(self) -> int:
        return self.time.value

    @property
    def current_state(self) -> TimerState:
        return self.state.value

    # Scoped usage, so the tick subscription is always released when the owner goes away.
    def __enter__(self):
        return self
    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    # Back to 0:00, nothing ticking.
    def clear(self):
        self._cancel_subscription()
        self.time.value = 0
        self.state.value = TimerState.CLEARED
        log.debug("Cleared countdown")

    # Starts (or resumes) ticking. Any previous subscription is dropped first so a double start can never leave two
    # streams decrementing the same countdown.
    def start(self):
        self._cancel_subscription()
        self._subscription = self._tick_source.subscribe(self._on_tick, self._on_tick_error)
        self.state.value = TimerState.RUNNING
        log.debug(f"Started countdown at {self.time.value} seconds")

    # Stops ticking but keeps the remaining time.
    def pause(self):
        self._cancel_subscription()
        self.state.value = TimerState.PAUSED
        log.debug(f"Paused countdown at {self.time.value} seconds")

    # Adds or removes `amount` seconds. Decrementing is a no-op at 0 and otherwise clamps at 0.
    def modify_time(self, increment: bool, amount: int):
        current = self.time.value
        if increment:
            self.time.value = max(0, current + amount)
        elif current > 0:
            self.time.value = max(0, current - amount)
        log.debug(f"Modified countdown by {'+' if increment else '-'}{amount}, now {self.time.value} seconds")

    # Releases the tick subscription. Safe to call more than once.
    def close(self):
        if self._subscription is not None:
            log.debug("Closing countdown controller, releasing tick subscription")
        self._cancel_subscription()

    def _cancel_subscription(self):
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _on_tick(self):
        if self.time.value > 0:
            self.time.value -= 1

    # Tick source failures stop the countdown gracefully instead of crashing.
    def _on_tick_error(self, exc):
        log.warning(f"Tick source failed ({exc!r}), pausing countdown at {self.time.value} seconds")
        self._cancel_subscription()
        self.state.value = TimerState.PAUSED
