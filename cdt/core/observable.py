"""Observable value holder — pure logic, no UI."""

from collections.abc import Callable


class Observable:
    """Holds a single value and tells subscribers when it changes.

    Subscribers are plain callables taking the new value. Setting a value
    equal to the current one is silent. Subscribing does not replay the
    current value; read ``value`` for the initial render.
    """

    def __init__(self, value):
        self._value = value
        self._listeners = []

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, new_value):
        if new_value == self._value:
            return
        self._value = new_value
        # Copy so a listener may unsubscribe itself mid-notify
        for listener in list(self._listeners):
            listener(new_value)

    def subscribe(self, listener: Callable) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
