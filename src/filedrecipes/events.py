from __future__ import annotations

from collections.abc import Callable


Listener = Callable[[], object]


class Signal:
    """Synchronous, payload-free notification.

    Listeners run on the caller's thread in registration order. An exception
    raised by a listener propagates out of ``emit`` and the remaining
    listeners are not called.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def disconnect(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self) -> None:
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._listeners)
