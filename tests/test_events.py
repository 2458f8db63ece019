from __future__ import annotations

from filedrecipes.events import Signal


def test_emit_calls_listeners_in_order() -> None:
    signal = Signal()
    calls: list[str] = []
    signal.connect(lambda: calls.append("a"))
    signal.connect(lambda: calls.append("b"))
    signal.emit()
    signal.emit()
    assert calls == ["a", "b", "a", "b"]


def test_disconnect() -> None:
    signal = Signal()
    calls: list[str] = []
    listener = signal.connect(lambda: calls.append("a"))
    assert len(signal) == 1
    signal.disconnect(listener)
    signal.disconnect(listener)
    signal.emit()
    assert calls == []
    assert len(signal) == 0


def test_listener_may_disconnect_itself() -> None:
    signal = Signal()
    calls: list[str] = []

    def once() -> None:
        calls.append("once")
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda: calls.append("other"))
    signal.emit()
    signal.emit()
    assert calls == ["once", "other", "other"]
