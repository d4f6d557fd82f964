from __future__ import annotations

import threading

from plotscript.errors import PlotscriptInterrupted


class Interrupt:
    """Cancellation token shared by an interpreter and every environment it creates.

    The evaluator calls `check` on entry to each evaluation step. Setting the
    token from any thread aborts the in-flight evaluation; it stays set until
    the owner clears it.
    """

    __slots__ = ("_event",)

    def __init__(self):
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def clear(self) -> None:
        self._event.clear()

    def is_set(self) -> bool:
        return self._event.is_set()

    def check(self) -> None:
        if self._event.is_set():
            raise PlotscriptInterrupted("Error: interpreter kernel interrupted")

    def __repr__(self) -> str:
        return f"<Interrupt set={self.is_set()}>"
