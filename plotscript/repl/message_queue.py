from __future__ import annotations

import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class MessageQueue(Generic[T]):
    """Unbounded FIFO shared between threads.

    `wait_and_pop` blocks on a condition variable until an item is available;
    `push` wakes one waiter.
    """

    def __init__(self):
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def push(self, item: T) -> None:
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def wait_and_pop(self, timeout: float | None = None) -> T:
        """Remove and return the oldest item, blocking while the queue is empty.

        Raises TimeoutError if `timeout` seconds pass without an item.
        """
        with self._cond:
            if not self._cond.wait_for(lambda: self._items, timeout):
                raise TimeoutError("no message received")
            return self._items.popleft()

    def try_pop(self, default: T | None = None) -> T | None:
        with self._cond:
            return self._items.popleft() if self._items else default

    def empty(self) -> bool:
        with self._cond:
            return not self._items

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)
