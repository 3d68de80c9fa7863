"""Bounded stacks: a plain array stack and one built from two queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from dsakit.queues import _Bounded, _checked_capacity


class BoundedStack(_Bounded):
    """LIFO stack holding at most ``capacity`` items.

    Iteration runs from the bottom of the stack to the top.
    """

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def pop(self) -> Any:
        self._ensure_items()
        return self._items.pop()

    def peek(self) -> Any:
        self._ensure_items()
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))


class QueueStack(_Bounded):
    """LIFO stack built from two FIFO queues.

    Each push enqueues onto the spare queue, moves every item of the
    main queue behind it and swaps the two, so the newest item is
    always at the front of the main queue. Iteration runs from the top
    of the stack to the bottom.
    """

    overflow_message = "Queue Overflow"
    underflow_message = "Stack Underflow"

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _checked_capacity(capacity)
        self._main: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, item: Any) -> None:
        self._ensure_room()
        self._spare.append(item)
        while self._main:
            self._spare.append(self._main.popleft())
        self._main, self._spare = self._spare, self._main

    def pop(self) -> Any:
        self._ensure_items()
        return self._main.popleft()

    def is_full(self) -> bool:
        return len(self._main) == self.capacity

    def is_empty(self) -> bool:
        return not self._main

    def __len__(self) -> int:
        return len(self._main)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._main))