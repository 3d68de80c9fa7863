"""Bounded queue variants: circular, linear, double-ended, priority and two-stack."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any, ClassVar

from dsakit.errors import CapacityError, EmptyError


def _checked_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class _Bounded:
    """Overflow and underflow checks shared by collections of limited size."""

    overflow_message: ClassVar[str] = "Overflow"
    underflow_message: ClassVar[str] = "Underflow"
    capacity: int

    def _ensure_room(self) -> None:
        if self.is_full():
            raise CapacityError(self.overflow_message)

    def _ensure_items(self) -> None:
        if self.is_empty():
            raise EmptyError(self.underflow_message)

    def is_full(self) -> bool:
        return len(self) == self.capacity

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class CircularQueue(_Bounded):
    """FIFO queue whose slots are reused once items leave the front."""

    overflow_message = "Queue Overflow"
    underflow_message = "Queue Underflow"

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def dequeue(self) -> Any:
        self._ensure_items()
        return self._items.popleft()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))


class LinearQueue(_Bounded):
    """FIFO queue whose slots are never reused.

    Once ``capacity`` items have been enqueued the queue stays full,
    even after items are dequeued.
    """

    overflow_message = "Queue Overflow"
    underflow_message = "Queue Underflow"

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def dequeue(self) -> Any:
        self._ensure_items()
        item = self._items[self._front]
        self._front += 1
        return item

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return self._front == len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front:])


class Deque(_Bounded):
    """Bounded double-ended queue."""

    overflow_message = "Deque Overflow"
    underflow_message = "Deque Underflow"

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: deque[Any] = deque()

    def push_left(self, item: Any) -> None:
        self._ensure_room()
        self._items.appendleft(item)

    def push_right(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def pop_left(self) -> Any:
        self._ensure_items()
        return self._items.popleft()

    def pop_right(self) -> Any:
        self._ensure_items()
        return self._items.pop()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))


class PriorityQueue(_Bounded):
    """Bounded queue that always releases its smallest item.

    Items are kept in arrival order; among equal smallest items the
    earliest one leaves first.
    """

    overflow_message = "Queue overflow"
    underflow_message = "Queue Underflow"

    def __init__(self, capacity: int = 5) -> None:
        self.capacity = _checked_capacity(capacity)
        self._items: list[Any] = []

    def enqueue(self, item: Any) -> None:
        self._ensure_room()
        self._items.append(item)

    def dequeue(self) -> Any:
        self._ensure_items()
        smallest = min(range(len(self._items)), key=self._items.__getitem__)
        return self._items.pop(smallest)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))


class TwoStackQueue(_Bounded):
    """FIFO queue built from an inbox stack and an outbox stack.

    The inbox holds at most ``capacity`` items; the outbox is refilled
    from the inbox only when it runs dry.
    """

    overflow_message = "Queue is Full"
    underflow_message = "Queue is Empty"

    def __init__(self, capacity: int = 40) -> None:
        self.capacity = _checked_capacity(capacity)
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, item: Any) -> None:
        self._ensure_room()
        self._inbox.append(item)

    def dequeue(self) -> Any:
        self._ensure_items()
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def is_full(self) -> bool:
        return len(self._inbox) == self.capacity

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in the order items will be dequeued."""
        return iter([*reversed(self._outbox), *self._inbox])