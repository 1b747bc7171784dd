"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Optional


class Fifo:
    """Queue where items leave in the order they were pushed."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push(self, item: Any) -> None:
        """Add an item at the back."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the front item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty Fifo")
        return self._items.popleft()

    def peek_first(self) -> Any:
        """Return the front item without removing it, or None when empty."""
        return self._items[0] if self._items else None

    def peek_last(self) -> Any:
        """Return the back item without removing it, or None when empty."""
        return self._items[-1] if self._items else None

    def clear(self, free_fn: Optional[Callable[[Any], None]] = None) -> None:
        """Remove all items, passing each to ``free_fn`` in queue order."""
        while self._items:
            item = self._items.popleft()
            if free_fn is not None:
                free_fn(item)

    def __len__(self) -> int:
        return len(self._items)