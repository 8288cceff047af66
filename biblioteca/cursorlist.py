"""A sequence with a movable cursor, used for the catalogue and reservation queues."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class CursorList:
    """An ordered collection with a cursor that marks the current element.

    Navigation methods return the element the cursor moves to, or ``None``
    when there is nowhere to move. Removing the current element moves the
    cursor to the element before it.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: list[Any] = list(items) if items is not None else []
        self._current: Optional[int] = None

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CursorList({self._items!r})"

    def first(self) -> Any:
        """Move the cursor to the first element and return it."""
        if not self._items:
            return None
        self._current = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the new current element."""
        if self._current is None or self._current + 1 >= len(self._items):
            return None
        self._current += 1
        return self._items[self._current]

    def last(self) -> Any:
        """Move the cursor to the last element and return it."""
        if not self._items:
            return None
        self._current = len(self._items) - 1
        return self._items[self._current]

    def prev(self) -> Any:
        """Move the cursor back and return the new current element."""
        if self._current is None or self._current == 0:
            return None
        self._current -= 1
        return self._items[self._current]

    def push_front(self, data: Any) -> None:
        """Insert at the front; the cursor keeps pointing at the same element."""
        self._items.insert(0, data)
        if self._current is not None:
            self._current += 1

    def push_back(self, data: Any) -> None:
        """Append at the end, leaving the cursor on the previous last element."""
        if not self._items:
            self._current = None
            self.push_front(data)
        else:
            self._current = len(self._items) - 1
            self.push_current(data)

    def push_current(self, data: Any) -> None:
        """Insert right after the current element."""
        if self._current is None:
            raise IndexError("no current element")
        self._items.insert(self._current + 1, data)

    def pop_front(self) -> Any:
        """Remove and return the first element, or ``None`` if empty."""
        self._current = 0 if self._items else None
        return self.pop_current()

    def pop_back(self) -> Any:
        """Remove and return the last element, or ``None`` if empty."""
        self._current = len(self._items) - 1 if self._items else None
        return self.pop_current()

    def pop_current(self) -> Any:
        """Remove and return the current element, or ``None`` if there is none."""
        if self._current is None:
            return None
        index = self._current
        data = self._items.pop(index)
        self._current = index - 1 if index > 0 else None
        return data

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()
        self._current = None