"""A singly linked FIFO queue that tolerates changes during iteration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

MatchFunc = Callable[[Any, Any], bool]
DestroyFunc = Callable[[Any], object]


@dataclass(slots=True)
class _Entry:
    data: Any
    next: Optional[_Entry] = None


def _direct_match(data: Any, match_data: Any) -> bool:
    return data == match_data


class Queue:
    """Ordered queue with head/tail access, search and conditional removal."""

    def __init__(self) -> None:
        self._head: Optional[_Entry] = None
        self._tail: Optional[_Entry] = None
        self._entries = 0

    def push_tail(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        entry = _Entry(data)
        if self._tail is not None:
            self._tail.next = entry
        self._tail = entry
        if self._head is None:
            self._head = entry
        self._entries += 1

    def push_head(self, data: Any) -> None:
        """Insert ``data`` at the head."""
        entry = _Entry(data, self._head)
        self._head = entry
        if self._tail is None:
            self._tail = entry
        self._entries += 1

    def push_after(self, entry: Any, data: Any) -> None:
        """Insert ``data`` right after the first element equal to ``entry``.

        Raises ValueError if no such element is queued.
        """
        node = self._find_entry(lambda item, _: item == entry, None)
        if node is None:
            raise ValueError(f"{entry!r} is not in the queue")
        new_entry = _Entry(data, node.next)
        if node.next is None:
            self._tail = new_entry
        node.next = new_entry
        self._entries += 1

    def pop_head(self) -> Any:
        """Remove and return the head element; IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty queue")
        entry = self._head
        self._head = entry.next
        if self._head is None:
            self._tail = None
        self._entries -= 1
        return entry.data

    def peek_head(self) -> Any:
        """Return the head element; IndexError if empty."""
        if self._head is None:
            raise IndexError("peek at an empty queue")
        return self._head.data

    def peek_tail(self) -> Any:
        """Return the tail element; IndexError if empty."""
        if self._tail is None:
            raise IndexError("peek at an empty queue")
        return self._tail.data

    def foreach(self, function: Callable[[Any], object] | None) -> None:
        """Call ``function`` on each element in order.

        The callback may modify the queue: elements appended meanwhile are
        visited, and the walk stops as soon as the queue becomes empty.
        """
        if function is None:
            return
        entry = self._head
        while entry is not None and self._head is not None:
            function(entry.data)
            entry = entry.next

    def _find_entry(self, match: MatchFunc, match_data: Any) -> Optional[_Entry]:
        entry = self._head
        while entry is not None:
            if match(entry.data, match_data):
                return entry
            entry = entry.next
        return None

    def find(self, match: MatchFunc | None = None, match_data: Any = None) -> Any:
        """Return the first element for which ``match(element, match_data)`` holds.

        Without ``match`` elements are compared to ``match_data`` by equality.
        Returns None when nothing matches.
        """
        entry = self._find_entry(match or _direct_match, match_data)
        return None if entry is None else entry.data

    def _unlink(self, match: MatchFunc, match_data: Any) -> Optional[_Entry]:
        prev: Optional[_Entry] = None
        entry = self._head
        while entry is not None:
            if match(entry.data, match_data):
                if prev is None:
                    self._head = entry.next
                else:
                    prev.next = entry.next
                if entry.next is None:
                    self._tail = prev
                self._entries -= 1
                return entry
            prev, entry = entry, entry.next
        return None

    def remove(self, data: Any) -> bool:
        """Remove the first element equal to ``data``; return whether one was removed."""
        return self._unlink(_direct_match, data) is not None

    def remove_if(self, match: MatchFunc | None, match_data: Any = None) -> Any:
        """Remove and return the first element matching ``match``, or None."""
        if match is None:
            return None
        entry = self._unlink(match, match_data)
        return None if entry is None else entry.data

    def remove_all(
        self,
        match: MatchFunc | None = None,
        match_data: Any = None,
        destroy: DestroyFunc | None = None,
    ) -> int:
        """Remove matching elements (all without ``match``) and return how many.

        ``destroy`` is called on each removed element.
        """
        count = 0
        if match is not None:
            while (entry := self._unlink(match, match_data)) is not None:
                if destroy is not None:
                    destroy(entry.data)
                count += 1
            return count

        entry = self._head
        self._head = None
        self._tail = None
        self._entries = 0
        while entry is not None:
            if destroy is not None:
                destroy(entry.data)
            count += 1
            entry = entry.next
        return count

    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._entries == 0

    def __len__(self) -> int:
        return self._entries

    def __iter__(self) -> Iterator[Any]:
        entry = self._head
        while entry is not None:
            yield entry.data
            entry = entry.next