"""Stacks: a linked stack, a circular linked stack and a fixed-size byte stack."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import EmptyError, FullError
from .nodes import Node

DEFAULT_CAPACITY = 1000
"""Default size in bytes of a ByteStack buffer."""

_LENGTH_FIELD = struct.Struct("<Q")


class LinkedStack:
    """A last-in, first-out stack built on a singly linked chain."""

    __slots__ = ("_top", "_size")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._top: Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        self._top = Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise EmptyError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.item

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise EmptyError("peek at an empty stack")
        return self._top.item

    def clear(self) -> None:
        """Remove every item."""
        self._top = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._top is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        node = self._top
        while node is not None:
            yield node.item
            node = node.next


class CircularStack:
    """A stack on a circular chain; the held node is the bottom, its successor the top."""

    __slots__ = ("_bottom", "_size")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._bottom: Node | None = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        node = Node(item)
        if self._bottom is None:
            node.next = node
            self._bottom = node
        else:
            node.next = self._bottom.next
            self._bottom.next = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._bottom is None:
            raise EmptyError("pop from an empty stack")
        top = self._bottom.next
        if top is self._bottom:
            self._bottom = None
        else:
            self._bottom.next = top.next
        top.next = None
        self._size -= 1
        return top.item

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._bottom is None:
            raise EmptyError("peek at an empty stack")
        return self._bottom.next.item

    def clear(self) -> None:
        """Remove every item."""
        if self._bottom is not None:
            self._bottom.next = None
        self._bottom = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._bottom is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from top to bottom."""
        if self._bottom is None:
            return
        node = self._bottom.next
        while True:
            yield node.item
            if node is self._bottom:
                return
            node = node.next


class ByteStack:
    """A stack of byte strings packed into a fixed-size buffer.

    Each entry is stored as its bytes followed by an 8-byte length field.
    """

    __slots__ = ("_buffer", "_top", "_count")

    HEADER_SIZE = _LENGTH_FIELD.size

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer = bytearray(capacity)
        self._top = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Total size of the buffer in bytes."""
        return len(self._buffer)

    @property
    def used(self) -> int:
        """Bytes taken by stored entries, length fields included."""
        return self._top

    def is_full(self, size: int) -> bool:
        """Tell whether an entry of ``size`` bytes would not fit."""
        return self.HEADER_SIZE + size > len(self._buffer) - self._top

    def push(self, data: bytes) -> None:
        """Store a copy of ``data`` on top of the stack."""
        data = bytes(data)
        if self.is_full(len(data)):
            raise FullError(f"no room for {len(data)} bytes")
        end = self._top + len(data)
        self._buffer[self._top:end] = data
        _LENGTH_FIELD.pack_into(self._buffer, end, len(data))
        self._top = end + self.HEADER_SIZE
        self._count += 1

    def pop(self, size: int | None = None) -> bytes:
        """Remove the top entry and return at most ``size`` of its bytes."""
        start, length = self._locate_top()
        data = self._read(start, length, size)
        self._top = start
        self._count -= 1
        return data

    def peek(self, size: int | None = None) -> bytes:
        """Return at most ``size`` bytes of the top entry without removing it."""
        start, length = self._locate_top()
        return self._read(start, length, size)

    def clear(self) -> None:
        """Remove every entry."""
        self._top = 0
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._top != 0

    def _locate_top(self) -> tuple[int, int]:
        if self._top == 0:
            raise EmptyError("the stack is empty")
        field_start = self._top - self.HEADER_SIZE
        (length,) = _LENGTH_FIELD.unpack_from(self._buffer, field_start)
        return field_start - length, length

    def _read(self, start: int, length: int, size: int | None) -> bytes:
        if size is not None and size < 0:
            raise ValueError("size must not be negative")
        count = length if size is None else min(size, length)
        return bytes(self._buffer[start:start + count])