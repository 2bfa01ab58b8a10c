"""Queues: a linked queue, a circular linked queue and a fixed-size ring buffer queue."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import EmptyError, FullError
from .nodes import Node

DEFAULT_CAPACITY = 1000
"""Default size in bytes of a RingBufferQueue buffer."""

_LENGTH_FIELD = struct.Struct("<Q")


class LinkedQueue:
    """A first-in, first-out queue built on a singly linked chain."""

    __slots__ = ("_front", "_back", "_size")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: Node | None = None
        self._back: Node | None = None
        self._size = 0
        for item in items:
            self.put(item)

    def put(self, item: Any) -> None:
        """Add an item at the back of the queue."""
        node = Node(item)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def get(self) -> Any:
        """Remove and return the item at the front."""
        if self._front is None:
            raise EmptyError("get from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        return node.item

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        if self._front is None:
            raise EmptyError("peek at an empty queue")
        return self._front.item

    def clear(self) -> None:
        """Remove every item."""
        self._front = self._back = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._front is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from front to back."""
        node = self._front
        while node is not None:
            yield node.item
            node = node.next


class CircularQueue:
    """A queue on a circular chain; the held node is the back, its successor the front."""

    __slots__ = ("_back", "_size")

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._back: Node | None = None
        self._size = 0
        for item in items:
            self.put(item)

    def put(self, item: Any) -> None:
        """Add an item at the back of the queue."""
        node = Node(item)
        if self._back is None:
            node.next = node
        else:
            node.next = self._back.next
            self._back.next = node
        self._back = node
        self._size += 1

    def get(self) -> Any:
        """Remove and return the item at the front."""
        if self._back is None:
            raise EmptyError("get from an empty queue")
        front = self._back.next
        if front is self._back:
            self._back = None
        else:
            self._back.next = front.next
        front.next = None
        self._size -= 1
        return front.item

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        if self._back is None:
            raise EmptyError("peek at an empty queue")
        return self._back.next.item

    def clear(self) -> None:
        """Remove every item."""
        if self._back is not None:
            self._back.next = None
        self._back = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._back is not None

    def __iter__(self) -> Iterator[Any]:
        """Yield the items from front to back."""
        if self._back is None:
            return
        node = self._back.next
        while True:
            yield node.item
            if node is self._back:
                return
            node = node.next


class RingBufferQueue:
    """A queue of byte strings packed into a fixed-size circular buffer.

    Each entry is stored as an 8-byte length field followed by its bytes;
    both may wrap around the end of the buffer.
    """

    __slots__ = ("_buffer", "_front", "_back", "_free", "_count")

    HEADER_SIZE = _LENGTH_FIELD.size

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buffer = bytearray(capacity)
        self._front = 0
        self._back = 0
        self._free = capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """Total size of the buffer in bytes."""
        return len(self._buffer)

    @property
    def used(self) -> int:
        """Bytes taken by stored entries, length fields included."""
        return len(self._buffer) - self._free

    def is_full(self, size: int) -> bool:
        """Tell whether an entry of ``size`` bytes would not fit."""
        return self.HEADER_SIZE + size > self._free

    def put(self, data: bytes) -> None:
        """Store a copy of ``data`` at the back of the queue."""
        data = bytes(data)
        if self.is_full(len(data)):
            raise FullError(f"no room for {len(data)} bytes")
        self._back = self._write(self._back, _LENGTH_FIELD.pack(len(data)))
        self._back = self._write(self._back, data)
        self._free -= self.HEADER_SIZE + len(data)
        self._count += 1

    def get(self, size: int | None = None) -> bytes:
        """Remove the front entry and return at most ``size`` of its bytes."""
        start, length = self._locate_front()
        data = self._take(start, length, size)
        self._front = (start + length) % len(self._buffer)
        self._free += self.HEADER_SIZE + length
        self._count -= 1
        if self._count == 0:
            self._front = self._back = 0
        return data

    def peek(self, size: int | None = None) -> bytes:
        """Return at most ``size`` bytes of the front entry without removing it."""
        start, length = self._locate_front()
        return self._take(start, length, size)

    def clear(self) -> None:
        """Remove every entry."""
        self._front = self._back = 0
        self._free = len(self._buffer)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def _locate_front(self) -> tuple[int, int]:
        if self._count == 0:
            raise EmptyError("the queue is empty")
        (length,) = _LENGTH_FIELD.unpack(self._read(self._front, self.HEADER_SIZE))
        start = (self._front + self.HEADER_SIZE) % len(self._buffer)
        return start, length

    def _take(self, start: int, length: int, size: int | None) -> bytes:
        if size is not None and size < 0:
            raise ValueError("size must not be negative")
        count = length if size is None else min(size, length)
        return self._read(start, count)

    def _write(self, position: int, data: bytes) -> int:
        capacity = len(self._buffer)
        first = min(len(data), capacity - position)
        self._buffer[position:position + first] = data[:first]
        rest = data[first:]
        self._buffer[:len(rest)] = rest
        return (position + len(data)) % capacity

    def _read(self, position: int, count: int) -> bytes:
        capacity = len(self._buffer)
        end = position + count
        if end <= capacity:
            return bytes(self._buffer[position:end])
        return bytes(self._buffer[position:]) + bytes(self._buffer[:end - capacity])