"""A singly linked list with sorted and positional operations, and a cursor over it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import DuplicateError, EmptyError, NotFoundError
from .nodes import Node

KeyFunc = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


class LinkedList:
    """A singly linked list.

    Items are compared through ``key`` (the item itself by default); two items
    are equal when their keys are equal. Positions are counted from 1.
    """

    __slots__ = ("_head", "_key", "_size")

    def __init__(self, items: Iterable[Any] = (), *, key: KeyFunc | None = None) -> None:
        self._head: Node | None = None
        self._key: KeyFunc = key or _identity
        self._size = 0
        for item in items:
            self.insert_last(item)

    # -- helpers -------------------------------------------------------------

    def _pairs(self) -> Iterator[tuple[Node | None, Node]]:
        prev: Node | None = None
        node = self._head
        while node is not None:
            yield prev, node
            prev, node = node, node.next

    def _link(self, prev: Node | None, item: Any) -> None:
        if prev is None:
            self._head = Node(item, self._head)
        else:
            prev.next = Node(item, prev.next)
        self._size += 1

    def _unlink(self, prev: Node | None, node: Node) -> Any:
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        node.next = None
        self._size -= 1
        return node.item

    def _sorted_position(self, item: Any) -> tuple[Node | None, Node | None]:
        """Return the node holding the first key not below ``item``'s, and its predecessor."""
        target = self._key(item)
        prev: Node | None = None
        node = self._head
        while node is not None and target > self._key(node.item):
            prev, node = node, node.next
        return prev, node

    def _equal(self, a: Any, b: Any) -> bool:
        return self._key(a) == self._key(b)

    def _at(self, pos: int) -> tuple[Node | None, Node]:
        if pos >= 1:
            for index, (prev, node) in enumerate(self._pairs(), start=1):
                if index == pos:
                    return prev, node
        raise NotFoundError(f"no item at position {pos}")

    def _find_sorted_node(self, item: Any) -> tuple[Node | None, Node]:
        prev, node = self._sorted_position(item)
        if node is None or not self._equal(item, node.item):
            raise NotFoundError(f"{item!r} is not in the list")
        return prev, node

    def _find_node(self, item: Any) -> tuple[Node | None, Node]:
        for prev, node in self._pairs():
            if self._equal(item, node.item):
                return prev, node
        raise NotFoundError(f"{item!r} is not in the list")

    def _last_pair(self) -> tuple[Node | None, Node]:
        if self._head is None:
            raise EmptyError("the list is empty")
        prev: Node | None = None
        node = self._head
        while node.next is not None:
            prev, node = node, node.next
        return prev, node

    # -- insertion -----------------------------------------------------------

    def insert_sorted(self, item: Any, allow_duplicates: bool = False) -> None:
        """Insert ``item`` keeping the list in ascending order.

        An equal item already present raises DuplicateError unless
        ``allow_duplicates`` is true, in which case the new item goes before it.
        """
        prev, node = self._sorted_position(item)
        if not allow_duplicates and node is not None and self._equal(item, node.item):
            raise DuplicateError(f"{item!r} is already in the list")
        self._link(prev, item)

    def insert_first(self, item: Any) -> None:
        """Insert ``item`` at the head."""
        self._link(None, item)

    def insert_last(self, item: Any) -> None:
        """Insert ``item`` at the tail."""
        prev = None if self._head is None else self._last_pair()[1]
        self._link(prev, item)

    def insert_at(self, item: Any, pos: int) -> None:
        """Insert ``item`` so that it ends up at position ``pos``.

        Positions up to 1 insert at the head; a position past ``len + 1``
        raises NotFoundError.
        """
        index = 1
        prev: Node | None = None
        node = self._head
        while node is not None and index < pos:
            prev, node = node, node.next
            index += 1
        if index < pos:
            raise NotFoundError(f"cannot insert at position {pos}")
        self._link(prev, item)

    # -- lookup --------------------------------------------------------------

    def find_sorted(self, item: Any) -> Any:
        """Return the stored item equal to ``item`` in a sorted list."""
        return self._find_sorted_node(item)[1].item

    def find(self, item: Any) -> Any:
        """Return the first stored item equal to ``item``."""
        return self._find_node(item)[1].item

    def get_at(self, pos: int) -> Any:
        """Return the item at position ``pos``."""
        return self._at(pos)[1].item

    def first(self) -> Any:
        """Return the item at the head."""
        if self._head is None:
            raise EmptyError("the list is empty")
        return self._head.item

    def last(self) -> Any:
        """Return the item at the tail."""
        return self._last_pair()[1].item

    # -- removal -------------------------------------------------------------

    def remove_sorted(self, item: Any) -> Any:
        """Remove and return the stored item equal to ``item`` in a sorted list."""
        return self._unlink(*self._find_sorted_node(item))

    def remove(self, item: Any) -> Any:
        """Remove and return the first stored item equal to ``item``."""
        return self._unlink(*self._find_node(item))

    def remove_first(self) -> Any:
        """Remove and return the item at the head."""
        if self._head is None:
            raise EmptyError("the list is empty")
        return self._unlink(None, self._head)

    def remove_last(self) -> Any:
        """Remove and return the item at the tail."""
        return self._unlink(*self._last_pair())

    def remove_at(self, pos: int) -> Any:
        """Remove and return the item at position ``pos``."""
        return self._unlink(*self._at(pos))

    def remove_duplicates_sorted(self) -> int:
        """Drop items equal to their predecessor; return how many were dropped."""
        removed = 0
        node = self._head
        while node is not None:
            while node.next is not None and self._equal(node.item, node.next.item):
                self._unlink(node, node.next)
                removed += 1
            node = node.next
        return removed

    def remove_duplicates(self) -> int:
        """Keep only the first of each group of equal items; return how many were dropped."""
        removed = 0
        reference = self._head
        while reference is not None:
            prev = reference
            node = reference.next
            while node is not None:
                following = node.next
                if self._equal(reference.item, node.item):
                    self._unlink(prev, node)
                    removed += 1
                else:
                    prev = node
                node = following
            reference = reference.next
        return removed

    # -- whole list ----------------------------------------------------------

    def sort(self) -> None:
        """Put the items in ascending order; equal items keep their order."""
        nodes = [node for _, node in self._pairs()]
        nodes.sort(key=lambda n: self._key(n.item))
        self._head = None
        for node in reversed(nodes):
            node.next = self._head
            self._head = node

    def clear(self) -> None:
        """Remove every item."""
        self._head = None
        self._size = 0

    def for_each(self, action: Callable[[Any], Any]) -> None:
        """Call ``action`` on every item from head to tail."""
        for item in self:
            action(item)

    def cursor(self) -> ListCursor:
        """Return a cursor over the list as it starts now."""
        return ListCursor(self._head)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[Any]:
        for _, node in self._pairs():
            yield node.item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ListCursor:
    """A cursor that steps through a list from its head."""

    __slots__ = ("_first", "_current")

    def __init__(self, head: Node | None) -> None:
        self._first = head
        self._current: Node | None = None

    def first(self) -> Any:
        """Move to the head and return its item."""
        if self._first is None:
            raise EmptyError("the list is empty")
        self._current = self._first
        return self._current.item

    def next(self) -> Any:
        """Move to the next node and return its item."""
        if self._current is None:
            raise NotFoundError("the cursor is not on an item")
        self._current = self._current.next
        if self._current is None:
            raise NotFoundError("no item after the end of the list")
        return self._current.item

    def has_next(self) -> bool:
        """Tell whether a node follows the current one."""
        return self._current is not None and self._current.next is not None

    def at_end(self) -> bool:
        """Tell whether the cursor is past the last item or not yet started."""
        return self._current is None