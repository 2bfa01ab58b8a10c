"""A doubly linked list that keeps a movable reference point inside the chain."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import DuplicateError, EmptyError, NotFoundError
from .nodes import DoubleNode

KeyFunc = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


class DoublyLinkedList:
    """A doubly linked list.

    The list holds a reference to one of its nodes (the last node inserted by
    a sorted insertion, for instance); sorted operations and unsorted searches
    start from there and walk in either direction. Items are compared through
    ``key`` (the item itself by default). Positions are counted from 1.
    """

    __slots__ = ("_current", "_key", "_size")

    def __init__(self, items: Iterable[Any] = (), *, key: KeyFunc | None = None) -> None:
        self._current: DoubleNode | None = None
        self._key: KeyFunc = key or _identity
        self._size = 0
        for item in items:
            self.insert_last(item)

    # -- helpers -------------------------------------------------------------

    def _head(self) -> DoubleNode | None:
        node = self._current
        if node is None:
            return None
        while node.prev is not None:
            node = node.prev
        return node

    def _tail(self) -> DoubleNode | None:
        node = self._current
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[DoubleNode]:
        node = self._head()
        while node is not None:
            following = node.next
            yield node
            node = following

    def _link(self, prev: DoubleNode | None, following: DoubleNode | None, item: Any) -> DoubleNode:
        node = DoubleNode(item, following, prev)
        if prev is not None:
            prev.next = node
        if following is not None:
            following.prev = node
        self._size += 1
        return node

    def _unlink(self, node: DoubleNode) -> Any:
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if node is self._current:
            self._current = node.next if node.next is not None else node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.item

    def _nearest(self, item: Any) -> DoubleNode | None:
        """Walk from the reference node to the node where ``item`` belongs in order."""
        node = self._current
        if node is None:
            return None
        target = self._key(item)
        while node.prev is not None and target < self._key(node.item):
            node = node.prev
        while node.next is not None and target > self._key(node.item):
            node = node.next
        return node

    def _sorted_neighbours(
        self, item: Any, node: DoubleNode | None, after_equal: bool
    ) -> tuple[DoubleNode | None, DoubleNode | None]:
        if node is None:
            return None, None
        target, here = self._key(item), self._key(node.item)
        if target > here or (after_equal and target == here):
            return node, node.next
        return node.prev, node

    def _equal(self, a: Any, b: Any) -> bool:
        return self._key(a) == self._key(b)

    def _find_sorted_node(self, item: Any) -> DoubleNode:
        node = self._nearest(item)
        if node is None or not self._equal(item, node.item):
            raise NotFoundError(f"{item!r} is not in the list")
        return node

    def _find_node(self, item: Any) -> DoubleNode:
        node = self._current
        while node is not None:
            if self._equal(item, node.item):
                return node
            node = node.prev
        node = self._current.next if self._current is not None else None
        while node is not None:
            if self._equal(item, node.item):
                return node
            node = node.next
        raise NotFoundError(f"{item!r} is not in the list")

    def _at(self, pos: int) -> DoubleNode:
        if pos >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == pos:
                    return node
        raise NotFoundError(f"no item at position {pos}")

    # -- insertion -----------------------------------------------------------

    def insert_sorted(self, item: Any, allow_duplicates: bool = False) -> None:
        """Insert ``item`` keeping the list in ascending order.

        An equal item already present raises DuplicateError unless
        ``allow_duplicates`` is true, in which case the new item goes after it.
        The new node becomes the reference node.
        """
        node = self._nearest(item)
        if not allow_duplicates and node is not None and self._equal(item, node.item):
            raise DuplicateError(f"{item!r} is already in the list")
        prev, following = self._sorted_neighbours(item, node, after_equal=True)
        self._current = self._link(prev, following, item)

    def insert_or_update(self, item: Any, update: Callable[[Any, Any], Any]) -> bool:
        """Insert ``item`` in order, or merge it into an equal stored item.

        When an equal item is stored, it is replaced by ``update(stored, item)``
        and False is returned. Otherwise the item is inserted, becomes the
        reference node, and True is returned.
        """
        node = self._nearest(item)
        if node is not None and self._equal(item, node.item):
            node.item = update(node.item, item)
            return False
        prev, following = self._sorted_neighbours(item, node, after_equal=False)
        self._current = self._link(prev, following, item)
        return True

    def insert_first(self, item: Any) -> None:
        """Insert ``item`` at the head."""
        node = self._link(None, self._head(), item)
        if self._current is None:
            self._current = node

    def insert_last(self, item: Any) -> None:
        """Insert ``item`` at the tail."""
        node = self._link(self._tail(), None, item)
        if self._current is None:
            self._current = node

    def insert_at(self, item: Any, pos: int) -> None:
        """Insert ``item`` so that it ends up at position ``pos``.

        Valid positions run from 1 to ``len + 1``; any other raises NotFoundError.
        """
        head = self._head()
        if head is None:
            if pos != 1:
                raise NotFoundError(f"cannot insert at position {pos}")
            self._current = self._link(None, None, item)
            return
        node = head
        remaining = pos - 1
        while node.next is not None and remaining > 0:
            node = node.next
            remaining -= 1
        if remaining > 1 or remaining < 0:
            raise NotFoundError(f"cannot insert at position {pos}")
        if remaining == 1:
            self._link(node, node.next, item)
        else:
            self._link(node.prev, node, item)

    # -- lookup --------------------------------------------------------------

    def find_sorted(self, item: Any) -> Any:
        """Return the stored item equal to ``item`` in a sorted list."""
        return self._find_sorted_node(item).item

    def find(self, item: Any) -> Any:
        """Return a stored item equal to ``item``, searching back then forward from the reference node."""
        return self._find_node(item).item

    def get_at(self, pos: int) -> Any:
        """Return the item at position ``pos``."""
        return self._at(pos).item

    def first(self) -> Any:
        """Return the item at the head."""
        head = self._head()
        if head is None:
            raise EmptyError("the list is empty")
        return head.item

    def last(self) -> Any:
        """Return the item at the tail."""
        tail = self._tail()
        if tail is None:
            raise EmptyError("the list is empty")
        return tail.item

    # -- removal -------------------------------------------------------------

    def remove_sorted(self, item: Any) -> Any:
        """Remove and return the stored item equal to ``item`` in a sorted list."""
        return self._unlink(self._find_sorted_node(item))

    def remove(self, item: Any) -> Any:
        """Remove and return a stored item equal to ``item``."""
        return self._unlink(self._find_node(item))

    def remove_first(self) -> Any:
        """Remove and return the item at the head."""
        head = self._head()
        if head is None:
            raise EmptyError("the list is empty")
        return self._unlink(head)

    def remove_last(self) -> Any:
        """Remove and return the item at the tail."""
        tail = self._tail()
        if tail is None:
            raise EmptyError("the list is empty")
        return self._unlink(tail)

    def remove_at(self, pos: int) -> Any:
        """Remove and return the item at position ``pos``."""
        return self._unlink(self._at(pos))

    def _drop_duplicate(self, node: DoubleNode) -> None:
        if node is self._current and node.prev is not None:
            self._current = node.prev
        self._unlink(node)

    def remove_duplicates_sorted(self) -> int:
        """Drop items equal to their predecessor; return how many were dropped."""
        removed = 0
        node = self._head()
        while node is not None:
            while node.next is not None and self._equal(node.item, node.next.item):
                self._drop_duplicate(node.next)
                removed += 1
            node = node.next
        return removed

    def remove_duplicates(self) -> int:
        """Keep only the first of each group of equal items; return how many were dropped."""
        removed = 0
        reference = self._head()
        while reference is not None:
            node = reference.next
            while node is not None:
                following = node.next
                if self._equal(reference.item, node.item):
                    self._drop_duplicate(node)
                    removed += 1
                node = following
            reference = reference.next
        return removed

    # -- whole list ----------------------------------------------------------

    def sort(self) -> None:
        """Put the items in ascending order; equal items keep their order."""
        nodes = list(self._nodes())
        ordered = sorted((node.item for node in nodes), key=self._key)
        for node, item in zip(nodes, ordered):
            node.item = item

    def clear(self) -> None:
        """Remove every item."""
        for node in self._nodes():
            node.next = node.prev = None
        self._current = None
        self._size = 0

    def for_each(self, action: Callable[[Any], Any]) -> None:
        """Call ``action`` on every item from head to tail."""
        for item in self:
            action(item)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._current is not None

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.item

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail()
        while node is not None:
            yield node.item
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"