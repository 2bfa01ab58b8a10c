"""A binary search tree with shape checks (complete, balanced, AVL)."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import DuplicateError, NotFoundError
from .nodes import TreeNode

KeyFunc = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


class TreeKind(enum.Enum):
    """The shape class of a tree, from most to least regular."""

    COMPLETE = "complete"
    BALANCED = "balanced"
    AVL = "avl"
    UNBALANCED = "unbalanced"


def _height(node: TreeNode | None) -> int:
    """Number of levels of the subtree rooted at ``node``."""
    levels = 0
    layer = [node] if node is not None else []
    while layer:
        levels += 1
        layer = [child for n in layer for child in (n.left, n.right) if child is not None]
    return levels


def _count_to_level(node: TreeNode | None, level: int) -> int:
    """Count the nodes from the root down to ``level`` (root is level 0)."""
    total = 0
    depth = 0
    layer = [node] if node is not None else []
    while layer and depth <= level:
        total += len(layer)
        layer = [child for n in layer for child in (n.left, n.right) if child is not None]
        depth += 1
    return total


class BinarySearchTree:
    """A binary search tree without self-balancing.

    Items are compared through ``key`` (the item itself by default); items
    with smaller keys go left, larger keys go right.
    """

    __slots__ = ("_root", "_key", "_size")

    def __init__(self, items: Iterable[Any] = (), *, key: KeyFunc | None = None) -> None:
        self._root: TreeNode | None = None
        self._key: KeyFunc = key or _identity
        self._size = 0
        for item in items:
            self.insert(item)

    # -- insertion and lookup ------------------------------------------------

    def insert(self, item: Any, update: Callable[[Any, Any], Any] | None = None) -> None:
        """Insert ``item`` at its place in the tree.

        When an equal item is already stored, it is replaced by
        ``update(stored, item)``; without ``update`` DuplicateError is raised.
        """
        target = self._key(item)
        parent: TreeNode | None = None
        node = self._root
        while node is not None:
            here = self._key(node.item)
            if target == here:
                if update is None:
                    raise DuplicateError(f"{item!r} is already in the tree")
                node.item = update(node.item, item)
                return
            parent = node
            node = node.left if target < here else node.right
        new = TreeNode(item)
        if parent is None:
            self._root = new
        elif target < self._key(parent.item):
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def _locate(self, item: Any) -> tuple[TreeNode | None, TreeNode]:
        target = self._key(item)
        parent: TreeNode | None = None
        node = self._root
        while node is not None:
            here = self._key(node.item)
            if target == here:
                return parent, node
            parent = node
            node = node.left if target < here else node.right
        raise NotFoundError(f"{item!r} is not in the tree")

    def find(self, item: Any) -> Any:
        """Return the stored item equal to ``item``."""
        return self._locate(item)[1].item

    # -- removal -------------------------------------------------------------

    def remove(self, item: Any) -> Any:
        """Remove and return the stored item equal to ``item``.

        An inner node takes the largest item of its left subtree when that
        subtree is taller than the right one, else the smallest item of its
        right subtree; the node that gave its item is removed the same way.
        """
        parent, node = self._locate(item)
        removed = node.item
        while node.left is not None or node.right is not None:
            if _height(node.left) > _height(node.right):
                repl_parent, repl = node, node.left
                while repl.right is not None:
                    repl_parent, repl = repl, repl.right
            else:
                repl_parent, repl = node, node.right
                while repl.left is not None:
                    repl_parent, repl = repl, repl.left
            node.item = repl.item
            parent, node = repl_parent, repl
        if parent is None:
            self._root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        self._size -= 1
        return removed

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._size = 0

    # -- traversal -----------------------------------------------------------

    def preorder(self) -> Iterator[Any]:
        """Yield the items node first, then left subtree, then right subtree."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.item
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield the items in ascending order."""
        stack: list[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.item
            node = node.right

    def postorder(self) -> Iterator[Any]:
        """Yield the items left subtree first, then right subtree, then node."""
        stack: list[tuple[TreeNode, bool]] = [(self._root, False)] if self._root is not None else []
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.item
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def render(self, show: Callable[[Any, int], Any] | None = None) -> str | None:
        """Walk right subtree, node, left subtree, calling ``show(item, level)``.

        Without ``show``, return the tree as text: one item per line,
        indented by a tab per level, so the tree reads rotated to the left.
        """
        lines: list[str] = []
        if show is None:
            def show(item: Any, level: int) -> None:
                lines.append("\t" * level + str(item))
            collect = True
        else:
            collect = False
        stack: list[tuple[TreeNode, int]] = []
        node, level = self._root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node, level = node.right, level + 1
            node, level = stack.pop()
            show(node.item, level)
            node, level = node.left, level + 1
        return "\n".join(lines) if collect else None

    # -- shape ---------------------------------------------------------------

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def is_complete(self) -> bool:
        """Tell whether every level is full."""
        return 2 ** self.height() - 1 == self._size

    def is_balanced(self) -> bool:
        """Tell whether every level except the last is full."""
        h = self.height()
        if h <= 2:
            return True
        return 2 ** (h - 1) - 1 == _count_to_level(self._root, h - 2)

    def is_avl(self) -> bool:
        """Tell whether the heights of every node's subtrees differ by at most one."""
        heights: dict[int, int] = {}
        for node in self._postorder_nodes():
            left = heights.get(id(node.left), 0) if node.left is not None else 0
            right = heights.get(id(node.right), 0) if node.right is not None else 0
            if abs(left - right) > 1:
                return False
            heights[id(node)] = max(left, right) + 1
        return True

    def kind(self) -> TreeKind:
        """Return the most regular shape class the tree fits."""
        if self.is_complete():
            return TreeKind.COMPLETE
        if self.is_balanced():
            return TreeKind.BALANCED
        if self.is_avl():
            return TreeKind.AVL
        return TreeKind.UNBALANCED

    def _postorder_nodes(self) -> Iterator[TreeNode]:
        stack: list[tuple[TreeNode, bool]] = [(self._root, False)] if self._root is not None else []
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # -- protocols -----------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __contains__(self, item: Any) -> bool:
        try:
            self._locate(item)
        except NotFoundError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.preorder())!r})"