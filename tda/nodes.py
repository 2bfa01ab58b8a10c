"""Node types shared by the linked containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class Node:
    """A node of a singly linked chain."""

    item: Any
    next: Node | None = None


@dataclass(eq=False, slots=True)
class DoubleNode:
    """A node of a doubly linked chain."""

    item: Any
    next: DoubleNode | None = None
    prev: DoubleNode | None = None


@dataclass(eq=False, slots=True)
class TreeNode:
    """A node of a binary tree."""

    item: Any
    left: TreeNode | None = None
    right: TreeNode | None = None