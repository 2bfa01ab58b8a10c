# tda

Classic abstract data types written as plain Python classes. The package has
no dependencies outside the standard library.

| Module | Contents |
| --- | --- |
| `tda.stacks` | `LinkedStack`, `CircularStack`, `ByteStack` |
| `tda.queues` | `LinkedQueue`, `CircularQueue`, `RingBufferQueue` |
| `tda.linked_list` | `LinkedList`, `ListCursor` |
| `tda.doubly_linked_list` | `DoublyLinkedList` |
| `tda.tree` | `BinarySearchTree`, `TreeKind` |
| `tda.nodes` | `Node`, `DoubleNode`, `TreeNode`, the nodes the linked containers are built from |
| `tda.errors` | the exceptions listed below |

## Errors

Every failure raises a subclass of `tda.errors.TDAError`:

- `DuplicateError`: an item that compares equal is already stored.
- `NotFoundError`: the requested item or position does not exist. It is also a `LookupError`.
- `EmptyError`: the container holds no items. It is also an `IndexError`.
- `FullError`: a fixed-size container has no room for the record.

## Installation

```
pip install .
```

## Stacks and queues

`LinkedStack` and `CircularStack` offer `push`, `pop`, `peek` and `clear`.
`LinkedQueue` and `CircularQueue` offer `put`, `get`, `peek` and `clear`. All
of them take an optional iterable of starting items. They also support
`len()`, truth testing and iteration. A stack iterates from top to bottom, and
a queue from front to back.

```python
from tda.stacks import LinkedStack
from tda.queues import LinkedQueue

stack = LinkedStack()
stack.push("a")
stack.push("b")
assert stack.peek() == "b"
assert stack.pop() == "b"

queue = LinkedQueue([1, 2])
assert queue.get() == 1
```

Reading from an empty stack or queue raises `EmptyError`.

### Byte-record containers

`ByteStack` and `RingBufferQueue` store byte strings in one fixed-size buffer.
The default capacity is 1000 bytes, and you can set it with
`ByteStack(capacity=...)` or `RingBufferQueue(capacity=...)`.

- **Storage:** every record takes its own length plus an 8-byte length field. In a `RingBufferQueue`, records may wrap around the end of the buffer.
- **Full buffer:** `push` or `put` raises `FullError` when a record does not fit. `is_full(size)` tells you beforehand whether a record of `size` bytes would not fit.
- **Reading:** `pop`, `get` and `peek` accept an optional `size` and return at most that many bytes of the record. Without `size` they return the whole record.
- **Usage:** the properties `capacity` and `used` report the buffer size and the bytes in use, length fields included.

```python
from tda.stacks import ByteStack
from tda.queues import RingBufferQueue

records = ByteStack()
records.push(b"hello")
assert records.peek(2) == b"he"
assert records.pop() == b"hello"

ring = RingBufferQueue(capacity=32)
ring.put(b"abc")
assert ring.used == 11
assert ring.get() == b"abc"
```

## Lists

`LinkedList` and `DoublyLinkedList` take an optional iterable of starting
items, which are appended in order. They also take a keyword-only `key`
function. Items are compared by key, and the default key is the item itself.
Positions start at 1.

Both classes share these operations:

- **Insert:** `insert_sorted(item, allow_duplicates=False)`, `insert_first`, `insert_last`, `insert_at(item, pos)`.
- **Look up:** `find_sorted`, `find`, `get_at(pos)`, `first`, `last`.
- **Remove:** `remove_sorted`, `remove`, `remove_first`, `remove_last`, `remove_at(pos)`.
- **Drop duplicates:** `remove_duplicates_sorted` and `remove_duplicates`, which both return how many items were dropped.
- **Whole list:** `sort` (stable), `clear`, `for_each(action)`, `len()` and iteration.

If `allow_duplicates` is false and an equal item is already stored,
`insert_sorted` raises `DuplicateError`.

```python
from tda.linked_list import LinkedList

items = LinkedList()
for value in (5, 1, 3):
    items.insert_sorted(value)
assert items.first() == 1 and items.last() == 5

cursor = items.cursor()
assert cursor.first() == 1
assert cursor.next() == 3
assert cursor.has_next()
```

### `LinkedList`

When duplicates are allowed, an equal item is inserted before the stored one.

`insert_at` treats any position up to 1 as the head. A position past
`len + 1` raises `NotFoundError`.

`cursor()` returns a `ListCursor` with the methods `first`, `next`,
`has_next` and `at_end`.

### `DoublyLinkedList`

The list keeps a reference to one of its nodes, namely the last node placed
by a sorted insertion. Sorted operations and `find` walk from that node in
either direction.

When duplicates are allowed, an equal item is inserted after the stored one.

`insert_at` only accepts positions from 1 to `len + 1`.

`insert_or_update(item, update)` inserts `item` in order and returns `True`.
If an equal item is already stored, it is replaced by `update(stored, item)`
and the method returns `False`.

The list also supports `reversed()`.

## Binary search trees

`BinarySearchTree` takes an optional iterable of starting items and a
keyword-only `key` function.

- **Insert:** `insert(item, update=None)` raises `DuplicateError` for an equal item. If you pass `update`, the stored item is replaced by `update(stored, item)` instead.
- **Find and remove:** `find` and `remove` return the stored item, or raise `NotFoundError`.
- **Traversal:** `preorder`, `inorder` and `postorder` are generators. Iterating over the tree goes in order, and `in` tests membership.
- **Rendering:** `render()` returns the tree as text rotated to the left, one item per line, indented by one tab per level. `render(show)` instead calls `show(item, level)` for each node, visiting the right subtree, then the node, then the left subtree.
- **Shape:** `height()`, `is_complete()`, `is_balanced()`, `is_avl()`, and `kind()`, which returns a `TreeKind`: `COMPLETE`, `BALANCED`, `AVL` or `UNBALANCED`.

The tree does not rebalance itself.

```python
from tda.tree import BinarySearchTree, TreeKind

tree = BinarySearchTree([2, 1, 3])
assert list(tree.inorder()) == [1, 2, 3]
assert tree.kind() is TreeKind.COMPLETE
assert tree.remove(2) == 2
```

## What the package does not do

It is a library only. There is no command-line tool, and the containers do
not save themselves to disk.

## Running the tests

```
pip install ".[test]"
pytest
```