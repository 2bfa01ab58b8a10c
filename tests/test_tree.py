import pytest

from tda.errors import DuplicateError, NotFoundError
from tda.tree import BinarySearchTree, TreeKind

FULL = [5, 3, 8, 1, 4, 7, 9]


def test_inorder_is_sorted():
    tree = BinarySearchTree([6, 2, 9, 1, 7, 3])
    assert list(tree.inorder()) == [1, 2, 3, 6, 7, 9]
    assert len(tree) == 6


def test_preorder_and_postorder():
    tree = BinarySearchTree(FULL)
    assert list(tree.preorder()) == [5, 3, 1, 4, 8, 7, 9]
    assert list(tree.postorder()) == [1, 4, 3, 7, 9, 8, 5]


def test_duplicate_raises():
    tree = BinarySearchTree([2, 1])
    with pytest.raises(DuplicateError):
        tree.insert(2)
    assert len(tree) == 2


def test_update_merges_equal_item():
    tree = BinarySearchTree(key=lambda pair: pair[0])
    tree.insert(("a", 1))
    tree.insert(("a", 2), lambda old, new: (old[0], old[1] + new[1]))
    assert tree.find(("a", 0)) == ("a", 3)
    assert len(tree) == 1


def test_find_and_missing():
    tree = BinarySearchTree(FULL)
    assert tree.find(7) == 7
    assert 4 in tree
    with pytest.raises(NotFoundError):
        tree.find(6)
    assert 6 not in tree


def test_remove_leaf():
    tree = BinarySearchTree(FULL)
    assert tree.remove(1) == 1
    assert list(tree.inorder()) == [3, 4, 5, 7, 8, 9]
    assert len(tree) == 6


def test_remove_root_uses_smallest_on_right_when_heights_equal():
    tree = BinarySearchTree(FULL)
    assert tree.remove(5) == 5
    assert list(tree.preorder()) == [7, 3, 1, 4, 8, 9]


def test_remove_uses_largest_on_left_when_left_is_taller():
    tree = BinarySearchTree([5, 3, 8, 1, 2])
    tree.remove(3)
    assert list(tree.preorder()) == [5, 2, 1, 8]


def test_remove_missing_raises():
    tree = BinarySearchTree([1])
    with pytest.raises(NotFoundError):
        tree.remove(2)


def test_remove_everything_keeps_order():
    items = [50, 20, 70, 10, 30, 60, 80, 25, 35, 65]
    tree = BinarySearchTree(items)
    remaining = sorted(items)
    for item in [20, 50, 65, 10, 80, 25, 30, 35, 60, 70]:
        tree.remove(item)
        remaining.remove(item)
        assert list(tree) == remaining
    assert not tree


def test_clear():
    tree = BinarySearchTree(FULL)
    tree.clear()
    assert len(tree) == 0
    assert list(tree.preorder()) == []
    assert tree.height() == 0


def test_render_with_callback():
    tree = BinarySearchTree([5, 3, 8])
    seen = []
    tree.render(lambda item, level: seen.append((item, level)))
    assert seen == [(8, 1), (5, 0), (3, 1)]


def test_render_as_text():
    tree = BinarySearchTree([5, 3, 8])
    assert tree.render() == "\t8\n5\n\t3"


def test_height():
    assert BinarySearchTree().height() == 0
    assert BinarySearchTree(FULL).height() == 3
    assert BinarySearchTree([1, 2, 3, 4]).height() == 4


def test_kind_complete():
    tree = BinarySearchTree(FULL)
    assert tree.is_complete()
    assert tree.kind() is TreeKind.COMPLETE


def test_empty_tree_is_complete():
    assert BinarySearchTree().kind() is TreeKind.COMPLETE


def test_kind_balanced():
    tree = BinarySearchTree([5, 3, 8, 1])
    assert not tree.is_complete()
    assert tree.is_balanced()
    assert tree.kind() is TreeKind.BALANCED


def test_kind_avl():
    tree = BinarySearchTree([8, 4, 12, 2, 6, 14, 1])
    assert not tree.is_balanced()
    assert tree.is_avl()
    assert tree.kind() is TreeKind.AVL


def test_kind_unbalanced():
    tree = BinarySearchTree([5, 3, 1])
    assert not tree.is_avl()
    assert tree.kind() is TreeKind.UNBALANCED


def test_degenerate_tree_is_deep():
    tree = BinarySearchTree(range(2000))
    assert tree.height() == 2000
    assert list(tree) == list(range(2000))
    assert not tree.is_avl()