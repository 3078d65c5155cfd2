import pytest

from algokit.bst import (
    BinarySearchTree,
    TreeNode,
    build_from_preorder,
    inorder,
    level_order,
    postorder,
    preorder,
    tree_height,
)

SAMPLE = [8, 3, 10, 1, 6, 14, 4, 7, 13]


@pytest.fixture
def tree():
    return BinarySearchTree(SAMPLE)


def test_preorder(tree):
    assert tree.preorder() == [8, 3, 1, 6, 4, 7, 10, 14, 13]


def test_inorder_is_sorted(tree):
    assert tree.inorder() == [1, 3, 4, 6, 7, 8, 10, 13, 14]


def test_postorder(tree):
    assert tree.postorder() == [1, 4, 7, 6, 3, 13, 14, 10, 8]


def test_height(tree):
    assert tree.height() == 3


def test_empty_height():
    assert BinarySearchTree().height() == -1


def test_level_order(tree):
    assert tree.level_order() == [[8], [3, 10], [1, 6, 14], [4, 7, 13]]


def test_parent_children(tree):
    assert tree.parent_children() == [
        (8, [3, 10]),
        (3, [1, 6]),
        (10, [14]),
        (1, []),
        (6, [4, 7]),
        (14, [13]),
        (4, []),
        (7, []),
        (13, []),
    ]


def test_leaves(tree):
    assert tree.leaves() == [1, 4, 7, 13]


def test_mirror(tree):
    tree.mirror()
    assert tree.level_order() == [[8], [10, 3], [14, 6, 1], [13, 7, 4]]
    assert tree.minimum() == 14


def test_min_max(tree):
    assert tree.minimum() == 1
    assert tree.maximum() == 14


def test_min_of_empty_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().minimum()
    with pytest.raises(ValueError):
        BinarySearchTree().maximum()


def test_search(tree):
    assert 7 in tree
    assert 5 not in tree


def test_duplicate_insert(tree):
    assert tree.insert(6) is False
    assert tree.inorder() == sorted(SAMPLE)
    assert tree.insert(5) is True
    assert tree.inorder() == sorted(SAMPLE + [5])


@pytest.mark.parametrize("value", SAMPLE)
def test_delete_keeps_order(tree, value):
    tree.delete(value)
    assert value not in tree
    assert tree.inorder() == sorted(v for v in SAMPLE if v != value)


def test_delete_two_children_uses_successor(tree):
    tree.delete(3)
    assert tree.level_order()[1] == [4, 10]


def test_delete_missing_raises(tree):
    with pytest.raises(KeyError):
        tree.delete(99)


def test_copy_is_independent(tree):
    duplicate = tree.copy()
    assert duplicate.level_order() == tree.level_order()
    duplicate.insert(2)
    assert 2 not in tree
    assert duplicate.root is not tree.root


def test_traversal_functions_on_nodes(tree):
    assert preorder(tree.root) == tree.preorder()
    assert inorder(tree.root) == tree.inorder()
    assert postorder(tree.root) == tree.postorder()
    assert level_order(None) == []


def test_build_from_preorder_round_trip():
    values = [1, 2, -1, -1, 3, -1, -1]
    root = build_from_preorder(values)
    assert preorder(root) == [1, 2, 3]
    assert root == TreeNode(1, TreeNode(2), TreeNode(3))
    assert tree_height(root) == 2


def test_build_empty_tree():
    assert build_from_preorder([-1]) is None
    assert tree_height(None) == 0


def test_build_truncated_raises():
    with pytest.raises(ValueError):
        build_from_preorder([1, 2, -1])


def test_tree_height_matches_bst_height(tree):
    assert tree_height(tree.root) == tree.height() + 1