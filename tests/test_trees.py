import pytest

from algokit.trees import (
    QuadNode,
    TreeNode,
    construct_quad_tree,
    is_height_balanced,
    max_depth,
)


def _example_tree():
    return TreeNode(1, TreeNode(4, TreeNode(14), TreeNode(15)), TreeNode(8))


def _chain(length):
    root = None
    for value in range(length):
        root = TreeNode(value, left=root)
    return root


def test_max_depth_of_example_tree():
    assert max_depth(_example_tree()) == 3


def test_max_depth_empty_and_single():
    assert max_depth(None) == 0
    assert max_depth(TreeNode(7)) == 1


@pytest.mark.parametrize("length", [1, 2, 5, 40])
def test_max_depth_of_chain(length):
    assert max_depth(_chain(length)) == length


def test_example_tree_is_balanced():
    assert is_height_balanced(_example_tree()) is True
    assert is_height_balanced(None) is True


def test_chain_is_not_balanced():
    assert is_height_balanced(_chain(3)) is False
    assert is_height_balanced(_chain(2)) is True


def test_deep_imbalance_is_detected():
    tree = TreeNode(0, _example_tree(), None)
    assert is_height_balanced(tree) is False


def test_uniform_grid_becomes_single_leaf():
    node = construct_quad_tree([[1, 1], [1, 1]])
    assert node == QuadNode(True, True)


def test_mixed_grid_splits_into_leaves():
    grid = [[1, 0], [0, 1]]
    node = construct_quad_tree(grid)
    assert node.is_leaf is False
    children = [node.top_left, node.top_right, node.bottom_left, node.bottom_right]
    assert all(child.is_leaf for child in children)
    assert [child.val for child in children] == [v == 1 for row in grid for v in row]


def test_quadrants_merge_where_uniform():
    grid = [
        [1, 1, 0, 0],
        [1, 1, 0, 0],
        [1, 1, 1, 1],
        [1, 1, 1, 1],
    ]
    node = construct_quad_tree(grid)
    assert node.is_leaf is False
    assert node.top_left == QuadNode(True, True)
    assert node.top_right == QuadNode(False, True)
    assert node.bottom_left == QuadNode(True, True)
    assert node.bottom_right == QuadNode(True, True)


def test_empty_grid_gives_none():
    assert construct_quad_tree([]) is None


def test_bad_grids_raise():
    with pytest.raises(ValueError):
        construct_quad_tree([[1, 0], [1]])
    with pytest.raises(ValueError):
        construct_quad_tree([[1, 0, 1], [1, 0, 1], [1, 0, 1]])