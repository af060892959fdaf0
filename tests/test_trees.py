from hypothesis import given
from hypothesis import strategies as st

from dsakit.trees import Node, diagonal_traversal, height, level_order


def small_tree():
    return Node(1, Node(2, Node(4), Node(5)), Node(3))


def diagonal_tree():
    return Node(
        8,
        Node(3, Node(1), Node(6, Node(4), Node(7))),
        Node(10, None, Node(14, Node(13))),
    )


def _count(node):
    return 0 if node is None else 1 + _count(node.left) + _count(node.right)


def _values(node):
    return [] if node is None else [node.data] + _values(node.left) + _values(node.right)


trees = st.recursive(
    st.builds(Node, st.integers()),
    lambda children: st.builds(Node, st.integers(), st.none() | children, st.none() | children),
    max_leaves=30,
)


def test_level_order_source_example():
    assert level_order(small_tree()) == [1, 2, 3, 4, 5]


def test_height_source_example():
    assert height(small_tree()) == 3


def test_diagonal_source_example():
    assert diagonal_traversal(diagonal_tree()) == [[8, 10, 14], [3, 6, 7, 13], [1, 4]]


def test_empty_tree():
    assert height(None) == 0
    assert level_order(None) == []
    assert diagonal_traversal(None) == []


def test_single_node():
    leaf = Node("x")
    assert height(leaf) == 1
    assert level_order(leaf) == ["x"]
    assert diagonal_traversal(leaf) == [["x"]]


def test_right_chain_is_one_diagonal():
    tree = Node(1, None, Node(2, None, Node(3)))
    assert diagonal_traversal(tree) == [[1, 2, 3]]
    assert height(tree) == 3


@given(tree=trees)
def test_level_order_visits_every_node(tree):
    result = level_order(tree)
    assert len(result) == _count(tree)
    assert sorted(result) == sorted(_values(tree))
    assert result[0] == tree.data


@given(tree=trees)
def test_diagonals_partition_the_nodes(tree):
    diagonals = diagonal_traversal(tree)
    flat = [value for diagonal in diagonals for value in diagonal]
    assert sorted(flat) == sorted(_values(tree))
    assert diagonals[0][0] == tree.data
    assert all(diagonals)


@given(tree=trees)
def test_height_bounds(tree):
    h = height(tree)
    assert 1 <= h <= _count(tree)
    assert h == 1 + max(height(tree.left), height(tree.right))