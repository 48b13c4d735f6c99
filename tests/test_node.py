import pytest

from bintree.node import Node


def _sample():
    """98 with children 12 and 402; 12 has 6 and 16, 402 has 256 and 512."""
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _chain_left(values):
    root = Node(values[0])
    node = root
    for v in values[1:]:
        node.left = Node(v, node)
        node = node.left
    return root


def _all_nodes(root):
    stack, out = [root], []
    while stack:
        node = stack.pop()
        out.append(node)
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return out


def test_new_node_links():
    parent = Node(98)
    child = Node(12, parent)
    assert child.value == 12
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.parent is None


def test_insert_left_pushes_existing_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    new = root.insert_left(54)
    assert new is root.left
    assert new.value == 54
    assert new.parent is root
    assert new.left.value == 12
    assert new.left.parent is new
    assert root.right.left.value == 128
    assert list(root.inorder()) == [12, 54, 98, 128, 402]


def test_insert_right_pushes_existing_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    new = root.insert_right(128)
    assert new is root.right
    assert new.right.value == 402
    assert new.right.parent is new
    assert root.left.right.value == 54
    assert list(root.preorder()) == [98, 12, 54, 128, 402]


def test_traversals():
    root = _sample()
    assert list(root.preorder()) == [98, 12, 6, 16, 402, 256, 512]
    assert list(root.inorder()) == [6, 12, 16, 98, 256, 402, 512]
    assert list(root.postorder()) == [6, 16, 12, 256, 512, 402, 98]


def test_traversals_contain_same_values():
    root = _sample()
    assert sorted(root.preorder()) == sorted(root.postorder()) == sorted(root.inorder())


def test_delete_detaches_subtree():
    root = _sample()
    left = root.left
    grandchild = left.left
    left.delete()
    assert root.left is None
    assert left.parent is None and left.left is None and left.right is None
    assert grandchild.parent is None
    assert list(root.preorder()) == [98, 402, 256, 512]


def test_is_leaf_and_is_root():
    root = _sample()
    assert root.is_root()
    assert not root.is_leaf()
    assert not root.right.is_root()
    assert root.right.right.is_leaf()
    assert not root.right.right.is_root()


def test_height_matches_deepest_node():
    root = _sample()
    root.right.right.insert_left(7)
    for node in _all_nodes(root):
        deepest = max(n.depth() for n in _all_nodes(node))
        assert node.height() == deepest - node.depth()


def test_height_of_chain():
    values = [5, 4, 3, 2, 1]
    root = _chain_left(values)
    assert root.height() == len(values) - 1


def test_depth_along_chain():
    values = [9, 8, 7, 6]
    node = _chain_left(values)
    for expected, v in enumerate(values):
        assert node.value == v
        assert node.depth() == expected
        node = node.left


def test_size_leaves_and_internal():
    root = _sample()
    assert root.size() == len(list(root.preorder()))
    assert root.size() == len(_all_nodes(root))
    leaves = [n for n in _all_nodes(root) if n.left is None and n.right is None]
    assert root.leaves() == len(leaves)
    assert root.internal_nodes() == root.size() - len(leaves)
    assert root.left.left.internal_nodes() == 0
    assert root.left.left.size() == 1


def test_balance():
    values = [1, 2, 3, 4]
    root = _chain_left(values)
    assert root.balance() == len(values) - 1
    assert _sample().balance() == 0
    leaf = Node(3)
    assert leaf.balance() == 0
    leaf.insert_right(4)
    assert leaf.balance() == -1


def test_is_full():
    root = _sample()
    assert root.is_full()
    root.left.left.insert_left(1)
    assert not root.is_full()
    assert not root.left.left.is_full()
    assert root.right.is_full()


def test_is_perfect():
    root = _sample()
    assert root.is_perfect()
    assert Node(1).is_perfect()
    root.right.right.insert_left(10)
    assert not root.is_perfect()
    root.right.right.insert_right(11)
    assert not root.is_perfect()


def test_sibling():
    root = _sample()
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.sibling() is None
    lone = Node(5)
    child = lone.insert_left(6)
    assert child.sibling() is None


def test_uncle():
    root = _sample()
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


@pytest.mark.parametrize("method", ["insert_left", "insert_right"])
def test_insert_returns_child_with_parent(method):
    root = Node(1)
    child = getattr(root, method)(2)
    assert child.parent is root
    assert child.value == 2
    assert root.size() == 2
    assert child.is_leaf()