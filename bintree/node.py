"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer and links to parent and children."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new = Node(value, self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new = Node(value, self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    def delete(self) -> None:
        """Detach this subtree from its parent and break all its links."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            elif self.parent.right is self:
                self.parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left, right."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left, node, right."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left, right, node."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest downward path; a leaf has height 0."""
        if self.is_leaf():
            return 0
        return 1 + max(
            child.height() for child in (self.left, self.right) if child is not None
        )

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self.preorder())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        count = 1 if self.is_leaf() else 0
        for child in (self.left, self.right):
            if child is not None:
                count += child.leaves()
        return count

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        return self.size() - self.leaves()

    def balance(self) -> int:
        """Height of the left subtree minus height of the right, counted in nodes."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node in this subtree has zero or two children."""
        if self.is_leaf():
            return True
        if self.left is not None and self.right is not None:
            return self.left.is_full() and self.right.is_full()
        return False

    def is_perfect(self) -> bool:
        """Check whether this subtree is perfect.

        A node with two leaf children is perfect; a node with two children
        is perfect when both subtrees are; otherwise only a root qualifies.
        """
        left, right = self.left, self.right
        if left is not None and right is not None:
            if left.is_leaf() and right.is_leaf():
                return True
            return left.is_perfect() and right.is_perfect()
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Optional[Node]) -> int:
    """Height of a subtree counted in nodes; an empty subtree has 0."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))