"""Worked examples that build small trees, draw them and print query results."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from bintree.display import print_tree
from bintree.node import Node

_Example = Callable[[TextIO], None]
_EXAMPLES: dict[int, _Example] = {}


def _example(number: int) -> Callable[[_Example], _Example]:
    def register(func: _Example) -> _Example:
        _EXAMPLES[number] = func
        return func

    return register


def _pointer(node: Optional[Node]) -> str:
    """Show a missing node the way a null pointer is printed."""
    return "(nil)" if node is None else repr(node)


def _seven_node_tree(left_right: int) -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(left_right, root.left)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    return root


def _five_node_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _nine_node_tree() -> Node:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


@_example(0)
def _build(out: TextIO) -> None:
    print_tree(_seven_node_tree(16), out)


@_example(1)
def _insert_left(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


@_example(2)
def _insert_right(out: TextIO) -> None:
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    print_tree(root, out)
    out.write("\n")
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


@_example(3)
def _delete(out: TextIO) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    root.delete()


@_example(4)
def _is_leaf(out: TextIO) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a leaf: {int(node.is_leaf())}\n")


@_example(5)
def _is_root(out: TextIO) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        out.write(f"Is {node.value} a root: {int(node.is_root())}\n")


def _traversal(out: TextIO, order: str) -> None:
    root = _seven_node_tree(56)
    print_tree(root, out)
    for value in getattr(root, order)():
        out.write(f"{value}\n")


@_example(6)
def _preorder(out: TextIO) -> None:
    _traversal(out, "preorder")


@_example(7)
def _inorder(out: TextIO) -> None:
    _traversal(out, "inorder")


@_example(8)
def _postorder(out: TextIO) -> None:
    _traversal(out, "postorder")


def _measure(out: TextIO, template: str, measure: Callable[[Node], int]) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    for node in (root, root.right, root.left.right):
        out.write(template.format(node.value, measure(node)))


@_example(9)
def _height(out: TextIO) -> None:
    _measure(out, "Height from {}: {}\n", Node.height)


@_example(10)
def _depth(out: TextIO) -> None:
    _measure(out, "Depth of {}: {}\n", Node.depth)


@_example(11)
def _size(out: TextIO) -> None:
    _measure(out, "Size of {}: {}\n", Node.size)


@_example(12)
def _leaves(out: TextIO) -> None:
    _measure(out, "Leaves in {}: {}\n", Node.leaves)


@_example(13)
def _nodes(out: TextIO) -> None:
    _measure(out, "Nodes in {}: {}\n", Node.internal_nodes)


@_example(14)
def _balance(out: TextIO) -> None:
    root = _five_node_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {node.balance():+d}\n")


@_example(15)
def _is_full(out: TextIO) -> None:
    root = _five_node_tree()
    root.left.left = Node(10, root.left)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        out.write(f"Is {node.value} full: {int(node.is_full())}\n")


@_example(16)
def _is_perfect(out: TextIO) -> None:
    root = _five_node_tree()
    root.left.left = Node(10, root.left)
    root.right.left = Node(10, root.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    root.right.right.left = Node(10, root.right.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    root.right.right.right = Node(10, root.right.right)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n")


@_example(17)
def _sibling(out: TextIO) -> None:
    root = _nine_node_tree()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right):
        sibling = node.sibling()
        out.write(f"Sibling of {node.value}: {sibling.value}\n")
    out.write(f"Sibling of {root.value}: {_pointer(root.sibling())}\n")


@_example(18)
def _uncle(out: TextIO) -> None:
    root = _nine_node_tree()
    print_tree(root, out)
    for node in (root.right.left, root.left.right):
        uncle = node.uncle()
        out.write(f"Uncle of {node.value}: {uncle.value}\n")
    out.write(f"Uncle of {root.left.value}: {_pointer(root.left.uncle())}\n")


def run_example(number: int, file: Optional[TextIO] = None) -> None:
    """Run the numbered example, writing its output to file (standard output by default)."""
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    example(file if file is not None else sys.stdout)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the examples named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree", description="Build, draw and query sample binary trees."
    )
    parser.add_argument(
        "examples",
        nargs="*",
        type=int,
        choices=sorted(_EXAMPLES),
        metavar="N",
        help=f"example number, {min(_EXAMPLES)} to {max(_EXAMPLES)} (default: all)",
    )
    args = parser.parse_args(argv)
    for number in args.examples or sorted(_EXAMPLES):
        run_example(number)
    return 0


if __name__ == "__main__":
    sys.exit(main())