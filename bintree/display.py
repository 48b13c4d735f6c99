"""Text rendering of a binary tree with connecting lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node

_ROW_WIDTH = 255


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _put(row: list[str], pos: int, ch: str) -> None:
    if pos >= len(row):
        row.extend(" " * (pos + 1 - len(row)))
    row[pos] = ch


def _layout(tree: Optional[Node], offset: int, depth: int, rows: list[list[str]]) -> int:
    """Draw the subtree into rows and return its printed width."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _layout(tree.left, offset, depth + 1, rows)
    right = _layout(tree.right, offset + left + width, depth + 1, rows)
    for i, ch in enumerate(label):
        _put(rows[depth], offset + left + i, ch)
    if depth:
        above = rows[depth - 1]
        if is_left:
            start, span = offset + left + width // 2, width + right
        else:
            start, span = offset - width // 2, left + width
        for pos in range(start, start + span):
            _put(above, pos, "-")
        _put(above, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, one line per level, each ending in a newline."""
    if tree is None:
        return ""
    rows = [[" "] * _ROW_WIDTH for _ in range(_height(tree) + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        text = "".join(row).rstrip(" ")
        if len(text) < 2:
            text = "".join(row[:2])
        lines.append(text + "\n")
    return "".join(lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to file, standard output by default."""
    (file if file is not None else sys.stdout).write(render(tree))