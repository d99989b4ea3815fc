"""Text rendering of binary trees as stacked rows of labelled nodes."""

from __future__ import annotations

import sys
from typing import TextIO

from bintrees_kit.node import BinaryTreeNode


class _Canvas:
    """Rows of characters that grow on demand."""

    def __init__(self, rows: int) -> None:
        self.rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        return ["".join(line).rstrip(" ").ljust(2) for line in self.rows]


def _edge_height(tree: BinaryTreeNode) -> int:
    left = 1 + _edge_height(tree.left) if tree.left is not None else 0
    right = 1 + _edge_height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _draw(tree: BinaryTreeNode | None, offset: int, depth: int, canvas: _Canvas) -> int:
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start, length = offset + left + width // 2, width + right
        else:
            start, length = offset - width // 2, left + width
        for i in range(length):
            canvas.put(depth - 1, start + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render_tree(tree: BinaryTreeNode | None) -> str:
    """Return the drawing of ``tree``, one newline-terminated row per level."""
    if tree is None:
        return ""
    canvas = _Canvas(_edge_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(line + "\n" for line in canvas.lines())


def print_tree(tree: BinaryTreeNode | None, file: TextIO | None = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(render_tree(tree))