"""Worked scenarios that build small trees, draw them and report on them."""

from __future__ import annotations

import argparse
import io
from collections.abc import Callable
from typing import TextIO

from bintrees_kit.node import BinaryTreeNode
from bintrees_kit.render import render_tree

_Scenario = Callable[[TextIO], None]
_SCENARIOS: dict[str, _Scenario] = {}


def _scenario(name: str) -> Callable[[_Scenario], _Scenario]:
    def register(func: _Scenario) -> _Scenario:
        _SCENARIOS[name] = func
        return func

    return register


def _draw(tree: BinaryTreeNode, out: TextIO) -> None:
    out.write(render_tree(tree))


def _pointer(node: BinaryTreeNode | None) -> str:
    return "(nil)" if node is None else f"0x{id(node):x}"


def _three_level_tree() -> BinaryTreeNode:
    """98 over 12 (6, 56) and 402 (256, 512)."""
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(56, root.left)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def _small_tree() -> BinaryTreeNode:
    """98 with children 12 and 402."""
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    return root


def _grown_tree() -> BinaryTreeNode:
    """The small tree after inserting 54 right of 12 and 128 right of 98."""
    root = _small_tree()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _family_tree() -> BinaryTreeNode:
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(128, root)
    root.left.right = BinaryTreeNode(54, root.left)
    root.right.right = BinaryTreeNode(402, root.right)
    root.left.left = BinaryTreeNode(10, root.left)
    root.right.left = BinaryTreeNode(110, root.right)
    root.right.right.left = BinaryTreeNode(200, root.right.right)
    root.right.right.right = BinaryTreeNode(512, root.right.right)
    return root


@_scenario("node")
def _node(out: TextIO) -> None:
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(16, root.left)
    root.right = BinaryTreeNode(402, root)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    _draw(root, out)


@_scenario("insert_left")
def _insert_left(out: TextIO) -> None:
    root = _small_tree()
    _draw(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    _draw(root, out)


@_scenario("insert_right")
def _insert_right(out: TextIO) -> None:
    root = _small_tree()
    _draw(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    _draw(root, out)


@_scenario("delete")
def _delete(out: TextIO) -> None:
    root = _grown_tree()
    _draw(root, out)
    root.delete()


def _report(
    out: TextIO,
    label: str,
    nodes: list[BinaryTreeNode],
    measure: Callable[[BinaryTreeNode], object],
) -> None:
    for node in nodes:
        print(label.format(node.value, measure(node)), file=out)


@_scenario("is_leaf")
def _is_leaf(out: TextIO) -> None:
    root = _grown_tree()
    _draw(root, out)
    _report(out, "Is {} a leaf: {}", [root, root.right, root.right.right],
            lambda n: int(n.is_leaf()))


@_scenario("is_root")
def _is_root(out: TextIO) -> None:
    root = _grown_tree()
    _draw(root, out)
    _report(out, "Is {} a root: {}", [root, root.right, root.right.right],
            lambda n: int(n.is_root()))


def _traversal(out: TextIO, walk: Callable[[BinaryTreeNode], object]) -> None:
    root = _three_level_tree()
    _draw(root, out)
    for value in walk(root):
        print(value, file=out)


@_scenario("preorder")
def _preorder(out: TextIO) -> None:
    _traversal(out, BinaryTreeNode.preorder)


@_scenario("inorder")
def _inorder(out: TextIO) -> None:
    _traversal(out, BinaryTreeNode.inorder)


@_scenario("postorder")
def _postorder(out: TextIO) -> None:
    _traversal(out, BinaryTreeNode.postorder)


def _grown_report(out: TextIO, label: str, measure: Callable[[BinaryTreeNode], object]) -> None:
    root = _grown_tree()
    _draw(root, out)
    _report(out, label, [root, root.right, root.left.right], measure)


@_scenario("height")
def _height(out: TextIO) -> None:
    _grown_report(out, "Height from {}: {}", BinaryTreeNode.height)


@_scenario("depth")
def _depth(out: TextIO) -> None:
    _grown_report(out, "Depth of {}: {}", BinaryTreeNode.depth)


@_scenario("size")
def _size(out: TextIO) -> None:
    _grown_report(out, "Size of {}: {}", BinaryTreeNode.size)


@_scenario("leaves")
def _leaves(out: TextIO) -> None:
    _grown_report(out, "Leaves in {}: {}", BinaryTreeNode.leaves)


@_scenario("nodes")
def _nodes(out: TextIO) -> None:
    _grown_report(out, "Nodes in {}: {}", BinaryTreeNode.nodes)


@_scenario("balance")
def _balance(out: TextIO) -> None:
    root = _grown_tree()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    _draw(root, out)
    _report(out, "Balance of {}: {:+d}", [root, root.right, root.left.left.right],
            BinaryTreeNode.balance)


@_scenario("is_full")
def _is_full(out: TextIO) -> None:
    root = _grown_tree()
    root.left.left = BinaryTreeNode(10, root.left)
    _draw(root, out)
    _report(out, "Is {} full: {}", [root, root.left, root.right],
            lambda n: int(n.is_full()))


@_scenario("is_perfect")
def _is_perfect(out: TextIO) -> None:
    root = _grown_tree()
    root.left.left = BinaryTreeNode(10, root.left)
    root.right.left = BinaryTreeNode(10, root.right)

    _draw(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.left = BinaryTreeNode(10, root.right.right)
    _draw(root, out)
    print(f"Perfect: {int(root.is_perfect())}\n", file=out)

    root.right.right.right = BinaryTreeNode(10, root.right.right)
    _draw(root, out)
    print(f"Perfect: {int(root.is_perfect())}", file=out)


def _relative_line(label: str, node: BinaryTreeNode, relative: BinaryTreeNode | None) -> str:
    shown = relative.value if relative is not None else _pointer(None)
    return f"{label} of {node.value}: {shown}"


@_scenario("sibling")
def _sibling(out: TextIO) -> None:
    root = _family_tree()
    _draw(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(_relative_line("Sibling", node, node.sibling()), file=out)


@_scenario("uncle")
def _uncle(out: TextIO) -> None:
    root = _family_tree()
    _draw(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(_relative_line("Uncle", node, node.uncle()), file=out)


def scenario_names() -> list[str]:
    """Names of the available scenarios, in their canonical order."""
    return list(_SCENARIOS)


def run_scenario(name: str) -> str:
    """Run the named scenario and return everything it prints.

    Raises KeyError for an unknown name.
    """
    try:
        scenario = _SCENARIOS[name]
    except KeyError:
        raise KeyError(f"unknown scenario: {name!r}") from None
    out = io.StringIO()
    scenario(out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """Run the scenarios named on the command line, or list them if none are given."""
    parser = argparse.ArgumentParser(
        prog="bintrees-demo",
        description="Build sample binary trees, draw them and report on them.",
    )
    parser.add_argument("scenarios", nargs="*", metavar="SCENARIO",
                        help="scenario to run; omit to list all scenarios")
    args = parser.parse_args(argv)

    if not args.scenarios:
        for name in scenario_names():
            print(name)
        return 0

    unknown = [name for name in args.scenarios if name not in _SCENARIOS]
    if unknown:
        parser.error(f"unknown scenario: {', '.join(unknown)}")

    outputs = [run_scenario(name) for name in args.scenarios]
    print("\n".join(outputs), end="")
    return 0