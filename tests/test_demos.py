import re

import pytest

from bintrees_kit.demos import main, run_scenario, scenario_names
from bintrees_kit.node import BinaryTreeNode
from bintrees_kit.render import render_tree

SAME_TREE_AS_DELETE = ["is_leaf", "is_root", "height", "depth", "size", "leaves", "nodes"]


def _three_level_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.right = BinaryTreeNode(402, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(56, root.left)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    return root


def _report_lines(output):
    return [line for line in output.splitlines() if ":" in line]


def test_scenario_names_are_unique_and_ordered():
    names = scenario_names()
    assert len(names) == len(set(names)) == 19
    assert names[0] == "node"
    assert names[-1] == "uncle"


@pytest.mark.parametrize("name", scenario_names())
def test_every_scenario_draws_root_first(name):
    output = run_scenario(name)
    assert output.endswith("\n")
    assert "(098)" in output.splitlines()[0]


def test_unknown_scenario_raises():
    with pytest.raises(KeyError):
        run_scenario("no-such-scenario")


def test_node_scenario_matches_render_of_built_tree():
    root = BinaryTreeNode(98)
    root.left = BinaryTreeNode(12, root)
    root.left.left = BinaryTreeNode(6, root.left)
    root.left.right = BinaryTreeNode(16, root.left)
    root.right = BinaryTreeNode(402, root)
    root.right.left = BinaryTreeNode(256, root.right)
    root.right.right = BinaryTreeNode(512, root.right)
    assert run_scenario("node") == render_tree(root)


@pytest.mark.parametrize("name", ["preorder", "inorder", "postorder"])
def test_traversal_scenarios_print_tree_then_values(name):
    tree = _three_level_tree()
    drawing = render_tree(tree)
    output = run_scenario(name)
    assert output.startswith(drawing)
    values = output[len(drawing):].splitlines()
    assert values == [str(v) for v in getattr(tree, name)()]


def test_inorder_of_search_tree_is_sorted():
    drawing = render_tree(_three_level_tree())
    values = [int(v) for v in run_scenario("inorder")[len(drawing):].splitlines()]
    assert values == sorted(values)


def test_delete_tree_is_final_drawing_of_insert_right():
    assert run_scenario("insert_right").endswith(run_scenario("delete"))


@pytest.mark.parametrize("name", SAME_TREE_AS_DELETE)
def test_report_scenarios_draw_grown_tree(name):
    output = run_scenario(name)
    assert output.startswith(run_scenario("delete"))
    assert len(_report_lines(output)) == 3


def test_insert_scenarios_print_two_drawings():
    for name in ("insert_left", "insert_right"):
        first, second = run_scenario(name).split("\n\n")
        assert first.count("(") < second.count("(")


def test_size_counts_every_drawn_node():
    output = run_scenario("size")
    drawing = run_scenario("delete")
    first_report = _report_lines(output)[0]
    assert first_report.startswith("Size of 98: ")
    assert int(first_report.rsplit(" ", 1)[1]) == drawing.count("(")


def test_depth_of_root_is_zero():
    assert _report_lines(run_scenario("depth"))[0] == "Depth of 98: 0"


def test_balance_lines_carry_explicit_sign():
    lines = _report_lines(run_scenario("balance"))
    assert len(lines) == 3
    assert all(re.fullmatch(r"Balance of \d+: [+-]\d+", line) for line in lines)


def test_is_perfect_prints_three_verdicts():
    output = run_scenario("is_perfect")
    verdicts = [line for line in output.splitlines() if line.startswith("Perfect: ")]
    assert len(verdicts) == 3
    assert all(v[-1] in "01" for v in verdicts)
    assert output.count("Perfect: ") == 3


def test_sibling_of_root_is_nil():
    assert run_scenario("sibling").splitlines()[-1] == "Sibling of 98: (nil)"


def test_uncle_of_child_of_root_is_nil():
    assert run_scenario("uncle").splitlines()[-1] == "Uncle of 12: (nil)"


def test_main_without_arguments_lists_scenarios(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == scenario_names()


def test_main_runs_named_scenario(capsys):
    assert main(["depth"]) == 0
    assert capsys.readouterr().out == run_scenario("depth")


def test_main_rejects_unknown_scenario(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["bogus"])
    assert excinfo.value.code == 2
    assert "bogus" in capsys.readouterr().err