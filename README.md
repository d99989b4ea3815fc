# bintrees-kit

A small library of linked binary tree nodes. Every node holds an integer
value and links to its parent and to its left and right children.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The node: `bintrees_kit.node.BinaryTreeNode`

`BinaryTreeNode(value, parent=None)` creates a node with no children. The
attributes `value`, `parent`, `left` and `right` are plain attributes and may
be set directly. Setting a child this way does not set the child's `parent`;
pass the parent to the constructor for that.

Building:

- `insert_left(value)` / `insert_right(value)` create a new child on that
  side and return it. A child already there moves one level down and becomes
  the same-side child of the new node.
- `delete()` detaches the node from its parent and clears the parent and
  child links of every node in its subtree.

Traversals (generators):

- `preorder()`, `inorder()`, `postorder()` yield the values.
- `preorder_nodes()`, `postorder_nodes()` yield the nodes themselves.

Measurements:

- `height()`: edges on the longest downward path (0 for a lone node).
- `depth()`: edges up to the root.
- `size()`: nodes in the subtree.
- `leaves()`: nodes in the subtree with no children.
- `nodes()`: nodes in the subtree with at least one child.
- `balance()`: number of levels under the left child minus number of levels
  under the right child.

Checks and relatives:

- `is_leaf()`, `is_root()`.
- `is_full()`: every node in the subtree has zero or two children.
- `is_perfect()`: every inner node has two children and all leaves are on
  the same level.
- `sibling()`: the other child of the parent, or `None`.
- `uncle()`: the sibling of the parent, or `None`.

```python
from bintrees_kit.node import BinaryTreeNode

root = BinaryTreeNode(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)          # 402 now hangs below 128

list(root.preorder())           # [98, 12, 54, 128, 402]
root.height()                   # 2
root.right.depth()              # 1
root.size(), root.leaves(), root.nodes()   # (5, 2, 3)
root.left.sibling().value       # 128
root.left.right.uncle().value   # 128
```

## Drawing: `bintrees_kit.render`

- `render_tree(tree)` returns the drawing as a string, one line per level,
  each value shown as a zero-padded label such as `(098)`, with dashes and a
  dot linking a parent to its children. `None` gives an empty string.
- `print_tree(tree, file=None)` writes the same drawing to `file`, or to
  standard output when no file is given.

```python
from bintrees_kit.render import print_tree

print_tree(root)
```

## Demonstrations: `bintrees_kit.demos`

A set of named scenarios builds small trees, draws them and prints what each
operation reports. The `bintrees-demo` command runs them:

```
bintrees-demo                  # list the scenario names
bintrees-demo height sibling   # run one or more scenarios
```

The scenarios are `node`, `insert_left`, `insert_right`, `delete`,
`is_leaf`, `is_root`, `preorder`, `inorder`, `postorder`, `height`, `depth`,
`size`, `leaves`, `nodes`, `balance`, `is_full`, `is_perfect`, `sibling` and
`uncle`. An unknown name is reported as an error. The output of several
scenarios is separated by a blank line.

From Python, `scenario_names()` returns the names in that order and
`run_scenario(name)` returns the text a scenario prints; it raises
`KeyError` for an unknown name.

## What it does not do

The tree is a plain linked structure. It keeps no ordering of values, does
no searching and no rebalancing, and cannot remove a single node from the
middle of a tree: `delete()` always takes a whole subtree.