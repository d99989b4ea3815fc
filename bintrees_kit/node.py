"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator


def _levels(node: BinaryTreeNode | None) -> int:
    """Number of levels in the subtree rooted at ``node`` (0 for no node)."""
    count = 0
    level = [node] if node is not None else []
    while level:
        count += 1
        level = [child for n in level for child in (n.left, n.right) if child is not None]
    return count


class BinaryTreeNode:
    """A node of a binary tree holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: BinaryTreeNode | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: BinaryTreeNode | None = None
        self.right: BinaryTreeNode | None = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child moves below it."""
        node = BinaryTreeNode(value, self)
        if self.left is not None:
            self.left.parent = node
            node.left = self.left
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child moves below it."""
        node = BinaryTreeNode(value, self)
        if self.right is not None:
            self.right.parent = node
            node.right = self.right
        self.right = node
        return node

    def delete(self) -> None:
        """Tear down the subtree rooted here and detach it from its parent."""
        if self.parent is not None:
            if self.parent.left is self:
                self.parent.left = None
            if self.parent.right is self:
                self.parent.right = None
        for node in list(self.postorder_nodes()):
            node.parent = None
            node.left = None
            node.right = None

    def is_leaf(self) -> bool:
        """True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True if the node has no parent."""
        return self.parent is None

    def preorder_nodes(self) -> Iterator[BinaryTreeNode]:
        """Yield the nodes of the subtree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder_nodes(self) -> Iterator[BinaryTreeNode]:
        """Yield the nodes of the subtree in post-order."""
        stack: list[tuple[BinaryTreeNode, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left, right."""
        for node in self.preorder_nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left, node, right."""
        stack: list[BinaryTreeNode] = []
        node: BinaryTreeNode | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left, right, node."""
        for node in self.postorder_nodes():
            yield node.value

    def height(self) -> int:
        """Number of edges on the longest downward path from this node."""
        return _levels(self) - 1

    def depth(self) -> int:
        """Number of edges from this node up to the root."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self.preorder_nodes())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in self.preorder_nodes() if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in self.preorder_nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Level count of the left subtree minus that of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self.preorder_nodes()
        )

    def is_perfect(self) -> bool:
        """True if every internal node has two children and all leaves share a level."""
        return self.size() == 2 ** _levels(self) - 1

    def sibling(self) -> BinaryTreeNode | None:
        """The other child of this node's parent, or None."""
        if self.parent is None:
            return None
        if self.parent.left is self:
            return self.parent.right
        return self.parent.left

    def uncle(self) -> BinaryTreeNode | None:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()