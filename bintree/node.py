"""Binary tree nodes with parent links, traversals and structural queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value and links to its relatives."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    # Construction

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves below it."""
        new = Node(value, parent=self)
        if self.left is not None:
            new.left = self.left
            self.left.parent = new
        self.left = new
        return new

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves below it."""
        new = Node(value, parent=self)
        if self.right is not None:
            new.right = self.right
            self.right.parent = new
        self.right = new
        return new

    # Node kind

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    # Traversals

    def _preorder_nodes(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values node first, then left subtree, then right subtree."""
        for node in self._preorder_nodes():
            yield node.value

    def inorder(self) -> Iterator[int]:
        """Yield values left subtree first, then node, then right subtree."""
        stack: list[Node] = []
        node: Node | None = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values left subtree first, then right subtree, then node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # Measurements

    def height(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        level = [self]
        height = 0
        while True:
            level = [child for node in level for child in node._children()]
            if not level:
                return height
            height += 1

    def depth(self) -> int:
        """Return the number of edges from this node up to the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        return sum(1 for _ in self._preorder_nodes())

    def leaves(self) -> int:
        """Return the number of leaves in the subtree rooted here."""
        return sum(1 for node in self._preorder_nodes() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Return the number of nodes with at least one child."""
        return sum(1 for node in self._preorder_nodes() if not node.is_leaf())

    # Properties

    def balance(self) -> int:
        """Return the height of the left subtree minus that of the right.

        A missing subtree and a single leaf both count as height 0.
        """
        left = self.left.height() if self.left is not None else 0
        right = self.right.height() if self.right is not None else 0
        return left - right

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None)
            for node in self._preorder_nodes()
        )

    def is_perfect(self) -> bool:
        """Return True if the tree is full and every leaf is at the same level."""
        expected = 0
        node: Node | None = self
        while node is not None:
            expected += 1
            node = node.left

        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                if level + 1 != expected:
                    return False
            elif node.left is None or node.right is None:
                return False
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return True

    # Relations

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(root: Node) -> Iterator[list[Node]]:
    level = deque([root])
    while level:
        yield list(level)
        level = deque(child for node in level for child in node._children())