# bintree

A small binary tree built from linked `Node` objects, in the module
`bintree.node`. Each node holds an integer value and knows its parent and
its left and right children. The package offers traversals, measurements,
structural checks and lookups of related nodes.

## Installation

```
pip install .
```

To install pytest as well, for running the tests:

```
pip install ".[test]"
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
right.insert_left(128)
```

`Node(value, parent=None)` creates a node. Passing a `parent` only sets the
new node's `parent` link; it does not attach the node as a child. To add a
child, use `insert_left` and `insert_right`: they create a child, link it
both ways and return it. If the parent already has a child on that side,
the new node takes its place and the old child becomes the new node's
child on the same side.

The links are plain attributes: `value`, `parent`, `left` and `right`.

## Traversals

`preorder`, `inorder` and `postorder` are generators that yield the node
values in the matching order:

```python
list(root.preorder())   # [98, 12, 54, 402, 128]
list(root.inorder())    # [12, 54, 98, 128, 402]
list(root.postorder())  # [54, 12, 128, 402, 98]
```

## Measurements

- `height()`: number of edges on the longest path from the node down to a leaf. A leaf has height 0.
- `depth()`: number of edges from the node up to the root. A root has depth 0.
- `size()`: number of nodes in the subtree.
- `leaves()`: number of leaves in the subtree.
- `internal_nodes()`: number of nodes in the subtree that have at least one child.
- `balance()`: height of the left subtree minus height of the right subtree. A missing subtree and a subtree that is a single leaf both count as height 0.

## Checks

- `is_leaf()`: the node has no children.
- `is_root()`: the node has no parent.
- `is_full()`: every node in the subtree has either zero or two children.
- `is_perfect()`: every node in the subtree has zero or two children and every leaf sits at the same level as the bottom of the leftmost path.

## Relatives

- `sibling()`: the parent's other child, or `None`.
- `uncle()`: the sibling of the node's parent, or `None`.

## What it does not do

There is no removal of nodes, no search by value and no keeping of values
in sorted order: the tree holds exactly the shape that `insert_left` and
`insert_right` give it.

## Running the tests

```
pytest
```