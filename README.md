# bintree

A small binary tree library. Each `Node` holds an integer value and links to
its parent and its left and right children. Nodes can grow the tree, walk
it, measure it and answer questions about its shape. A separate module draws
a tree as ASCII art.

## Installing

```
pip install .
```

Install with `pip install .[test]` to get the test dependencies, then run
`pytest`.

## Building a tree

```python
from bintree.node import Node
from bintree.display import print_tree

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)

print_tree(root)
```

`Node(value, parent=None)` makes a node; it does not attach itself to the
parent, so either assign it to `parent.left` / `parent.right` yourself or use
the insert methods.

`insert_left(value)` and `insert_right(value)` create a new child on that
side and return it. If there already was a child on that side, it moves down
to become the new node's child on the same side.

`delete()` detaches a node from its parent and breaks every link inside its
subtree.

## Walking a tree

`preorder()`, `inorder()` and `postorder()` are generators that yield the
node values of the subtree in the given order:

```python
list(root.inorder())
```

## Measuring and checking

| Method             | Answer                                                           |
|--------------------|------------------------------------------------------------------|
| `height()`         | edges on the longest path down to a leaf (a leaf gives 0)        |
| `depth()`          | edges on the path up to the root (the root gives 0)              |
| `size()`           | number of nodes in the subtree                                   |
| `leaves()`         | number of leaves in the subtree                                  |
| `internal_nodes()` | number of nodes in the subtree with at least one child           |
| `balance()`        | height of the left subtree minus height of the right             |
| `is_leaf()`        | the node has no children                                         |
| `is_root()`        | the node has no parent                                           |
| `is_full()`        | every node in the subtree has either zero or two children        |
| `is_perfect()`     | see below                                                        |
| `sibling()`        | the other child of the parent, or `None`                         |
| `uncle()`          | the parent's sibling, or `None`                                  |

`is_perfect()` follows these rules: a node with two leaf children is
perfect; a node with two children is perfect when both its subtrees are;
a node without two children counts as perfect only when it is the root.

## Drawing

`bintree.display.render(tree)` returns the drawing as a single string, one
line per level, each line ending in a newline; `render(None)` returns an
empty string. `print_tree(tree, file=None)` writes that string to a text
stream, standard output by default. Each value is shown at least three
digits wide in brackets, and dots and dashes join parents to their children:

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Examples

`bintree.demo` holds numbered example scenarios, 0 to 18, each building a
small tree, drawing it and printing the result of one operation. Run one or
more by number, or all of them with no arguments:

```
bintree-demo 14
bintree-demo 6 7 8
bintree-demo
```

From Python, `bintree.demo.run_example(number, file=None)` runs one scenario
and writes its output to `file` (standard output by default); an unknown
number raises `ValueError`. `bintree.demo.main(argv=None)` is the command's
entry point.

## What it does not do

Trees live only in memory: there is no way to save or load them, and no
search-tree, AVL or heap ordering is kept on insert.