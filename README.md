# dsakit

Plain, dependency-free Python implementations of classic data structures
and algorithms.

| Module               | What it holds                                               |
|----------------------|-------------------------------------------------------------|
| `dsakit.linkedlist`  | `Node`, `LinkedList`, `has_loop`, `merge_sorted`            |
| `dsakit.circular`    | `CircularList`                                              |
| `dsakit.search`      | `find_all`, `search_pattern` (naive pattern search)         |
| `dsakit.graph`       | `Graph` over an adjacency matrix, with BFS and DFS          |
| `dsakit.binarytree`  | `TreeNode`, `BinaryTree` with traversals and height         |
| `dsakit.bst`         | `BSTNode`, `BinarySearchTree`, `inorder_predecessor`, `inorder_successor` |
| `dsakit.avl`         | `AVLNode`, `AVLTree`, `node_height`, `balance_factor`       |

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Singly linked lists

`insert(index, value)` places the value after `index` nodes (0 makes it the
head); `delete(index)` takes a 1-based position and returns the removed
value. Both raise `IndexError` for a position out of range.

```python
from dsakit.linkedlist import LinkedList, merge_sorted

items = LinkedList([10, 20, 20, 40, 50])
items.insert(0, 5)          # [5, 10, 20, 20, 40, 50]
items.delete(2)             # removes 10
items.remove_duplicates()   # [5, 20, 40, 50]
print(list(items), items.is_sorted())

items.reverse()             # also: reverse_values(), reverse_recursive()
print(items.display(" -> "))

merged = merge_sorted(LinkedList([10, 20, 40]), LinkedList([15, 18, 25]))
print(list(merged))         # the two inputs are left empty
```

`LinkedList.has_loop()` and the module-level `has_loop(head)` detect a
cycle reachable from a head node.

### Circular lists

```python
from dsakit.circular import CircularList

ring = CircularList([2, 3, 4, 5, 6])
ring.insert(0, 1)           # new head
print(len(ring), ring.display())
print(ring.delete(1))       # 1-based, returns the removed value
```

### Pattern search

```python
from dsakit.search import find_all, search_pattern

print(find_all("AABAACAADAABAABA", "AABA"))  # [0, 9, 12]
print(search_pattern("AABAACAADAABAABA", "AABA"), end="")
# index = 0
# index = 9
# index = 12
```

### Graphs

An entry of 1 at `[i][j]` is an edge from `i` to `j`. Vertices are numbered
from 1: column 0 is never followed during a traversal.

```python
from dsakit.graph import Graph

graph = Graph([
    [0, 0, 0, 0],
    [0, 0, 1, 1],
    [0, 1, 0, 1],
    [0, 1, 1, 0],
])
print(graph.bfs(1), graph.dfs(1), graph.has_edges(2))
```

A non-square matrix raises `ValueError`; a start vertex outside the matrix
raises `IndexError`.

### Binary trees

`from_level_values` takes the root, then the left and right child of each
node in level order, with `-1` for no child.

```python
from dsakit.binarytree import BinaryTree

tree = BinaryTree.from_level_values([1, 2, 3, -1, -1, -1, -1])
print(tree.preorder(), tree.inorder(), tree.postorder())
print(tree.level_order(), tree.height())
```

### Binary search trees and AVL trees

```python
from dsakit.bst import BinarySearchTree, inorder_predecessor
from dsakit.avl import AVLTree

bst = BinarySearchTree()
for key in (10, 5, 20, 8, 30):
    bst.insert(key)         # also: insert_recursive(key)
bst.delete(20)              # KeyError if the key is absent
print(bst.inorder(), 8 in bst, bst.height())
print(bst.search(8), bst.search_recursive(99))

rebuilt = BinarySearchTree.from_preorder([30, 20, 10, 15, 25, 40, 50, 45])
print(rebuilt.inorder())
print(inorder_predecessor(rebuilt.root.left).data)

avl = AVLTree()
for key in (30, 20, 10):
    avl.insert(key)
print(avl.inorder(), avl.height())
```

## Command-line tools

Two commands read whitespace-separated integers from a file named on the
command line, or from standard input when no file is given:

```
dsakit-graph [input]
dsakit-tree [input]
```

`dsakit-graph` reads the number of vertices, then the adjacency matrix, then
menu choices: `1 <vertex>` for breadth-first search, `2 <vertex>` for
depth-first search, `3 <vertex>` to check whether a vertex has any edge, and
`4` (or the end of input) to exit.

`dsakit-tree` reads level-order values (`-1` marks a missing child) and
prints the preorder, inorder, postorder and level-order traversals and the
height.

## Limitations

- `AVLTree` rebalances only left-heavy nodes (LL and LR rotations);
  right-heavy subtrees are left as inserted, and there is no deletion.
- `BinaryTree` has no insertion or deletion beyond building from
  level-order values.
- Everything lives in memory; nothing is saved to disk.