# dslabs

A collection of classic data-structure and algorithm exercises, written as a
plain Python library. Each module covers one topic and works on ordinary
Python values: lists, strings, tuples and small node classes. Functions
return their results instead of printing them, and report bad input by
raising exceptions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Topic |
| --- | --- |
| `dslabs.arrays` | Triple-form sparse matrices (`SparseMatrix`, `Triple`), `spiral_matrix`, `saddle_points`, packed symmetric matrices (`packed_value`, `packed_add`, `packed_multiply`), `format_grid` |
| `dslabs.glist` | Generalised lists in bracket notation: `parse`, `to_string`, `length`, `depth`, `max_atom` |
| `dslabs.strings` | 1-based `substring`, `insert`, `delete`, `replace`; `index_naive`; KMP with `kmp_next` and `kmp_nextval` tables |
| `dslabs.btree` | Binary trees (`Node`) in bracket notation, `find`, `height`, recursive and iterative traversals, `level_order` |
| `dslabs.construct` | Rebuilding a tree from preorder/inorder (`from_pre_in`) or postorder/inorder (`from_post_in`), `indented` outline |
| `dslabs.metrics` | `node_count`, `leaf_count`, `level` of a node, `width` |
| `dslabs.paths` | Leaf-to-root paths by preorder, postorder and level-order walks; `longest_path` |
| `dslabs.expression` | `build` and `evaluate` a tree for a single-digit `+ - * /` expression |
| `dslabs.serialize` | Preorder `serialize`/`deserialize` with `#` for empty subtrees, `is_subtree`, `has_same_shape_subtree` |
| `dslabs.threaded` | Inorder threaded binary trees (`ThreadedTree`) |
| `dslabs.huffman` | `build_huffman`, `huffman_codes`, `average_code_length` |
| `dslabs.orgtree` | A multi-way organisation tree (`OrgNode`) read from a record file, with unit, class and student counts |
| `dslabs.family` | A family tree kept in a fixed-width data file, with an interactive menu |
| `dslabs.graph` | Adjacency-list graphs (`AdjGraph`), `dfs`, `dfs_iterative`, `bfs`, `all_dfs_orders`, spanning-tree edges |
| `dslabs.graphpaths` | `all_simple_paths`, `paths_of_length`, `shortest_path` by BFS |
| `dslabs.spanning` | `prim` and `kruskal` minimum spanning trees, `DisjointSet`, `minimum_road_cost` |
| `dslabs.shortest` | `dijkstra`, `floyd`, `min_cycle`, `party_total`, `cheapest_shortest` |
| `dslabs.routes` | A translator network (`Network`, `parse_network`) and constrained `treasure_paths` |
| `dslabs.topo` | `topological_order` and `critical_activities` of an activity-on-edge network |
| `dslabs.search` | Sequential, binary, block and stride search; bounds and ranges; `median_of_two`; binary-search decision trees |
| `dslabs.bst` | Binary search trees (`BST`): insert, delete, search paths, ASL, search-sequence check, LCA |
| `dslabs.hashing` | Open addressing with linear probing (`LinearProbingTable`) |
| `dslabs.avl` | AVL trees (`AVLTree`) with `delete_min` and `delete_max`, and an operation driver `process` |
| `dslabs.indexed` | A set with constant-time insert, remove and access by position (`IndexedSet`) |
| `dslabs.charcount` | Character frequencies in sorted order (`char_counts`) |

## Examples

Binary trees are written in bracket notation, where a missing left child is
left empty before the comma:

```python
from dslabs import btree

root = btree.parse("A(B(D,E(,G)),C(,F(H,I)))")
print(btree.to_string(root))
print(btree.preorder(root))
print(btree.height(root))
```

String matching with KMP:

```python
from dslabs import strings

s = "abcabcdabcdeabcdefabcdefg"
t = "abcdeabcdefab"
print(strings.kmp_next(t))
print(strings.kmp_index(s, t))
```

A spiral matrix:

```python
from dslabs.arrays import spiral_matrix, format_grid

print(format_grid(spiral_matrix(4)))
```

Graphs are built from an adjacency matrix, where `0` and the infinity marker
`dslabs.graph.INF` mean "no edge":

```python
from dslabs.graph import AdjGraph, dfs, bfs

g = AdjGraph.from_matrix([
    [0, 1, 0, 1, 1],
    [1, 0, 1, 1, 0],
    [0, 1, 0, 1, 1],
    [1, 1, 1, 0, 1],
    [1, 0, 1, 1, 0],
])
print(g.to_string())
print(dfs(g, 0))
print(bfs(g, 0))
```

A binary search tree:

```python
from dslabs.bst import BST

tree = BST([25, 18, 46, 2, 53, 39, 32, 4, 74, 67, 60, 11])
print(tree.to_string())
print(tree.asl_success(), tree.asl_failure())
print(list(tree))
```

## Command line

The family-tree manager runs as an interactive menu that reads and saves its
records in a data file (`fam.dat` in the current directory unless a path is
given as the argument):

```
dslabs-family
dslabs-family family.dat
```

## What it does not do

Apart from `dslabs-family`, the package has no commands: every other exercise
is a library function to be called from Python, and none of them prints its
results or reads input from the terminal. There are no knight's-tour or other
chessboard search routines.