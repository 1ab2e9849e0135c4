# dsakit

Small, dependency-free implementations of classic data-structure and algorithm
exercises: undirected graphs, minimum spanning trees, grid flood fill, generic
(n-ary) trees, a chained hash map, array problems that a hash table solves,
and tries.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

`dsakit.graph.Graph` is an undirected graph over the vertices `0` to
`vertices - 1`. Edges are pairs, or triples with a weight; an edge without a
weight has weight 1, and adding an edge with weight 0 removes it. A vertex
outside the range raises `ValueError`. Neighbours are always visited in
ascending order.

```python
from dsakit.graph import Graph

g = Graph(4, [(0, 1), (1, 2), (2, 0)])
g.count_triangles()        # 1
g.dfs_order()              # [0, 1, 2, 3]
g.bfs_order()              # [0, 1, 2, 3]
g.connected_components()   # [[0, 1, 2], [3]]
g.has_path(0, 2)           # True
g.dfs_path(0, 2)           # [2, 1, 0]  (from the end back to the start)
g.dfs_path(0, 3)           # None
g.is_connected()           # False
g.count_islands()          # 2

w = Graph(3)
w.add_edge(0, 1, 4)
w.add_edge(1, 2, 1)
w.shortest_distances()     # [0, 4, 5]  (Dijkstra from vertex 0)
```

In `shortest_distances`, vertices that cannot be reached from vertex 0 get
`math.inf`.

## Minimum spanning trees

`dsakit.mst.kruskal` returns the edges of a minimum spanning tree, lightest
first. Edges may be `Edge` objects or `(first, second, weight)` triples.

```python
from dsakit.mst import Edge, kruskal

kruskal(3, [Edge(0, 1, 3), Edge(1, 2, 1), Edge(0, 2, 2)])
# [Edge(first=1, second=2, weight=1), Edge(first=0, second=2, weight=2)]
```

It raises `ValueError` when there are no vertices, when an edge names a
vertex out of range, or when the graph is not connected.

## Grids

`dsakit.grid.largest_piece` gives the size of the largest 4-connected region
of cells equal to 1 in a rectangular grid. Rows of different lengths raise
`ValueError`.

```python
from dsakit.grid import largest_piece

largest_piece([[1, 1], [0, 1]])   # 3
```

## Generic trees

`dsakit.tree.TreeNode` is a dataclass holding `data` and a list of
`children`. Trees can be built by hand or read from a sequence of integer
tokens:

- `read_level_order(tokens)`: the root's data, then, for each node in level
  order, its child count followed by that many children's data.
- `read_preorder(tokens)`: each node as its data, its child count, and then
  each of its children in the same form.

Both raise `ValueError` when the tokens run out early or a count is negative.

```python
from dsakit.tree import read_level_order

root = read_level_order([1, 3, 2, 3, 4, 0, 0, 1, 5, 0])
root.preorder()            # [1, 2, 3, 4, 5]
root.postorder()           # [2, 3, 5, 4, 1]
root.level_lines()         # ['1:2,3,4,', '2:', '3:', '4:5,', '5:']
root.preorder_lines()      # the same lines in pre-order
root.nodes_at_level(1)     # [2, 3, 4]
root.size()                # 5
root.total()               # 15
root.identical(other)      # equal data in matching positions
root.replace_with_depth()  # every node's data becomes its depth
```

`identical` pairs children by position and does not compare children past
the end of the shorter list.

`dsakit.tree_queries` answers questions about a tree:

- `contains(root, value)`
- `count_leaves(root)`
- `count_greater_than(root, value)`
- `largest(root)`
- `next_larger(root, value)`: the smallest data above `value`, or `None`
- `max_child_sum_value(root)`: data of the node whose own data plus its
  children's data is largest; ties go to the node met first in pre-order
- `max_child_sum_value_last(root)`: the same, with ties going to the node met
  last

## Hash maps

`dsakit.chained_map.ChainedMap` is a separately chained hash map with string
keys. It starts with 5 buckets and doubles them when the load factor goes past
0.7. `get` and `delete` raise `KeyError` for a missing key.

```python
from dsakit.chained_map import ChainedMap

m = ChainedMap()
m.insert("abc", 1)
"abc" in m                 # True
m.get("abc")               # 1
m.delete("abc")            # 1
len(m)                     # 0
m.load_factor()            # 0.0
```

`dsakit.hashing` holds array exercises that a hash table solves:

- `extract_unique(text)` and `remove_duplicates(values)`: drop repeats, keeping
  first-seen order
- `most_frequent(values)`: ties go to the value seen first; empty input
  raises `ValueError`
- `longest_consecutive_sequence(values)`: `[start, end]` of the longest run
  of consecutive integers, or `[start]` for a run of one; empty input raises
  `ValueError`
- `longest_zero_sum_subarray(values)`: length of the longest contiguous
  stretch summing to zero
- `count_zero_sum_pairs(values)`: pairs of positions whose values add up to 0
- `count_pairs_with_difference(values, k)`: pairs of positions whose values
  differ by `|k|`

## Tries

Words are made of the lowercase letters `a` to `z`; other characters raise
`ValueError`.

```python
from dsakit.trie import Trie, SuffixTrie, has_palindrome_pair

t = Trie()
for word in ["no", "note", "notes", "node"]:
    t.insert(word)
t.search("note")           # True
"not" in t                 # False
t.complete("no")           # ['no', 'node', 'note', 'notes']
t.remove("note")

s = SuffixTrie()
s.insert("bet")
s.search("et")             # True: the pattern occurs somewhere in a word

has_palindrome_pair(["abc", "cba"])   # True
```

`has_palindrome_pair` is true when some word, reversed, equals itself or a
word given before it.

## What it does not do

`dsakit` is a library only. It has no command-line interface and prints
nothing: every function returns its result, and reading trees from text is
left to the caller, who passes the integer tokens to `read_level_order` or
`read_preorder`.