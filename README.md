# bubble-ist

Compute the parent of every vertex of the bubble-sort network B_n in each of
its n-1 independent spanning trees. The identity permutation is the common
root of all trees.

The vertices of B_n are the n! permutations of `1..n`. Each vertex is
identified by its rank in lexicographic order.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
bubble-ist 4
```

This enumerates all 4! vertices and writes the table to
`Sequential_parents.csv` in the current directory. When it is done it prints
`Done. Written 24 vertices × 3 trees -> Sequential_parents.csv`.

Options:

- `N` (required): the number of symbols. It must be at least 2. Otherwise the
  command prints an error and exits with status 1.
- `-o`, `--output`: the CSV file to write.
- `--parts`: split the vertex range into this many contiguous chunks
  (default 1).
- `--index`: the 0-based chunk to compute (default 0).

With `--parts` greater than 1, only the chosen chunk is computed. Unless
`--output` is given, it goes to `Parallel_parents_rank<index>.csv`. The
command then prints `Rank <index> finished in <seconds> seconds.`. Every chunk
file starts with the same header line.

The table has one row per vertex. For `n = 3` it reads:

```
vertex_id,perm,T1,T2
0,1-2-3,-1,-1
1,1-3-2,4,0
2,2-1-3,0,3
3,2-3-1,2,5
4,3-1-2,5,1
5,3-2-1,3,4
```

Column `Tt` holds the id of the vertex's parent in tree `t`. The root has `-1`
in every tree column.

## Library use

```python
from bubble_ist.permutations import unrank, rank_of, perm_to_str
from bubble_ist.parents import get_parent, parent_ids
from bubble_ist.table import header, parent_rows, partition, write_csv

perm = unrank(1, 3)            # (1, 3, 2)
rank_of(perm)                  # 1
perm_to_str(perm)              # "1-3-2"
get_parent(perm, 1)            # (3, 1, 2)
parent_ids(perm)               # [4, 0]

header(3)                      # "vertex_id,perm,T1,T2"

start, count = partition(6, 2, 1)   # (3, 3)
rows = parent_rows(3, start, count)
write_csv("parents.csv", 3, rows)   # returns 3
```

- `bubble_ist.permutations`: `factorials`, `unrank`, `rank_of`,
  `perm_to_str`, `is_identity` and `lex_permutations`. These rank,
  enumerate and format permutations of `1..n`. Permutations are tuples.
- `bubble_ist.parents`: `swap_symbol` swaps a symbol with its right-hand
  neighbour. `get_parent(perm, t)` gives the parent in tree `t`. It raises
  `ValueError` for the root, for a tree index outside `1..n-1`, and for input
  that is not a permutation of `1..n` with `n >= 2`. `parent_ids(perm)` lists
  the parent ranks for every tree, or `-1` for each tree at the root.
- `bubble_ist.table`: `Row` is a frozen dataclass with `vertex_id`, `perm` and
  `parents`. `Row.to_csv()` renders one row as a line. `parent_rows` yields the
  rows of a range of vertices. `write_csv` writes a header and rows.
  `partition(total, parts, index)` returns the `(start, count)` of one chunk.
  Any remainder goes to the first chunks.

## What it does not do

One run computes one chunk in one process. The package does not start or
coordinate several workers. To spread the work, run the command once per chunk
with the same `--parts` and a different `--index`. Then combine the per-chunk
files yourself. The table is the only output: the package does not build the
trees as graph objects or draw them.