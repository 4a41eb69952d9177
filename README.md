# tree234

A 2-3-4 tree (a B-tree of order 4) that counts the splits, merges and
rotations it performs, a red-black tree, and a conversion from one to the
other. An interactive command builds a tree from a file of integers, lets you
edit and print it, converts it into a red-black tree, and appends benchmark
results to comma-separated text files.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from tree234.btree import BTree
from tree234.conversion import btree_to_redblack

tree = BTree()
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    tree.insert(key)

print(tree.render())        # indented view of the nodes, one per line
print(list(tree))           # keys in ascending order
print(tree.height(), tree.count_nodes())

tree.remove(6)
print(6 in tree, len(tree))

rb = btree_to_redblack(tree)
rb.insert(42)
print(rb.render())          # pre-order listing with colours
print(list(rb))             # keys in ascending order
```

### `tree234.btree`

- `BTree` holds distinct integer keys. `insert(key)` returns `False` and
  changes nothing if the key is already present; `remove(key)` returns
  `False` if the key is missing. `keys()`, iteration, `in` and `len()` work
  as expected. `height()` counts levels down the leftmost path and
  `count_nodes()` counts nodes. `render()` returns lines such as
  `|-- [10, 20]`, indented two spaces per level.
- Every tree carries a `BTreeStats` record in `tree.stats` with `splits`,
  `merges`, `rotations`, `height`, `blocks` and `removal_percent`;
  `reset()` sets them all back to zero. `insertion_stats()` and
  `removal_stats(percent)` refresh the height and node count and return the
  record.
- `save_insertion_stats(path, quantity, stats)` appends
  `quantity,splits,height,blocks`; `save_removal_stats(path, stats)` appends
  `percent%,rotations,merges,height,blocks`. `benchmark_insertion(tree,
  quantity, path)` and `benchmark_removal(tree, percent, path)` collect the
  statistics, append them and return them.
- `create_number_file(path, count, seed)` writes `count` pseudo-random
  integers below 100000, one per line, and returns them.

### `tree234.redblack`

`RedBlackTree` keeps every inserted key, duplicates included (equal keys go
to the right). `insert(key)` returns the new `RBNode`; `remove(key)` removes
one occurrence and returns `False` if the key is absent. `preorder()` and
`inorder()` yield nodes, iteration yields keys in order, and `render()`
returns one `\n<colour> - <key>.` entry per node in pre-order, where the
colour is `Color.RED.value` (`V`) or `Color.BLACK.value` (`P`).

### `tree234.conversion`

`btree_to_redblack(tree)` returns a new `RedBlackTree` with the same keys: a
node with one key becomes a black node, one with two keys a black node with a
red right child, and one with three keys a black node with two red children.

### `tree234.cli`

`load_tree(path)` builds a `BTree` from the whitespace-separated integers in
a file. `removal_benchmark(elements, percentages, path, rng)` rebuilds a tree
from `elements` once per percentage, removes that share of them chosen at
random with `rng` (a `random.Random`), appends each result to `path` and
returns the list of `BTreeStats`.

## The command

```
tree234
```

The menus and prompts are in Portuguese and answers are read from standard
input. The program first asks whether to create a new number file (name,
count and seed) or to read an existing one, loads every number into a 2-3-4
tree and prints it. A menu then offers insertion, removal, printing and
conversion to a red-black tree, which has its own menu for insertion, removal
and printing. A non-numeric answer where a number is expected is asked for
again.

On leaving, the insertion statistics are appended to
`estatisticas_insercao.txt` in the current directory, using as quantity the
count given when creating the file, or the number of values read. When that
quantity is exactly 10000, the tree is also rebuilt four times with 10%, 20%,
35% and 50% of its keys removed at random, and each result is appended to
`estatisticas_remocao.txt`.