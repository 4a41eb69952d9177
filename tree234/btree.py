"""A 2-3-4 tree (a B-tree of order 4) with operation counters and benchmark helpers."""

from __future__ import annotations

import bisect
import random
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, List, Union

MAX_KEYS = 3
MIN_KEYS_TO_DESCEND = 2
NUMBER_FILE_LIMIT = 100000

PathType = Union[str, "PathLike[str]"]


@dataclass
class BTreeStats:
    """Counters collected while a tree is built and shrunk."""

    splits: int = 0
    merges: int = 0
    height: int = 0
    blocks: int = 0
    rotations: int = 0
    removal_percent: float = 0.0

    def reset(self) -> None:
        """Set every counter back to zero."""
        self.splits = 0
        self.merges = 0
        self.height = 0
        self.blocks = 0
        self.rotations = 0
        self.removal_percent = 0.0


@dataclass(eq=False)
class BTreeNode:
    """A node holding one to three sorted keys and, unless a leaf, one more child."""

    keys: List[int] = field(default_factory=list)
    children: List["BTreeNode"] = field(default_factory=list)

    @property
    def leaf(self) -> bool:
        return not self.children


class BTree:
    """A 2-3-4 tree of distinct integer keys."""

    def __init__(self) -> None:
        self.root = BTreeNode()
        self.stats = BTreeStats()

    # -- insertion ---------------------------------------------------------

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it was already present."""
        root = self.root
        if len(root.keys) == MAX_KEYS:
            new_root = BTreeNode(children=[root])
            self.root = new_root
            self._split_child(new_root, 0)
        return self._insert_nonfull(self.root, key)

    def _split_child(self, parent: BTreeNode, index: int) -> None:
        self.stats.splits += 1
        child = parent.children[index]
        left_key, middle_key, right_key = child.keys
        sibling = BTreeNode(keys=[right_key], children=child.children[2:])
        child.keys = [left_key]
        child.children = child.children[:2]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, middle_key)

    def _insert_nonfull(self, node: BTreeNode, key: int) -> bool:
        while True:
            if key in node.keys:
                return False
            index = bisect.bisect_left(node.keys, key)
            if node.leaf:
                node.keys.insert(index, key)
                return True
            if len(node.children[index].keys) == MAX_KEYS:
                self._split_child(node, index)
                if key == node.keys[index]:
                    return False
                if key > node.keys[index]:
                    index += 1
            node = node.children[index]

    # -- removal -----------------------------------------------------------

    def remove(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        removed = self._remove_from(self.root, key)
        if not self.root.keys and not self.root.leaf:
            self.root = self.root.children[0]
        return removed

    def _remove_from(self, node: BTreeNode, key: int) -> bool:
        if key in node.keys:
            index = node.keys.index(key)
            if node.leaf:
                del node.keys[index]
                return True
            left = node.children[index]
            right = node.children[index + 1]
            if len(left.keys) >= MIN_KEYS_TO_DESCEND:
                predecessor = self._max_key(left)
                node.keys[index] = predecessor
                return self._remove_from(left, predecessor)
            if len(right.keys) >= MIN_KEYS_TO_DESCEND:
                successor = self._min_key(right)
                node.keys[index] = successor
                return self._remove_from(right, successor)
            self._merge_children(node, index)
            return self._remove_from(left, key)

        if node.leaf:
            return False
        index = bisect.bisect_left(node.keys, key)
        self._ensure_enough_keys(node, index)
        if index > len(node.keys):
            index -= 1
        return self._remove_from(node.children[index], key)

    @staticmethod
    def _max_key(node: BTreeNode) -> int:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _min_key(node: BTreeNode) -> int:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _merge_children(self, node: BTreeNode, index: int) -> None:
        self.stats.merges += 1
        child = node.children[index]
        sibling = node.children.pop(index + 1)
        child.keys.append(node.keys.pop(index))
        child.keys.extend(sibling.keys)
        child.children.extend(sibling.children)

    def _borrow_from_left(self, node: BTreeNode, index: int) -> None:
        self.stats.rotations += 1
        child = node.children[index]
        sibling = node.children[index - 1]
        child.keys.insert(0, node.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[index - 1] = sibling.keys.pop()

    def _borrow_from_right(self, node: BTreeNode, index: int) -> None:
        self.stats.rotations += 1
        child = node.children[index]
        sibling = node.children[index + 1]
        child.keys.append(node.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[index] = sibling.keys.pop(0)

    def _ensure_enough_keys(self, node: BTreeNode, index: int) -> None:
        if len(node.children[index].keys) >= MIN_KEYS_TO_DESCEND:
            return
        key_count = len(node.keys)
        if index > 0 and len(node.children[index - 1].keys) >= MIN_KEYS_TO_DESCEND:
            self._borrow_from_left(node, index)
        elif index < key_count and len(node.children[index + 1].keys) >= MIN_KEYS_TO_DESCEND:
            self._borrow_from_right(node, index)
        elif index < key_count:
            self._merge_children(node, index)
        else:
            self._merge_children(node, index - 1)

    # -- queries -----------------------------------------------------------

    def _in_order(self, node: BTreeNode) -> Iterator[int]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._in_order(child)
            yield key
        yield from self._in_order(node.children[-1])

    def __iter__(self) -> Iterator[int]:
        return self._in_order(self.root)

    def keys(self) -> List[int]:
        """All keys in ascending order."""
        return list(self)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while True:
            if key in node.keys:
                return True
            if node.leaf:
                return False
            node = node.children[bisect.bisect_left(node.keys, key)]

    def __len__(self) -> int:
        return sum(len(node.keys) for node in self._nodes())

    def _nodes(self) -> Iterator[BTreeNode]:
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children)

    def height(self) -> int:
        """Number of levels, counted down the leftmost path."""
        levels = 1
        node = self.root
        while not node.leaf:
            levels += 1
            node = node.children[0]
        return levels

    def count_nodes(self) -> int:
        """Number of nodes (blocks) in the tree."""
        return sum(1 for _ in self._nodes())

    def render(self) -> str:
        """Indented, one node per line, in pre-order."""
        lines: List[str] = []

        def visit(node: BTreeNode, level: int) -> None:
            keys = ", ".join(str(key) for key in node.keys)
            lines.append(f"{'  ' * level}|-- [{keys}]")
            for child in node.children:
                visit(child, level + 1)

        visit(self.root, 0)
        return "".join(line + "\n" for line in lines)

    # -- statistics --------------------------------------------------------

    def insertion_stats(self) -> BTreeStats:
        """Refresh height and block count and return the counters."""
        self.stats.height = self.height()
        self.stats.blocks = self.count_nodes()
        return self.stats

    def removal_stats(self, percent: float) -> BTreeStats:
        """Record the removal percentage, refresh the shape counters and return them."""
        self.stats.removal_percent = percent
        self.stats.height = self.height()
        self.stats.blocks = self.count_nodes()
        return self.stats


def save_insertion_stats(path: PathType, quantity: int, stats: BTreeStats) -> None:
    """Append ``quantity,splits,height,blocks`` to ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{quantity},{stats.splits},{stats.height},{stats.blocks}\n")


def save_removal_stats(path: PathType, stats: BTreeStats) -> None:
    """Append ``percent%,rotations,merges,height,blocks`` to ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(
            f"{stats.removal_percent:.0f}%,{stats.rotations},"
            f"{stats.merges},{stats.height},{stats.blocks}\n"
        )


def benchmark_insertion(tree: BTree, quantity: int, path: PathType) -> BTreeStats:
    """Collect insertion statistics for ``tree`` and append them to ``path``."""
    stats = tree.insertion_stats()
    save_insertion_stats(path, quantity, stats)
    return stats


def benchmark_removal(tree: BTree, percent: float, path: PathType) -> BTreeStats:
    """Collect removal statistics for ``tree`` and append them to ``path``."""
    stats = tree.removal_stats(percent)
    save_removal_stats(path, stats)
    return stats


def create_number_file(path: PathType, count: int, seed: int) -> List[int]:
    """Write ``count`` pseudo-random numbers below 100000, one per line; return them."""
    rng = random.Random(seed)
    numbers = [rng.randrange(NUMBER_FILE_LIMIT) for _ in range(count)]
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{number}\n" for number in numbers)
    return numbers