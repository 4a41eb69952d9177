"""A red-black tree with a shared black sentinel standing in for every empty link."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class Color(Enum):
    """Node colour; the value is the letter used when the tree is printed."""

    RED = "V"
    BLACK = "P"


@dataclass(eq=False)
class RBNode:
    """A tree node; empty links point at the owning tree's sentinel."""

    key: int
    color: Color = Color.RED
    left: Optional["RBNode"] = None
    right: Optional["RBNode"] = None
    parent: Optional["RBNode"] = None


class RedBlackTree:
    """A red-black tree of integer keys; equal keys are kept and go to the right."""

    def __init__(self) -> None:
        nil = RBNode(key=-1, color=Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        self.nil = nil
        self.root = nil

    # -- insertion ---------------------------------------------------------

    def insert(self, key: int) -> RBNode:
        """Insert ``key`` and rebalance; return the new node."""
        nil = self.nil
        node = RBNode(key=key, color=Color.RED, left=nil, right=nil, parent=nil)
        parent = nil
        current = self.root
        while current is not nil:
            parent = current
            current = current.left if key < current.key else current.right
        node.parent = parent
        if parent is nil:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._fix_insert(node)
        return node

    def _fix_insert(self, node: RBNode) -> None:
        while node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                    grandparent = parent.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)
        self.root.color = Color.BLACK

    # -- removal -----------------------------------------------------------

    def _find(self, key: int) -> RBNode:
        current = self.root
        while current is not self.nil and current.key != key:
            current = current.left if key < current.key else current.right
        return current

    def remove(self, key: int) -> bool:
        """Remove one occurrence of ``key``; return False if it is absent."""
        nil = self.nil
        target = self._find(key)
        if target is nil:
            return False

        removed = target
        if target.left is not nil and target.right is not nil:
            successor = target.right
            while successor.left is not nil:
                successor = successor.left
            target.key = successor.key
            removed = successor

        removed_parent = removed.parent
        removed_color = removed.color
        child = removed.left if removed.left is not nil else removed.right

        if child is not nil:
            child.parent = removed_parent
        if removed_parent is nil:
            self.root = child
        elif removed is removed_parent.left:
            removed_parent.left = child
        else:
            removed_parent.right = child

        if removed_color is Color.BLACK:
            self._fix_remove(child, removed_parent)
        return True

    def _fix_remove(self, node: RBNode, parent: RBNode) -> None:
        nil = self.nil
        while node is not self.root and node.color is Color.BLACK:
            if node is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                elif sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                elif sibling.right.color is Color.BLACK:
                    if sibling.left is not nil:
                        sibling.left.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_right(sibling)
                elif sibling is not nil:
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.right is not nil:
                        sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self.root
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                elif sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                    parent = node.parent
                elif sibling.left.color is Color.BLACK:
                    if sibling.right is not nil:
                        sibling.right.color = Color.BLACK
                    sibling.color = Color.RED
                    self._rotate_left(sibling)
                elif sibling is not nil:
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    if sibling.left is not nil:
                        sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self.root

        if node is not nil:
            node.color = Color.BLACK
        self.root.color = Color.BLACK

    # -- rotations ---------------------------------------------------------

    def _replace_in_parent(self, old: RBNode, new: RBNode) -> None:
        parent = old.parent
        new.parent = parent
        if parent is self.nil:
            self.root = new
        elif parent.right is old:
            parent.right = new
        else:
            parent.left = new

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not self.nil:
            pivot.left.parent = node
        self._replace_in_parent(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not self.nil:
            pivot.right.parent = node
        self._replace_in_parent(node, pivot)
        pivot.right = node
        node.parent = pivot

    # -- traversal ---------------------------------------------------------

    def preorder(self) -> Iterator[RBNode]:
        """Nodes in pre-order: node, left subtree, right subtree."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node is self.nil:
                continue
            yield node
            stack.append(node.right)
            stack.append(node.left)

    def inorder(self) -> Iterator[RBNode]:
        """Nodes in key order."""
        stack = []
        node = self.root
        while stack or node is not self.nil:
            while node is not self.nil:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def __iter__(self) -> Iterator[int]:
        return (node.key for node in self.inorder())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._find(key) is not self.nil

    def render(self) -> str:
        """Pre-order listing, one ``\\n<colour> - <key>.`` entry per node."""
        return "".join(f"\n{node.color.value} - {node.key}." for node in self.preorder())