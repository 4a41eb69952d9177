"""Conversion of a 2-3-4 tree into an equivalent red-black tree."""

from __future__ import annotations

from typing import Optional

from .btree import BTree, BTreeNode
from .redblack import Color, RBNode, RedBlackTree


def _new_node(tree: RedBlackTree, key: int, color: Color, parent: RBNode) -> RBNode:
    nil = tree.nil
    return RBNode(key=key, color=color, left=nil, right=nil, parent=parent)


def _child(node: BTreeNode, index: int) -> Optional[BTreeNode]:
    return None if node.leaf else node.children[index]


def _convert(tree: RedBlackTree, node: Optional[BTreeNode], parent: RBNode) -> RBNode:
    """Build the red-black subtree for ``node``, hanging it under ``parent``."""
    if node is None or not node.keys:
        return tree.nil

    keys = node.keys
    if len(keys) == 1:
        top = _new_node(tree, keys[0], Color.BLACK, parent)
        top.left = _convert(tree, _child(node, 0), top)
        top.right = _convert(tree, _child(node, 1), top)
    elif len(keys) == 2:
        top = _new_node(tree, keys[0], Color.BLACK, parent)
        red = _new_node(tree, keys[1], Color.RED, top)
        top.right = red
        top.left = _convert(tree, _child(node, 0), top)
        red.left = _convert(tree, _child(node, 1), red)
        red.right = _convert(tree, _child(node, 2), red)
    else:
        top = _new_node(tree, keys[1], Color.BLACK, parent)
        low = _new_node(tree, keys[0], Color.RED, top)
        high = _new_node(tree, keys[2], Color.RED, top)
        top.left = low
        top.right = high
        low.left = _convert(tree, _child(node, 0), low)
        low.right = _convert(tree, _child(node, 1), low)
        high.left = _convert(tree, _child(node, 2), high)
        high.right = _convert(tree, _child(node, 3), high)
    return top


def btree_to_redblack(tree: BTree) -> RedBlackTree:
    """Return a red-black tree holding the same keys as the 2-3-4 ``tree``.

    A 2-node becomes a black node, a 3-node a black node with a red right
    child, and a 4-node a black node with two red children.
    """
    result = RedBlackTree()
    result.root = _convert(result, tree.root, result.nil)
    return result