"""Tree node model.

A node owns its children through left/right. The parent link is a weakref so
the graph has no ownership cycle; the tree is kept alive by whoever holds the
root.
"""
from __future__ import annotations

import weakref
from typing import Optional

from ..core.digest import to_hex
from ..core.errors import DetachedNode


class TreeNode:
    """One node of the log tree, leaf or internal.

    Attributes:
        value: Digest bytes
        left: Left child, None for a leaf
        right: Right child, None for a leaf
    """

    __slots__ = ("value", "left", "right", "_parent", "__weakref__")

    def __init__(
        self,
        value: bytes,
        left: Optional[TreeNode] = None,
        right: Optional[TreeNode] = None,
    ):
        if (left is None) != (right is None):
            raise ValueError("Node must have both children or none")
        self.value = value
        self.left = left
        self.right = right
        self._parent = None

    @property
    def parent(self) -> Optional[TreeNode]:
        """Parent node, None for the root.

        Raises:
            DetachedNode: If the parent was released because nothing holds
                the tree root any more
        """
        if self._parent is None:
            return None
        parent = self._parent()
        if parent is None:
            raise DetachedNode("Parent node was released; keep a reference to the tree root")
        return parent

    @parent.setter
    def parent(self, node: Optional[TreeNode]) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        return self.parent is None

    def is_left_child(self) -> bool:
        """True if this node is its parent's left child.

        A duplicated last node is both children of its parent; it counts as
        the left one.
        """
        parent = self.parent
        return parent is not None and parent.left is self

    def depth(self) -> int:
        """Number of parent hops from this node to the root."""
        hops = 0
        node = self.parent
        while node is not None:
            hops += 1
            node = node.parent
        return hops

    def describe(self) -> dict:
        """Node summary for traces."""
        return {
            "value": to_hex(self.value),
            "leaf": self.is_leaf(),
            "root": self.is_root(),
        }

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf() else "node"
        return f"TreeNode({kind}, {to_hex(self.value)[:16]})"
