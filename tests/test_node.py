"""Tests for logtree.tree.node."""
import gc
import weakref

import pytest

from logtree.core.digest import digest
from logtree.core.errors import DetachedNode
from logtree.tree.build import build_leaves, build_tree
from logtree.tree.node import TreeNode


class TestTreeNode:
    """Tests for TreeNode structure."""

    def test_leaf_node(self):
        """Node without children is a leaf and, with no parent, a root."""
        node = TreeNode(digest(b"x"))
        assert node.is_leaf()
        assert node.is_root()
        assert node.parent is None

    def test_one_child_rejected(self):
        """Exactly one child raises ValueError."""
        leaf = TreeNode(digest(b"x"))
        with pytest.raises(ValueError):
            TreeNode(digest(b"y"), left=leaf)
        with pytest.raises(ValueError):
            TreeNode(digest(b"y"), right=leaf)

    def test_parent_links(self):
        """Children point at their parent after build."""
        leaves = build_leaves(["a", "b"])
        root = build_tree(leaves)
        assert leaves[0].parent is root
        assert leaves[1].parent is root
        assert not root.is_leaf()
        assert root.is_root()

    def test_is_left_child(self):
        """Left child reports True, right child False."""
        leaves = build_leaves(["a", "b"])
        root = build_tree(leaves)
        assert leaves[0].is_left_child()
        assert not leaves[1].is_left_child()
        assert not root.is_left_child()

    def test_duplicated_node_is_both_children(self):
        """Duplicated last node is the left and right child of one parent."""
        leaves = build_leaves(["a", "b", "c"])
        build_tree(leaves)
        parent = leaves[2].parent
        assert parent.left is leaves[2]
        assert parent.right is leaves[2]

    def test_depth(self):
        """depth() counts hops to the root."""
        leaves = build_leaves(["a", "b", "c", "d"])
        root = build_tree(leaves)
        assert root.depth() == 0
        assert root.left.depth() == 1
        assert all(leaf.depth() == 2 for leaf in leaves)

    def test_parent_is_not_owning(self):
        """Dropping the root releases the parents of the leaves."""
        leaves = build_leaves(["a", "b"])
        root = build_tree(leaves)
        parent_ref = weakref.ref(root)
        assert leaves[0].parent is root
        del root
        gc.collect()
        assert parent_ref() is None

    def test_released_parent_raises(self):
        """A released parent raises instead of making the leaf look like a root."""
        leaves = build_leaves(["a", "b", "c"])
        root_value = build_tree(leaves).value
        gc.collect()

        assert len(root_value) == 32
        with pytest.raises(DetachedNode):
            leaves[0].parent
        with pytest.raises(DetachedNode):
            leaves[0].is_root()
        with pytest.raises(DetachedNode):
            leaves[0].depth()

    def test_describe(self):
        """describe() reports hex value and role."""
        node = TreeNode(digest(b"x"))
        info = node.describe()
        assert info["value"] == digest(b"x").hex()
        assert info["leaf"] is True
        assert info["root"] is True
