"""Tree subpackage: node model, construction, and path verification."""
from .build import build_leaves, build_tree
from .logtree import LogTree
from .node import TreeNode
from .verify import find_leaf, hash_path, is_valid_log_entry

__all__ = [
    "TreeNode",
    "build_leaves",
    "build_tree",
    "find_leaf",
    "hash_path",
    "is_valid_log_entry",
    "LogTree",
]
