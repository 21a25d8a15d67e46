"""LogTree: Merkle tree commitments over text logs.

Public API:
- Core: digest, hash_line, hash_pair, parse_root, to_hex, emit_receipt
- Errors: LogTreeError, InputUnavailable, EmptyTree, DigestUnavailable, InvalidRoot,
  DetachedNode
- Tree: TreeNode, build_leaves, build_tree, hash_path, is_valid_log_entry, LogTree
- Anchor: anchor_root
- Source: read_lines
"""
from .anchor import anchor_root
from .core import (
    DetachedNode,
    DigestUnavailable,
    EmptyTree,
    InputUnavailable,
    InvalidRoot,
    LogTreeError,
    digest,
    emit_receipt,
    hash_line,
    hash_pair,
    parse_root,
    to_hex,
)
from .source import read_lines
from .tree import (
    LogTree,
    TreeNode,
    build_leaves,
    build_tree,
    find_leaf,
    hash_path,
    is_valid_log_entry,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Core
    "digest",
    "hash_line",
    "hash_pair",
    "parse_root",
    "to_hex",
    "emit_receipt",
    # Errors
    "LogTreeError",
    "InputUnavailable",
    "EmptyTree",
    "DigestUnavailable",
    "InvalidRoot",
    "DetachedNode",
    # Tree
    "TreeNode",
    "build_leaves",
    "build_tree",
    "find_leaf",
    "hash_path",
    "is_valid_log_entry",
    "LogTree",
    # Anchor
    "anchor_root",
    # Source
    "read_lines",
]
