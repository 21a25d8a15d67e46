"""Leaf-to-root path verification.

The verifier finds the leaf for a candidate line, then walks parent links
upward recomputing each ancestor's digest from its children. The last value
of that chain is the recomputed root.

Callers pass the root node along with the leaves. Parent links are weak, so
the root is what keeps the internal nodes alive during the walk.
"""
from typing import Sequence

from ..core.constants import DIGEST_ALGORITHM, RECEIPT_VERIFY
from ..core.digest import hash_line, hash_pair, to_hex
from ..core.errors import DetachedNode
from .build import Trace
from .node import TreeNode


def find_leaf(leaves: Sequence[TreeNode], leaf_digest: bytes) -> TreeNode | None:
    """Return the first leaf whose value equals leaf_digest, else None."""
    for leaf in leaves:
        if leaf.value == leaf_digest:
            return leaf
    return None


def hash_path(
    root: TreeNode,
    leaves: Sequence[TreeNode],
    line: str,
    algorithm: str = DIGEST_ALGORITHM,
) -> list[bytes]:
    """Recompute the chain of digests from the line's leaf to the root.

    Args:
        root: Root node returned by build_tree
        leaves: Leaf nodes of that tree
        line: Candidate log line
        algorithm: Digest algorithm the tree was built with

    Returns:
        [leaf digest, parent digest, ..., root digest], or [] when no leaf
        matches

    Raises:
        DetachedNode: If the matched leaf does not lead up to root
    """
    leaf_digest = hash_line(line, algorithm)
    leaf = find_leaf(leaves, leaf_digest)
    if leaf is None:
        return []

    path = [leaf_digest]
    node = leaf
    while node is not root:
        node = node.parent
        if node is None:
            raise DetachedNode("Leaf is not part of the tree under the given root")
        path.append(hash_pair(node.left.value, node.right.value, algorithm))
    return path


def is_valid_log_entry(
    root: TreeNode,
    leaves: Sequence[TreeNode],
    line: str,
    trusted_root: bytes,
    algorithm: str = DIGEST_ALGORITHM,
    trace: Trace | None = None,
) -> bool:
    """Check that line is in the tree and the tree's root matches trusted_root.

    Args:
        root: Root node returned by build_tree
        leaves: Leaf nodes of that tree
        line: Candidate log line
        trusted_root: Root digest to compare against, raw bytes
        algorithm: Digest algorithm the tree was built with
        trace: Optional callback receiving (receipt_type, data)

    Returns:
        True if the recomputed root equals trusted_root, False otherwise
        (including when the line is not found)
    """
    path = hash_path(root, leaves, line, algorithm)
    found = bool(path)
    valid = found and path[-1] == trusted_root

    if trace is not None:
        trace(RECEIPT_VERIFY, {
            "found": found,
            "valid": valid,
            "hash_path": [to_hex(h) for h in path],
            "trusted_root": to_hex(trusted_root),
        })

    return valid
