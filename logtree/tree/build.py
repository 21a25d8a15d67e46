"""Leaf and tree construction.

build_leaves hashes each log line into a leaf node.
build_tree pairs nodes level by level until one root remains.

Odd levels duplicate their last node before pairing. The duplicate is the
same node object, not a copy.
"""
from typing import Callable, Iterable

from ..core.constants import DIGEST_ALGORITHM, RECEIPT_LEVEL, RECEIPT_ROOT
from ..core.digest import hash_line, hash_pair, to_hex
from ..core.errors import EmptyTree
from .node import TreeNode

Trace = Callable[[str, dict], object]


def build_leaves(lines: Iterable[str], algorithm: str = DIGEST_ALGORITHM) -> list[TreeNode]:
    """Create one leaf node per line, in order.

    Args:
        lines: Ordered log lines
        algorithm: Digest algorithm name

    Returns:
        List of leaf nodes; empty when lines is empty
    """
    return [TreeNode(hash_line(line, algorithm)) for line in lines]


def build_tree(
    leaves: list[TreeNode],
    algorithm: str = DIGEST_ALGORITHM,
    trace: Trace | None = None,
) -> TreeNode:
    """Build the tree over leaves and return its root.

    A single leaf is returned as the root unchanged. The leaves list is
    not modified.

    Args:
        leaves: Ordered leaf nodes from build_leaves
        algorithm: Digest algorithm name
        trace: Optional callback receiving (receipt_type, data)

    Returns:
        Root node

    Raises:
        EmptyTree: If leaves is empty
    """
    if not leaves:
        raise EmptyTree("Cannot build a tree from zero leaves")

    current = list(leaves)
    level = 0

    while len(current) > 1:
        duplicated = len(current) % 2 == 1
        if duplicated:
            current.append(current[-1])

        parents = []
        for i in range(0, len(current), 2):
            left, right = current[i], current[i + 1]
            parent = TreeNode(hash_pair(left.value, right.value, algorithm), left, right)
            left.parent = parent
            right.parent = parent
            parents.append(parent)

        if trace is not None:
            trace(RECEIPT_LEVEL, {
                "level": level,
                "node_count": len(current),
                "duplicated_last": duplicated,
                "nodes": [node.describe() for node in current],
            })

        current = parents
        level += 1

    root = current[0]
    if trace is not None:
        trace(RECEIPT_ROOT, {
            "merkle_root": to_hex(root.value),
            "leaf_count": len(leaves),
            "depth": level,
        })
    return root
