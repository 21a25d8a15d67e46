"""Root commitment hook.

anchor_root is a ready-made sign hook for LogTree: it records the root
digest as an anchor receipt. External signing services plug in the same way,
as any callable taking the root digest.
"""
from .core.constants import DIGEST_ALGORITHM, RECEIPT_ANCHOR
from .core.digest import to_hex
from .core.receipt import emit_receipt


def anchor_root(root_digest: bytes, algorithm: str = DIGEST_ALGORITHM) -> dict:
    """Emit an anchor receipt for a tree root.

    Args:
        root_digest: Root digest bytes
        algorithm: Digest algorithm the root was computed with

    Returns:
        Anchor receipt dict
    """
    data = {
        "merkle_root": to_hex(root_digest),
        "hash_algo": algorithm,
        "digest_size": len(root_digest),
    }
    return emit_receipt(RECEIPT_ANCHOR, data)
