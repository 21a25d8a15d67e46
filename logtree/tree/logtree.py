"""LogTree aggregate: a built tree over one log plus its trusted root."""
import logging
from typing import Any, Callable, Iterable

from ..core.constants import DIGEST_ALGORITHM
from ..core.errors import EmptyTree
from ..source import read_lines
from . import verify
from .build import Trace, build_leaves, build_tree
from .node import TreeNode

logger = logging.getLogger("logtree")

Signer = Callable[[bytes], Any]


class LogTree:
    """Merkle tree over the ordered lines of a log.

    The root holds every node through child links; leaves are kept as a
    separate tuple for lookup by digest.

    Attributes:
        algorithm: Digest algorithm used for every node
        leaves: Leaf nodes in line order
        root: Root node
        trusted_root: Digest that verifications compare against
        signature: Result of the sign hook, None if absent or failed
    """

    def __init__(
        self,
        lines: Iterable[str],
        trusted_root: bytes | None = None,
        algorithm: str = DIGEST_ALGORITHM,
        trace: Trace | None = None,
        sign: Signer | None = None,
    ):
        """Build the tree.

        Args:
            lines: Ordered log lines
            trusted_root: Externally trusted root digest; the computed root
                is trusted when None
            algorithm: Digest algorithm name
            trace: Optional callback receiving (receipt_type, data)
            sign: Optional hook called once with the root digest

        Raises:
            EmptyTree: If lines is empty
            DigestUnavailable: If algorithm cannot be used
        """
        self.algorithm = algorithm
        self.leaves: tuple[TreeNode, ...] = tuple(build_leaves(lines, algorithm))
        if not self.leaves:
            raise EmptyTree("Log has no lines")

        self.root = build_tree(list(self.leaves), algorithm, trace)
        self.trusted_root = trusted_root if trusted_root is not None else self.root.value
        self._trace = trace
        self.signature = self._sign(sign) if sign is not None else None

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "LogTree":
        """Build a LogTree from the lines of a text file.

        Raises:
            InputUnavailable: If the file cannot be read
            EmptyTree: If the file has no lines
        """
        return cls(read_lines(path), **kwargs)

    def _sign(self, sign: Signer) -> Any:
        try:
            return sign(self.root.value)
        except Exception as e:
            logger.warning("Root signing hook failed: %s", e, exc_info=True)
            return None

    @property
    def root_digest(self) -> bytes:
        return self.root.value

    @property
    def leaf_count(self) -> int:
        return len(self.leaves)

    @property
    def depth(self) -> int:
        """Levels above the leaves; 0 for a single-line log."""
        return self.leaves[0].depth()

    def hash_path(self, line: str) -> list[bytes]:
        """Digest chain from the line's leaf to the root, [] if absent."""
        return verify.hash_path(self.root, self.leaves, line, self.algorithm)

    def is_valid_log_entry(self, line: str, trusted_root: bytes | None = None) -> bool:
        """Verify line against trusted_root, or the stored trusted root."""
        if trusted_root is None:
            trusted_root = self.trusted_root
        return verify.is_valid_log_entry(
            self.root, self.leaves, line, trusted_root, self.algorithm, self._trace
        )

    def __len__(self) -> int:
        return len(self.leaves)
