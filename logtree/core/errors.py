"""Exceptions raised by LogTree.

Entry-not-found is not here: verification reports it as False.
"""


class LogTreeError(Exception):
    """Base class for LogTree failures."""
    pass


class InputUnavailable(LogTreeError):
    """Raised when the log lines cannot be read."""
    pass


class EmptyTree(LogTreeError):
    """Raised when a tree is requested over zero leaves. No root exists."""
    pass


class DigestUnavailable(LogTreeError):
    """Raised when the digest algorithm cannot be used. Never catch silently."""
    pass


class InvalidRoot(LogTreeError):
    """Raised when a supplied trusted root is not a 32-byte hex digest."""
    pass


class DetachedNode(LogTreeError):
    """Raised when a node's parent was released or the node is not under the given root."""
    pass
