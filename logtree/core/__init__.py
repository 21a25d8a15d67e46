"""Core subpackage for LogTree primitives.

Exports digest functions, errors, and receipt emission.
"""
from .digest import digest, hash_line, hash_pair, parse_root, to_hex
from .errors import (
    DetachedNode,
    DigestUnavailable,
    EmptyTree,
    InputUnavailable,
    InvalidRoot,
    LogTreeError,
)
from .receipt import emit_receipt

__all__ = [
    "digest",
    "hash_line",
    "hash_pair",
    "parse_root",
    "to_hex",
    "emit_receipt",
    "LogTreeError",
    "InputUnavailable",
    "EmptyTree",
    "DigestUnavailable",
    "InvalidRoot",
    "DetachedNode",
]
