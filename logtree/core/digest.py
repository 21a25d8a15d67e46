"""Digest primitives for LogTree.

Functions:
    digest: fixed-length hash of a byte sequence
    hash_line: leaf digest of one log line
    hash_pair: parent digest of two child digests
    to_hex / parse_root: hex rendering of digests

Pure functions with no state.
"""
import hashlib

import blake3

from .constants import DIGEST_ALGORITHM, DIGEST_SIZE, LINE_ENCODING
from .errors import DigestUnavailable, InvalidRoot


def _hasher(algorithm: str):
    if algorithm == "blake3":
        return blake3.blake3()
    try:
        return hashlib.new(algorithm)
    except (ValueError, TypeError) as e:
        raise DigestUnavailable(f"Digest algorithm {algorithm!r} is not available: {e}") from e


def digest(data: bytes, algorithm: str = DIGEST_ALGORITHM) -> bytes:
    """Hash data with the configured algorithm.

    Args:
        data: Bytes to hash
        algorithm: hashlib name or "blake3"

    Returns:
        DIGEST_SIZE-byte digest

    Raises:
        DigestUnavailable: If the algorithm is unknown or not 256-bit
    """
    hasher = _hasher(algorithm)
    if hasher.digest_size != DIGEST_SIZE:
        raise DigestUnavailable(
            f"Digest algorithm {algorithm!r} produces {hasher.digest_size} bytes, "
            f"need {DIGEST_SIZE}"
        )
    hasher.update(data)
    return hasher.digest()


def hash_line(line: str, algorithm: str = DIGEST_ALGORITHM) -> bytes:
    """Leaf digest: digest(line encoded as UTF-8)."""
    return digest(line.encode(LINE_ENCODING), algorithm)


def hash_pair(left: bytes, right: bytes, algorithm: str = DIGEST_ALGORITHM) -> bytes:
    """Parent digest: digest(left || right), no separator."""
    return digest(left + right, algorithm)


def to_hex(value: bytes) -> str:
    return value.hex()


def parse_root(text: str) -> bytes:
    """Decode a hex trusted root.

    Args:
        text: Hex string, case-insensitive, surrounding whitespace ignored

    Returns:
        DIGEST_SIZE raw bytes

    Raises:
        InvalidRoot: If text is not hex or has the wrong length
    """
    try:
        value = bytes.fromhex(text.strip())
    except ValueError as e:
        raise InvalidRoot(f"Trusted root is not valid hex: {text!r}") from e

    if len(value) != DIGEST_SIZE:
        raise InvalidRoot(f"Trusted root must be {DIGEST_SIZE} bytes, got {len(value)}")
    return value
