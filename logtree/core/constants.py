"""LogTree constants.

All tunables live here. Functions take these as defaults; nothing mutates them.
"""

# Digest
DIGEST_ALGORITHM = "sha256"
DIGEST_SIZE = 32  # bytes; every node value has this length

# Log lines are hashed as UTF-8 bytes
LINE_ENCODING = "utf-8"

# Algorithms accepted by --algorithm. All produce DIGEST_SIZE bytes.
SUPPORTED_ALGORITHMS = ("sha256", "sha3_256", "blake2s", "blake3")

# Receipt types emitted through the trace callback
RECEIPT_LEVEL = "level"
RECEIPT_ROOT = "root"
RECEIPT_VERIFY = "verify"
RECEIPT_ANCHOR = "anchor"
