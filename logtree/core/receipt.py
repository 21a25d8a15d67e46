"""Receipt emission for LogTree diagnostics.

Functions:
    emit_receipt: Emit receipt with required fields to stdout

emit_receipt has the trace callback signature (receipt_type, data), so it can
be handed to build and verify calls directly.
"""
import hashlib
import json
from datetime import datetime, timezone


def emit_receipt(receipt_type: str, data: dict) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True.

    Args:
        receipt_type: Type of receipt (level, root, verify, anchor)
        data: Receipt payload data

    Returns:
        Complete receipt dict with receipt_type, ts, payload_hash
    """
    payload_bytes = json.dumps(data, sort_keys=True).encode("utf-8")
    payload_hash = hashlib.sha256(payload_bytes).hexdigest()

    receipt = {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "payload_hash": payload_hash,
        **data
    }

    print(json.dumps(receipt, sort_keys=True), flush=True)

    return receipt
