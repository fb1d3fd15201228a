"""Receipt primitives shared by every doublysure module.

Functions:
    payload_hash: SHA256 hex digest of a receipt payload
    emit_receipt: Emit receipt with required fields to stdout
    StopRule: Exception for stoprule triggers
"""
import hashlib
import json
from datetime import datetime, timezone


class StopRule(Exception):
    """Raised when stoprule triggers. Never catch silently."""
    pass


def payload_hash(data: bytes | str | dict) -> str:
    """Compute SHA256 hex digest of a payload.

    Dicts are serialized with sorted keys so equal payloads hash equally.
    Pure function with no side effects.
    """
    if isinstance(data, dict):
        data = json.dumps(data, sort_keys=True, separators=(",", ":"))
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def emit_receipt(receipt_type: str, data: dict) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True.

    Args:
        receipt_type: Type of receipt (see core.constants)
        data: Receipt payload data, must be JSON serializable

    Returns:
        Complete receipt dict with receipt_type, ts, payload_hash
    """
    receipt = {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "payload_hash": payload_hash(data),
        **data
    }

    print(json.dumps(receipt, sort_keys=True), flush=True)

    return receipt
