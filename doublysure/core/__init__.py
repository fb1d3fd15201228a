"""Core subpackage for doublysure primitives.

Exports all from receipt.py and constants.py.
"""
from .receipt import emit_receipt, payload_hash, StopRule
from .constants import (
    DEFAULT_QUESTION,
    ANSWER_YES,
    ANSWER_NO,
    RECEIPT_RESOLUTION,
    EXIT_DECLINED,
    EXIT_NOT_RUNNABLE,
)

__all__ = [
    # Receipt primitives
    "emit_receipt",
    "payload_hash",
    "StopRule",
    # Constants
    "DEFAULT_QUESTION",
    "ANSWER_YES",
    "ANSWER_NO",
    "RECEIPT_RESOLUTION",
    "EXIT_DECLINED",
    "EXIT_NOT_RUNNABLE",
]
