"""
doublysure - Using types to make sure that you're sure, sure, and doubly sure

Users get prompted to make sure they want to perform a destructive action,
why shouldn't developers?

When you receive an AreYouSure you must answer the question:
    yes_i_am_sure()     -> run the deferred callable / unwrap the value
    no_i_am_not_sure()  -> discard it, nothing runs
"""

__version__ = "0.1.0"

from doublysure.core.receipt import StopRule
from doublysure.prompt import ask
from doublysure.sure import (
    AlreadyResolved,
    AreYouSure,
    SureKind,
    confirm,
    dangerous,
    decline,
    sure_block,
    sure_call,
    sure_deferred,
    sure_value,
)

__all__ = [
    "AreYouSure",
    "SureKind",
    "sure_value",
    "sure_deferred",
    "sure_call",
    "sure_block",
    "dangerous",
    "confirm",
    "decline",
    "ask",
    "AlreadyResolved",
    "StopRule",
    "__version__",
]
