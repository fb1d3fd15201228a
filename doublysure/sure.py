"""The AreYouSure gate: make sure, sure, and doubly sure.

An AreYouSure holds either a value or a deferred zero-argument callable.
Whoever receives one must answer the question exactly once:

    yes_i_am_sure()     -> returns the value, or runs the deferred callable
    no_i_am_not_sure()  -> discards it, the deferred callable never runs

Library authors return an AreYouSure from dangerous functions so callers
have to confirm before anything destructive happens:

    @dangerous
    def drop_table(name: str) -> None:
        ...

    drop_table("users").yes_i_am_sure()
"""
import functools
from enum import Enum
from typing import Callable, Generic, TypeVar

from doublysure.config import features
from doublysure.core.constants import ANSWER_NO, ANSWER_YES, RECEIPT_RESOLUTION
from doublysure.core.receipt import StopRule, emit_receipt

T = TypeVar("T")


class SureKind(Enum):
    """Which variant an AreYouSure holds."""
    VALUE = "value"        # Already computed
    DEFERRED = "deferred"  # Runs on yes_i_am_sure()


class AlreadyResolved(StopRule):
    """Raised when an AreYouSure is answered a second time."""
    pass


class AreYouSure(Generic[T]):
    """A value or deferred callable gated behind an explicit answer.

    The method names are verbose on purpose: callers should understand
    they are confirming a potentially destructive action.

    The gate is consumed by its first answer. Afterwards it holds nothing
    and any further answer raises AlreadyResolved.
    """

    __slots__ = ("_kind", "_payload", "_resolved", "label")

    def __init__(self, value: T, label: str | None = None):
        self._kind = SureKind.VALUE
        self._payload = value
        self._resolved = False
        self.label = label

    @classmethod
    def value(cls, value: T, label: str | None = None) -> "AreYouSure[T]":
        """Wrap an already computed value. Same as AreYouSure(value)."""
        return cls(value, label)

    @classmethod
    def deferred(cls, fn: Callable[[], T], label: str | None = None) -> "AreYouSure[T]":
        """Wrap a zero-argument callable without calling it."""
        if not callable(fn):
            raise TypeError(f"deferred gate needs a callable, got {type(fn).__name__}")
        sure = cls(fn, label)
        sure._kind = SureKind.DEFERRED
        return sure

    @property
    def kind(self) -> SureKind:
        return self._kind

    @property
    def is_deferred(self) -> bool:
        return self._kind is SureKind.DEFERRED

    @property
    def resolved(self) -> bool:
        """True once yes_i_am_sure() or no_i_am_not_sure() has been called."""
        return self._resolved

    def yes_i_am_sure(self) -> T:
        """You are, in fact, sure that you want to do this.

        Returns the held value, or runs the deferred callable once and
        returns whatever it returns. Exceptions from the callable propagate
        unchanged; the gate is spent either way.
        """
        kind, payload = self._take(ANSWER_YES)
        if kind is SureKind.DEFERRED:
            return payload()
        return payload

    def no_i_am_not_sure(self) -> None:
        """You're not actually sure you want to do this.

        Discards the held value or callable. A deferred callable is never run.
        """
        self._take(ANSWER_NO)

    def _take(self, answer: str) -> tuple:
        """Mark the gate resolved and hand over its payload."""
        if self._resolved:
            raise AlreadyResolved(
                f"AreYouSure{self._describe()} was already answered, "
                f"cannot answer '{answer}' again"
            )
        kind, payload = self._kind, self._payload
        self._resolved = True
        self._payload = None

        if features.FEATURE_RESOLUTION_RECEIPTS_ENABLED:
            emit_receipt(RECEIPT_RESOLUTION, {
                "kind": kind.value,
                "answer": answer,
                "label": self.label,
            })

        return kind, payload

    def _describe(self) -> str:
        return f"({self.label!r})" if self.label else ""

    def __repr__(self) -> str:
        state = "resolved" if self._resolved else self._kind.value
        label = f" label={self.label!r}" if self.label else ""
        return f"<AreYouSure {state}{label}>"


def sure_value(value: T, label: str | None = None) -> AreYouSure[T]:
    """Wrap a value that has already been computed."""
    return AreYouSure.value(value, label)


def sure_deferred(fn: Callable[[], T], label: str | None = None) -> AreYouSure[T]:
    """Wrap a zero-argument callable, run only on yes_i_am_sure()."""
    return AreYouSure.deferred(fn, label)


def sure_call(fn: Callable[..., T], *args, **kwargs) -> AreYouSure[T]:
    """Defer fn(*args, **kwargs).

    The arguments are evaluated now, the call happens on yes_i_am_sure():

        sure_call(min, 4, 5).yes_i_am_sure()  # 4
    """
    return AreYouSure.deferred(
        functools.partial(fn, *args, **kwargs),
        label=getattr(fn, "__qualname__", None),
    )


def sure_block(fn: Callable[[], T]) -> AreYouSure[T]:
    """Decorator turning a zero-argument function body into a deferred gate.

        @sure_block
        def wipe():
            shutil.rmtree(build_dir)
            return build_dir

        wipe.yes_i_am_sure()
    """
    return AreYouSure.deferred(fn, label=fn.__qualname__)


def dangerous(fn: Callable[..., T]) -> Callable[..., AreYouSure[T]]:
    """Decorator for library authors: calls return a gate instead of running."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> AreYouSure[T]:
        return AreYouSure.deferred(
            functools.partial(fn, *args, **kwargs),
            label=fn.__qualname__,
        )
    return wrapper


def confirm(sure: AreYouSure[T]) -> T:
    """Answer yes. Same as sure.yes_i_am_sure()."""
    return sure.yes_i_am_sure()


def decline(sure: AreYouSure[T]) -> None:
    """Answer no. Same as sure.no_i_am_not_sure()."""
    sure.no_i_am_not_sure()
