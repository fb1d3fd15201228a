"""Ask a human before answering an AreYouSure."""
from typing import TypeVar

import click

from doublysure.core.constants import DEFAULT_QUESTION
from doublysure.sure import AreYouSure

T = TypeVar("T")


def ask(
    sure: AreYouSure[T],
    question: str | None = None,
    assume_yes: bool = False,
    default: bool = False
) -> tuple[bool, T | None]:
    """Prompt on the terminal and answer the gate with the user's reply.

    - question falls back to the gate's label, then DEFAULT_QUESTION
    - assume_yes skips the prompt (the --yes flag)
    - Ctrl-C / EOF declines the gate before click.Abort propagates

    Returns (answered_yes, value). value is None when declined.
    """
    if not assume_yes:
        try:
            answered_yes = click.confirm(_question(sure, question), default=default)
        except click.Abort:
            sure.no_i_am_not_sure()
            raise
        if not answered_yes:
            sure.no_i_am_not_sure()
            return False, None

    return True, sure.yes_i_am_sure()


def _question(sure: AreYouSure, question: str | None) -> str:
    if question:
        return question
    if sure.label:
        return f"{DEFAULT_QUESTION} ({sure.label})"
    return DEFAULT_QUESTION
