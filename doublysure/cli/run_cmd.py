"""Run command: execute an external command only after confirmation."""
import functools
import shlex
import subprocess
import sys

import click

from doublysure.core.constants import EXIT_DECLINED, EXIT_NOT_RUNNABLE
from doublysure.prompt import ask
from doublysure.sure import sure_deferred

from .output import print_error, print_notice


@click.command(context_settings={
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
})
@click.option('--yes', '-y', 'assume_yes', is_flag=True, help='Answer yes without prompting.')
@click.option('--label', default=None, help='Text shown in the prompt instead of the command.')
@click.argument('command', nargs=-1, required=True, type=click.UNPROCESSED)
def run(assume_yes: bool, label: str | None, command: tuple[str, ...]):
    """Run COMMAND only if you are sure.

    The command's exit status is passed through. Declining exits with 1.
    """
    sure = sure_deferred(
        functools.partial(subprocess.run, list(command)),
        label=label or shlex.join(command),
    )

    try:
        answered_yes, completed = ask(sure, assume_yes=assume_yes)
    except OSError as e:
        print_error(f"cannot run {command[0]}: {e.strerror or e}")
        sys.exit(EXIT_NOT_RUNNABLE)

    if not answered_yes:
        print_notice("Not sure. Nothing was run.")
        sys.exit(EXIT_DECLINED)

    sys.exit(completed.returncode)
