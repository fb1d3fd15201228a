"""Shared output formatting. NO class - just functions."""

import click


def print_error(message: str) -> None:
    """Print error message in red to stderr."""
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)


def print_notice(message: str) -> None:
    """Print a neutral notice in yellow to stderr."""
    click.echo(click.style(message, fg="yellow"), err=True)
