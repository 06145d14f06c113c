"""Shared output helpers for the rustman CLI."""

import typer


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


__all__ = [
    "print_error",
]
