"""Output utilities for CLI commands with clear intent.

- user_output: messages for the person at the terminal (stderr)
- machine_output: data meant to be piped or parsed (stdout)
"""

import logging
import os

import click

from svnhook.core.config import DEBUG_ENV


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write data to stdout."""
    click.echo(message)


def error_output(message: str) -> None:
    """Write a message with a red "Error: " prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)


def configure_logging(debug: bool = False) -> None:
    """Enable debug logging when requested or when SVNHOOK_DEBUG is set."""
    if debug or os.getenv(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
