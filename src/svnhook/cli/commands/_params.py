"""Shared click parameters for svnhook commands."""

from pathlib import Path

import click

from svnhook.core.hook_kind import ALL_HOOKS

HOOK_NAMES = [kind.value for kind in ALL_HOOKS]

repos_argument = click.argument("repos", type=click.Path(file_okay=False, path_type=Path))
hook_argument = click.argument("hook", type=click.Choice(HOOK_NAMES))
