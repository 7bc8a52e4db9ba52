from pathlib import Path

import click

from svnhook.cli.commands._params import repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.cli.output import machine_output
from svnhook.core.context import SvnhookContext


@click.command("status")
@repos_argument
@click.pass_obj
@cli_error_boundary
def status_cmd(ctx: SvnhookContext, repos: Path) -> None:
    """Show which hooks are managed by svnhook and how many scripts each has."""
    manager = ctx.open_manager(repos)
    for kind, count in manager.status().items():
        if count is None:
            machine_output(f"{kind}: not managed")
        else:
            machine_output(f"{kind}: {count} script(s)")
