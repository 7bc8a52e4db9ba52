from pathlib import Path

import click

from svnhook.cli.commands._params import hook_argument, repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.cli.output import machine_output, user_output
from svnhook.core.context import SvnhookContext
from svnhook.core.hook_kind import HookKind


@click.command("list")
@repos_argument
@hook_argument
@click.option("--target", default="", help="Redispatch subdirectory to list instead.")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: SvnhookContext, repos: Path, hook: str, target: str) -> None:
    """List the scripts of HOOK in execution order.

    Enabled scripts are marked with "+", disabled (non-executable) ones
    with "-".
    """
    manager = ctx.open_manager(repos)
    scripts = manager.scripts(HookKind.from_name(hook), target)

    for script in scripts:
        mark = "+" if script.enabled else "-"
        machine_output(f"{mark} {script.name}")

    user_output(f"Total: {len(scripts)} script(s)")
