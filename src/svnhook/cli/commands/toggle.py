from pathlib import Path

import click

from svnhook.cli.commands._params import hook_argument, repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.cli.output import user_output
from svnhook.core.context import SvnhookContext
from svnhook.core.hook_kind import HookKind


@click.command("enable")
@repos_argument
@hook_argument
@click.argument("script")
@click.option("--target", default="", help="Redispatch subdirectory holding SCRIPT.")
@click.pass_obj
@cli_error_boundary
def enable_cmd(
    ctx: SvnhookContext, repos: Path, hook: str, script: str, target: str
) -> None:
    """Enable SCRIPT of HOOK by making it executable."""
    entry = ctx.open_manager(repos).set_enabled(
        HookKind.from_name(hook), script, True, target
    )
    user_output(f"Enabled {entry.path}")


@click.command("disable")
@repos_argument
@hook_argument
@click.argument("script")
@click.option("--target", default="", help="Redispatch subdirectory holding SCRIPT.")
@click.pass_obj
@cli_error_boundary
def disable_cmd(
    ctx: SvnhookContext, repos: Path, hook: str, script: str, target: str
) -> None:
    """Disable SCRIPT of HOOK by removing its executable bits.

    The script stays in place and is still listed and counted.
    """
    entry = ctx.open_manager(repos).set_enabled(
        HookKind.from_name(hook), script, False, target
    )
    user_output(f"Disabled {entry.path}")
