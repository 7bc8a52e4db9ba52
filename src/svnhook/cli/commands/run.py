from pathlib import Path

import click

from svnhook.cli.commands._params import hook_argument, repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.core.context import SvnhookContext
from svnhook.core.hook_kind import HookKind


@click.command("run", context_settings={"ignore_unknown_options": True})
@repos_argument
@hook_argument
@click.option("--target", default="", help="Run a redispatch subdirectory instead.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def run_cmd(
    ctx: SvnhookContext, repos: Path, hook: str, target: str, args: tuple[str, ...]
) -> None:
    """Run the enabled scripts of HOOK with ARGS, as Subversion would.

    Exits with the status of the first failing script, except for post-*
    hooks, whose failures are ignored.
    """
    manager = ctx.open_manager(repos)
    manager.run_hook(HookKind.from_name(hook), list(args), target=target)
