from pathlib import Path

import click

from svnhook.cli.commands._params import HOOK_NAMES, repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.cli.output import user_output
from svnhook.core.context import SvnhookContext
from svnhook.core.hook_kind import HookKind


@click.command("init")
@repos_argument
@click.argument("hooks", nargs=-1, type=click.Choice(HOOK_NAMES))
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: SvnhookContext, repos: Path, hooks: tuple[str, ...]) -> None:
    """Install svnhook dispatchers into a repository.

    Installs the named HOOKS, or every hook not installed yet when none are
    given. Scripts for a hook go in REPOS/hooks/_<hook>/.
    """
    manager = ctx.open_manager(repos)

    if hooks:
        installed: list[HookKind] = []
        for name in hooks:
            kind = HookKind.from_name(name)
            manager.init(kind)
            installed.append(kind)
    else:
        installed = manager.init_all()

    if not installed:
        user_output("All hooks are already installed.")
        return

    for kind in installed:
        user_output(f"Installed {kind} hook at {manager.repo.hook_path(kind)}")
