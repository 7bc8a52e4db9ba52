from pathlib import Path

import click

from svnhook.cli.commands._params import hook_argument, repos_argument
from svnhook.cli.error_boundary import cli_error_boundary
from svnhook.cli.output import machine_output, user_output
from svnhook.core.context import SvnhookContext
from svnhook.core.dispatch import resolve_target
from svnhook.core.hook_kind import HookKind
from svnhook.core.svnlook import normalize_repo_path


@click.command("resolve")
@repos_argument
@hook_argument
@click.argument("paths", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def resolve_cmd(ctx: SvnhookContext, repos: Path, hook: str, paths: tuple[str, ...]) -> None:
    """Show which scripts would run for a commit touching PATHS.

    Dry run of redispatch: reads the mapping embedded in the installed HOOK
    and prints the resolved script directory and its enabled scripts.
    """
    manager = ctx.open_manager(repos)
    kind = HookKind.from_name(hook)
    mapping = manager.dispatch_mapping(kind)

    target = resolve_target(mapping, [normalize_repo_path(p) for p in paths])
    user_output(f"Scripts directory: {manager.repo.script_dir(kind, target)}")
    for script in manager.scripts(kind, target):
        if script.enabled:
            machine_output(script.name)
