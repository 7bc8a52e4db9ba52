import click

from svnhook.cli.commands.init import init_cmd
from svnhook.cli.commands.list_cmd import list_cmd
from svnhook.cli.commands.resolve import resolve_cmd
from svnhook.cli.commands.run import run_cmd
from svnhook.cli.commands.status import status_cmd
from svnhook.cli.commands.toggle import disable_cmd, enable_cmd
from svnhook.cli.output import configure_logging
from svnhook.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="svnhook")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Manage Subversion hook scripts."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    configure_logging(ctx.obj.config.debug)


cli.add_command(init_cmd)
cli.add_command(list_cmd)
cli.add_command(status_cmd)
cli.add_command(run_cmd)
cli.add_command(resolve_cmd)
cli.add_command(enable_cmd)
cli.add_command(disable_cmd)


def main() -> None:
    """CLI entry point used by the `svnhook` console script."""
    cli()
