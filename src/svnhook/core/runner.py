"""Sequential script execution with the pre/post failure policy."""

import logging
from collections.abc import Sequence

from svnhook.core.errors import ScriptFailure, SpawnFailure
from svnhook.core.executor import ScriptExecutor
from svnhook.core.scripts import ScriptEntry

logger = logging.getLogger(__name__)


def exit_status(returncode: int) -> int:
    """Convert a subprocess return code into a process exit status.

    Signal terminations (negative return codes) map to 128 + signal number,
    the shell convention.
    """
    if returncode < 0:
        return 128 + -returncode
    return returncode


def run_scripts(
    executor: ScriptExecutor,
    scripts: Sequence[ScriptEntry],
    args: Sequence[str],
    *,
    ignore_errors: bool,
) -> int:
    """Run `scripts` one after another, forwarding `args` to each.

    Args:
        executor: Process spawning implementation
        scripts: Scripts in execution order
        args: Hook arguments forwarded verbatim to every script
        ignore_errors: Keep going after a script fails (post-* hooks)

    Returns:
        0 once every script has run

    Raises:
        SpawnFailure: If a script cannot be started, regardless of ignore_errors
        ScriptFailure: If a script fails and ignore_errors is False; the
            remaining scripts are not run
    """
    for script in scripts:
        logger.debug("Running %s %s", script.path, list(args))
        try:
            returncode = executor.execute(script.path, args)
        except OSError as e:
            raise SpawnFailure(script.path, e.strerror or str(e)) from e

        if returncode == 0:
            continue

        status = exit_status(returncode)
        if not ignore_errors:
            raise ScriptFailure(script.path, status)
        logger.debug("Ignoring failure of %s (exit status %d)", script.path, status)

    return 0
