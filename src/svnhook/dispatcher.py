"""Entry point called by installed hook stubs.

Subversion runs hooks/<hook>, which imports this module and calls main()
with its own location, its name, its embedded dispatch mapping and the hook
arguments. The return value becomes the hook's exit status.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from svnhook.cli.output import configure_logging, user_output
from svnhook.core.dispatch import Dispatcher, DispatchMapping
from svnhook.core.errors import HookError, ScriptFailure
from svnhook.core.executor import ScriptExecutor
from svnhook.core.hook_kind import HookKind
from svnhook.core.manager import HookManager
from svnhook.core.svnlook import ChangedPaths, RealSvnlook

logger = logging.getLogger(__name__)


def main(
    hook_file: str,
    hook_name: str,
    config_text: str,
    argv: Sequence[str],
    *,
    executor: ScriptExecutor | None = None,
    changed_paths: ChangedPaths | None = None,
) -> int:
    """Dispatch one hook invocation.

    Args:
        hook_file: Path of the running stub (its __file__)
        hook_name: Hook event name, e.g. "pre-commit"
        config_text: TOML dispatch mapping embedded in the stub
        argv: Arguments Subversion passed to the hook
        executor: Process spawner override, for tests
        changed_paths: Changed-path source override, for tests

    Returns:
        0 on success, otherwise the exit status of the failure
    """
    configure_logging()
    try:
        kind = HookKind.from_name(hook_name)
        repo_path = Path(hook_file).absolute().parent.parent
        manager = HookManager.open(repo_path, executor=executor)
        mapping = DispatchMapping.from_toml(config_text)
        source = changed_paths if changed_paths is not None else RealSvnlook(mapping.svnlook)
        return Dispatcher(manager, mapping, source).dispatch(kind, argv)
    except ScriptFailure as e:
        # The script reports its own reason on stderr.
        logger.debug("%s", e)
        return e.exit_code
    except HookError as e:
        user_output(f"svnhook: {e}")
        return e.exit_code
