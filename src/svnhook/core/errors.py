"""Error taxonomy for hook management and dispatch.

Core code raises these exceptions; only process boundaries (the dispatcher
entry point and the CLI error boundary) turn them into exit statuses.
"""

from pathlib import Path


class HookError(Exception):
    """Base class for all svnhook errors.

    Attributes:
        exit_code: Process exit status to use when this error terminates a run
    """

    exit_code: int = 1


class NotARepository(HookError):
    """Raised when a path has no Subversion `format` marker file."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} is not a svn repository.")


class AlreadyInstalled(HookError):
    """Raised when a hook file already exists at the install location."""

    def __init__(self, hook_name: str, hook_path: Path):
        self.hook_name = hook_name
        self.hook_path = hook_path
        super().__init__(f"There is already a {hook_name} file at {hook_path}.")


class IOFailure(HookError):
    """Raised when a filesystem step of hook installation fails.

    The message carries the underlying OS error text.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SpawnFailure(HookError):
    """Raised when a script process cannot be started at all."""

    def __init__(self, script_path: Path, reason: str):
        self.script_path = script_path
        self.reason = reason
        super().__init__(f"Failed to execute {script_path}: {reason}.")


class ScriptFailure(HookError):
    """Raised when a script exits non-zero or is killed by a signal.

    The exit code of the failed script becomes the exit code of the run.
    """

    def __init__(self, script_path: Path, exit_code: int):
        self.script_path = script_path
        self.exit_code = exit_code
        super().__init__(f"{script_path} failed with exit status {exit_code}.")


class ScriptNotFound(HookError):
    """Raised when a named script does not exist in a script directory."""

    def __init__(self, script_path: Path):
        self.script_path = script_path
        super().__init__(f"No such script: {script_path}")


class UnknownHook(HookError, ValueError):
    """Raised when a hook name is not one of the Subversion hook events."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown hook '{name}'.")


class InvalidDispatchMapping(HookError, ValueError):
    """Raised when an embedded dispatch mapping cannot be parsed or validated."""

    pass


class CommandFailure(HookError):
    """Raised when a helper command (such as svnlook) fails or is missing."""

    pass


class HookNotInstalled(HookError):
    """Raised when an operation needs a managed hook file that is missing."""

    def __init__(self, hook_name: str, hook_path: Path):
        self.hook_name = hook_name
        self.hook_path = hook_path
        super().__init__(f"The {hook_name} hook is not managed by svnhook ({hook_path}).")
