"""Error boundary handling for CLI commands.

Catches svnhook's own errors at command entry points and displays clean
error messages without stack traces, exiting with the error's exit status.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from svnhook.cli.output import error_output
from svnhook.core.errors import HookError


T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns HookError into an error message and exit status.

    Catches:
        - HookError and subclasses (exit status from the error)
        - ValueError: Invalid input or configuration (exit status 1)

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HookError as e:
            error_output(str(e))
            raise SystemExit(e.exit_code) from None
        except ValueError as e:
            error_output(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
