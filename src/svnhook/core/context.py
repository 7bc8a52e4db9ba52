"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from svnhook.core.config import SvnhookConfig, load_config
from svnhook.core.executor import RealScriptExecutor, ScriptExecutor
from svnhook.core.manager import HookManager


@dataclass(frozen=True)
class SvnhookContext:
    """Immutable context holding all dependencies for svnhook commands.

    Created at CLI entry point and threaded through the application.
    """

    config: SvnhookConfig
    executor: ScriptExecutor

    def open_manager(self, repos: Path) -> HookManager:
        """Bind a HookManager to `repos` using this context's dependencies.

        Raises:
            NotARepository: If `repos` is not a Subversion repository
        """
        return HookManager.open(repos, executor=self.executor, svnlook=self.config.svnlook)

    @staticmethod
    def for_test(
        config: SvnhookConfig | None = None,
        executor: ScriptExecutor | None = None,
    ) -> "SvnhookContext":
        """Create a context with test defaults for anything not given.

        Args:
            config: Optional config. If None, uses svnlook="svnlook", debug=False.
            executor: Optional executor. If None, uses RealScriptExecutor.
        """
        return SvnhookContext(
            config=config if config is not None else SvnhookConfig(svnlook="svnlook", debug=False),
            executor=executor if executor is not None else RealScriptExecutor(),
        )


def create_context() -> SvnhookContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    return SvnhookContext(config=load_config(), executor=RealScriptExecutor())
