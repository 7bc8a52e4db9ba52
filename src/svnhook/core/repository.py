"""Repository handle.

Validates a Subversion repository path once and derives the hook locations
from it. Passed explicitly to every component that needs it.
"""

from dataclasses import dataclass
from pathlib import Path

from svnhook.core.errors import NotARepository
from svnhook.core.hook_kind import HookKind

# Every Subversion repository has this file at its root.
FORMAT_MARKER = "format"


@dataclass(frozen=True)
class RepositoryHandle:
    """Represents a validated Subversion repository root."""

    path: Path

    @staticmethod
    def open(path: Path) -> "RepositoryHandle":
        """Validate `path` and build a handle for it.

        Args:
            path: Repository root (relative paths are resolved)

        Returns:
            RepositoryHandle pointing at the absolute repository root

        Raises:
            NotARepository: If `path/format` does not exist
        """
        root = path.expanduser().resolve()
        if not (root / FORMAT_MARKER).exists():
            raise NotARepository(path)
        return RepositoryHandle(path=root)

    @property
    def hooks_dir(self) -> Path:
        return self.path / "hooks"

    def hook_path(self, kind: HookKind) -> Path:
        """Location of the dispatcher stub for `kind`."""
        return self.hooks_dir / kind.value

    def script_dir(self, kind: HookKind, target: str = "") -> Path:
        """Directory holding the scripts for `kind`.

        Args:
            kind: Hook event
            target: Redispatch subdirectory; empty means the hook's own
                script directory

        Returns:
            `hooks/_<hook>` or `hooks/_<hook>/<target>`
        """
        base = self.hooks_dir / kind.script_dir_name
        if not target:
            return base
        return base / target
