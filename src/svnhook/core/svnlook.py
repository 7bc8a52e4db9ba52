"""Inspect which repository paths a hook invocation touches.

Architecture:
- ChangedPaths: Abstract interface used by redispatch resolution
- RealSvnlook: Production implementation shelling out to svnlook
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from svnhook.core.hook_kind import HookKind
from svnhook.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

DEFAULT_SVNLOOK = "svnlook"

# Hooks whose second argument names a transaction or revision to inspect.
_TXN_HOOKS = {HookKind.PRE_COMMIT}
_REV_HOOKS = {
    HookKind.POST_COMMIT,
    HookKind.PRE_REVPROP_CHANGE,
    HookKind.POST_REVPROP_CHANGE,
}
# Hooks whose second argument is the path being locked or unlocked.
_PATH_HOOKS = {HookKind.PRE_LOCK, HookKind.PRE_UNLOCK}


def normalize_repo_path(path: str) -> str:
    """Strip surrounding slashes so "/trunk/lib/" and "trunk/lib" compare equal."""
    return path.strip("/")


def parse_svnlook_changed(output: str) -> list[str]:
    """Parse `svnlook changed` output into repository paths.

    Each line is a four-column status field followed by the path, e.g.
    "U   trunk/lib/foo.c" or "A   trunk/doc/".
    """
    paths: list[str] = []
    for line in output.splitlines():
        if len(line) <= 4:
            continue
        paths.append(normalize_repo_path(line[4:]))
    return paths


class ChangedPaths(ABC):
    """Abstract interface for discovering the paths an operation touches."""

    @abstractmethod
    def changed_paths(self, kind: HookKind, args: Sequence[str]) -> list[str] | None:
        """List the repository paths touched by the operation being hooked.

        Args:
            kind: Hook event that fired
            args: Positional arguments Subversion passed to the hook

        Returns:
            Normalized repository paths, or None if this hook carries no
            information about touched paths
        """
        ...


class RealSvnlook(ChangedPaths):
    """Production implementation using `svnlook changed`."""

    def __init__(self, svnlook: str = DEFAULT_SVNLOOK) -> None:
        self._svnlook = svnlook

    def changed_paths(self, kind: HookKind, args: Sequence[str]) -> list[str] | None:
        if len(args) < 2:
            return None
        repos, subject = args[0], args[1]

        if kind in _PATH_HOOKS:
            return [normalize_repo_path(subject)]
        if kind in _TXN_HOOKS:
            flag = "-t"
        elif kind in _REV_HOOKS:
            flag = "-r"
        else:
            return None

        result = run_subprocess_with_context(
            [self._svnlook, "changed", flag, subject, repos],
            operation_context=f"list paths changed by {kind} {subject}",
        )
        paths = parse_svnlook_changed(result.stdout)
        logger.debug("svnlook reported %d changed path(s) for %s", len(paths), subject)
        return paths
