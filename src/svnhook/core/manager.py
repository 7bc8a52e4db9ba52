"""Hook installation, listing, execution and status for one repository."""

import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import svnhook
from svnhook.core.dispatch import DispatchMapping
from svnhook.core.errors import (
    AlreadyInstalled,
    HookNotInstalled,
    IOFailure,
    ScriptNotFound,
)
from svnhook.core.executor import RealScriptExecutor, ScriptExecutor
from svnhook.core.hook_kind import ALL_HOOKS, HookKind
from svnhook.core.repository import RepositoryHandle
from svnhook.core.runner import run_scripts
from svnhook.core.scripts import ScriptEntry, load_scripts
from svnhook.core.stub import extract_dispatch_config, is_managed_stub, render_hook_stub
from svnhook.core.svnlook import DEFAULT_SVNLOOK
from svnhook.version import __version__

logger = logging.getLogger(__name__)

HOOK_FILE_MODE = 0o755


def library_search_path() -> Path:
    """Directory that must be on sys.path for a hook stub to import svnhook."""
    return Path(svnhook.__file__).resolve().parent.parent


def _os_reason(error: OSError) -> str:
    return error.strerror or str(error)


class HookManager:
    """Manages the hooks of a single Subversion repository.

    Example:
        >>> manager = HookManager.open(Path("/srv/svn/project"))
        >>> manager.init(HookKind.PRE_COMMIT)
        >>> for script in manager.scripts(HookKind.PRE_COMMIT):
        ...     print(script.path)
    """

    def __init__(
        self,
        repo: RepositoryHandle,
        *,
        executor: ScriptExecutor | None = None,
        svnlook: str = DEFAULT_SVNLOOK,
    ) -> None:
        """Bind a manager to a repository.

        Args:
            repo: Validated repository handle
            executor: Process spawner for running scripts (defaults to real
                subprocesses)
            svnlook: svnlook command recorded in newly installed hooks
        """
        self.repo = repo
        self._executor = executor if executor is not None else RealScriptExecutor()
        self._svnlook = svnlook

    @staticmethod
    def open(
        path: Path,
        *,
        executor: ScriptExecutor | None = None,
        svnlook: str = DEFAULT_SVNLOOK,
    ) -> "HookManager":
        """Validate `path` as a repository and bind a manager to it.

        Raises:
            NotARepository: If `path/format` does not exist
        """
        return HookManager(RepositoryHandle.open(path), executor=executor, svnlook=svnlook)

    def init(self, kind: HookKind) -> Path:
        """Install the dispatcher stub for `kind` and create its script directory.

        An existing script directory is kept as is, so reinstalling a removed
        stub picks up the scripts already in place.

        Args:
            kind: Hook event to install

        Returns:
            Path of the installed hook file

        Raises:
            AlreadyInstalled: If a file already exists at the hook path
            IOFailure: If writing the stub, setting its mode or creating the
                script directory fails. Earlier steps are not rolled back.
        """
        hook_path = self.repo.hook_path(kind)
        if hook_path.exists():
            raise AlreadyInstalled(kind.value, hook_path)

        stub = render_hook_stub(
            kind,
            DispatchMapping(svnlook=self._svnlook),
            version=__version__,
            interpreter=Path(sys.executable).absolute(),
            search_path=library_search_path(),
        )

        try:
            hook_path.write_text(stub, encoding="utf-8")
            hook_path.chmod(HOOK_FILE_MODE)
        except OSError as e:
            raise IOFailure(hook_path, _os_reason(e)) from e

        script_dir = self.repo.script_dir(kind)
        try:
            script_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise IOFailure(script_dir, _os_reason(e)) from e

        logger.debug("Installed %s hook at %s", kind, hook_path)
        return hook_path

    def init_all(self) -> list[HookKind]:
        """Install every hook that has no file yet.

        Returns:
            The hook kinds that were installed
        """
        installed: list[HookKind] = []
        for kind in ALL_HOOKS:
            if self.repo.hook_path(kind).exists():
                continue
            self.init(kind)
            installed.append(kind)
        return installed

    def scripts(self, kind: HookKind, target: str = "") -> list[ScriptEntry]:
        """List the scripts of `kind` (or of one of its redispatch targets)."""
        return load_scripts(self.repo.script_dir(kind, target))

    def run_hook(self, kind: HookKind, args: Sequence[str], target: str = "") -> int:
        """Run the enabled scripts of `kind` with the hook arguments.

        Failures of post-* hooks are ignored; any other hook stops at the
        first failing script.

        Returns:
            0 on success

        Raises:
            ScriptFailure: If a script of a gating hook fails
            SpawnFailure: If a script cannot be started
        """
        enabled = [script for script in self.scripts(kind, target) if script.enabled]
        logger.debug("Running %d enabled %s script(s), target=%r", len(enabled), kind, target)
        return run_scripts(self._executor, enabled, args, ignore_errors=kind.is_post)

    def is_managed(self, kind: HookKind) -> bool:
        """Whether the hook file of `kind` is an executable svnhook stub."""
        hook_path = self.repo.hook_path(kind)
        if not hook_path.is_file() or not os.access(hook_path, os.X_OK):
            return False
        try:
            text = hook_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Cannot read %s: %s", hook_path, _os_reason(e))
            return False
        return is_managed_stub(text)

    def status(self) -> dict[HookKind, int | None]:
        """Report, for every hook, None if unmanaged or its script count."""
        result: dict[HookKind, int | None] = {}
        for kind in ALL_HOOKS:
            if self.is_managed(kind):
                result[kind] = len(self.scripts(kind))
            else:
                result[kind] = None
        return result

    def set_enabled(
        self, kind: HookKind, name: str, enabled: bool, target: str = ""
    ) -> ScriptEntry:
        """Enable or disable a script by toggling its executable bits.

        Enabling grants execute permission wherever read permission is
        granted; disabling removes all execute permission. `name` must be one
        of the scripts listed for `kind` and `target`; nothing is changed
        otherwise.

        Returns:
            The script entry as loaded after the change

        Raises:
            ScriptNotFound: If no such script exists in the hook's directory
            IOFailure: If the permissions cannot be changed
        """
        script_dir = self.repo.script_dir(kind, target)
        entry = next((e for e in load_scripts(script_dir) if e.name == name), None)
        if entry is None:
            raise ScriptNotFound(script_dir / name)
        script_path = entry.path

        mode = script_path.stat().st_mode & 0o7777
        if enabled:
            new_mode = mode | ((mode & 0o444) >> 2)
        else:
            new_mode = mode & ~0o111
        try:
            script_path.chmod(new_mode)
        except OSError as e:
            raise IOFailure(script_path, _os_reason(e)) from e

        for reloaded in self.scripts(kind, target):
            if reloaded.name == name:
                return reloaded
        raise ScriptNotFound(script_path)

    def dispatch_mapping(self, kind: HookKind) -> DispatchMapping:
        """Read the dispatch mapping embedded in the installed hook of `kind`.

        Raises:
            HookNotInstalled: If the hook file is missing or not an svnhook stub
            InvalidDispatchMapping: If the embedded mapping is malformed
        """
        hook_path = self.repo.hook_path(kind)
        if not self.is_managed(kind):
            raise HookNotInstalled(kind.value, hook_path)
        text = hook_path.read_text(encoding="utf-8")
        return DispatchMapping.from_toml(extract_dispatch_config(text))
