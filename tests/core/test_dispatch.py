"""Tests for dispatch mappings, redispatch resolution and the Dispatcher."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from svnhook.core.dispatch import (
    Dispatcher,
    DispatchMapping,
    DispatchState,
    key_covers,
    resolve_target,
)
from svnhook.core.errors import InvalidDispatchMapping, ScriptFailure
from svnhook.core.hook_kind import HookKind
from svnhook.core.manager import HookManager
from tests.fakes.executor import FakeScriptExecutor
from tests.fakes.svnlook import FakeChangedPaths
from tests.test_utils.repo_setup import create_repository, write_script

LIB_MAPPING = DispatchMapping(mapping={"": "default", "lib": "libteam"})


class TestDispatchMapping:
    """Tests for DispatchMapping validation and TOML handling."""

    def test_default_is_self_loop(self) -> None:
        mapping = DispatchMapping()
        assert mapping.mapping == {"": ""}
        assert mapping.is_self_loop
        assert mapping.svnlook == "svnlook"

    def test_requires_default_entry(self) -> None:
        with pytest.raises(ValidationError, match="default"):
            DispatchMapping(mapping={"lib": "libteam"})

    def test_normalizes_slashes(self) -> None:
        mapping = DispatchMapping(mapping={"": "", "/trunk/lib/": "/libteam/"})
        assert mapping.mapping == {"": "", "trunk/lib": "libteam"}
        assert not mapping.is_self_loop

    def test_rejects_target_escaping_hook_directory(self) -> None:
        with pytest.raises(ValidationError, match="inside the hook directory"):
            DispatchMapping(mapping={"": "", "lib": "../elsewhere"})

    def test_rejects_duplicate_after_normalization(self) -> None:
        with pytest.raises(ValidationError, match="duplicates"):
            DispatchMapping(mapping={"": "", "lib": "a", "/lib": "b"})

    def test_is_immutable(self) -> None:
        mapping = DispatchMapping()
        with pytest.raises(ValidationError):
            mapping.svnlook = "other"  # type: ignore[misc]

    def test_rendered_toml_parses_back_with_hints(self) -> None:
        mapping = DispatchMapping(svnlook="/opt/svn/bin/svnlook", mapping=LIB_MAPPING.mapping)

        text = mapping.to_toml(HookKind.PRE_COMMIT)

        assert '"" = "default"' in text
        assert "# Add other dispatch mapping here:" in text
        assert "_pre-commit/bar/" in text
        assert DispatchMapping.from_toml(text) == mapping

    def test_from_toml_rejects_invalid_toml(self) -> None:
        with pytest.raises(InvalidDispatchMapping, match="TOML"):
            DispatchMapping.from_toml("[mapping\n")

    def test_from_toml_rejects_missing_default(self) -> None:
        with pytest.raises(InvalidDispatchMapping):
            DispatchMapping.from_toml('[mapping]\n"lib" = "libteam"\n')


class TestResolveTarget:
    """Tests for longest-covering-prefix resolution."""

    def test_commit_solely_within_prefix_uses_its_target(self) -> None:
        assert resolve_target(LIB_MAPPING, ["lib/a.c", "lib/sub/b.c"]) == "libteam"

    def test_commit_spanning_prefixes_uses_default(self) -> None:
        assert resolve_target(LIB_MAPPING, ["lib/a.c", "doc/readme"]) == "default"

    def test_unknown_or_empty_paths_use_default(self) -> None:
        assert resolve_target(LIB_MAPPING, None) == "default"
        assert resolve_target(LIB_MAPPING, []) == "default"

    def test_longest_covering_key_wins(self) -> None:
        mapping = DispatchMapping(
            mapping={"": "", "trunk": "trunk-team", "trunk/lib": "lib-team"}
        )
        assert resolve_target(mapping, ["trunk/lib/a.c"]) == "lib-team"
        assert resolve_target(mapping, ["trunk/lib/a.c", "trunk/doc/b"]) == "trunk-team"

    def test_prefix_must_end_at_path_boundary(self) -> None:
        assert resolve_target(LIB_MAPPING, ["library/a.c"]) == "default"

    def test_key_covers(self) -> None:
        assert key_covers("", "anything")
        assert key_covers("lib", "lib")
        assert key_covers("lib", "lib/x")
        assert not key_covers("lib", "libx")


class TestDispatcher:
    """Tests for the Dispatcher state machine."""

    def _manager(self, tmp_path: Path, executor: FakeScriptExecutor) -> HookManager:
        repo = create_repository(tmp_path / "repo")
        return HookManager.open(repo, executor=executor)

    def test_self_loop_skips_path_lookup(self, tmp_path: Path) -> None:
        executor = FakeScriptExecutor()
        manager = self._manager(tmp_path, executor)
        write_script(manager.repo.script_dir(HookKind.PRE_COMMIT), "01-check")
        changed = FakeChangedPaths(["lib/a.c"])
        dispatcher = Dispatcher(manager, DispatchMapping(), changed)

        assert dispatcher.state is DispatchState.IDLE
        result = dispatcher.dispatch(HookKind.PRE_COMMIT, ["/repo", "1-1"])

        assert result == 0
        assert dispatcher.state is DispatchState.DONE
        assert dispatcher.target == ""
        assert changed.lookups == []
        assert executor.executed_names == ["01-check"]

    def test_runs_scripts_of_resolved_subdirectory(self, tmp_path: Path) -> None:
        executor = FakeScriptExecutor()
        manager = self._manager(tmp_path, executor)
        script_dir = manager.repo.script_dir(HookKind.PRE_COMMIT)
        write_script(script_dir / "default", "01-default")
        write_script(script_dir / "libteam", "01-lib")
        changed = FakeChangedPaths(["lib/a.c"])
        dispatcher = Dispatcher(manager, LIB_MAPPING, changed)

        dispatcher.dispatch(HookKind.PRE_COMMIT, ["/repo", "1-1"])

        assert dispatcher.target == "libteam"
        assert executor.executed_names == ["01-lib"]
        assert changed.lookups == [(HookKind.PRE_COMMIT, ["/repo", "1-1"])]

    def test_mixed_commit_runs_default_target(self, tmp_path: Path) -> None:
        executor = FakeScriptExecutor()
        manager = self._manager(tmp_path, executor)
        script_dir = manager.repo.script_dir(HookKind.PRE_COMMIT)
        write_script(script_dir / "default", "01-default")
        write_script(script_dir / "libteam", "01-lib")
        dispatcher = Dispatcher(manager, LIB_MAPPING, FakeChangedPaths(["lib/a.c", "doc/b"]))

        dispatcher.dispatch(HookKind.PRE_COMMIT, ["/repo", "1-1"])

        assert dispatcher.target == "default"
        assert executor.executed_names == ["01-default"]

    def test_reaches_done_when_script_fails(self, tmp_path: Path) -> None:
        executor = FakeScriptExecutor(exit_codes={"01-check": 1})
        manager = self._manager(tmp_path, executor)
        write_script(manager.repo.script_dir(HookKind.PRE_COMMIT), "01-check")
        dispatcher = Dispatcher(manager, DispatchMapping(), FakeChangedPaths())

        with pytest.raises(ScriptFailure):
            dispatcher.dispatch(HookKind.PRE_COMMIT, ["/repo", "1-1"])

        assert dispatcher.state is DispatchState.DONE
