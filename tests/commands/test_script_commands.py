"""Tests for the list, run, resolve, enable and disable commands."""

import re
from pathlib import Path

from click.testing import CliRunner

from svnhook.cli.cli import cli
from svnhook.core.context import SvnhookContext
from svnhook.core.dispatch import DispatchMapping
from svnhook.core.hook_kind import HookKind
from tests.fakes.executor import FakeScriptExecutor
from tests.test_utils.repo_setup import create_repository, write_script


def _repo_with_scripts(tmp_path: Path) -> Path:
    repo = create_repository(tmp_path / "repo")
    script_dir = repo / "hooks" / "_pre-commit"
    write_script(script_dir, "02-style")
    write_script(script_dir, "01-lint")
    write_script(script_dir, "03-off", executable=False)
    return repo


def test_list_shows_scripts_in_order_with_state(tmp_path: Path) -> None:
    repo = _repo_with_scripts(tmp_path)
    runner = CliRunner()

    result = runner.invoke(cli, ["list", str(repo), "pre-commit"], obj=SvnhookContext.for_test())

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:3] == ["+ 01-lint", "+ 02-style", "- 03-off"]
    assert "Total: 3 script(s)" in result.output


def test_run_forwards_args_to_enabled_scripts(tmp_path: Path) -> None:
    repo = _repo_with_scripts(tmp_path)
    executor = FakeScriptExecutor()
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["run", str(repo), "pre-commit", "/srv/repo", "4-b"],
        obj=SvnhookContext.for_test(executor=executor),
    )

    assert result.exit_code == 0, result.output
    assert executor.executed_names == ["01-lint", "02-style"]
    assert all(args == ["/srv/repo", "4-b"] for _, args in executor.calls)


def test_run_exits_with_failing_script_status(tmp_path: Path) -> None:
    repo = _repo_with_scripts(tmp_path)
    executor = FakeScriptExecutor(exit_codes={"01-lint": 7})
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["run", str(repo), "pre-commit", "/srv/repo", "4-b"],
        obj=SvnhookContext.for_test(executor=executor),
    )

    assert result.exit_code == 7
    assert executor.executed_names == ["01-lint"]


def test_resolve_shows_redispatch_target(tmp_path: Path) -> None:
    repo = create_repository(tmp_path / "repo")
    runner = CliRunner()
    runner.invoke(cli, ["init", str(repo), "pre-commit"], obj=SvnhookContext.for_test())
    hook_path = repo / "hooks" / "pre-commit"
    mapping = DispatchMapping(mapping={"": "default", "lib": "libteam"})
    text = hook_path.read_text(encoding="utf-8")
    text = re.sub(
        r"(?s)(DISPATCH_CONFIG = r'''\n).*?(''')",
        lambda m: m.group(1) + mapping.to_toml(HookKind.PRE_COMMIT) + m.group(2),
        text,
    )
    hook_path.write_text(text, encoding="utf-8")
    write_script(repo / "hooks" / "_pre-commit" / "libteam", "01-lib")

    result = runner.invoke(
        cli,
        ["resolve", str(repo), "pre-commit", "/lib/a.c", "lib/b.c"],
        obj=SvnhookContext.for_test(),
    )

    assert result.exit_code == 0, result.output
    assert "_pre-commit/libteam" in result.output
    assert "01-lib" in result.output


def test_resolve_requires_managed_hook(tmp_path: Path) -> None:
    repo = create_repository(tmp_path / "repo")
    runner = CliRunner()

    result = runner.invoke(
        cli, ["resolve", str(repo), "pre-commit", "lib/a.c"], obj=SvnhookContext.for_test()
    )

    assert result.exit_code == 1
    assert "not managed by svnhook" in result.output


def test_disable_and_enable_script(tmp_path: Path) -> None:
    repo = _repo_with_scripts(tmp_path)
    runner = CliRunner()

    disabled = runner.invoke(
        cli, ["disable", str(repo), "pre-commit", "01-lint"], obj=SvnhookContext.for_test()
    )
    assert disabled.exit_code == 0, disabled.output
    listing = runner.invoke(cli, ["list", str(repo), "pre-commit"], obj=SvnhookContext.for_test())
    assert "- 01-lint" in listing.output

    enabled = runner.invoke(
        cli, ["enable", str(repo), "pre-commit", "01-lint"], obj=SvnhookContext.for_test()
    )
    assert enabled.exit_code == 0, enabled.output
    listing = runner.invoke(cli, ["list", str(repo), "pre-commit"], obj=SvnhookContext.for_test())
    assert "+ 01-lint" in listing.output


def test_enable_missing_script_fails(tmp_path: Path) -> None:
    repo = create_repository(tmp_path / "repo")
    runner = CliRunner()

    result = runner.invoke(
        cli, ["enable", str(repo), "pre-commit", "nope"], obj=SvnhookContext.for_test()
    )

    assert result.exit_code == 1
    assert "No such script" in result.output


def test_disable_script_in_redispatch_target(tmp_path: Path) -> None:
    repo = create_repository(tmp_path / "repo")
    write_script(repo / "hooks" / "_pre-commit" / "libteam", "01-lib")
    runner = CliRunner()

    nested = runner.invoke(
        cli,
        ["disable", str(repo), "pre-commit", "libteam/01-lib"],
        obj=SvnhookContext.for_test(),
    )
    assert nested.exit_code == 1
    assert "No such script" in nested.output

    result = runner.invoke(
        cli,
        ["disable", str(repo), "pre-commit", "01-lib", "--target", "libteam"],
        obj=SvnhookContext.for_test(),
    )
    assert result.exit_code == 0, result.output
    listing = runner.invoke(
        cli,
        ["list", str(repo), "pre-commit", "--target", "libteam"],
        obj=SvnhookContext.for_test(),
    )
    assert "- 01-lib" in listing.output
