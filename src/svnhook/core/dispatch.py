"""Redispatch: route a hook invocation to a subdirectory of scripts.

Each installed hook embeds a DispatchMapping, a TOML document mapping
repository path prefixes to script subdirectories:

    svnlook = "svnlook"

    [mapping]
    "" = ""
    "trunk/lib" = "libteam"

With this mapping a commit touching only paths under trunk/lib runs the
scripts in hooks/_pre-commit/libteam/; any other commit runs the scripts in
hooks/_pre-commit/ itself. The empty key is the fallback and must always be
present. Mapping it to "" (the default for new hooks) means no redispatch.
"""

import logging
import tomllib
from collections.abc import Sequence
from enum import Enum
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

import tomlkit
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from svnhook.core.errors import InvalidDispatchMapping
from svnhook.core.hook_kind import HookKind
from svnhook.core.svnlook import DEFAULT_SVNLOOK, ChangedPaths, normalize_repo_path

if TYPE_CHECKING:
    from svnhook.core.manager import HookManager

logger = logging.getLogger(__name__)

# The mapping is embedded in a raw triple-quoted Python string.
_FORBIDDEN_SEQUENCE = "'''"


class DispatchMapping(BaseModel):
    """Validated redispatch configuration for one hook."""

    model_config = ConfigDict(frozen=True)

    svnlook: str = Field(default=DEFAULT_SVNLOOK, min_length=1)
    mapping: dict[str, str] = Field(default_factory=lambda: {"": ""})

    @field_validator("svnlook")
    @classmethod
    def validate_svnlook(cls, v: str) -> str:
        if _FORBIDDEN_SEQUENCE in v:
            raise ValueError(f"svnlook must not contain {_FORBIDDEN_SEQUENCE}")
        return v

    @field_validator("mapping")
    @classmethod
    def validate_mapping(cls, v: dict[str, str]) -> dict[str, str]:
        """Normalize prefixes and targets, and require the fallback entry."""
        normalized: dict[str, str] = {}
        for key, target in v.items():
            norm_key = normalize_repo_path(key)
            if key and not norm_key:
                raise ValueError(f"mapping key {key!r} is not a path prefix")
            if norm_key in normalized:
                raise ValueError(f"mapping key {key!r} duplicates {norm_key!r}")

            norm_target = normalize_repo_path(target)
            if ".." in PurePosixPath(norm_target).parts:
                raise ValueError(f"mapping target {target!r} must stay inside the hook directory")
            for text in (key, target):
                if _FORBIDDEN_SEQUENCE in text:
                    raise ValueError(f"mapping entries must not contain {_FORBIDDEN_SEQUENCE}")
            normalized[norm_key] = norm_target

        if "" not in normalized:
            raise ValueError('mapping must contain the default "" entry')
        return normalized

    @property
    def default_target(self) -> str:
        return self.mapping[""]

    @property
    def is_self_loop(self) -> bool:
        """True when the mapping holds only the default entry pointing at itself."""
        return self.mapping == {"": ""}

    @staticmethod
    def from_toml(text: str) -> "DispatchMapping":
        """Parse an embedded mapping document.

        Raises:
            InvalidDispatchMapping: If the text is not TOML or fails validation
        """
        try:
            data = tomllib.loads(text)
            return DispatchMapping.model_validate(data)
        except tomllib.TOMLDecodeError as e:
            raise InvalidDispatchMapping(f"Invalid dispatch mapping TOML: {e}") from e
        except ValidationError as e:
            raise InvalidDispatchMapping(f"Invalid dispatch mapping: {e}") from e

    def to_toml(self, kind: HookKind) -> str:
        """Render the mapping, with editing hints, for embedding in a hook stub."""
        doc = tomlkit.document()
        doc.add("svnlook", self.svnlook)

        table = tomlkit.table()
        for key, target in self.mapping.items():
            table.add(key, target)
        table.add(tomlkit.comment("Add other dispatch mapping here:"))
        table.add(tomlkit.comment('"foo" = "bar"'))
        table.add(
            tomlkit.comment(
                f"will run scripts under {kind.script_dir_name}/bar/ "
                "when commits are solely within foo."
            )
        )
        doc.add("mapping", table)
        return tomlkit.dumps(doc)


def key_covers(key: str, path: str) -> bool:
    """Whether mapping key `key` is a prefix of repository path `path`."""
    if not key:
        return True
    return path == key or path.startswith(key + "/")


def resolve_target(mapping: DispatchMapping, paths: Sequence[str] | None) -> str:
    """Pick the script subdirectory for an operation touching `paths`.

    The longest non-empty key that covers every path wins. When no key
    covers them all, or the touched paths are unknown, the default target
    is used.
    """
    if not paths:
        return mapping.default_target

    best: str | None = None
    for key in mapping.mapping:
        if not key:
            continue
        if not all(key_covers(key, path) for path in paths):
            continue
        if best is None or len(key) > len(best):
            best = key

    if best is None:
        return mapping.default_target
    return mapping.mapping[best]


class DispatchState(Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    DELEGATED = "delegated"
    DONE = "done"


class Dispatcher:
    """Resolves the redispatch target for one hook invocation and runs it.

    A Dispatcher handles a single invocation: IDLE -> RESOLVING ->
    DELEGATED -> DONE.
    """

    def __init__(
        self,
        manager: "HookManager",
        mapping: DispatchMapping,
        changed_paths: ChangedPaths,
    ) -> None:
        self._manager = manager
        self._mapping = mapping
        self._changed_paths = changed_paths
        self.state = DispatchState.IDLE
        self.target: str | None = None

    def resolve(self, kind: HookKind, args: Sequence[str]) -> str:
        """Resolve the script subdirectory for this invocation."""
        self.state = DispatchState.RESOLVING
        if self._mapping.is_self_loop:
            self.target = ""
            return self.target

        paths = self._changed_paths.changed_paths(kind, args)
        self.target = resolve_target(self._mapping, paths)
        logger.debug("Resolved %s paths %s to target %r", kind, paths, self.target)
        return self.target

    def dispatch(self, kind: HookKind, args: Sequence[str]) -> int:
        """Resolve, then run the scripts of the resolved target.

        Raises:
            ScriptFailure: Propagated from the runner for gating hooks
            SpawnFailure: Propagated from the runner
        """
        target = self.resolve(kind, args)
        self.state = DispatchState.DELEGATED
        try:
            return self._manager.run_hook(kind, args, target=target)
        finally:
            self.state = DispatchState.DONE
