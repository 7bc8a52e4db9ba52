"""Subversion hook events."""

from enum import Enum

from svnhook.core.errors import UnknownHook


class HookKind(Enum):
    """The closed set of hook events Subversion invokes."""

    START_COMMIT = "start-commit"
    PRE_COMMIT = "pre-commit"
    POST_COMMIT = "post-commit"
    PRE_LOCK = "pre-lock"
    POST_LOCK = "post-lock"
    PRE_UNLOCK = "pre-unlock"
    POST_UNLOCK = "post-unlock"
    PRE_REVPROP_CHANGE = "pre-revprop-change"
    POST_REVPROP_CHANGE = "post-revprop-change"

    @property
    def is_post(self) -> bool:
        """Whether this hook fires after the operation has completed.

        Failures of post-* scripts are ignored; everything else gates the
        operation.
        """
        return self.value.startswith("post-")

    @property
    def script_dir_name(self) -> str:
        return f"_{self.value}"

    @classmethod
    def from_name(cls, name: str) -> "HookKind":
        """Parse a hook name such as "pre-commit".

        Raises:
            UnknownHook: If the name is not a Subversion hook event
        """
        for kind in cls:
            if kind.value == name:
                return kind
        raise UnknownHook(name)

    def __str__(self) -> str:
        return self.value


# Sorted by name, the order status listings use.
ALL_HOOKS: tuple[HookKind, ...] = tuple(sorted(HookKind, key=lambda kind: kind.value))
