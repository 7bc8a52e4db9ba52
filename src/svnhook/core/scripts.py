"""Script discovery.

A script directory holds zero or more files. Every regular file is a script;
subdirectories are redispatch targets and are skipped. Scripts run in
lexical filename order.

Enabled convention: a script is enabled when it is executable by the current
user. Non-executable files are still listed (and counted by status) but are
never run.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptEntry:
    """One script file discovered in a script directory."""

    path: Path
    enabled: bool
    order: int

    @property
    def name(self) -> str:
        return self.path.name


def load_scripts(directory: Path) -> list[ScriptEntry]:
    """Load the scripts in `directory` in execution order.

    Args:
        directory: Script directory to scan; may not exist

    Returns:
        Entries sorted by filename, empty if the directory is missing
    """
    if not directory.is_dir():
        logger.debug("Script directory %s does not exist", directory)
        return []

    files = sorted(
        (child for child in directory.iterdir() if child.is_file()),
        key=lambda child: child.name,
    )
    entries = [
        ScriptEntry(path=child.absolute(), enabled=os.access(child, os.X_OK), order=index)
        for index, child in enumerate(files)
    ]
    logger.debug(
        "Loaded %d script(s) from %s: %s", len(entries), directory, [e.name for e in entries]
    )
    return entries
