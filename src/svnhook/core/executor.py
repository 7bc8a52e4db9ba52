"""Script process execution.

Architecture:
- ScriptExecutor: Abstract interface for running one script to completion
- RealScriptExecutor: Production implementation using subprocess
"""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class ScriptExecutor(ABC):
    """Abstract interface for spawning scripts.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def execute(self, script: Path, args: Sequence[str]) -> int:
        """Run `script` with `args` and wait for it to finish.

        Args:
            script: Absolute path to the executable
            args: Arguments forwarded verbatim

        Returns:
            The process return code. Negative values mean the process was
            killed by that signal number.

        Raises:
            OSError: If the process could not be started
        """
        ...


class RealScriptExecutor(ScriptExecutor):
    """Production implementation using subprocess.

    Children inherit stdin, stdout and stderr so Subversion relays script
    output (e.g. rejection messages) to the client.
    """

    def execute(self, script: Path, args: Sequence[str]) -> int:
        result = subprocess.run([str(script), *args], check=False)
        return result.returncode
