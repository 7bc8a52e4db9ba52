"""svnhook configuration.

Configuration is resolved once at an entry point and passed explicitly:
defaults, then the optional TOML file, then the environment.

Example ~/.svnhook/config.toml:
  svnlook = "/usr/local/bin/svnlook"
  debug = false
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from svnhook.core.svnlook import DEFAULT_SVNLOOK

SVNLOOK_ENV = "SVNLOOK"
DEBUG_ENV = "SVNHOOK_DEBUG"
CONFIG_PATH_ENV = "SVNHOOK_CONFIG"


@dataclass(frozen=True)
class SvnhookConfig:
    """Immutable svnhook configuration.

    svnlook is the command baked into newly installed hooks for inspecting
    commits; Subversion runs hooks with an empty environment, so it is
    recorded at install time rather than looked up at dispatch time.
    """

    svnlook: str
    debug: bool


def default_config_path(environ: Mapping[str, str]) -> Path:
    override = environ.get(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".svnhook" / "config.toml"


def load_config(
    environ: Mapping[str, str] | None = None, config_path: Path | None = None
) -> SvnhookConfig:
    """Load configuration from the config file (if present) and environment.

    Args:
        environ: Environment mapping (defaults to os.environ)
        config_path: Config file location (defaults to SVNHOOK_CONFIG or
            ~/.svnhook/config.toml)

    Returns:
        SvnhookConfig with every field resolved

    Raises:
        ValueError: If the config file is not valid TOML or `debug` is not a
            boolean
    """
    env = os.environ if environ is None else environ
    path = config_path if config_path is not None else default_config_path(env)

    data: dict[str, object] = {}
    if path.exists():
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid config file {path}: {e}") from e

    svnlook = str(data.get("svnlook") or DEFAULT_SVNLOOK)
    debug = data.get("debug", False)
    if not isinstance(debug, bool):
        raise ValueError(f"Invalid config file {path}: debug must be true or false")

    if env.get(SVNLOOK_ENV):
        svnlook = env[SVNLOOK_ENV]
    if env.get(DEBUG_ENV):
        debug = True

    return SvnhookConfig(svnlook=svnlook, debug=debug)
