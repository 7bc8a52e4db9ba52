"""Hook stub rendering and recognition.

The stub installed at hooks/<hook> is a fixed Python program. Only the
interpreter, the library search path, the version, the hook name and the
embedded dispatch mapping vary between installations.
"""

import re
from pathlib import Path

from svnhook.core.dispatch import DispatchMapping
from svnhook.core.errors import InvalidDispatchMapping
from svnhook.core.hook_kind import HookKind

HOOK_FORMAT_VERSION = 1
MANAGED_MARKER = "managed by svnhook"

_FORMAT_RE = re.compile(r"^# svnhook-format: (\d+)$", re.MULTILINE)
_CONFIG_RE = re.compile(r"^DISPATCH_CONFIG = r'''\n(.*?)'''$", re.MULTILINE | re.DOTALL)

_STUB_TEMPLATE = """\
#!{interpreter}
# svnhook-format: {format_version}
# Generated by svnhook version {version}.
# This {hook} hook is managed by svnhook.
import sys

sys.path.insert(0, {search_path!r})
try:
    from svnhook.dispatcher import main
except ImportError:
    sys.exit(0)

DISPATCH_CONFIG = r'''
{config}'''

sys.exit(main(__file__, {hook!r}, DISPATCH_CONFIG, sys.argv[1:]))
"""


def render_hook_stub(
    kind: HookKind,
    mapping: DispatchMapping,
    *,
    version: str,
    interpreter: Path,
    search_path: Path,
) -> str:
    """Build the text of the dispatcher stub for `kind`.

    Args:
        kind: Hook event the stub is installed for
        mapping: Dispatch mapping to embed
        version: Installing svnhook version
        interpreter: Absolute path of the Python interpreter for the #! line
        search_path: Directory containing the svnhook package

    Returns:
        Complete stub source text
    """
    return _STUB_TEMPLATE.format(
        interpreter=interpreter,
        format_version=HOOK_FORMAT_VERSION,
        version=version,
        hook=kind.value,
        search_path=str(search_path),
        config=mapping.to_toml(kind),
    )


def read_format_version(text: str) -> int | None:
    """Return the hook format version recorded in a stub, if any."""
    match = _FORMAT_RE.search(text)
    if match is None:
        return None
    return int(match.group(1))


def is_managed_stub(text: str) -> bool:
    """Whether `text` is a stub this version of svnhook can manage.

    The text must carry the "managed by" marker and a format version no
    newer than HOOK_FORMAT_VERSION.
    """
    if MANAGED_MARKER not in text:
        return False
    format_version = read_format_version(text)
    return format_version is not None and format_version <= HOOK_FORMAT_VERSION


def extract_dispatch_config(text: str) -> str:
    """Return the TOML dispatch mapping embedded in a stub.

    Raises:
        InvalidDispatchMapping: If the stub has no DISPATCH_CONFIG block
    """
    match = _CONFIG_RE.search(text)
    if match is None:
        raise InvalidDispatchMapping("Hook file has no DISPATCH_CONFIG block")
    return match.group(1)
