"""svnhook: manage Subversion repository hook scripts.

For programmatic use:
    from svnhook.core.manager import HookManager

Import from submodules:
- version: __version__
- core.manager: HookManager (install, list, run and inspect hooks)
- dispatcher: main (entry point called by installed hook stubs)
"""

from svnhook.version import __version__ as __version__
