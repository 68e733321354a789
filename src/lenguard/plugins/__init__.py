"""Extension layer — adapter plugins via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

import pluggy

from lenguard.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("lenguard")

__all__ = ["PluginManager", "hookimpl"]
