"""Plugin discovery and loading.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Capabilities: extra type adapters.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

import pluggy

from lenguard.plugins.hookspecs import LenguardHookSpec

PROJECT_NAME = "lenguard"
ENTRY_POINT_GROUP = "lenguard.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and adapter registration."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LenguardHookSpec)
        self._loaded: bool = False

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins and register the adapters they provide.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_plugin_instances()
        self._collect_adapters()
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        if self._loaded:
            self._collect_adapters(plugin)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_plugin_instances(self) -> None:
        """Replace registered plugin classes with instantiated objects.

        Entry-point loading may register a plugin class directly. Hook dispatch
        against class objects leaves ``self`` unbound and fails at runtime.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin):
                continue
            if not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)

            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue

            self._pm.register(instance, name=plugin_name)
            logger.debug("Instantiated entry-point plugin: %s", plugin_name)

    def _collect_adapters(self, plugin: object | None = None) -> None:
        """Run the ``register_adapters`` hook, one implementation at a time.

        Each implementation is called on its own so a failing plugin is
        logged and skipped without hiding the others.  With *plugin*, only
        that plugin's implementation runs.
        """
        for impl in self._pm.hook.register_adapters.get_hookimpls():
            if plugin is not None and impl.plugin is not plugin:
                continue
            self._register_plugin_adapters(impl.function, impl.plugin_name)

    @staticmethod
    def _register_plugin_adapters(hook: Callable[[], Any], plugin_name: str) -> None:
        """Register the adapters returned by one hook implementation."""
        from lenguard.domain.adapters import register_adapter

        try:
            adapter_map = hook()
        except Exception:
            logger.warning(
                "Failed to collect adapters from plugin %s",
                plugin_name,
                exc_info=True,
            )
            return

        if adapter_map is None:
            return
        if not isinstance(adapter_map, dict):
            logger.warning("Plugin %s returned non-dict adapter registrations", plugin_name)
            return

        for type_, adapter in adapter_map.items():
            try:
                register_adapter(type_, adapter)
            except (TypeError, ValueError):
                logger.warning(
                    "Skipping adapter registration %r from plugin %s",
                    type_,
                    plugin_name,
                    exc_info=True,
                )

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Check whether *cls* has any methods decorated with ``@hookimpl``.

        Pluggy's ``HookimplMarker("lenguard")`` sets a ``lenguard_impl``
        attribute on decorated methods.
        """
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "lenguard_impl", None):
                return True
        return False
