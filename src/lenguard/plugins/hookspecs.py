"""Pluggy hook specifications for lenguard.

One setup-time hook lets plugins extend the adapter table with their
own types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from lenguard.domain.adapters import TypeAdapter

hookspec = pluggy.HookspecMarker("lenguard")


class LenguardHookSpec:
    """Hook specifications for the lenguard plugin system."""

    @hookspec
    def register_adapters(self) -> dict[type, TypeAdapter] | None:
        """Return type -> TypeAdapter mappings to extend ADAPTER_REGISTRY."""
