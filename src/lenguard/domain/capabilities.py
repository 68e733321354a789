"""Capability protocols for types that measure themselves.

Any class may opt into a policy by defining the matching method; no
registration is needed.  A capability method wins over the adapter table,
so a ``str`` subclass that defines ``num_chars()`` is measured by it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasBytes(Protocol):
    """Reports the number of storage units composing the value."""

    def num_bytes(self) -> int: ...


@runtime_checkable
class HasChars(Protocol):
    """Reports the number of Unicode scalar values in the value."""

    def num_chars(self) -> int: ...


@runtime_checkable
class HasSimpleLength(Protocol):
    """Reports the type's own notion of length."""

    def length(self) -> int: ...
