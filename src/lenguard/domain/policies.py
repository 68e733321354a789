"""Measurement policies and counting primitives.

A policy is what the caller asks for ("how long is this, in bytes?").
A measure is how one concrete type answers it.  Type adapters map each
``(policy, type)`` pair onto exactly one measure.
"""

from __future__ import annotations

from enum import StrEnum


class LengthPolicy(StrEnum):
    """The three independent notions of length a caller may select."""

    BYTES = "bytes"
    CHARS = "chars"
    SIMPLE = "simple"


class Measure(StrEnum):
    """Counting primitives shared by every type adapter."""

    TEXT_STORAGE_UNITS = "text_storage_units"
    TEXT_SCALARS = "text_scalars"
    BUFFER_OCTETS = "buffer_octets"
    SEQUENCE_ELEMENTS = "sequence_elements"
    CHAR_ELEMENTS = "char_elements"


# Method a value may define to carry a policy on its own.
CAPABILITY_METHODS: dict[LengthPolicy, str] = {
    LengthPolicy.BYTES: "num_bytes",
    LengthPolicy.CHARS: "num_chars",
    LengthPolicy.SIMPLE: "length",
}
