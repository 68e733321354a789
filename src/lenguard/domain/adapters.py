"""Type adapter table and registry.

Each supported type maps to a :class:`TypeAdapter` naming one
:class:`Measure` per policy it supports.  A policy missing from an
adapter is not supported by that type; nothing falls back to ``len()``.

Resolution walks ``type(value).__mro__`` so subclasses inherit the entry
of their nearest registered base (``Counter`` resolves through ``dict``,
``OrderedDict`` has its own entry).

INVARIANT: hash-based unordered collections (``set``, ``frozenset``) are
not in the default table.  :func:`register_hash_collections` opts in.
"""

from __future__ import annotations

import array
import collections
import logging
import threading
from collections.abc import Buffer, Callable, Collection, Iterator, Sized
from dataclasses import dataclass, field
from typing import Any

from lenguard.domain.errors import UnsupportedTypeError
from lenguard.domain.policies import CAPABILITY_METHODS, LengthPolicy, Measure

logger = logging.getLogger(__name__)

# array.array typecodes holding one Unicode scalar per element ("w" since 3.13).
CHAR_TYPECODES = frozenset({"u", "w"})


# ---------------------------------------------------------------------------
# Counting primitives
# ---------------------------------------------------------------------------


def _text_storage_units(value: Any) -> int:
    # Lone surrogates are counted as 3 octets instead of raising.
    return len(str(value).encode("utf-8", "surrogatepass"))


def _text_scalars(value: Any) -> int:
    return len(str(value))


def _buffer_octets(value: Any) -> int:
    with memoryview(value) as view:
        return view.nbytes


def _sequence_elements(value: Any) -> int:
    return len(value)


def _char_elements(value: Any) -> int:
    if isinstance(value, array.array):
        if value.typecode not in CHAR_TYPECODES:
            raise UnsupportedTypeError(
                LengthPolicy.CHARS,
                type(value).__name__,
                f"typecode {value.typecode!r} does not hold characters",
            )
        return len(value)
    count = 0
    for item in value:
        if not (isinstance(item, str) and len(item) == 1):
            raise UnsupportedTypeError(
                LengthPolicy.CHARS,
                type(value).__name__,
                f"element {item!r} is not a single character",
            )
        count += 1
    return count


MEASURES: dict[Measure, Callable[[Any], int]] = {
    Measure.TEXT_STORAGE_UNITS: _text_storage_units,
    Measure.TEXT_SCALARS: _text_scalars,
    Measure.BUFFER_OCTETS: _buffer_octets,
    Measure.SEQUENCE_ELEMENTS: _sequence_elements,
    Measure.CHAR_ELEMENTS: _char_elements,
}

# Value types each measure can count; checked when a caller picks the measure.
MEASURE_INPUTS: dict[Measure, tuple[type, ...]] = {
    Measure.TEXT_STORAGE_UNITS: (str, collections.UserString),
    Measure.TEXT_SCALARS: (str, collections.UserString),
    Measure.BUFFER_OCTETS: (Buffer,),
    Measure.SEQUENCE_ELEMENTS: (Sized,),
    Measure.CHAR_ELEMENTS: (Collection,),
}


# ---------------------------------------------------------------------------
# Adapter table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TypeAdapter:
    """Per-type measurement strategy.

    Attributes:
        category: Human-readable family (``"text"``, ``"byte_buffer"``, ...).
        measures: Policy to measure mapping; absent policies are unsupported.
    """

    category: str
    measures: dict[LengthPolicy, Measure] = field(default_factory=dict)

    def supports(self, policy: LengthPolicy) -> bool:
        return policy in self.measures

    def measure_for(self, policy: LengthPolicy) -> Measure | None:
        return self.measures.get(policy)


TEXT = TypeAdapter(
    "text",
    {
        LengthPolicy.BYTES: Measure.TEXT_STORAGE_UNITS,
        LengthPolicy.CHARS: Measure.TEXT_SCALARS,
        LengthPolicy.SIMPLE: Measure.TEXT_STORAGE_UNITS,
    },
)
BYTE_BUFFER = TypeAdapter(
    "byte_buffer",
    {
        LengthPolicy.BYTES: Measure.BUFFER_OCTETS,
        LengthPolicy.SIMPLE: Measure.SEQUENCE_ELEMENTS,
    },
)
TYPED_ARRAY = TypeAdapter(
    "typed_array",
    {
        LengthPolicy.BYTES: Measure.BUFFER_OCTETS,
        LengthPolicy.CHARS: Measure.CHAR_ELEMENTS,
        LengthPolicy.SIMPLE: Measure.SEQUENCE_ELEMENTS,
    },
)
SEQUENCE = TypeAdapter(
    "sequence",
    {
        LengthPolicy.CHARS: Measure.CHAR_ELEMENTS,
        LengthPolicy.SIMPLE: Measure.SEQUENCE_ELEMENTS,
    },
)
COLLECTION = TypeAdapter("collection", {LengthPolicy.SIMPLE: Measure.SEQUENCE_ELEMENTS})

ADAPTER_REGISTRY: dict[type, TypeAdapter] = {}

_lock = threading.Lock()


def register_adapter(type_: type, adapter: TypeAdapter, *, replace: bool = False) -> None:
    """Add *type_* to the adapter table.

    Registering the adapter a type already has is a no-op.

    Raises:
        TypeError: If *type_* is not a class or *adapter* is not a TypeAdapter.
        ValueError: If *type_* already has a different adapter and *replace*
            is False.
    """
    if not isinstance(type_, type):
        msg = f"Adapter key must be a type, got {type_!r}"
        raise TypeError(msg)
    if not isinstance(adapter, TypeAdapter):
        msg = f"Adapter for {type_.__name__} must be a TypeAdapter, got {adapter!r}"
        raise TypeError(msg)
    with _lock:
        if ADAPTER_REGISTRY.get(type_) == adapter:
            return
        if type_ in ADAPTER_REGISTRY and not replace:
            msg = f"{type_.__name__} already has a registered adapter"
            raise ValueError(msg)
        ADAPTER_REGISTRY[type_] = adapter
    logger.debug("Registered %s adapter for %s", adapter.category, type_.__name__)


def unregister_adapter(type_: type) -> TypeAdapter | None:
    """Remove *type_* from the adapter table, returning its old adapter."""
    with _lock:
        return ADAPTER_REGISTRY.pop(type_, None)


def iter_adapters() -> Iterator[tuple[type, TypeAdapter]]:
    """Yield ``(type, adapter)`` pairs in registration order."""
    with _lock:
        items = list(ADAPTER_REGISTRY.items())
    yield from items


def register_hash_collections() -> None:
    """Opt ``set`` and ``frozenset`` into the simple-length policy."""
    for type_ in (set, frozenset):
        register_adapter(type_, COLLECTION, replace=True)


def resolve_adapter(value: Any) -> TypeAdapter | None:
    """Return the adapter of the nearest registered class in the MRO."""
    for klass in type(value).__mro__:
        adapter = ADAPTER_REGISTRY.get(klass)
        if adapter is not None:
            return adapter
    return None


def measure(value: Any, policy: LengthPolicy, using: Measure | None = None) -> int:
    """Count *value* under *policy*.

    Resolution order: an explicit *using* measure, then a capability method on
    the value (``num_bytes``/``num_chars``/``length``), then the adapter
    table.

    Raises:
        UnsupportedTypeError: If nothing provides a measurement, *using* cannot
            count a value of this type, or a capability method returns
            something other than a non-negative int.
    """
    if using is not None:
        if not isinstance(value, MEASURE_INPUTS[using]):
            raise UnsupportedTypeError(
                policy, type(value).__name__, f"measure {str(using)!r} cannot count it"
            )
        return MEASURES[using](value)

    method_name = CAPABILITY_METHODS[policy]
    method = getattr(value, method_name, None)
    if callable(method):
        count = method()
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise UnsupportedTypeError(
                policy,
                type(value).__name__,
                f"{method_name}() returned {count!r}, not a non-negative int",
            )
        return count

    adapter = resolve_adapter(value)
    if adapter is None:
        raise UnsupportedTypeError(policy, type(value).__name__)
    chosen = adapter.measure_for(policy)
    if chosen is None:
        raise UnsupportedTypeError(policy, type(value).__name__)
    return MEASURES[chosen](value)


def _register_adapters() -> None:
    """Populate :data:`ADAPTER_REGISTRY` with the built-in types."""
    register_adapter(str, TEXT)
    register_adapter(collections.UserString, TEXT)
    for type_ in (bytes, bytearray, memoryview):
        register_adapter(type_, BYTE_BUFFER)
    register_adapter(array.array, TYPED_ARRAY)
    for type_ in (list, tuple, collections.deque, collections.UserList):
        register_adapter(type_, SEQUENCE)
    for type_ in (range, dict, collections.OrderedDict, collections.UserDict):
        register_adapter(type_, COLLECTION)


_register_adapters()
