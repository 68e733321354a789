"""lenguard — length-bounded validation for text, byte buffers and collections.

Three policies, one entry point each:

- :func:`validate_num_bytes` — storage units (UTF-8 octets for text)
- :func:`validate_num_chars` — Unicode scalar values
- :func:`validate_length` — the type's own length (bytes for text,
  elements for collections)

``None`` passes every policy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lenguard.domain.adapters import (
    ADAPTER_REGISTRY,
    TypeAdapter,
    iter_adapters,
    measure,
    register_adapter,
    register_hash_collections,
    resolve_adapter,
    unregister_adapter,
)
from lenguard.domain.capabilities import HasBytes, HasChars, HasSimpleLength
from lenguard.domain.errors import LenguardError, LengthViolation, UnsupportedTypeError
from lenguard.domain.policies import LengthPolicy, Measure
from lenguard.domain.range import check_len
from lenguard.domain.result import CheckResult, LengthError
from lenguard.rules import (
    validate,
    validate_length,
    validate_num_bytes,
    validate_num_chars,
    validate_optional,
)

if TYPE_CHECKING:
    from lenguard.config.settings import LenguardSettings

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def configure(settings: LenguardSettings | None = None) -> list[str]:
    """Apply *settings* to the process: logging, adapter table, plugins.

    Settings only ever add adapters; a ``hash_collections = false`` run
    does not remove set/frozenset entries registered earlier.

    Returns the names of loaded plugins.
    """
    from lenguard.config.logging import configure_logging
    from lenguard.config.settings import LenguardSettings

    if settings is None:
        settings = LenguardSettings.from_cli()

    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    if settings.adapters.hash_collections:
        register_hash_collections()
        logger.debug("Hash-based collections enabled for the simple policy")

    if not settings.adapters.plugins:
        return []

    from lenguard.plugins.manager import PluginManager

    return PluginManager().discover_and_load()


__all__ = [
    "ADAPTER_REGISTRY",
    "CheckResult",
    "HasBytes",
    "HasChars",
    "HasSimpleLength",
    "LengthError",
    "LengthPolicy",
    "LengthViolation",
    "LenguardError",
    "Measure",
    "TypeAdapter",
    "UnsupportedTypeError",
    "__version__",
    "check_len",
    "configure",
    "iter_adapters",
    "measure",
    "register_adapter",
    "register_hash_collections",
    "resolve_adapter",
    "unregister_adapter",
    "validate",
    "validate_length",
    "validate_num_bytes",
    "validate_num_chars",
    "validate_optional",
]
