"""Swap event decoding via signature dispatch.

This package provides:
- Signature primitives (SwapSignature, SignatureRegistry)
- Registry construction with duplicate detection
- Pre-built registries for the supported DEX families
- The dispatcher translating one transaction's logs into SwapEvent objects
"""

from dexswaps.decoding.dispatcher import iter_swap_events, parse_swap_events
from dexswaps.decoding.registries import make_default_registry
from dexswaps.decoding.registry_builder import make_registry, merge_registries, topic0_of
from dexswaps.decoding.specs import (
    RegistryConfigError,
    SignatureRegistry,
    SwapSignature,
)
from dexswaps.decoding.utils import decode_signed_int256

__all__ = [
    "iter_swap_events",
    "parse_swap_events",
    "make_default_registry",
    "make_registry",
    "merge_registries",
    "topic0_of",
    "RegistryConfigError",
    "SignatureRegistry",
    "SwapSignature",
    "decode_signed_int256",
]
