from __future__ import annotations

from .core.models import EventLog, SwapEvent
from .decoding.dispatcher import iter_swap_events, parse_swap_events
from .decoding.registries import make_default_registry
from .decoding.registry_builder import make_registry, merge_registries
from .decoding.specs import RegistryConfigError, SignatureRegistry, SwapSignature

__all__ = [
    "EventLog",
    "SwapEvent",
    "iter_swap_events",
    "parse_swap_events",
    "make_default_registry",
    "make_registry",
    "merge_registries",
    "RegistryConfigError",
    "SignatureRegistry",
    "SwapSignature",
]
