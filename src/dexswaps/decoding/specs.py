"""Swap signature primitives and registry typing.

Defines:
- `SwapSignature`: one registry entry (topic0 → decoder for one layout)
- `SignatureRegistry`: read-only mapping from topic0 → SwapSignature
- `RegistryConfigError`: raised while building a registry, never while decoding
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from dexswaps.core.interfaces import ISwapDecoder


class RegistryConfigError(ValueError):
    """A registry was configured inconsistently (duplicate or mismatched topic0, unknown family)."""


@dataclass(frozen=True)
class SwapSignature:
    """One event signature and the decoder that understands it."""

    topic0: str  # lowercased 0x-hex
    protocol: str  # family tag, e.g. "uniswap_v3"
    event: str  # human-readable Solidity signature; hashes to topic0 unless `alias`
    decoder: ISwapDecoder
    # topic0 of a fork emitting the `event` layout under another name
    alias: bool = False

    def __post_init__(self) -> None:
        if not self.topic0.startswith("0x") or len(self.topic0) != 66:
            raise RegistryConfigError(f"{self.protocol}: malformed topic0 {self.topic0!r}")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "topic0", self.topic0.lower())


# The full registry keyed by topic0 (lowercased 0x-hex). Read-only at runtime.
SignatureRegistry = Mapping[str, SwapSignature]


def get_registry_protocols(registry: SignatureRegistry) -> list[str]:
    return sorted({s.protocol for s in registry.values()})
