"""Registry builder utilities.

This module provides:
- `make_registry()` → read-only SignatureRegistry; rejects duplicate topic0s and
  events that do not hash to their topic0
- `merge_registries()` → compose registries under the same check
- `topic0_of()` → keccak topic0 for a Solidity event signature string
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from eth_utils import keccak

from .specs import RegistryConfigError, SignatureRegistry, SwapSignature


# ---- Helpers: topic0 from an event signature ----
def _split_params(params: str) -> list[str]:
    """Split a parameter list on top-level commas; tuple components stay together."""
    parts: list[str] = []
    depth = start = 0
    for i, ch in enumerate(params):
        depth += {"(": 1, ")": -1}.get(ch, 0)
        if ch == "," and depth == 0:
            parts.append(params[start:i])
            start = i + 1
    parts.append(params[start:])
    return [p.strip() for p in parts if p.strip()]


def _param_type(p: str) -> str:
    """ABI type of one parameter fragment (drops `indexed` and the name)."""
    tokens = [t for t in p.split() if t != "indexed"]
    if not tokens:
        raise ValueError(f"Empty parameter in signature: {p!r}")
    return tokens[0] if len(tokens) == 1 else ' '.join(tokens[:-1])


_ABI_ALIASES = {"uint": "uint256", "int": "int256"}


def canonical_signature(signature: str) -> str:
    """Reduce a Solidity event signature to its canonical hashing form.

    Example:
      "Swap(address indexed sender, uint amount0In, ...)" → "Swap(address,uint256,...)"
    """
    sig = signature.strip()
    open_paren = sig.find('(')
    close_paren = sig.rfind(')')
    if open_paren == -1 or close_paren == -1 or close_paren < open_paren:
        raise ValueError(f"Invalid event signature: {signature}")
    name = sig[:open_paren].strip()
    types = [_param_type(p) for p in _split_params(sig[open_paren + 1 : close_paren])]
    types = [_ABI_ALIASES.get(t, t) for t in types]
    return f"{name}({','.join(types)})"


def topic0_of(signature: str) -> str:
    """Return the lowercased 0x-hex keccak topic0 for an event signature."""
    return '0x' + keccak(text=canonical_signature(signature)).hex()


# ---- Registry construction ----
def make_registry(signatures: SwapSignature | Iterable[SwapSignature]) -> SignatureRegistry:
    """Create a read-only registry from one or many swap signatures.

    Raises
    ------
    RegistryConfigError
        If the same topic0 is registered twice, or a non-alias event does not
        hash to its topic0.
    """
    reg: dict[str, SwapSignature] = {}
    sig_list = [signatures] if isinstance(signatures, SwapSignature) else list(signatures)

    for s in sig_list:
        if not s.alias:
            hashed = topic0_of(s.event)
            if hashed != s.topic0:
                raise RegistryConfigError(
                    f"{s.protocol}: {s.event!r} hashes to {hashed}, registered as {s.topic0}"
                )
        prev = reg.get(s.topic0)
        if prev is not None:
            raise RegistryConfigError(
                f"topic0 {s.topic0} registered twice ({prev.protocol} and {s.protocol})"
            )
        reg[s.topic0] = s

    return MappingProxyType(reg)


def merge_registries(*registries: SignatureRegistry) -> SignatureRegistry:
    """Compose several registries; duplicated topic0s are a configuration error."""
    return make_registry(s for reg in registries for s in reg.values())
