"""Swap signature registries for the supported protocol families.

Each family has its own builder; all builders return read-only registries
that compose through `merge_registries`, which rejects a topic0 claimed by two
families.

Available registries:
- make_uniswap_v2_registry(), make_uniswap_v3_registry()
- make_uniswap_v4_registry(), make_pancake_v4_registry()
- make_dodo_registry(), make_fourmeme_registry()
- make_default_registry(protocols=None) → any subset of the above

Example
-------
>>> from dexswaps.decoding.registries import make_default_registry
>>> reg = make_default_registry(["uniswap_v2", "uniswap_v3"])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from dexswaps.protocols import dodo, fourmeme, pool_id, uniswap_v2, uniswap_v3

from .registry_builder import make_registry, merge_registries
from .specs import RegistryConfigError, SignatureRegistry, SwapSignature


# -------------------------
# Constant-product pairs
# -------------------------

def make_uniswap_v2_registry() -> SignatureRegistry:
    """Return registry for Uniswap V2 pairs and the same-layout fork."""
    return make_registry([
        SwapSignature(uniswap_v2.SWAP_T0, uniswap_v2.PROTOCOL, uniswap_v2.SWAP_EVENT, uniswap_v2.parse_swap),
        SwapSignature(
            uniswap_v2.FORK_SWAP_T0,
            uniswap_v2.PROTOCOL,
            uniswap_v2.SWAP_EVENT,
            uniswap_v2.parse_swap,
            alias=True,
        ),
    ])


# -------------------------
# Concentrated-liquidity pools (signed deltas)
# -------------------------

def make_uniswap_v3_registry() -> SignatureRegistry:
    """Return registry for Uniswap V3 pools and PancakeSwap V3 pools."""
    return make_registry([
        SwapSignature(uniswap_v3.SWAP_T0, uniswap_v3.PROTOCOL, uniswap_v3.SWAP_EVENT, uniswap_v3.parse_swap),
        SwapSignature(
            uniswap_v3.PANCAKE_V3_SWAP_T0,
            uniswap_v3.PROTOCOL,
            uniswap_v3.PANCAKE_V3_SWAP_EVENT,
            uniswap_v3.parse_swap,
        ),
    ])


# -------------------------
# Pool-identifier keyed managers
# -------------------------

def make_uniswap_v4_registry() -> SignatureRegistry:
    """Return registry for the Uniswap V4 PoolManager."""
    return make_registry(
        SwapSignature(
            pool_id.UNISWAP_V4_SWAP_T0,
            pool_id.UNISWAP_V4,
            pool_id.UNISWAP_V4_SWAP_EVENT,
            pool_id.parse_uniswap_v4_swap,
        )
    )


def make_pancake_v4_registry() -> SignatureRegistry:
    """Return registry for PancakeSwap V4 CLPool and BinPool managers."""
    return make_registry([
        SwapSignature(
            pool_id.PANCAKE_V4_CL_SWAP_T0,
            pool_id.PANCAKE_V4_CL,
            pool_id.PANCAKE_V4_CL_SWAP_EVENT,
            pool_id.parse_cl_pool_swap,
        ),
        SwapSignature(
            pool_id.PANCAKE_V4_BIN_SWAP_T0,
            pool_id.PANCAKE_V4_BIN,
            pool_id.PANCAKE_V4_BIN_SWAP_EVENT,
            pool_id.parse_bin_pool_swap,
        ),
    ])


# -------------------------
# Proxy-routed pools / launchpads
# -------------------------

def make_dodo_registry() -> SignatureRegistry:
    """Return registry for DODO pools."""
    return make_registry(
        SwapSignature(dodo.SWAP_T0, dodo.PROTOCOL, dodo.SWAP_EVENT, dodo.parse_swap)
    )


def make_fourmeme_registry() -> SignatureRegistry:
    """Return registry for four.meme launchpad trades."""
    return make_registry([
        SwapSignature(fourmeme.PURCHASE_T0, fourmeme.PROTOCOL, fourmeme.PURCHASE_EVENT, fourmeme.parse_purchase),
        SwapSignature(fourmeme.SALE_T0, fourmeme.PROTOCOL, fourmeme.SALE_EVENT, fourmeme.parse_sale),
    ])


# -------------------------
# Everything
# -------------------------

REGISTRY_BUILDERS: dict[str, Callable[[], SignatureRegistry]] = {
    "uniswap_v2": make_uniswap_v2_registry,
    "uniswap_v3": make_uniswap_v3_registry,
    "uniswap_v4": make_uniswap_v4_registry,
    "pancake_v4": make_pancake_v4_registry,
    "dodo": make_dodo_registry,
    "fourmeme": make_fourmeme_registry,
}


def make_default_registry(protocols: Iterable[str] | None = None) -> SignatureRegistry:
    """Return the merged registry for `protocols` (all families when None).

    Raises
    ------
    RegistryConfigError
        On an unknown family name or a topic0 shared by two families.
    """
    names = list(REGISTRY_BUILDERS) if protocols is None else list(protocols)
    unknown = [n for n in names if n not in REGISTRY_BUILDERS]
    if unknown:
        raise RegistryConfigError(
            f"unknown protocol(s): {', '.join(unknown)}; expected one of {', '.join(REGISTRY_BUILDERS)}"
        )
    return merge_registries(*(REGISTRY_BUILDERS[n]() for n in dict.fromkeys(names)))
