"""Uniswap V3 style pool swaps (signed amount deltas).

Swap(address indexed sender, address indexed recipient, int256 amount0,
     int256 amount1, uint160 sqrtPriceX96, uint128 liquidity, int24 tick)

PancakeSwap V3 emits the same layout with two trailing protocol-fee words.
"""

from __future__ import annotations

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.utils import checksum, decode_signed_int256, word_at
from dexswaps.protocols.common import signed_delta_swap

PROTOCOL = "uniswap_v3"

SWAP_EVENT = (
    "Swap(address indexed sender, address indexed recipient, int256 amount0, int256 amount1, "
    "uint160 sqrtPriceX96, uint128 liquidity, int24 tick)"
)
SWAP_T0 = "0xc42079f94a6350d7e6235f29174924f928cc2ac818eb64fed8004e115fbcca67"

PANCAKE_V3_SWAP_EVENT = (
    "Swap(address indexed sender, address indexed recipient, int256 amount0, int256 amount1, "
    "uint160 sqrtPriceX96, uint128 liquidity, int24 tick, "
    "uint128 protocolFeesToken0, uint128 protocolFeesToken1)"
)
PANCAKE_V3_SWAP_T0 = "0x19b47279256b2a23a1665c810c8d55a1758940ee09377d4f8d26497a3577dc83"

TOPICS = 3
MIN_DATA = 5 * 32


def parse_swap(log: EventLog) -> SwapEvent | None:
    """Decode a V3 pool Swap; None if the log does not fit the layout."""
    if len(log.topics) != TOPICS or len(log.data) < MIN_DATA:
        return None

    amount0 = decode_signed_int256(word_at(log.data, 0))
    amount1 = decode_signed_int256(word_at(log.data, 1))
    return signed_delta_swap(checksum(log.address), amount0, amount1, PROTOCOL)
