"""Pool-identifier keyed swaps (singleton pool managers).

Uniswap V4 and PancakeSwap V4 (CLPool and BinPool) emit

    Swap(PoolId indexed id, address indexed sender, int128 amount0, int128 amount1, ...)

from one manager contract for every pool. The emitting address therefore
does not identify the pool; the pair identity is the leading 20 bytes of the
32-byte PoolId. That pseudo-address is stable per pool but is not a deployed
contract. Only the two amount words are read, so trailing fields that differ
between pool types are ignored.
"""

from __future__ import annotations

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.utils import decode_signed_int256, pseudo_address, topic_bytes, word_at
from dexswaps.protocols.common import signed_delta_swap

UNISWAP_V4 = "uniswap_v4"
PANCAKE_V4_CL = "pancake_v4_cl"
PANCAKE_V4_BIN = "pancake_v4_bin"

UNISWAP_V4_SWAP_EVENT = (
    "Swap(bytes32 indexed id, address indexed sender, int128 amount0, int128 amount1, "
    "uint160 sqrtPriceX96, uint128 liquidity, int24 tick, uint24 fee)"
)
UNISWAP_V4_SWAP_T0 = "0x40e9cecb9f5f1f1c5b9c97dec2917b7ee92e57ba5563708daca94dd84ad7112f"

PANCAKE_V4_CL_SWAP_EVENT = (
    "Swap(bytes32 indexed id, address indexed sender, int128 amount0, int128 amount1, "
    "uint160 sqrtPriceX96, uint128 liquidity, int24 tick, uint24 fee, uint16 protocolFee)"
)
PANCAKE_V4_CL_SWAP_T0 = "0x04206ad2b7c0f463bff3dd4f33c5735b0f2957a351e4f79763a4fa9e775dd237"

PANCAKE_V4_BIN_SWAP_EVENT = (
    "Swap(bytes32 indexed id, address indexed sender, int128 amount0, int128 amount1, "
    "uint24 activeId, uint24 fee, uint16 protocolFee)"
)
PANCAKE_V4_BIN_SWAP_T0 = "0x3e8aae37f890eb1f9d63dd4d2062f3f0be757848a0f0760e4f3e53dad556e861"

# Topics: [signature, PoolId, sender]
TOPICS = 3
MIN_DATA = 2 * 32


def _parse(log: EventLog, protocol: str) -> SwapEvent | None:
    if len(log.topics) != TOPICS or len(log.data) < MIN_DATA:
        return None

    pool_id = topic_bytes(log.topics[1])
    amount0 = decode_signed_int256(word_at(log.data, 0))
    amount1 = decode_signed_int256(word_at(log.data, 1))
    return signed_delta_swap(pseudo_address(pool_id), amount0, amount1, protocol)


def parse_uniswap_v4_swap(log: EventLog) -> SwapEvent | None:
    """Decode a Uniswap V4 PoolManager Swap."""
    return _parse(log, UNISWAP_V4)


def parse_cl_pool_swap(log: EventLog) -> SwapEvent | None:
    """Decode a PancakeSwap V4 CLPoolManager Swap."""
    return _parse(log, PANCAKE_V4_CL)


def parse_bin_pool_swap(log: EventLog) -> SwapEvent | None:
    """Decode a PancakeSwap V4 BinPoolManager Swap."""
    return _parse(log, PANCAKE_V4_BIN)
