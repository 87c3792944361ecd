"""Uniswap V2 style pair swaps (constant-product, unsigned in/out amounts).

Swap(address indexed sender, uint256 amount0In, uint256 amount1In,
     uint256 amount0Out, uint256 amount1Out, address indexed to)
"""

from __future__ import annotations

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.utils import checksum, decode_uint256, word_at

PROTOCOL = "uniswap_v2"

SWAP_EVENT = (
    "Swap(address indexed sender, uint256 amount0In, uint256 amount1In, "
    "uint256 amount0Out, uint256 amount1Out, address indexed to)"
)
SWAP_T0 = "0xd78ad95fa46c994b6551d0da85fc275fe613ce37657fb8d5e3d130840159d822"
# V2 fork emitting the same topic/payload layout under a different topic0
FORK_SWAP_T0 = "0x606ecd02b3e3b4778f8e97b2e03351de14224efaa5fa64e62200afc9395c2499"

TOPICS = 3
MIN_DATA = 4 * 32


def parse_swap(log: EventLog) -> SwapEvent | None:
    """Decode a V2 pair Swap; None if the log does not fit the layout."""
    if len(log.topics) != TOPICS or len(log.data) < MIN_DATA:
        return None

    amount0_in = decode_uint256(word_at(log.data, 0))
    amount1_in = decode_uint256(word_at(log.data, 1))
    amount0_out = decode_uint256(word_at(log.data, 2))
    amount1_out = decode_uint256(word_at(log.data, 3))

    token0_to_1 = amount0_in > 0
    if token0_to_1:
        amount_in, amount_out = amount0_in, amount1_out
    else:
        amount_in, amount_out = amount1_in, amount0_out

    # zero-sided logs (e.g. flash-swap repayments) are not trades
    if amount_in == 0 or amount_out == 0:
        return None

    return SwapEvent(
        pair_id=checksum(log.address),
        token0_to_1=token0_to_1,
        amount_in=amount_in,
        amount_out=amount_out,
        protocol=PROTOCOL,
    )
