"""DODO proxy-routed pool swaps.

DODOSwap(address fromToken, address toToken, uint256 fromAmount,
         uint256 toAmount, address trader, address receiver)

Nothing is indexed and amounts are unsigned; the side is given by field
position (from/to), not by sign.
"""

from __future__ import annotations

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.utils import checksum, decode_uint256, word_at

PROTOCOL = "dodo"

SWAP_EVENT = (
    "DODOSwap(address fromToken, address toToken, uint256 fromAmount, uint256 toAmount, "
    "address trader, address receiver)"
)
SWAP_T0 = "0xc2c0245e056d5fb095f04cd6373bc770802ebd1e6c918eb78fdef843cdb37b0f"

TOPICS = 1
MIN_DATA = 6 * 32


def parse_swap(log: EventLog) -> SwapEvent | None:
    """Decode a DODOSwap; None if the log does not fit the layout.

    token0 is the lower of the two token addresses (factory sort order), so
    the swap is token0 → token1 when fromToken sorts below toToken.
    """
    if len(log.topics) != TOPICS or len(log.data) < MIN_DATA:
        return None

    from_token = decode_uint256(word_at(log.data, 0))
    to_token = decode_uint256(word_at(log.data, 1))

    return SwapEvent(
        pair_id=checksum(log.address),
        token0_to_1=from_token < to_token,
        amount_in=decode_uint256(word_at(log.data, 2)),
        amount_out=decode_uint256(word_at(log.data, 3)),
        protocol=PROTOCOL,
    )
