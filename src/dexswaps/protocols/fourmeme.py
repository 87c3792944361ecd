"""four.meme bonding-curve launchpad trades.

TokenPurchase / TokenSale(address token, address account, uint256 price,
    uint256 amount, uint256 cost, uint256 fee, uint256 offers, uint256 funds)

One manager contract emits trades for every launched token, so the pair
identity is the token address (word 0). token0 is the launched token and
token1 the quote currency: a purchase is token1 → token0, a sale token0 → token1.
"""

from __future__ import annotations

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.utils import address_from_word, decode_uint256, word_at

PROTOCOL = "fourmeme"

PURCHASE_EVENT = (
    "TokenPurchase(address token, address account, uint256 price, uint256 amount, "
    "uint256 cost, uint256 fee, uint256 offers, uint256 funds)"
)
PURCHASE_T0 = "0x7db52723a3b2cdd6164364b3b766e65e540d7be48ffa89582956d8eaebe62942"

SALE_EVENT = (
    "TokenSale(address token, address account, uint256 price, uint256 amount, "
    "uint256 cost, uint256 fee, uint256 offers, uint256 funds)"
)
SALE_T0 = "0x0a5575b3648bae2210cee56bf33254cc1ddfbc7bf637c0af2ac18b14fb1bae19"

TOPICS = 1
MIN_DATA = 8 * 32


def _parse(log: EventLog, *, sale: bool) -> SwapEvent | None:
    if len(log.topics) != TOPICS or len(log.data) < MIN_DATA:
        return None

    token_amount = decode_uint256(word_at(log.data, 3))
    quote_amount = decode_uint256(word_at(log.data, 4))

    return SwapEvent(
        pair_id=address_from_word(word_at(log.data, 0)),
        token0_to_1=sale,
        amount_in=token_amount if sale else quote_amount,
        amount_out=quote_amount if sale else token_amount,
        protocol=PROTOCOL,
    )


def parse_purchase(log: EventLog) -> SwapEvent | None:
    """Quote currency in, launched token out."""
    return _parse(log, sale=False)


def parse_sale(log: EventLog) -> SwapEvent | None:
    """Launched token in, quote currency out."""
    return _parse(log, sale=True)
