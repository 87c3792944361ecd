"""Shared amount rules for decoders whose payload carries signed deltas."""

from __future__ import annotations

from dexswaps.core.models import SwapEvent


def signed_delta_swap(pair_id: str, amount0: int, amount1: int, protocol: str) -> SwapEvent:
    """Build a SwapEvent from two pool-side signed deltas.

    Convention: a positive delta means that token entered the pool.
    token0 → token1 exactly when amount0 > 0. The two deltas are not checked
    for opposite signs.
    """
    token0_to_1 = amount0 > 0
    amount_in = amount0 if amount0 > 0 else amount1
    amount_out = amount0 if amount0 < 0 else amount1
    return SwapEvent(
        pair_id=pair_id,
        token0_to_1=token0_to_1,
        amount_in=abs(amount_in),
        amount_out=abs(amount_out),
        protocol=protocol,
    )
