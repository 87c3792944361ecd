"""Per-protocol swap decoders.

Each module exposes plain `parse_*(log) -> SwapEvent | None` functions plus
the topic0 constants they understand. Decoders are independent of each other.
"""
