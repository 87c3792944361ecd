"""Core data models: raw logs in, unified swap events out.

This module defines:
- `EventLog`: one raw log as delivered by a receipt/log provider.
- `SwapEvent`: protocol-agnostic swap produced by a decoder.

Design notes
------------
- Topics are kept as lowercased 0x-hex strings (66 chars), the same shape
  JSON-RPC nodes return them in. `EventLog` validates its address and
  topics on construction, so decoders only ever see well-formed logs.
- Amounts are Python ints (arbitrary precision). No floats anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from eth_utils import decode_hex, is_address, is_hex  # type: ignore[attr-defined]

TOPIC_HEX_LEN = 66  # "0x" + 64 hex chars


def _to_int(v: Any) -> int | None:
    if v is None:
        return None
    if isinstance(v, int):
        return v
    return int(v, 16) if str(v).startswith("0x") else int(v)


def normalize_topic(topic: str | bytes) -> str:
    """Return a topic as lowercased 0x-hex, raising ValueError if it is not 32 bytes."""
    if isinstance(topic, (bytes, bytearray)):
        if len(topic) != 32:
            raise ValueError(f"topic must be 32 bytes, got {len(topic)}")
        return "0x" + bytes(topic).hex()
    t = topic.lower()
    if not t.startswith("0x"):
        t = "0x" + t
    if len(t) != TOPIC_HEX_LEN or not is_hex(t):
        raise ValueError(f"invalid topic: {topic!r}")
    return t


# === Input record ===


@dataclass(slots=True, frozen=True)
class EventLog:
    """Raw log, minimally normalized."""

    address: str  # lowercased 0x...
    topics: tuple[str, ...]  # lowercased 0x..., 32 bytes each
    data: bytes
    tx_hash: str | None = None
    log_index: int | None = None
    block_number: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.address, str) or not is_address(self.address):
            raise ValueError(f"invalid log address: {self.address!r}")
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "address", self.address.lower())
        object.__setattr__(self, "topics", tuple(normalize_topic(t) for t in self.topics))

    @classmethod
    def from_rpc(cls, rl: dict[str, Any]) -> EventLog:
        """Build an `EventLog` from a JSON-RPC log object.

        Raises
        ------
        ValueError
            If the address, a topic or the data field is malformed.
        """
        data = rl.get("data") or "0x"
        if isinstance(data, str):
            if not is_hex(data):
                raise ValueError(f"invalid log data: {data[:18]!r}")
            data = decode_hex(data)

        return cls(
            address=str(rl.get("address") or ""),
            topics=tuple(rl.get("topics", [])),
            data=bytes(data),
            tx_hash=(rl.get("transactionHash") or rl.get("transaction_hash") or "").lower() or None,
            log_index=_to_int(rl.get("logIndex")),
            block_number=_to_int(rl.get("blockNumber")),
        )


# === Output record ===


@dataclass(slots=True, frozen=True)
class SwapEvent:
    """A decoded swap, independent of the emitting protocol.

    `pair_id` is an EIP-55 address. For pool-identifier keyed protocols it is
    a pseudo-address (leading 20 bytes of the pool id), stable per pool but
    not a deployed contract.
    """

    pair_id: str
    token0_to_1: bool
    amount_in: int
    amount_out: int
    protocol: str = ""

    def as_dict(self) -> dict[str, Any]:
        """JSON-safe view; amounts as decimal strings to keep uint256 exact."""
        return {
            "protocol": self.protocol,
            "pair_id": self.pair_id,
            "token0_to_1": self.token0_to_1,
            "amount_in": str(self.amount_in),
            "amount_out": str(self.amount_out),
        }
