"""Decoding utilities: ABI word access and integer/address parsers.

Every decoder reads its payload through these helpers so there is exactly one
sign-extension routine in the code base.
"""

from __future__ import annotations

from eth_utils import to_checksum_address  # type: ignore[attr-defined]

WORD = 32
_INT256_SIGN = 1 << 255
_UINT256_MOD = 1 << 256


def word_at(data: bytes, i: int) -> bytes:
    """Return the i-th 32-byte ABI word.

    Callers check the payload length first; an out-of-range index returns a
    short slice.
    """
    start = WORD * i
    return data[start : start + WORD]


def decode_signed_int256(word: bytes) -> int:
    """Interpret exactly 32 bytes as a big-endian two's-complement integer.

    Narrower signed types (int128, int24) are sign-extended to a full word by
    the ABI encoder, so this covers them as well.
    """
    v = int.from_bytes(word, "big", signed=False)
    if v & _INT256_SIGN:
        v -= _UINT256_MOD
    return v


def decode_uint256(word: bytes) -> int:
    """Interpret 32 bytes as a big-endian unsigned integer."""
    return int.from_bytes(word, "big", signed=False)


def address_from_word(word: bytes) -> str:
    """Return the checksummed address held in the low 20 bytes of a word."""
    return to_checksum_address("0x" + word[-20:].hex())


def topic_bytes(topic_hex: str) -> bytes:
    """Raw 32 bytes of a normalized (0x-prefixed, 66 chars) topic."""
    return bytes.fromhex(topic_hex[2:])


def pseudo_address(pool_id: bytes) -> str:
    """Pseudo pair address: the leading 20 bytes of a 32-byte pool identifier."""
    return to_checksum_address("0x" + pool_id[:20].hex())


def checksum(address: str) -> str:
    return to_checksum_address(address)
