from collections.abc import Callable

import pytest

from dexswaps.core.models import EventLog
from dexswaps.decoding.registries import make_default_registry
from dexswaps.decoding.specs import SignatureRegistry

POOL = "0x1f98431c8ad98523631ae4a59f267346ea31f984"
SENDER_TOPIC = "0x" + "0" * 24 + "e592427a0aece92de3edee1f18e0157c05861564"
RECIPIENT_TOPIC = "0x" + "0" * 24 + "68b3465833fb72a70ecdf485e0e4c7bd8665fc45"
POOL_ID = "0x" + "ab" * 20 + "cd" * 12
UNKNOWN_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"  # ERC-20 Transfer


def word(v: int) -> bytes:
    """One ABI word, two's complement for negatives."""
    return (v % (1 << 256)).to_bytes(32, "big")


def addr_word(address: str) -> bytes:
    return bytes(12) + bytes.fromhex(address[2:])


def payload(*values: int) -> bytes:
    return b"".join(word(v) for v in values)


@pytest.fixture
def registry() -> SignatureRegistry:
    return make_default_registry()


@pytest.fixture
def make_log() -> Callable[..., EventLog]:
    def _make(*topics: str, data: bytes = b"", address: str = POOL, log_index: int = 0) -> EventLog:
        return EventLog(address=address, topics=tuple(topics), data=data, tx_hash="0xtx", log_index=log_index)

    return _make
