import json
from pathlib import Path

import pytest

from dexswaps.adapters.receipts import load_receipt_logs
from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.protocols import pool_id, uniswap_v2, uniswap_v3

from .conftest import POOL, POOL_ID, RECIPIENT_TOPIC, SENDER_TOPIC, payload


def _rpc_log(**overrides):
    rl = {
        "address": "0x0D4A11D5EEAAC28EC3F61D100DAF4D40471F1852",
        "topics": [uniswap_v2.SWAP_T0, SENDER_TOPIC, RECIPIENT_TOPIC],
        "data": "0x" + payload(1, 0, 0, 2).hex(),
        "logIndex": "0x1a",
        "blockNumber": "0x10",
        "transactionHash": "0xABC",
    }
    rl.update(overrides)
    return rl


def test_from_rpc_normalizes():
    log = EventLog.from_rpc(_rpc_log(topics=[uniswap_v2.SWAP_T0.upper().replace("0X", "0x"), SENDER_TOPIC, RECIPIENT_TOPIC]))
    assert log.address == "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"
    assert log.topics[0] == uniswap_v2.SWAP_T0
    assert log.data == payload(1, 0, 0, 2)
    assert log.log_index == 26
    assert log.block_number == 16
    assert log.tx_hash == "0xabc"


def test_from_rpc_empty_data():
    assert EventLog.from_rpc(_rpc_log(data="0x")).data == b""


@pytest.mark.parametrize(
    "overrides",
    [
        {"address": "0x1234"},
        {"topics": ["0xdead"]},
        {"data": "0xzz"},
    ],
)
def test_from_rpc_rejects_malformed(overrides):
    with pytest.raises(ValueError):
        EventLog.from_rpc(_rpc_log(**overrides))


@pytest.mark.parametrize(
    "address, topics",
    [
        ("pool", (uniswap_v3.SWAP_T0, SENDER_TOPIC, RECIPIENT_TOPIC)),
        (POOL, (pool_id.UNISWAP_V4_SWAP_T0, "0xabcd", SENDER_TOPIC)),
        (POOL, (pool_id.UNISWAP_V4_SWAP_T0, b"\x01" * 20, SENDER_TOPIC)),
    ],
)
def test_malformed_event_log_cannot_be_built(address, topics):
    with pytest.raises(ValueError):
        EventLog(address=address, topics=topics, data=payload(1000, -990))


def test_event_log_normalizes_on_construction():
    log = EventLog(
        address=POOL.upper().replace("0X", "0x"),
        topics=(bytes.fromhex(pool_id.UNISWAP_V4_SWAP_T0[2:]), POOL_ID.upper().replace("0X", "0x"), SENDER_TOPIC),
        data=payload(1000, -990),
    )
    assert log.address == POOL
    assert log.topics == (pool_id.UNISWAP_V4_SWAP_T0, POOL_ID, SENDER_TOPIC)


def test_load_receipt_envelope(tmp_path: Path):
    p = tmp_path / "receipt.json"
    p.write_text(json.dumps({"jsonrpc": "2.0", "id": 1, "result": {"transactionHash": "0xabc", "logs": [_rpc_log()]}}))
    logs = load_receipt_logs(p)
    assert len(logs) == 1
    assert logs[0].topics[0] == uniswap_v2.SWAP_T0


def test_load_bare_log_list():
    logs = load_receipt_logs([_rpc_log(), _rpc_log(logIndex="0x1b")])
    assert [l.log_index for l in logs] == [26, 27]


def test_load_null_result():
    with pytest.raises(ValueError, match="not found"):
        load_receipt_logs({"jsonrpc": "2.0", "id": 1, "result": None})


def test_swap_event_as_dict_keeps_big_ints_exact():
    s = SwapEvent(pair_id="0xP", token0_to_1=True, amount_in=2**255, amount_out=1, protocol="uniswap_v3")
    d = s.as_dict()
    assert d["amount_in"] == str(2**255)
    assert d["token0_to_1"] is True


def test_swap_event_is_frozen():
    s = SwapEvent(pair_id="0xP", token0_to_1=True, amount_in=1, amount_out=1)
    with pytest.raises(AttributeError):
        s.amount_in = 2  # type: ignore[misc]
