import json
from pathlib import Path

from click.testing import CliRunner

from dexswaps.cli import cli
from dexswaps.protocols import pool_id, uniswap_v2

from .conftest import POOL_ID, RECIPIENT_TOPIC, SENDER_TOPIC, UNKNOWN_T0, payload

PAIR = "0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852"


def _write_receipt(tmp_path: Path) -> Path:
    logs = [
        {"address": PAIR, "topics": [UNKNOWN_T0, SENDER_TOPIC, RECIPIENT_TOPIC], "data": "0x" + payload(5).hex()},
        {"address": PAIR, "topics": [uniswap_v2.SWAP_T0, SENDER_TOPIC, RECIPIENT_TOPIC], "data": "0x" + payload(0, 7, 3, 0).hex()},
        {"address": PAIR, "topics": [pool_id.UNISWAP_V4_SWAP_T0, POOL_ID, SENDER_TOPIC], "data": "0x" + payload(9, -8).hex()},
    ]
    p = tmp_path / "receipt.json"
    p.write_text(json.dumps({"transactionHash": "0xabc", "logs": logs}))
    return p


def test_decode_json(tmp_path: Path):
    result = CliRunner().invoke(cli, ["decode", str(_write_receipt(tmp_path)), "--json"])

    assert result.exit_code == 0, result.output
    rows = [json.loads(line) for line in result.output.splitlines()]
    assert [r["protocol"] for r in rows] == ["uniswap_v2", "uniswap_v4"]
    assert rows[0]["token0_to_1"] is False
    assert (rows[0]["amount_in"], rows[0]["amount_out"]) == ("7", "3")
    assert (rows[1]["amount_in"], rows[1]["amount_out"]) == ("9", "8")


def test_decode_protocol_filter(tmp_path: Path):
    result = CliRunner().invoke(cli, ["decode", str(_write_receipt(tmp_path)), "--json", "--protocol", "uniswap_v4"])

    assert result.exit_code == 0, result.output
    assert len(result.output.splitlines()) == 1


def test_decode_table(tmp_path: Path):
    result = CliRunner().invoke(cli, ["decode", str(_write_receipt(tmp_path))])

    assert result.exit_code == 0, result.output
    assert "2 swap(s) in 3 log(s)" in result.output


def test_decode_bad_receipt(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps([{"address": "nope", "topics": []}]))

    result = CliRunner().invoke(cli, ["decode", str(p)])

    assert result.exit_code != 0
    assert "cannot read receipt" in result.output


def test_signatures():
    result = CliRunner().invoke(cli, ["signatures", "--protocol", "dodo"])

    assert result.exit_code == 0, result.output
    assert "1 signature(s)" in result.output
