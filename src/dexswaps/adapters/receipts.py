"""Offline receipt loading: JSON-RPC shaped documents → `EventLog` records.

Accepted inputs
---------------
- an `eth_getTransactionReceipt` result object (with a `logs` array)
- the full JSON-RPC envelope (`{"jsonrpc": ..., "result": {...}}`)
- a bare list of log objects
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from dexswaps.core.models import EventLog

logger = logging.getLogger(__name__)


class RpcLog(BaseModel):
    address: str
    topics: list[str] = []
    data: str = "0x"
    logIndex: str | int | None = None
    transactionHash: str | None = None
    blockNumber: str | int | None = None

    def to_event_log(self) -> EventLog:
        return EventLog.from_rpc(self.model_dump())


class RpcReceipt(BaseModel):
    transactionHash: str | None = None
    logs: Sequence[RpcLog]


ReceiptJson = dict[str, Any] | list[dict[str, Any]]
ReceiptSpec = ReceiptJson | Path


def _load_json(source: ReceiptSpec) -> ReceiptJson:
    if isinstance(source, Path):
        return json.loads(source.read_text())
    return source


def load_receipt_logs(source: ReceiptSpec) -> list[EventLog]:
    """Return the logs of one transaction receipt, in log order.

    Raises
    ------
    ValueError
        If the document holds no receipt or a log is malformed
        (`pydantic.ValidationError` is a ValueError).
    """
    payload = _load_json(source)
    if isinstance(payload, dict) and "result" in payload:
        payload = payload["result"]
    if payload is None:
        raise ValueError("receipt not found (null result)")

    if isinstance(payload, list):
        rpc_logs = [RpcLog.model_validate(entry) for entry in payload]
    else:
        rpc_logs = list(RpcReceipt.model_validate(payload).logs)

    logs = [rl.to_event_log() for rl in rpc_logs]
    logger.info("loaded %d logs from %s", len(logs), source if isinstance(source, Path) else "document")
    return logs
