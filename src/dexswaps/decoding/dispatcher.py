"""Signature dispatch: raw logs of one transaction → unified swap events.

For each log, topic0 is looked up in the registry supplied by the caller and
the matching decoder is tried. Logs without topics, with an unknown topic0,
or rejected by their decoder are skipped. Output order follows input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from dexswaps.core.models import EventLog, SwapEvent
from dexswaps.decoding.specs import SignatureRegistry

logger = logging.getLogger(__name__)


def iter_swap_events(logs: Iterable[EventLog], registry: SignatureRegistry) -> Iterator[SwapEvent]:
    """Lazily yield swap events for `logs`, in order."""
    for i, log in enumerate(logs):
        if not log.topics:
            continue

        entry = registry.get(log.topics[0].lower())
        if entry is None:
            continue

        swap = entry.decoder(log)
        if swap is None:
            logger.debug(
                "log %d (tx=%s): not a valid %s swap (topics=%d, data=%d bytes)",
                i,
                log.tx_hash,
                entry.protocol,
                len(log.topics),
                len(log.data),
            )
            continue

        yield swap


def parse_swap_events(logs: Iterable[EventLog], registry: SignatureRegistry) -> list[SwapEvent]:
    """Extract swap events from the logs of a single transaction."""
    return list(iter_swap_events(logs, registry))
