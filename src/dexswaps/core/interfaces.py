from __future__ import annotations

from typing import Protocol, runtime_checkable

from dexswaps.core.models import EventLog, SwapEvent


# ---------------------------------------------------------------------------
# ISwapDecoder
# ---------------------------------------------------------------------------

@runtime_checkable
class ISwapDecoder(Protocol):
    """
    Try-decode capability for one swap event layout.

    Contract:
    - Total: returns None for any log that is not a valid instance of the
      layout (wrong topic count, short payload). Never raises for bad input.
    - Pure: no I/O, no state.

    Plain module-level functions satisfy this protocol.
    """

    def __call__(self, log: EventLog) -> SwapEvent | None:
        ...
