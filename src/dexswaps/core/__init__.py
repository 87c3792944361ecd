"""Core data models, configuration and interfaces.

This package provides:
- Data models (EventLog, SwapEvent)
- Configuration (DecodeConfig)
- The decoder capability protocol (ISwapDecoder)
"""

from dexswaps.core.config import DecodeConfig
from dexswaps.core.interfaces import ISwapDecoder
from dexswaps.core.models import EventLog, SwapEvent

__all__ = [
    "DecodeConfig",
    "ISwapDecoder",
    "EventLog",
    "SwapEvent",
]
