from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeConfig:
    """Configuration for a decode run (CLI)."""

    # Protocol family tags to register; None means every supported family.
    protocols: tuple[str, ...] | None = None
    log_level: str = "WARNING"
    as_json: bool = False
