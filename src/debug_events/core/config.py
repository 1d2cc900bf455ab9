from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractorConfig:
    """Configuration for the event extractor."""

    strict_fields: bool = True  # raise UnknownFieldError instead of skipping
    default_type: str = "bytes32"  # used when an ABI input declares no type
    event_key: str = "event"  # reserved record key for the event name
    keep_anonymous_logs: bool = False  # keep undecoded logs (no event name) as event=""
