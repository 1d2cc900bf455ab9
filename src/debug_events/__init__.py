from __future__ import annotations

from .core.config import ExtractorConfig
from .core.errors import (
    DebugEventsError,
    InvalidTransactionError,
    InvalidValueError,
    NoTransactionError,
    UnknownFieldError,
)
from .core.models import CleanedRecord, LogEntry, Transaction
from .debug_events import DebugEvents
from .decoding.registry import make_schema_index
from .decoding.specs import EventFieldSpec, EventSchemaIndex
from .decoding.utils import normalize_value

__all__ = [
    "DebugEvents",
    "ExtractorConfig",
    "DebugEventsError",
    "InvalidTransactionError",
    "InvalidValueError",
    "NoTransactionError",
    "UnknownFieldError",
    "CleanedRecord",
    "LogEntry",
    "Transaction",
    "make_schema_index",
    "EventFieldSpec",
    "EventSchemaIndex",
    "normalize_value",
]
