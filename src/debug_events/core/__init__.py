"""Core data models, configuration, interfaces and errors.

This package provides:
- Data models (LogEntry, Transaction, CleanedRecord)
- Configuration (ExtractorConfig)
- Error taxonomy (NoTransactionError, UnknownFieldError, InvalidValueError, InvalidTransactionError)
"""

from debug_events.core.config import ExtractorConfig
from debug_events.core.errors import (
    DebugEventsError,
    InvalidTransactionError,
    InvalidValueError,
    NoTransactionError,
    UnknownFieldError,
)
from debug_events.core.models import CleanedRecord, LogEntry, Transaction

__all__ = [
    "ExtractorConfig",
    "DebugEventsError",
    "InvalidTransactionError",
    "InvalidValueError",
    "NoTransactionError",
    "UnknownFieldError",
    "CleanedRecord",
    "LogEntry",
    "Transaction",
]
