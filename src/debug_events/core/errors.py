from __future__ import annotations

from typing import Any


class DebugEventsError(Exception):
    """Base class for every error raised by debug_events."""


class NoTransactionError(DebugEventsError):
    """Events were queried before a transaction was attached."""

    def __init__(self, message: str = "There is no transaction to get events from") -> None:
        super().__init__(message)


class UnknownFieldError(DebugEventsError, KeyError):
    """A decoded log field has no entry in the contract's event schema."""

    def __init__(self, event: str, field: str) -> None:
        self.event = event
        self.field = field
        super().__init__(f"Field {field!r} is not declared for event {event!r} in the contract ABI")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class InvalidValueError(DebugEventsError, ValueError):
    """A raw value could not be normalized for its declared ABI type."""

    def __init__(self, value: Any, type: str, reason: str = "") -> None:
        self.value = value
        self.type = type
        msg = f"Cannot normalize {value!r} as {type}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class InvalidTransactionError(DebugEventsError, TypeError):
    """The attached transaction exposes no logs (not a receipt, log list or `.logs` object)."""

    def __init__(self, tx: Any) -> None:
        self.tx = tx
        super().__init__(f"Cannot read logs from {type(tx).__name__} {tx!r}")
