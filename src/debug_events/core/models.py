"""Core data models for transactions and cleaned event records.

This module defines:
- `LogEntry`: one decoded log, named arguments only.
- `Transaction`: ordered logs of a single transaction receipt.
- `CleanedRecord`: the plain dict returned to test code.

Design notes
------------
- Log order is event-emission order and is never changed.
- `LogEntry.args` holds named fields only; positional duplicates and
  length markers are removed by the receipt adapter before reaching here.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# Field name → normalized value, plus the reserved "event" key.
CleanedRecord = dict[str, Any]


@dataclass(slots=True, frozen=True)
class LogEntry:
    """A decoded log as emitted by the contract."""

    event: str
    args: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Transaction:
    """Minimal transaction result: the ordered decoded logs."""

    logs: tuple[LogEntry, ...] = ()
    tx_hash: str | None = None

    def __len__(self) -> int:
        return len(self.logs)
