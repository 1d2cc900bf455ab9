"""Receipt adapter: raw transaction results → core `Transaction` models.

Log decoders (truffle, web3.js) attach each argument twice, by name and by
position, plus a `__length__` marker. Only named fields reach the core; the
cleanup happens here, at the boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from debug_events.core.config import ExtractorConfig
from debug_events.core.errors import InvalidTransactionError
from debug_events.core.models import LogEntry, Transaction
from debug_events.decoding.utils import get_attr

logger = logging.getLogger(__name__)

LENGTH_MARKER = "__length__"
_TX_HASH_KEYS = ("tx", "transactionHash", "tx_hash")


def is_positional_key(key: Any) -> bool:
    """True for positional duplicates ("0", "1", 2 ...) of named arguments."""
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isdigit()


def named_args(args: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Drop positional duplicates and the length marker, keeping key order."""
    if not args:
        return {}
    return {
        key: value
        for key, value in args.items()
        if not is_positional_key(key) and key != LENGTH_MARKER
    }


def log_entry_from_raw(raw: Any) -> LogEntry:
    """Build a LogEntry from a decoded log mapping or object (`event` + `args`)."""
    if isinstance(raw, LogEntry):
        return raw
    return LogEntry(event=get_attr(raw, "event") or "", args=named_args(get_attr(raw, "args")))


def _raw_logs(tx: Any) -> Sequence[Any]:
    if isinstance(tx, Sequence) and not isinstance(tx, (str, bytes)):
        return tx
    logs = get_attr(tx, "logs")
    if logs is None or isinstance(logs, (str, bytes)) or not isinstance(logs, Sequence):
        raise InvalidTransactionError(tx)
    return logs


def _tx_hash(tx: Any) -> str | None:
    if isinstance(tx, Sequence):
        return None
    for key in _TX_HASH_KEYS:
        value = get_attr(tx, key)
        if isinstance(value, str):
            return value
    return None


def as_transaction(tx: Any, config: ExtractorConfig | None = None) -> Transaction:
    """Adapt a receipt (mapping, `.logs` object or bare log sequence) to a Transaction."""
    if isinstance(tx, Transaction):
        return tx
    config = config or ExtractorConfig()

    logs: list[LogEntry] = []
    for raw in _raw_logs(tx):
        entry = log_entry_from_raw(raw)
        if not entry.event and not config.keep_anonymous_logs:
            logger.debug("dropping log without a decoded event name")
            continue
        logs.append(entry)
    return Transaction(logs=tuple(logs), tx_hash=_tx_hash(tx))
