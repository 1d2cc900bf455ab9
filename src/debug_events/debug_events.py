"""Transaction event inspector for contract tests.

`DebugEvents` indexes a contract's event ABI once and turns the logs of any
attached transaction into plain records:

>>> events = DebugEvents(token_abi).set_tx(receipt)
>>> events.get_event("Transfer")
{'from': '0xAA', 'to': '0xBB', 'value': 1000, 'event': 'Transfer'}
"""

from __future__ import annotations

import logging
from typing import Any

from debug_events.abi_events import make_schema_index_from_abi
from debug_events.adapters.receipts import as_transaction
from debug_events.core.config import ExtractorConfig
from debug_events.core.errors import NoTransactionError
from debug_events.core.interfaces import TextDecoder
from debug_events.core.models import CleanedRecord, Transaction
from debug_events.decoding.decoder import clean_logs, filter_logs
from debug_events.decoding.specs import EventSchemaIndex
from debug_events.decoding.utils import hex_to_utf8

logger = logging.getLogger(__name__)


class DebugEvents:
    """Cleaned event records of a transaction, typed by the contract's ABI."""

    def __init__(
        self,
        contract: Any,
        tx: Any = None,
        *,
        config: ExtractorConfig | None = None,
        text_decoder: TextDecoder | None = None,
    ) -> None:
        self._config = config or ExtractorConfig()
        self._text_decoder = text_decoder or hex_to_utf8
        self._events: EventSchemaIndex = make_schema_index_from_abi(contract)
        self._tx: Transaction | None = None
        if tx is not None:
            self.set_tx(tx)

    @property
    def events(self) -> EventSchemaIndex:
        return self.get_contract_events()

    @property
    def tx(self) -> Transaction | None:
        return self._tx

    def set_tx(self, tx: Any) -> DebugEvents:
        """Attach (or replace) the transaction to read events from; None detaches it."""
        if tx is None:
            self._tx = None
            return self
        self._tx = as_transaction(tx, self._config)
        logger.debug("attached transaction %s with %d logs", self._tx.tx_hash, len(self._tx.logs))
        return self

    def get_contract_events(self) -> EventSchemaIndex:
        """Event name → field name → EventFieldSpec, as declared by the ABI."""
        return {name: dict(fields) for name, fields in self._events.items()}

    def get_events(self, event_name: str | None = None) -> list[CleanedRecord]:
        """Cleaned records of every log (or only those named `event_name`), in emission order."""
        if self._tx is None:
            raise NoTransactionError()
        return clean_logs(
            filter_logs(self._tx.logs, event_name),
            self._events,
            config=self._config,
            text_decoder=self._text_decoder,
        )

    def get_event(self, event_name: str | None = None) -> CleanedRecord | None:
        """First cleaned record, or None when no matching event was emitted."""
        events = self.get_events(event_name)
        return events[0] if events else None
