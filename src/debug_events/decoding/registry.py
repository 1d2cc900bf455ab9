"""Event schema index built from a contract's event ABI.

This module exposes:
- `make_schema_index(contract_events)` → EventSchemaIndex for every event descriptor
- `add_event_fields(index, event)` → merge one descriptor's inputs into the index
- `get_field_spec(index, event_name, field_name)` → lookup, raising UnknownFieldError

Descriptors may be plain dicts (truffle `contract.events` values, JSON ABI
entries), pydantic `AbiEvent` models, or any object with `name` / `inputs`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from debug_events.core.errors import UnknownFieldError
from debug_events.decoding.specs import EventFieldSpec, EventSchemaIndex
from debug_events.decoding.utils import get_attr

logger = logging.getLogger(__name__)


def add_event_fields(index: EventSchemaIndex, event: Any) -> None:
    """Record every input of one event descriptor under its event name.

    Descriptors sharing a name accumulate into the same entry; a later input
    with the same field name replaces the earlier one.
    """
    name = get_attr(event, "name")
    for event_input in get_attr(event, "inputs", None) or ():
        fields = index.setdefault(name, {})
        fields[get_attr(event_input, "name")] = EventFieldSpec(
            type=get_attr(event_input, "type"),
            indexed=bool(get_attr(event_input, "indexed", False)),
        )


def make_schema_index(contract_events: Mapping[str, Any] | Iterable[Any]) -> EventSchemaIndex:
    """Build the schema index from an event-identifier → descriptor mapping.

    A plain iterable of descriptors is accepted too. An empty input gives an
    empty index.
    """
    events = contract_events.values() if isinstance(contract_events, Mapping) else contract_events
    index: EventSchemaIndex = {}
    for event in events:
        add_event_fields(index, event)
    logger.debug("built event schema index with %d events", len(index))
    return index


def get_field_spec(index: EventSchemaIndex, event_name: str, field_name: str) -> EventFieldSpec:
    """Return the spec for `event_name.field_name` or raise UnknownFieldError."""
    try:
        return index[event_name][field_name]
    except KeyError:
        raise UnknownFieldError(event_name, field_name) from None
