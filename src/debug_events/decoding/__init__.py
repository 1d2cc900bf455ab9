"""Event schema indexing and value normalization.

This package provides:
- Event schema types (EventFieldSpec, EventSchemaIndex)
- Schema index construction from ABI descriptors or event signatures
- Per-type value normalization (bytes32 text, uint numbers)
- Log cleaner producing plain records
"""

from debug_events.decoding.decoder import clean_log, clean_logs, filter_logs
from debug_events.decoding.registry import add_event_fields, get_field_spec, make_schema_index
from debug_events.decoding.registry_builder import make_schema_index_from_signatures
from debug_events.decoding.specs import EventFieldSpec, EventSchema, EventSchemaIndex
from debug_events.decoding.utils import clean_string, clean_uint, hex_to_utf8, normalize_value

__all__ = [
    "clean_log",
    "clean_logs",
    "filter_logs",
    "add_event_fields",
    "get_field_spec",
    "make_schema_index",
    "make_schema_index_from_signatures",
    "EventFieldSpec",
    "EventSchema",
    "EventSchemaIndex",
    "clean_string",
    "clean_uint",
    "hex_to_utf8",
    "normalize_value",
]
