"""Event schema primitives.

Defines lightweight types describing how to clean event fields:
- `EventFieldSpec`: declared ABI type + indexed flag of one event argument
- `EventSchema`: mapping field name → EventFieldSpec for one event
- `EventSchemaIndex`: mapping event name → EventSchema
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventFieldSpec:
    """Describe one event argument (ABI type and indexed-ness)."""

    type: str  # e.g., "address", "uint256", "bytes32"
    indexed: bool = False


EventSchema = dict[str, EventFieldSpec]

# The full index keyed by event name (case-sensitive, as in the ABI).
EventSchemaIndex = dict[str, EventSchema]


def get_indexed_fields(schema: EventSchema) -> list[str]:
    return [name for name, spec in schema.items() if spec.indexed]
