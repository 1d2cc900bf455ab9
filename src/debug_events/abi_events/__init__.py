import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Literal

from eth_utils.abi import event_signature_to_log_topic
from pydantic import BaseModel

from debug_events.decoding.registry import make_schema_index
from debug_events.decoding.specs import EventSchemaIndex


class AbiInput(BaseModel):
    indexed: bool = False
    internalType: str | None = None
    name: str
    type: str


class AbiEvent(BaseModel):
    anonymous: bool = False
    inputs: Sequence[AbiInput] = ()
    name: str
    type: Literal["event"] = "event"


def get_event_signature(event: AbiEvent):
    return f"{event.name}({','.join(event_input.type for event_input in event.inputs)})"


def get_event_topic0(event: AbiEvent):
    return "0x" + event_signature_to_log_topic(get_event_signature(event)).hex()


AbiJson = Iterable[dict[str, Any]]
# A JSON ABI list, a path to one, a truffle artifact or an id → event descriptor mapping.
AbiSpec = AbiJson | Mapping[str, Any] | Path


def _load_abi(abi: AbiSpec) -> AbiJson | Mapping[str, Any]:
    if isinstance(abi, Path):
        return json.loads(abi.read_text())
    return abi


def get_events_from_abi(abi: AbiSpec) -> dict[str, AbiEvent]:
    """Return event descriptors keyed by event identifier.

    JSON ABI lists are keyed by topic0 so overloaded events stay distinct;
    mappings keep their own keys (truffle's `contract.events` is keyed by topic0).
    """
    abi = _load_abi(abi)
    if isinstance(abi, Mapping):
        if "abi" in abi:
            return get_events_from_abi(abi["abi"])
        return {key: AbiEvent.model_validate(entry) for key, entry in abi.items()}

    events: dict[str, AbiEvent] = {}
    for entry in abi:
        if entry.get("type") != "event":
            continue
        event = AbiEvent.model_validate(entry)
        events[get_event_topic0(event)] = event
    return events


def get_contract_events(contract: Any) -> dict[str, AbiEvent]:
    """Event descriptors of a contract object, artifact, ABI list or ABI file."""
    events = getattr(contract, "events", None)
    if isinstance(events, Mapping):
        return get_events_from_abi(events)
    abi = getattr(contract, "abi", None)
    if abi is not None:
        return get_events_from_abi(abi)
    if isinstance(contract, str):
        return get_events_from_abi(Path(contract))
    return get_events_from_abi(contract)


def make_schema_index_from_abi(abi: Any) -> EventSchemaIndex:
    return make_schema_index(get_contract_events(abi))
