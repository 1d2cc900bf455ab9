from pathlib import Path

import pytest

from debug_events.abi_events import get_event_topic0, get_events_from_abi, make_schema_index_from_abi
from debug_events.core.errors import UnknownFieldError
from debug_events.decoding.registry import get_field_spec, make_schema_index
from debug_events.decoding.registry_builder import (
    event_from_signature,
    events_from_signatures,
    make_schema_index_from_signatures,
)
from debug_events.decoding.specs import EventFieldSpec, get_indexed_fields


def test_make_schema_index(contract_events):
    index = make_schema_index(contract_events)

    assert set(index) == {"Transfer", "NameSet"}
    assert index["Transfer"]["from"] == EventFieldSpec(type="address", indexed=True)
    assert index["Transfer"]["value"] == EventFieldSpec(type="uint256", indexed=False)
    assert get_indexed_fields(index["NameSet"]) == ["account"]


def test_make_schema_index_is_pure(contract_events):
    assert make_schema_index(contract_events) == make_schema_index(contract_events)


def test_make_schema_index_empty():
    assert make_schema_index({}) == {}


def test_same_event_name_accumulates_and_overwrites():
    events = {
        "0x01": {"name": "Deposit", "inputs": [
            {"name": "user", "type": "address", "indexed": True},
            {"name": "amount", "type": "uint256", "indexed": False},
        ]},
        "0x02": {"name": "Deposit", "inputs": [
            {"name": "amount", "type": "uint128", "indexed": True},
            {"name": "memo", "type": "bytes32", "indexed": False},
        ]},
    }
    index = make_schema_index(events)

    assert list(index["Deposit"]) == ["user", "amount", "memo"]
    assert index["Deposit"]["amount"] == EventFieldSpec(type="uint128", indexed=True)


def test_get_field_spec_unknown():
    index = make_schema_index_from_signatures("Transfer(address indexed from, address indexed to, uint256 value)")

    with pytest.raises(UnknownFieldError) as exc_info:
        get_field_spec(index, "Transfer", "amount")
    assert exc_info.value.event == "Transfer"
    assert exc_info.value.field == "amount"

    with pytest.raises(UnknownFieldError):
        get_field_spec(index, "Approval", "value")


def test_make_schema_index_from_abi(token_abi_path: Path):
    assert token_abi_path.is_file()
    index = make_schema_index_from_abi(token_abi_path)
    events = get_events_from_abi(token_abi_path)

    assert len(events) == 4  # ABI defines 4 events, functions are skipped
    assert set(events.keys()) == {get_event_topic0(event) for event in events.values()}
    # events without inputs have no schema entry
    assert set(index) == {"Transfer", "Approval", "NameSet"}
    assert index["NameSet"]["name"].type == "bytes32"


def test_transfer_topic0(token_abi_path: Path):
    topic0s = {event.name: topic0 for topic0, event in get_events_from_abi(token_abi_path).items()}
    assert topic0s["Transfer"] == "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


def test_truffle_artifact_is_unwrapped(token_abi_path: Path):
    import json

    artifact = {"contractName": "Token", "abi": json.loads(token_abi_path.read_text())}
    assert make_schema_index_from_abi(artifact) == make_schema_index_from_abi(token_abi_path)


def test_event_from_signature():
    event = event_from_signature("Deposit(address indexed user, uint256, bytes32 tag)")

    assert event["name"] == "Deposit"
    assert event["inputs"] == [
        {"name": "user", "type": "address", "indexed": True},
        {"name": "arg1", "type": "uint256", "indexed": False},
        {"name": "tag", "type": "bytes32", "indexed": False},
    ]


def test_events_from_signatures_keyed_by_topic0():
    events = events_from_signatures([
        "Transfer(address indexed from, address indexed to, uint256 value)",
        "Approval(address indexed owner, address indexed spender, uint256 value)",
    ])
    assert "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef" in events
    assert len(events) == 2


def test_invalid_signature():
    with pytest.raises(ValueError):
        event_from_signature("Transfer address from")


def test_parameter_without_type():
    with pytest.raises(ValueError):
        event_from_signature("Deposit(address indexed user, indexed)")
