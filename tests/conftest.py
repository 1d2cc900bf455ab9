from pathlib import Path
from typing import Any

import pytest

ABI_DIR = Path(__file__).parent / "abi"

# "Alice" stored in a bytes32 slot, right-padded with zero bytes
ALICE_BYTES32 = "0x" + b"Alice".hex() + "00" * 27


@pytest.fixture
def token_abi_path() -> Path:
    return ABI_DIR / "token_abi.json"


@pytest.fixture
def contract_events() -> dict[str, Any]:
    """Event descriptors keyed by topic0, as exposed by a truffle contract's `events`."""
    return {
        "0xddf252ad": {
            "name": "Transfer",
            "inputs": [
                {"indexed": True, "name": "from", "type": "address"},
                {"indexed": True, "name": "to", "type": "address"},
                {"indexed": False, "name": "value", "type": "uint256"},
            ],
        },
        "0x1f0b2c3a": {
            "name": "NameSet",
            "inputs": [
                {"indexed": True, "name": "account", "type": "address"},
                {"indexed": False, "name": "name", "type": "bytes32"},
                {"indexed": False, "name": "level", "type": "uint8"},
                {"indexed": False, "name": "active", "type": "bool"},
            ],
        },
    }


@pytest.fixture
def transfer_receipt() -> dict[str, Any]:
    """Truffle-style result: named + positional args and a length marker."""
    return {
        "tx": "0xabc",
        "logs": [
            {
                "event": "Transfer",
                "args": {
                    "0": "0xAA",
                    "1": "0xBB",
                    "2": "1000",
                    "__length__": 3,
                    "from": "0xAA",
                    "to": "0xBB",
                    "value": "1000",
                },
            },
        ],
    }


@pytest.fixture
def mixed_receipt() -> dict[str, Any]:
    return {
        "tx": "0xdef",
        "logs": [
            {"event": "Transfer", "args": {"from": "0x01", "to": "0x02", "value": "1"}},
            {
                "event": "NameSet",
                "args": {"account": "0x01", "name": ALICE_BYTES32, "level": "7", "active": True, "__length__": 4},
            },
            {"event": "Transfer", "args": {"from": "0x02", "to": "0x03", "value": "0x10"}},
        ],
    }
