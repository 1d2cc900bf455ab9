"""Schema builder utilities for creating event schema indexes from signatures.

This module lets tests describe a contract without a compiled ABI:
- `event_from_signature()` parses one Solidity event signature into a descriptor
- `events_from_signatures()` keys descriptors by topic0, like `contract.events`
- `make_schema_index_from_signatures()` goes straight to an EventSchemaIndex

Example
-------
>>> index = make_schema_index_from_signatures(
...     "Transfer(address indexed from, address indexed to, uint256 value)"
... )
>>> index["Transfer"]["value"].type
'uint256'
"""

from __future__ import annotations

from typing import Any

from eth_utils import keccak

from .registry import make_schema_index
from .specs import EventSchemaIndex


# ---- Helpers: parse an event signature ----
def _split_params(params_str: str) -> list[str]:
    """Split the parameter list by commas while respecting nested tuple types."""
    items: list[str] = []
    depth = 0
    buf: list[str] = []
    for ch in params_str:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth -= 1
            buf.append(ch)
        elif ch == ',' and depth == 0:
            items.append(''.join(buf).strip())
            buf = []
        else:
            buf.append(ch)
    if buf:
        items.append(''.join(buf).strip())
    return [i for i in items if i]


def _parse_param(p: str, fallback_name: str) -> tuple[str, str, bool]:
    """Parse one parameter fragment into (name, abi_type, indexed)."""
    s = ' '.join(p.strip().split())
    indexed = False
    if ' indexed ' in f' {s} ':
        indexed = True
        s = f' {s} '.replace(' indexed ', ' ').strip()
    tokens = s.split()
    if not tokens:
        raise ValueError(f"Parameter {p!r} has no type")
    if len(tokens) == 1:
        # Unnamed parameter
        return (fallback_name, tokens[0], indexed)
    # Last token is the name, the rest is the type
    return (tokens[-1], ' '.join(tokens[:-1]), indexed)


def event_from_signature(signature: str) -> dict[str, Any]:
    """Build an ABI-shaped event descriptor from a Solidity event signature.

    Example input:
      "Transfer(address indexed from, address indexed to, uint256 value)"
    """
    sig = signature.strip()
    open_paren = sig.find('(')
    close_paren = sig.rfind(')')
    if open_paren <= 0 or close_paren < open_paren:
        raise ValueError(f"Invalid event signature: {signature}")
    name = sig[:open_paren].strip()
    params_str = sig[open_paren + 1 : close_paren].strip()

    inputs = []
    for i, part in enumerate(_split_params(params_str)):
        name_i, abi_type_i, is_indexed = _parse_param(part, fallback_name=f"arg{i}")
        inputs.append({"name": name_i, "type": abi_type_i, "indexed": is_indexed})

    return {"name": name, "type": "event", "anonymous": False, "inputs": inputs}


def get_signature_topic0(event: dict[str, Any]) -> str:
    """Topic0 of a descriptor: keccak of the canonical type list (no names, no 'indexed')."""
    canonical_types = ','.join(event_input["type"] for event_input in event["inputs"])
    return '0x' + keccak(text=f"{event['name']}({canonical_types})").hex()


def events_from_signatures(signatures: str | list[str]) -> dict[str, dict[str, Any]]:
    """Create a topic0 → descriptor mapping from one or multiple signatures."""
    sig_list = [signatures] if isinstance(signatures, str) else signatures
    events: dict[str, dict[str, Any]] = {}
    for signature in sig_list:
        event = event_from_signature(signature)
        events[get_signature_topic0(event)] = event
    return events


def make_schema_index_from_signatures(signatures: str | list[str]) -> EventSchemaIndex:
    """Create a schema index from one or multiple event signatures."""
    return make_schema_index(events_from_signatures(signatures))
