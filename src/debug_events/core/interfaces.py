from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# ILogEntry / ITransaction
# ---------------------------------------------------------------------------

@runtime_checkable
class ILogEntry(Protocol):
    """
    One decoded log.

    Domain expectations:
    - `event` is the ABI event name the log was decoded as.
    - `args` maps field names to raw values, named fields only.
    """

    event: str
    args: Mapping[str, Any]


@runtime_checkable
class ITransaction(Protocol):
    """
    Transaction result exposing decoded logs in emission order.

    Implementations:
    - `Transaction` (core model built by the receipt adapter)
    - Any test double with a `logs` attribute
    """

    @property
    def logs(self) -> Sequence[ILogEntry]:
        ...


# ---------------------------------------------------------------------------
# TextDecoder
# ---------------------------------------------------------------------------

# Decodes a fixed-width on-chain byte value (hex string or bytes) into text.
# Must be synchronous and side-effect free.
TextDecoder = Callable[[Any], str]
