"""
Typed error classes for the response parsers.

Only shape problems are reported here. Failures of the XDR codec itself
(bad base64, truncated or unknown union arms) are raised by ``stellar_sdk``
and reach the caller untouched, so callers can tell "the node sent something
we cannot shape" apart from "the payload does not decode".
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

__all__ = [
    "ParserError",
    "MalformedLedgerEntry",
    "UnexpectedResultCount",
]


class ParserError(Exception):
    """Base class for all parser errors."""


@dataclass(slots=True)
class MalformedLedgerEntry(ParserError):
    """
    Raised when a ledger entry returned by ``getLedgerEntries`` lacks its
    ``key`` or ``xdr`` payload.

    Fields:
      - message: human-readable description
      - entry: the offending raw entry, as received on the wire
    """

    message: str
    entry: Dict[str, Any]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.message}: {json.dumps(self.entry, sort_keys=True, default=str)}"


@dataclass(slots=True)
class UnexpectedResultCount(ParserError):
    """
    Raised in strict mode when a simulation carries more than one host
    function result. The RPC only ever returns zero or one.
    """

    count: int
    request_id: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        rid = f" id={self.request_id}" if self.request_id is not None else ""
        return f"UnexpectedResultCount{rid}: expected at most 1 result, got {self.count}"
