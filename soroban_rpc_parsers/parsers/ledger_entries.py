"""
getLedgerEntries response parsing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union

from ..codec import XdrRole, decode
from ..errors import MalformedLedgerEntry
from ..models.parsed import GetLedgerEntriesResponse, LedgerEntryResult
from ..models.raw import (RawGetLedgerEntriesResponse, RawLedgerEntryResult,
                          as_raw)

log = logging.getLogger(__name__)


def _as_received(raw: Union[RawLedgerEntryResult, Mapping[str, Any]]) -> Dict[str, Any]:
    # the wire mapping untouched: unknown keys and string-typed numbers included
    if isinstance(raw, Mapping):
        return dict(raw)
    return raw.model_dump(by_alias=True, exclude_unset=True)


def parse_raw_ledger_entry(
    raw: Union[RawLedgerEntryResult, Mapping[str, Any]],
) -> LedgerEntryResult:
    entry = as_raw(RawLedgerEntryResult, raw)
    if not entry.key or not entry.xdr:
        raise MalformedLedgerEntry(message="invalid ledger entry", entry=_as_received(raw))
    return LedgerEntryResult(
        key=decode(XdrRole.LEDGER_KEY, entry.key),
        val=decode(XdrRole.LEDGER_ENTRY_DATA, entry.xdr),
        last_modified_ledger_seq=entry.last_modified_ledger_seq,
        live_until_ledger_seq=entry.live_until_ledger_seq,
    )


def parse_raw_ledger_entries(
    raw: Union[RawGetLedgerEntriesResponse, Mapping[str, Any]],
) -> GetLedgerEntriesResponse:
    """
    Decode every entry. One malformed entry fails the whole response with
    :class:`MalformedLedgerEntry`; no partial result is returned.
    """
    r = as_raw(RawGetLedgerEntriesResponse, raw)
    # rows as received, so a malformed one is reported exactly as sent
    rows = raw.get("entries") if isinstance(raw, Mapping) else r.entries
    entries = tuple(parse_raw_ledger_entry(e) for e in (rows or ()))
    log.debug("getLedgerEntries: decoded %d entries at ledger %d", len(entries), r.latest_ledger)
    return GetLedgerEntriesResponse(latest_ledger=r.latest_ledger, entries=entries)


__all__ = ["parse_raw_ledger_entry", "parse_raw_ledger_entries"]
