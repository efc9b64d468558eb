"""
getEvents response parsing.

Topics and values are ``SCVal`` XDR. ``contractId`` is a strkey, and the node
sends ``""`` for events that are not scoped to a contract (system and some
diagnostic events); that sentinel becomes ``contract_id=None`` rather than
being handed to ``Address``.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from stellar_sdk import Address

from ..codec import XdrRole, decode, decode_many
from ..models.parsed import EventResponse, GetEventsResponse
from ..models.raw import RawEventResponse, RawGetEventsResponse, as_raw

log = logging.getLogger(__name__)


def parse_raw_event(raw: Union[RawEventResponse, Mapping[str, Any]]) -> EventResponse:
    evt = as_raw(RawEventResponse, raw)
    return EventResponse(
        id=evt.id,
        type=evt.type,
        ledger=evt.ledger,
        ledger_closed_at=evt.ledger_closed_at,
        paging_token=evt.paging_token,
        in_successful_contract_call=evt.in_successful_contract_call,
        tx_hash=evt.tx_hash,
        contract_id=Address(evt.contract_id) if evt.contract_id != "" else None,
        topic=decode_many(XdrRole.SC_VAL, evt.topic),
        value=decode(XdrRole.SC_VAL, evt.value),
    )


def parse_raw_events(raw: Union[RawGetEventsResponse, Mapping[str, Any]]) -> GetEventsResponse:
    r = as_raw(RawGetEventsResponse, raw)
    events = tuple(parse_raw_event(evt) for evt in (r.events or ()))
    log.debug("getEvents: decoded %d events up to ledger %d", len(events), r.latest_ledger)
    return GetEventsResponse(latest_ledger=r.latest_ledger, events=events, cursor=r.cursor)


__all__ = ["parse_raw_event", "parse_raw_events"]
