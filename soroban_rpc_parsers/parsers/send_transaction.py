"""
sendTransaction response parsing.

The node answers a submission with a status and, when it rejects the
transaction, a base64 ``TransactionResult`` plus optional diagnostic events.
The raw ``errorResultXdr`` / ``diagnosticEventsXdr`` keys are replaced by their
decoded forms, never kept alongside them.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ..codec import XdrRole, decode, decode_many
from ..models.parsed import (AnySendTransactionResponse,
                             SendTransactionErrorResponse,
                             SendTransactionResponse)
from ..models.raw import RawSendTransactionResponse, as_raw

log = logging.getLogger(__name__)


def parse_raw_send_transaction(
    raw: Union[RawSendTransactionResponse, Mapping[str, Any]],
) -> AnySendTransactionResponse:
    r = as_raw(RawSendTransactionResponse, raw)

    if not r.error_result_xdr:
        return SendTransactionResponse(
            status=r.status,
            hash=r.hash,
            latest_ledger=r.latest_ledger,
            latest_ledger_close_time=r.latest_ledger_close_time,
        )

    events = None
    if r.diagnostic_events_xdr:
        events = decode_many(XdrRole.DIAGNOSTIC_EVENT, r.diagnostic_events_xdr)

    log.debug(
        "sendTransaction %s rejected (status=%s, diagnostic_events=%d)",
        r.hash,
        r.status,
        len(events or ()),
    )
    return SendTransactionErrorResponse(
        status=r.status,
        hash=r.hash,
        latest_ledger=r.latest_ledger,
        latest_ledger_close_time=r.latest_ledger_close_time,
        error_result=decode(XdrRole.TRANSACTION_RESULT, r.error_result_xdr),
        diagnostic_events=events,
    )


__all__ = ["parse_raw_send_transaction"]
