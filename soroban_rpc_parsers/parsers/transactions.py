"""
getTransaction / getTransactions response parsing.

Both endpoints return the same transaction fields (envelope, result and
result-meta as base64 XDR, plus ledger scalars), wrapped differently:
``getTransaction`` adds the node's ledger window and may report NOT_FOUND,
``getTransactions`` returns a page of rows that each carry their own status.
:func:`parse_transaction_info` decodes the shared fields; the wrappers attach
status and envelope data.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from stellar_sdk import xdr as stellar_xdr

from ..codec import XdrRole, decode, decode_many
from ..models.parsed import (GetFailedTransactionResponse,
                             GetMissingTransactionResponse,
                             GetSuccessfulTransactionResponse,
                             GetTransactionResponse, GetTransactionsResponse,
                             TransactionInfo, TransactionInfoFields)
from ..models.raw import (RawGetTransactionResponse,
                          RawGetTransactionsResponse, RawTransactionInfo,
                          as_raw)

log = logging.getLogger(__name__)

# TransactionMeta arm that carries Soroban invocation metadata
_META_V3 = 3


def _return_value(meta: stellar_xdr.TransactionMeta) -> Optional[stellar_xdr.SCVal]:
    if meta.v != _META_V3 or meta.v3 is None:
        return None
    soroban_meta = meta.v3.soroban_meta
    if soroban_meta is None:
        return None
    return soroban_meta.return_value


def parse_transaction_info(
    raw: Union[RawTransactionInfo, RawGetTransactionResponse],
) -> TransactionInfoFields:
    """
    Decode the transaction fields common to both endpoints. ``status`` is
    left to the caller.
    """
    # meta first: the return value comes out of it
    meta = decode(XdrRole.TRANSACTION_META, raw.result_meta_xdr)

    events = None
    if raw.diagnostic_events_xdr is not None:
        events = decode_many(XdrRole.DIAGNOSTIC_EVENT, raw.diagnostic_events_xdr)

    return TransactionInfoFields(
        ledger=raw.ledger,
        created_at=raw.created_at,
        application_order=raw.application_order,
        fee_bump=raw.fee_bump,
        envelope_xdr=decode(XdrRole.TRANSACTION_ENVELOPE, raw.envelope_xdr),
        result_xdr=decode(XdrRole.TRANSACTION_RESULT, raw.result_xdr),
        result_meta_xdr=meta,
        return_value=_return_value(meta),
        diagnostic_events_xdr=events,
    )


def parse_raw_transactions(
    raw: Union[RawTransactionInfo, Mapping[str, Any]],
) -> TransactionInfo:
    """Parse one row of a ``getTransactions`` page."""
    r = as_raw(RawTransactionInfo, raw)
    info = parse_transaction_info(r)
    return TransactionInfo(status=r.status, tx_hash=r.tx_hash, **dict(info))


def parse_raw_transactions_page(
    raw: Union[RawGetTransactionsResponse, Mapping[str, Any]],
) -> GetTransactionsResponse:
    r = as_raw(RawGetTransactionsResponse, raw)
    txs = tuple(parse_raw_transactions(row) for row in (r.transactions or ()))
    log.debug("getTransactions: decoded %d transactions (cursor=%s)", len(txs), r.cursor)
    return GetTransactionsResponse(
        transactions=txs,
        latest_ledger=r.latest_ledger,
        latest_ledger_close_timestamp=r.latest_ledger_close_timestamp,
        oldest_ledger=r.oldest_ledger,
        oldest_ledger_close_timestamp=r.oldest_ledger_close_timestamp,
        cursor=r.cursor,
    )


def parse_raw_transaction(
    raw: Union[RawGetTransactionResponse, Mapping[str, Any]],
) -> GetTransactionResponse:
    """
    Parse a ``getTransaction`` response into its NOT_FOUND, SUCCESS or FAILED
    variant. A missing transaction carries only the ledger window.
    """
    r = as_raw(RawGetTransactionResponse, raw)
    window = dict(
        latest_ledger=r.latest_ledger,
        latest_ledger_close_time=r.latest_ledger_close_time,
        oldest_ledger=r.oldest_ledger,
        oldest_ledger_close_time=r.oldest_ledger_close_time,
        tx_hash=r.tx_hash,
    )
    if r.status == "NOT_FOUND":
        return GetMissingTransactionResponse(**window)

    info = dict(parse_transaction_info(r))
    if r.status == "SUCCESS":
        return GetSuccessfulTransactionResponse(**window, **info)
    return GetFailedTransactionResponse(**window, **info)


__all__ = [
    "parse_transaction_info",
    "parse_raw_transactions",
    "parse_raw_transactions_page",
    "parse_raw_transaction",
]
