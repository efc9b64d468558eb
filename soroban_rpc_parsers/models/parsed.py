"""
Parsed RPC models: the typed, decoded shapes the parsers return.

Every model is frozen and its sequences are tuples, so a parsed response is a
value: built once from one raw input and never mutated. XDR payloads are
``stellar_sdk.xdr`` objects. Optional fields are ``None`` when the node did
not provide them; an empty tuple always means "provided, but empty".

Each response kind is a small sum type:

- sendTransaction:     SendTransactionResponse | SendTransactionErrorResponse
- getTransaction:      GetMissingTransactionResponse | GetSuccessfulTransactionResponse
                       | GetFailedTransactionResponse
- simulateTransaction: SimulateTransactionErrorResponse
                       | SimulateTransactionSuccessResponse
                       | SimulateTransactionRestoreResponse

Simulation variants carry ``parsed: Literal[True]``; raw simulation models
never do, which is how the simulation parser tells the two apart.
"""

from __future__ import annotations

from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict
from stellar_sdk import Address
from stellar_sdk import xdr as stellar_xdr

from .raw import (EventType, LedgerEntryChangeType, SendTransactionStatus,
                  SimulationCost, TransactionInfoStatus)


class _ParsedModel(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# -----------------------------------------------------------------------------
# sendTransaction
# -----------------------------------------------------------------------------


class BaseSendTransactionResponse(_ParsedModel):
    status: SendTransactionStatus
    hash: str
    latest_ledger: int
    latest_ledger_close_time: int


class SendTransactionResponse(BaseSendTransactionResponse):
    """Submission accepted (or deduplicated / deferred) by the node."""


class SendTransactionErrorResponse(BaseSendTransactionResponse):
    """Submission rejected; ``error_result`` says why."""

    error_result: stellar_xdr.TransactionResult
    diagnostic_events: Optional[Tuple[stellar_xdr.DiagnosticEvent, ...]] = None


AnySendTransactionResponse = Union[SendTransactionResponse, SendTransactionErrorResponse]


# -----------------------------------------------------------------------------
# getTransaction / getTransactions
# -----------------------------------------------------------------------------


class TransactionInfoFields(_ParsedModel):
    """
    Decoded transaction fields shared by ``getTransaction`` and
    ``getTransactions``. Status is attached by the caller.
    """

    ledger: int
    created_at: int
    application_order: int
    fee_bump: bool
    envelope_xdr: stellar_xdr.TransactionEnvelope
    result_xdr: stellar_xdr.TransactionResult
    result_meta_xdr: stellar_xdr.TransactionMeta
    return_value: Optional[stellar_xdr.SCVal] = None
    diagnostic_events_xdr: Optional[Tuple[stellar_xdr.DiagnosticEvent, ...]] = None


class TransactionInfo(TransactionInfoFields):
    status: TransactionInfoStatus
    tx_hash: Optional[str] = None


class GetTransactionsResponse(_ParsedModel):
    transactions: Tuple[TransactionInfo, ...] = ()
    latest_ledger: int
    latest_ledger_close_timestamp: int
    oldest_ledger: int
    oldest_ledger_close_timestamp: int
    cursor: Optional[str] = None


class _GetTransactionWindow(_ParsedModel):
    latest_ledger: int
    latest_ledger_close_time: int
    oldest_ledger: int
    oldest_ledger_close_time: int
    tx_hash: Optional[str] = None


class GetMissingTransactionResponse(_GetTransactionWindow):
    status: Literal["NOT_FOUND"] = "NOT_FOUND"


class GetSuccessfulTransactionResponse(_GetTransactionWindow, TransactionInfoFields):
    status: Literal["SUCCESS"] = "SUCCESS"


class GetFailedTransactionResponse(_GetTransactionWindow, TransactionInfoFields):
    status: Literal["FAILED"] = "FAILED"


GetTransactionResponse = Union[
    GetMissingTransactionResponse,
    GetSuccessfulTransactionResponse,
    GetFailedTransactionResponse,
]


# -----------------------------------------------------------------------------
# getEvents
# -----------------------------------------------------------------------------


class EventResponse(_ParsedModel):
    id: str
    type: EventType
    ledger: int
    ledger_closed_at: str
    paging_token: Optional[str] = None
    in_successful_contract_call: bool
    tx_hash: Optional[str] = None
    # None when the event is not scoped to a contract
    contract_id: Optional[Address] = None
    topic: Tuple[stellar_xdr.SCVal, ...] = ()
    value: stellar_xdr.SCVal


class GetEventsResponse(_ParsedModel):
    latest_ledger: int
    events: Tuple[EventResponse, ...] = ()
    cursor: Optional[str] = None


# -----------------------------------------------------------------------------
# getLedgerEntries
# -----------------------------------------------------------------------------


class LedgerEntryResult(_ParsedModel):
    key: stellar_xdr.LedgerKey
    val: stellar_xdr.LedgerEntryData
    last_modified_ledger_seq: Optional[int] = None
    live_until_ledger_seq: Optional[int] = None


class GetLedgerEntriesResponse(_ParsedModel):
    latest_ledger: int
    entries: Tuple[LedgerEntryResult, ...] = ()


# -----------------------------------------------------------------------------
# simulateTransaction
# -----------------------------------------------------------------------------


class SimulateHostFunctionResult(_ParsedModel):
    auth: Tuple[stellar_xdr.SorobanAuthorizationEntry, ...] = ()
    retval: stellar_xdr.SCVal


class LedgerEntryChange(_ParsedModel):
    """
    One state change a simulated invocation would make. ``before`` is None
    for a created entry, ``after`` is None for a deleted one.
    """

    type: LedgerEntryChangeType
    key: stellar_xdr.LedgerKey
    before: Optional[stellar_xdr.LedgerEntry] = None
    after: Optional[stellar_xdr.LedgerEntry] = None


class RestorePreamble(_ParsedModel):
    min_resource_fee: int
    transaction_data: stellar_xdr.SorobanTransactionData


class BaseSimulateTransactionResponse(_ParsedModel):
    parsed: Literal[True] = True
    id: str
    latest_ledger: int
    events: Tuple[stellar_xdr.DiagnosticEvent, ...] = ()


class SimulateTransactionErrorResponse(BaseSimulateTransactionResponse):
    error: str


class SimulateTransactionSuccessResponse(BaseSimulateTransactionResponse):
    transaction_data: stellar_xdr.SorobanTransactionData
    min_resource_fee: int
    cost: Optional[SimulationCost] = None
    result: Optional[SimulateHostFunctionResult] = None
    state_changes: Optional[Tuple[LedgerEntryChange, ...]] = None


class SimulateTransactionRestoreResponse(SimulateTransactionSuccessResponse):
    """Success, but expired ledger state must be restored first."""

    restore_preamble: RestorePreamble


SimulateTransactionResponse = Union[
    SimulateTransactionErrorResponse,
    SimulateTransactionSuccessResponse,
    SimulateTransactionRestoreResponse,
]


__all__ = [
    "BaseSendTransactionResponse",
    "SendTransactionResponse",
    "SendTransactionErrorResponse",
    "AnySendTransactionResponse",
    "TransactionInfoFields",
    "TransactionInfo",
    "GetTransactionsResponse",
    "GetMissingTransactionResponse",
    "GetSuccessfulTransactionResponse",
    "GetFailedTransactionResponse",
    "GetTransactionResponse",
    "EventResponse",
    "GetEventsResponse",
    "LedgerEntryResult",
    "GetLedgerEntriesResponse",
    "SimulateHostFunctionResult",
    "LedgerEntryChange",
    "RestorePreamble",
    "BaseSimulateTransactionResponse",
    "SimulateTransactionErrorResponse",
    "SimulateTransactionSuccessResponse",
    "SimulateTransactionRestoreResponse",
    "SimulateTransactionResponse",
]
