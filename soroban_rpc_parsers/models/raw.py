"""
Raw RPC models: the JSON shapes returned by a Soroban RPC node, before any
XDR is decoded.

Field names on the wire are part of the compatibility surface; every attribute
carries an alias spelling the exact camelCase key. Binary payloads stay as
base64 strings here. Unknown keys are ignored so newer nodes can add fields
without breaking older clients.

Sentinels kept as received:
- ``contractId == ""`` on an event means "not scoped to a contract".
- ``restorePreamble.transactionData == ""`` means "no restore needed".
- a missing key (``None`` here) means "not provided".
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Literal, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SendTransactionStatus = Literal["PENDING", "DUPLICATE", "TRY_AGAIN_LATER", "ERROR"]
GetTransactionStatus = Literal["SUCCESS", "NOT_FOUND", "FAILED"]
TransactionInfoStatus = Literal["SUCCESS", "FAILED"]
EventType = Literal["contract", "system", "diagnostic"]


class LedgerEntryChangeType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


# Older nodes send the change type as its XDR-style ordinal.
_CHANGE_TYPE_CODES = {
    0: LedgerEntryChangeType.CREATED,
    1: LedgerEntryChangeType.UPDATED,
    2: LedgerEntryChangeType.DELETED,
}


class _RawModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


# -----------------------------------------------------------------------------
# sendTransaction
# -----------------------------------------------------------------------------


class RawSendTransactionResponse(_RawModel):
    status: SendTransactionStatus = Field(alias="status")
    hash: str = Field(alias="hash")
    latest_ledger: int = Field(alias="latestLedger")
    latest_ledger_close_time: int = Field(alias="latestLedgerCloseTime")
    error_result_xdr: Optional[str] = Field(default=None, alias="errorResultXdr")
    diagnostic_events_xdr: Optional[List[str]] = Field(
        default=None, alias="diagnosticEventsXdr"
    )


# -----------------------------------------------------------------------------
# getTransaction / getTransactions
# -----------------------------------------------------------------------------


class RawTransactionInfo(_RawModel):
    """
    One transaction as listed by ``getTransactions``.
    """

    status: TransactionInfoStatus = Field(alias="status")
    ledger: int = Field(alias="ledger")
    created_at: int = Field(alias="createdAt")
    application_order: int = Field(alias="applicationOrder")
    fee_bump: bool = Field(alias="feeBump")
    envelope_xdr: str = Field(alias="envelopeXdr")
    result_xdr: str = Field(alias="resultXdr")
    result_meta_xdr: str = Field(alias="resultMetaXdr")
    diagnostic_events_xdr: Optional[List[str]] = Field(
        default=None, alias="diagnosticEventsXdr"
    )
    tx_hash: Optional[str] = Field(default=None, alias="txHash")


class RawGetTransactionResponse(_RawModel):
    """
    ``getTransaction`` result. The ledger window is always present; the
    transaction fields only when the status is not ``NOT_FOUND``.
    """

    status: GetTransactionStatus = Field(alias="status")
    latest_ledger: int = Field(alias="latestLedger")
    latest_ledger_close_time: int = Field(alias="latestLedgerCloseTime")
    oldest_ledger: int = Field(alias="oldestLedger")
    oldest_ledger_close_time: int = Field(alias="oldestLedgerCloseTime")
    tx_hash: Optional[str] = Field(default=None, alias="txHash")

    ledger: Optional[int] = Field(default=None, alias="ledger")
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    application_order: Optional[int] = Field(default=None, alias="applicationOrder")
    fee_bump: Optional[bool] = Field(default=None, alias="feeBump")
    envelope_xdr: Optional[str] = Field(default=None, alias="envelopeXdr")
    result_xdr: Optional[str] = Field(default=None, alias="resultXdr")
    result_meta_xdr: Optional[str] = Field(default=None, alias="resultMetaXdr")
    diagnostic_events_xdr: Optional[List[str]] = Field(
        default=None, alias="diagnosticEventsXdr"
    )

    @model_validator(mode="after")
    def _found_fields_present(self) -> "RawGetTransactionResponse":
        if self.status == "NOT_FOUND":
            return self
        missing = [
            name
            for name in (
                "ledger",
                "created_at",
                "application_order",
                "fee_bump",
                "envelope_xdr",
                "result_xdr",
                "result_meta_xdr",
            )
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(
                f"status {self.status} requires transaction fields, missing: {missing}"
            )
        return self


class RawGetTransactionsResponse(_RawModel):
    transactions: Optional[List[RawTransactionInfo]] = Field(
        default=None, alias="transactions"
    )
    latest_ledger: int = Field(alias="latestLedger")
    latest_ledger_close_timestamp: int = Field(alias="latestLedgerCloseTimestamp")
    oldest_ledger: int = Field(alias="oldestLedger")
    oldest_ledger_close_timestamp: int = Field(alias="oldestLedgerCloseTimestamp")
    cursor: Optional[str] = Field(default=None, alias="cursor")


# -----------------------------------------------------------------------------
# getEvents
# -----------------------------------------------------------------------------


class RawEventResponse(_RawModel):
    id: str = Field(alias="id")
    type: EventType = Field(alias="type")
    ledger: int = Field(alias="ledger")
    ledger_closed_at: str = Field(alias="ledgerClosedAt")
    paging_token: Optional[str] = Field(default=None, alias="pagingToken")
    in_successful_contract_call: bool = Field(alias="inSuccessfulContractCall")
    tx_hash: Optional[str] = Field(default=None, alias="txHash")
    contract_id: str = Field(default="", alias="contractId")
    topic: List[str] = Field(default_factory=list, alias="topic")
    value: str = Field(alias="value")


class RawGetEventsResponse(_RawModel):
    latest_ledger: int = Field(alias="latestLedger")
    events: Optional[List[RawEventResponse]] = Field(default=None, alias="events")
    cursor: Optional[str] = Field(default=None, alias="cursor")


# -----------------------------------------------------------------------------
# getLedgerEntries
# -----------------------------------------------------------------------------


class RawLedgerEntryResult(_RawModel):
    """
    ``key`` and ``xdr`` are required by the protocol but optional here: the
    ledger-entries parser reports their absence itself, with the entry attached.
    """

    key: Optional[str] = Field(default=None, alias="key")
    xdr: Optional[str] = Field(default=None, alias="xdr")
    last_modified_ledger_seq: Optional[int] = Field(
        default=None, alias="lastModifiedLedgerSeq"
    )
    live_until_ledger_seq: Optional[int] = Field(
        default=None, alias="liveUntilLedgerSeq"
    )


class RawGetLedgerEntriesResponse(_RawModel):
    latest_ledger: int = Field(alias="latestLedger")
    entries: Optional[List[RawLedgerEntryResult]] = Field(default=None, alias="entries")


# -----------------------------------------------------------------------------
# simulateTransaction
# -----------------------------------------------------------------------------


class SimulationCost(_RawModel):
    """
    Resource usage reported by a simulation. Shared by raw and parsed shapes
    since it carries no XDR.
    """

    cpu_insns: int = Field(alias="cpuInsns")
    mem_bytes: int = Field(alias="memBytes")


class RawSimulateHostFunctionResult(_RawModel):
    auth: Optional[List[str]] = Field(default=None, alias="auth")
    xdr: Optional[str] = Field(default=None, alias="xdr")


class RawRestorePreamble(_RawModel):
    min_resource_fee: int = Field(alias="minResourceFee")
    transaction_data: str = Field(alias="transactionData")


class RawLedgerEntryChange(_RawModel):
    type: LedgerEntryChangeType = Field(alias="type")
    key: str = Field(alias="key")
    before: Optional[str] = Field(default=None, alias="before")
    after: Optional[str] = Field(default=None, alias="after")

    @field_validator("type", mode="before")
    @classmethod
    def _type_from_code(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            try:
                return _CHANGE_TYPE_CODES[v]
            except KeyError:
                raise ValueError(f"unknown ledger entry change type: {v}") from None
        return v


class RawSimulateTransactionResponse(_RawModel):
    id: str = Field(alias="id")
    latest_ledger: int = Field(alias="latestLedger")
    error: Optional[str] = Field(default=None, alias="error")
    transaction_data: Optional[str] = Field(default=None, alias="transactionData")
    events: Optional[List[str]] = Field(default=None, alias="events")
    min_resource_fee: Optional[int] = Field(default=None, alias="minResourceFee")
    results: Optional[List[RawSimulateHostFunctionResult]] = Field(
        default=None, alias="results"
    )
    cost: Optional[SimulationCost] = Field(default=None, alias="cost")
    restore_preamble: Optional[RawRestorePreamble] = Field(
        default=None, alias="restorePreamble"
    )
    state_changes: Optional[List[RawLedgerEntryChange]] = Field(
        default=None, alias="stateChanges"
    )


# -----------------------------------------------------------------------------
# Helper: accept either a model or the JSON mapping the transport decoded
# -----------------------------------------------------------------------------

M = TypeVar("M", bound=BaseModel)


def as_raw(model: Type[M], raw: Union[M, Mapping[str, Any]]) -> M:
    """
    Return ``raw`` if it already is a ``model``; validate it into one if it is
    a mapping. Validation errors propagate as ``pydantic.ValidationError``.
    """
    if isinstance(raw, model):
        return raw
    if isinstance(raw, Mapping):
        return model.model_validate(raw)
    raise TypeError(f"expected {model.__name__} or a mapping, got {type(raw).__name__}")


__all__ = [
    "SendTransactionStatus",
    "GetTransactionStatus",
    "TransactionInfoStatus",
    "EventType",
    "LedgerEntryChangeType",
    "RawSendTransactionResponse",
    "RawTransactionInfo",
    "RawGetTransactionResponse",
    "RawGetTransactionsResponse",
    "RawEventResponse",
    "RawGetEventsResponse",
    "RawLedgerEntryResult",
    "RawGetLedgerEntriesResponse",
    "SimulationCost",
    "RawSimulateHostFunctionResult",
    "RawRestorePreamble",
    "RawLedgerEntryChange",
    "RawSimulateTransactionResponse",
    "as_raw",
]
