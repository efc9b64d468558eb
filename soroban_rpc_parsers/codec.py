"""
soroban_rpc_parsers.codec
=========================

Role-keyed XDR decoding on top of ``stellar_sdk.xdr``.

Every binary field the RPC returns is base64 XDR, and the schema to decode it
with is fixed by the field's role (a ``resultXdr`` is always a
``TransactionResult``, a ``topic`` entry is always an ``SCVal``, ...). The
parsers name the role and this module picks the schema:

    >>> from soroban_rpc_parsers.codec import XdrRole, decode
    >>> decode(XdrRole.SC_VAL, "AAAAAQ==")    # doctest: +SKIP
    <SCVal [type=SCValType.SCV_VOID]>

Nothing here catches codec errors; a payload that does not decode raises
whatever ``stellar_sdk`` raises.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Type, Union

from stellar_sdk import xdr as stellar_xdr


class XdrRole(str, Enum):
    TRANSACTION_ENVELOPE = "TransactionEnvelope"
    TRANSACTION_RESULT = "TransactionResult"
    TRANSACTION_META = "TransactionMeta"
    DIAGNOSTIC_EVENT = "DiagnosticEvent"
    LEDGER_KEY = "LedgerKey"
    LEDGER_ENTRY = "LedgerEntry"
    LEDGER_ENTRY_DATA = "LedgerEntryData"
    SC_VAL = "SCVal"
    AUTHORIZATION_ENTRY = "SorobanAuthorizationEntry"
    TRANSACTION_DATA = "SorobanTransactionData"


_SCHEMAS: Dict[XdrRole, Type[Any]] = {
    XdrRole.TRANSACTION_ENVELOPE: stellar_xdr.TransactionEnvelope,
    XdrRole.TRANSACTION_RESULT: stellar_xdr.TransactionResult,
    XdrRole.TRANSACTION_META: stellar_xdr.TransactionMeta,
    XdrRole.DIAGNOSTIC_EVENT: stellar_xdr.DiagnosticEvent,
    XdrRole.LEDGER_KEY: stellar_xdr.LedgerKey,
    XdrRole.LEDGER_ENTRY: stellar_xdr.LedgerEntry,
    XdrRole.LEDGER_ENTRY_DATA: stellar_xdr.LedgerEntryData,
    XdrRole.SC_VAL: stellar_xdr.SCVal,
    XdrRole.AUTHORIZATION_ENTRY: stellar_xdr.SorobanAuthorizationEntry,
    XdrRole.TRANSACTION_DATA: stellar_xdr.SorobanTransactionData,
}


def schema_for(role: Union[XdrRole, str]) -> Type[Any]:
    """Return the ``stellar_sdk.xdr`` class used for ``role``."""
    return _SCHEMAS[XdrRole(role)]


def decode(role: Union[XdrRole, str], data: str) -> Any:
    """Decode one base64 XDR string with the schema for ``role``."""
    return schema_for(role).from_xdr(data)


def decode_optional(role: Union[XdrRole, str], data: Optional[str]) -> Optional[Any]:
    """
    Like :func:`decode`, but ``None`` and ``""`` mean "not provided" and map
    to ``None`` instead of being fed to the codec.
    """
    if not data:
        return None
    return decode(role, data)


def decode_many(role: Union[XdrRole, str], items: Iterable[str]) -> Tuple[Any, ...]:
    """Decode each string in order; the result is a tuple."""
    cls = schema_for(role)
    return tuple(cls.from_xdr(item) for item in items)


def void_scval() -> stellar_xdr.SCVal:
    """The canonical ``SCV_VOID`` value used when a return value is missing."""
    return stellar_xdr.SCVal(type=stellar_xdr.SCValType.SCV_VOID)


__all__ = [
    "XdrRole",
    "schema_for",
    "decode",
    "decode_optional",
    "decode_many",
    "void_scval",
]
