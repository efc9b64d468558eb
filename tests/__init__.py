"""
Test utilities: small, valid XDR values built with stellar_sdk.

Usage in tests:
    from tests import scval_b64, diagnostic_event, ttl_ledger_key

    def test_topic():
        out = decode(XdrRole.SC_VAL, scval_b64(scval.to_symbol("mint")))
        assert out == scval.to_symbol("mint")

Every builder returns the XDR object; ``.to_xdr()`` gives the base64 wire form.
"""
from __future__ import annotations

import typing as t

from stellar_sdk import (Account, Address, Keypair, Network, SorobanDataBuilder,
                         StrKey, TransactionBuilder, scval)
from stellar_sdk import xdr as stellar_xdr

CONTRACT_ID = StrKey.encode_contract(b"\x07" * 32)


def scval_b64(value: stellar_xdr.SCVal) -> str:
    return value.to_xdr()


def diagnostic_event(topic: str = "fn_call", data: int = 1) -> stellar_xdr.DiagnosticEvent:
    return stellar_xdr.DiagnosticEvent(
        in_successful_contract_call=True,
        event=stellar_xdr.ContractEvent(
            ext=stellar_xdr.ExtensionPoint(v=0),
            contract_id=None,
            type=stellar_xdr.ContractEventType.DIAGNOSTIC,
            body=stellar_xdr.ContractEventBody(
                v=0,
                v0=stellar_xdr.ContractEventV0(
                    topics=[scval.to_symbol(topic)],
                    data=scval.to_int32(data),
                ),
            ),
        ),
    )


def ttl_ledger_key(seed: int = 1) -> stellar_xdr.LedgerKey:
    return stellar_xdr.LedgerKey(
        type=stellar_xdr.LedgerEntryType.TTL,
        ttl=stellar_xdr.LedgerKeyTtl(key_hash=stellar_xdr.Hash(bytes([seed]) * 32)),
    )


def ttl_ledger_entry_data(seed: int = 1, live_until: int = 500) -> stellar_xdr.LedgerEntryData:
    return stellar_xdr.LedgerEntryData(
        type=stellar_xdr.LedgerEntryType.TTL,
        ttl=stellar_xdr.TTLEntry(
            key_hash=stellar_xdr.Hash(bytes([seed]) * 32),
            live_until_ledger_seq=stellar_xdr.Uint32(live_until),
        ),
    )


def ttl_ledger_entry(
    seed: int = 1, live_until: int = 500, last_modified: int = 10
) -> stellar_xdr.LedgerEntry:
    return stellar_xdr.LedgerEntry(
        last_modified_ledger_seq=stellar_xdr.Uint32(last_modified),
        data=ttl_ledger_entry_data(seed, live_until),
        ext=stellar_xdr.LedgerEntryExt(v=0),
    )


def transaction_result(fee: int = 100) -> stellar_xdr.TransactionResult:
    return stellar_xdr.TransactionResult(
        fee_charged=stellar_xdr.Int64(fee),
        result=stellar_xdr.TransactionResultResult(
            code=stellar_xdr.TransactionResultCode.txBAD_SEQ
        ),
        ext=stellar_xdr.TransactionResultExt(v=0),
    )


def transaction_envelope() -> stellar_xdr.TransactionEnvelope:
    source = Account(Keypair.random().public_key, 1)
    tx = (
        TransactionBuilder(
            source_account=source,
            network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE,
            base_fee=100,
        )
        .append_bump_sequence_op(bump_to=5)
        .set_timeout(30)
        .build()
    )
    return tx.to_xdr_object()


def _no_changes() -> stellar_xdr.LedgerEntryChanges:
    return stellar_xdr.LedgerEntryChanges(ledger_entry_changes=[])


def transaction_meta_v3(
    return_value: t.Optional[stellar_xdr.SCVal] = None,
) -> stellar_xdr.TransactionMeta:
    """V3 meta; with ``return_value`` the Soroban sub-record is present."""
    soroban_meta = None
    if return_value is not None:
        soroban_meta = stellar_xdr.SorobanTransactionMeta(
            ext=stellar_xdr.SorobanTransactionMetaExt(v=0),
            events=[],
            return_value=return_value,
            diagnostic_events=[],
        )
    return stellar_xdr.TransactionMeta(
        v=3,
        v3=stellar_xdr.TransactionMetaV3(
            ext=stellar_xdr.ExtensionPoint(v=0),
            tx_changes_before=_no_changes(),
            operations=[],
            tx_changes_after=_no_changes(),
            soroban_meta=soroban_meta,
        ),
    )


def transaction_meta_v2() -> stellar_xdr.TransactionMeta:
    return stellar_xdr.TransactionMeta(
        v=2,
        v2=stellar_xdr.TransactionMetaV2(
            tx_changes_before=_no_changes(),
            operations=[],
            tx_changes_after=_no_changes(),
        ),
    )


def soroban_data(resource_fee: int = 100) -> stellar_xdr.SorobanTransactionData:
    return SorobanDataBuilder().set_resource_fee(resource_fee).build()


def auth_entry(function_name: str = "transfer") -> stellar_xdr.SorobanAuthorizationEntry:
    return stellar_xdr.SorobanAuthorizationEntry(
        credentials=stellar_xdr.SorobanCredentials(
            type=stellar_xdr.SorobanCredentialsType.SOROBAN_CREDENTIALS_SOURCE_ACCOUNT
        ),
        root_invocation=stellar_xdr.SorobanAuthorizedInvocation(
            function=stellar_xdr.SorobanAuthorizedFunction(
                type=stellar_xdr.SorobanAuthorizedFunctionType.SOROBAN_AUTHORIZED_FUNCTION_TYPE_CONTRACT_FN,
                contract_fn=stellar_xdr.InvokeContractArgs(
                    contract_address=Address(CONTRACT_ID).to_xdr_sc_address(),
                    function_name=stellar_xdr.SCSymbol(function_name.encode()),
                    args=[],
                ),
            ),
            sub_invocations=[],
        ),
    )


def raw_transaction_fields(
    meta: t.Optional[stellar_xdr.TransactionMeta] = None,
    envelope: t.Optional[stellar_xdr.TransactionEnvelope] = None,
    **extra: t.Any,
) -> dict:
    """The camelCase transaction fields shared by getTransaction(s) rows."""
    fields = {
        "ledger": 1234,
        "createdAt": 1700000000,
        "applicationOrder": 1,
        "feeBump": False,
        "envelopeXdr": (envelope or transaction_envelope()).to_xdr(),
        "resultXdr": transaction_result().to_xdr(),
        "resultMetaXdr": (meta or transaction_meta_v2()).to_xdr(),
    }
    fields.update(extra)
    return fields


__all__ = [
    "CONTRACT_ID",
    "scval_b64",
    "diagnostic_event",
    "ttl_ledger_key",
    "ttl_ledger_entry_data",
    "ttl_ledger_entry",
    "transaction_result",
    "transaction_envelope",
    "transaction_meta_v3",
    "transaction_meta_v2",
    "soroban_data",
    "auth_entry",
    "raw_transaction_fields",
]
