import pytest
from pydantic import ValidationError

from soroban_rpc_parsers.models.raw import (LedgerEntryChangeType,
                                            RawEventResponse,
                                            RawLedgerEntryChange,
                                            RawSendTransactionResponse, as_raw)


def test_wire_aliases_round_trip():
    raw = {
        "status": "PENDING",
        "hash": "ab" * 32,
        "latestLedger": 7,
        "latestLedgerCloseTime": "8",
        "someFutureField": True,
    }
    model = RawSendTransactionResponse.model_validate(raw)
    assert model.latest_ledger == 7
    dumped = model.model_dump(by_alias=True, exclude_none=True)
    assert dumped == {**{k: v for k, v in raw.items() if k != "someFutureField"},
                      "latestLedgerCloseTime": 8}


def test_raw_models_are_frozen():
    model = RawSendTransactionResponse.model_validate(
        {"status": "PENDING", "hash": "x", "latestLedger": 1, "latestLedgerCloseTime": 1}
    )
    with pytest.raises(ValidationError):
        model.hash = "y"


def test_unknown_status_rejected():
    with pytest.raises(ValidationError):
        RawSendTransactionResponse.model_validate(
            {"status": "WHATEVER", "hash": "x", "latestLedger": 1, "latestLedgerCloseTime": 1}
        )


@pytest.mark.parametrize(
    "code,expected",
    [(0, LedgerEntryChangeType.CREATED), (1, LedgerEntryChangeType.UPDATED),
     (2, LedgerEntryChangeType.DELETED), ("updated", LedgerEntryChangeType.UPDATED)],
)
def test_change_type_accepts_codes_and_names(code, expected):
    change = RawLedgerEntryChange.model_validate({"type": code, "key": "AAAA"})
    assert change.type is expected


def test_change_type_rejects_unknown_code():
    with pytest.raises(ValidationError):
        RawLedgerEntryChange.model_validate({"type": 5, "key": "AAAA"})


def test_event_contract_id_defaults_to_empty_sentinel():
    evt = RawEventResponse.model_validate(
        {"id": "1", "type": "system", "ledger": 1, "ledgerClosedAt": "t",
         "inSuccessfulContractCall": True, "value": "AAAAAQ=="}
    )
    assert evt.contract_id == ""
    assert evt.topic == []


def test_as_raw_rejects_other_types():
    with pytest.raises(TypeError):
        as_raw(RawEventResponse, 42)
