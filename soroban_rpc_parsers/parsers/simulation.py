"""
simulateTransaction response parsing.

A simulation comes back in one of three shapes:

1) error:    ``{"id", "latestLedger", "events"?, "error": "..."}``
2) success:  transaction data, resource fee, cost, an optional 0-or-1 element
             ``results`` list and optional ``stateChanges``
3) success with a restore hint: as (2) plus a ``restorePreamble`` whose
             ``transactionData`` is non-empty, describing the footprint that
             has to be restored before the invocation can succeed

:func:`parse_raw_simulation` picks the variant and decodes it. Parsed models
carry ``parsed=True``; passing one back in returns the very same object, so
callers can normalize "raw or parsed" input without tracking which they hold.

Coalescing rules
----------------
* ``results`` holds at most one entry. It becomes the scalar ``result``
  (``auth`` decoded, ``retval`` decoded or ``SCV_VOID`` when the node omitted
  ``xdr``). More than one entry is logged and the first one is used, or
  :class:`~soroban_rpc_parsers.errors.UnexpectedResultCount` is raised when the
  config asks for strict results.
* A missing or empty ``transactionData`` becomes an empty
  ``SorobanTransactionData`` (what ``SorobanDataBuilder().build()`` gives).
* ``stateChanges`` entries have their key decoded and ``before``/``after``
  snapshots decoded or left as ``None`` (created / deleted entries).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from stellar_sdk import SorobanDataBuilder

from ..codec import XdrRole, decode, decode_many, decode_optional, void_scval
from ..config import DEFAULT, ParserConfig
from ..errors import UnexpectedResultCount
from ..models.parsed import (BaseSimulateTransactionResponse,
                             LedgerEntryChange, RestorePreamble,
                             SimulateHostFunctionResult,
                             SimulateTransactionErrorResponse,
                             SimulateTransactionResponse,
                             SimulateTransactionRestoreResponse,
                             SimulateTransactionSuccessResponse)
from ..models.raw import (RawLedgerEntryChange, RawSimulateHostFunctionResult,
                          RawSimulateTransactionResponse, as_raw)

log = logging.getLogger(__name__)

SimulationInput = Union[
    SimulateTransactionResponse,
    RawSimulateTransactionResponse,
    Mapping[str, Any],
]


# -----------------------------------------------------------------------------
# Variant predicates
# -----------------------------------------------------------------------------


def is_simulation_raw(sim: SimulationInput) -> bool:
    return not isinstance(sim, BaseSimulateTransactionResponse)


def is_simulation_error(sim: SimulateTransactionResponse) -> bool:
    return isinstance(sim, SimulateTransactionErrorResponse)


def is_simulation_success(sim: SimulateTransactionResponse) -> bool:
    """True for plain successes and for successes carrying a restore hint."""
    return isinstance(sim, SimulateTransactionSuccessResponse)


def is_simulation_restore(sim: SimulateTransactionResponse) -> bool:
    return isinstance(sim, SimulateTransactionRestoreResponse)


# -----------------------------------------------------------------------------
# Success branch
# -----------------------------------------------------------------------------


def _host_function_result(row: RawSimulateHostFunctionResult) -> SimulateHostFunctionResult:
    return SimulateHostFunctionResult(
        auth=decode_many(XdrRole.AUTHORIZATION_ENTRY, row.auth or ()),
        retval=decode(XdrRole.SC_VAL, row.xdr) if row.xdr else void_scval(),
    )


def _state_change(change: RawLedgerEntryChange) -> LedgerEntryChange:
    return LedgerEntryChange(
        type=change.type,
        key=decode(XdrRole.LEDGER_KEY, change.key),
        before=decode_optional(XdrRole.LEDGER_ENTRY, change.before),
        after=decode_optional(XdrRole.LEDGER_ENTRY, change.after),
    )


def _coalesce_result(
    sim: RawSimulateTransactionResponse, cfg: ParserConfig
) -> Optional[SimulateHostFunctionResult]:
    if not sim.results:
        return None
    if len(sim.results) > 1:
        if cfg.strict_results:
            raise UnexpectedResultCount(count=len(sim.results), request_id=sim.id)
        log.warning(
            "simulation %s returned %d results, expected at most 1; using the first",
            sim.id,
            len(sim.results),
        )
    return _host_function_result(sim.results[0])


def build_successful_simulation(
    sim: RawSimulateTransactionResponse,
    base: Dict[str, Any],
    cfg: Optional[ParserConfig] = None,
) -> Union[SimulateTransactionSuccessResponse, SimulateTransactionRestoreResponse]:
    """
    Build the success (or restore-hint) variant from a raw simulation that
    carries no ``error``. ``base`` holds the already-decoded shared fields.
    """
    cfg = cfg or DEFAULT

    state_changes: Optional[Tuple[LedgerEntryChange, ...]] = None
    if sim.state_changes is not None:
        state_changes = tuple(_state_change(c) for c in sim.state_changes)

    # no footprint from the node: an empty SorobanTransactionData
    if sim.transaction_data:
        transaction_data = decode(XdrRole.TRANSACTION_DATA, sim.transaction_data)
    else:
        transaction_data = SorobanDataBuilder().build()

    fields = dict(
        base,
        transaction_data=transaction_data,
        min_resource_fee=sim.min_resource_fee,
        cost=sim.cost,
        result=_coalesce_result(sim, cfg),
        state_changes=state_changes,
    )

    preamble = sim.restore_preamble
    if preamble is None or preamble.transaction_data == "":
        return SimulateTransactionSuccessResponse(**fields)

    log.debug("simulation %s needs a restore (fee=%d)", sim.id, preamble.min_resource_fee)
    return SimulateTransactionRestoreResponse(
        **fields,
        restore_preamble=RestorePreamble(
            min_resource_fee=preamble.min_resource_fee,
            transaction_data=decode(XdrRole.TRANSACTION_DATA, preamble.transaction_data),
        ),
    )


# -----------------------------------------------------------------------------
# Entry point
# -----------------------------------------------------------------------------


def parse_raw_simulation(
    sim: SimulationInput,
    *,
    config: Optional[ParserConfig] = None,
) -> SimulateTransactionResponse:
    """
    Convert a raw simulation (model or JSON mapping) into its parsed variant.
    An already-parsed response is returned unchanged (same object).
    """
    if not is_simulation_raw(sim):
        return sim  # type: ignore[return-value]

    r = as_raw(RawSimulateTransactionResponse, sim)
    base: Dict[str, Any] = dict(
        parsed=True,
        id=r.id,
        latest_ledger=r.latest_ledger,
        events=decode_many(XdrRole.DIAGNOSTIC_EVENT, r.events or ()),
    )

    if isinstance(r.error, str):
        log.debug("simulation %s failed: %s", r.id, r.error)
        return SimulateTransactionErrorResponse(**base, error=r.error)

    return build_successful_simulation(r, base, config)


__all__ = [
    "is_simulation_raw",
    "is_simulation_error",
    "is_simulation_success",
    "is_simulation_restore",
    "build_successful_simulation",
    "parse_raw_simulation",
]
