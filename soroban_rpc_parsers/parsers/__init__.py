"""
soroban_rpc_parsers.parsers
---------------------------

One pure function (family) per RPC response kind:

- sendTransaction     -> parse_raw_send_transaction
- getTransaction(s)   -> parse_raw_transaction, parse_raw_transactions,
                         parse_raw_transactions_page, parse_transaction_info
- getEvents           -> parse_raw_events
- getLedgerEntries    -> parse_raw_ledger_entries
- simulateTransaction -> parse_raw_simulation
"""

from __future__ import annotations

from .events import parse_raw_event, parse_raw_events
from .ledger_entries import parse_raw_ledger_entries, parse_raw_ledger_entry
from .send_transaction import parse_raw_send_transaction
from .simulation import (build_successful_simulation, is_simulation_error,
                         is_simulation_raw, is_simulation_restore,
                         is_simulation_success, parse_raw_simulation)
from .transactions import (parse_raw_transaction, parse_raw_transactions,
                           parse_raw_transactions_page, parse_transaction_info)

__all__ = [
    "parse_raw_send_transaction",
    "parse_transaction_info",
    "parse_raw_transactions",
    "parse_raw_transactions_page",
    "parse_raw_transaction",
    "parse_raw_event",
    "parse_raw_events",
    "parse_raw_ledger_entry",
    "parse_raw_ledger_entries",
    "build_successful_simulation",
    "parse_raw_simulation",
    "is_simulation_raw",
    "is_simulation_error",
    "is_simulation_success",
    "is_simulation_restore",
]
