"""
Soroban RPC response parsers — Python
Convenience exports for turning raw RPC JSON into decoded, typed responses.
"""

from .version import __version__  # noqa: F401

# Config, logging & errors
from .config import ParserConfig  # noqa: F401
from .log import configure_logging, get_logger  # noqa: F401
from .errors import ParserError, MalformedLedgerEntry, UnexpectedResultCount  # noqa: F401

# Codec
from .codec import XdrRole, decode, decode_many, void_scval  # noqa: F401

# Parsers
from .parsers import (  # noqa: F401
    parse_raw_send_transaction,
    parse_transaction_info,
    parse_raw_transactions,
    parse_raw_transactions_page,
    parse_raw_transaction,
    parse_raw_events,
    parse_raw_ledger_entries,
    parse_raw_simulation,
    is_simulation_raw,
    is_simulation_error,
    is_simulation_success,
    is_simulation_restore,
)

__all__ = [
    "__version__",
    # Core
    "ParserConfig", "configure_logging", "get_logger",
    "ParserError", "MalformedLedgerEntry", "UnexpectedResultCount",
    # Codec
    "XdrRole", "decode", "decode_many", "void_scval",
    # Parsers
    "parse_raw_send_transaction",
    "parse_transaction_info", "parse_raw_transactions",
    "parse_raw_transactions_page", "parse_raw_transaction",
    "parse_raw_events", "parse_raw_ledger_entries",
    "parse_raw_simulation",
    "is_simulation_raw", "is_simulation_error",
    "is_simulation_success", "is_simulation_restore",
]
