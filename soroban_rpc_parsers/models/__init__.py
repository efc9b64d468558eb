"""
soroban_rpc_parsers.models
--------------------------

- raw:    wire shapes, XDR still base64 (see .raw)
- parsed: decoded, frozen shapes returned by the parsers (see .parsed)
"""

from __future__ import annotations

from .parsed import *  # noqa: F401,F403
from .parsed import __all__ as _parsed_all
from .raw import *  # noqa: F401,F403
from .raw import __all__ as _raw_all

__all__ = list(_raw_all) + list(_parsed_all)
