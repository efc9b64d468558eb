"""
Parser configuration.

- Loads defaults and supports overrides via environment variables
  (SOROBAN_PARSERS_*).
- The parsers never mutate a config; pass one explicitly or rely on DEFAULT.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_DEFAULT_PREFIX = "SOROBAN_PARSERS_"
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUE = ("1", "true", "yes", "y", "on")


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None else default


def _parse_bool(val: Any, default: bool = False) -> bool:
    if val is None or val == "":
        return default
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in _TRUE


def _parse_level(val: Any) -> str:
    """
    Accepts a level name (any case) and returns it upper-cased.
    """
    if val is None or val == "":
        return _DEFAULT_LOG_LEVEL
    name = str(val).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"unknown log level: {val!r}")
    return name


@dataclass(frozen=True, slots=True)
class ParserConfig:
    # Raise instead of warn when a simulation returns more than one result
    strict_results: bool = False
    log_level: str = field(default_factory=lambda: _DEFAULT_LOG_LEVEL)

    @classmethod
    def from_env(cls, prefix: str = _DEFAULT_PREFIX) -> "ParserConfig":
        """
        Create config from environment variables:

        SOROBAN_PARSERS_STRICT_RESULTS  (bool: 1/true/yes/on)
        SOROBAN_PARSERS_LOG_LEVEL       (DEBUG/INFO/WARNING/ERROR)
        """
        strict = _parse_bool(_env(f"{prefix}STRICT_RESULTS", None))
        level = _parse_level(_env(f"{prefix}LOG_LEVEL", None))
        return cls(strict_results=strict, log_level=level)

    @classmethod
    def with_overrides(
        cls, base: Optional["ParserConfig"] = None, **overrides: Any
    ) -> "ParserConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys are ignored.
        """
        base = base or cls.from_env()
        data = base.to_dict()
        data.update({k: v for k, v in overrides.items() if k in data})
        if "strict_results" in overrides:
            data["strict_results"] = _parse_bool(overrides["strict_results"])
        if "log_level" in overrides:
            data["log_level"] = _parse_level(overrides["log_level"])
        return cls(**data)

    @property
    def log_level_no(self) -> int:
        return logging.getLevelName(self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strict_results": bool(self.strict_results),
            "log_level": self.log_level,
        }


# Convenience singleton
DEFAULT = ParserConfig.from_env()

__all__ = ["ParserConfig", "DEFAULT"]
