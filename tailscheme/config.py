from __future__ import annotations
import logging
import os

# Integers are fixed-width two's complement.
INT_BITS = 32
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1

# Characters allowed in a token; anything else besides parens and whitespace is malformed.
TOKEN_CHARS = r"A-Za-z0-9<=>?_*/+\-"
WHITESPACE = " \n\r\t"

# Name of the symbol returned by predicates for true.
TRUE_NAME = "t"

_DEFAULT_LOG_LEVEL = "WARNING"


def wrap_int(value: int) -> int:
    """Reduce `value` to the signed INT_BITS range, wrapping on overflow."""
    value &= (1 << INT_BITS) - 1
    return value - (1 << INT_BITS) if value > INT_MAX else value


def log_level_from_env(var: str = "TAILSCHEME_LOG_LEVEL") -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        raw = _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
