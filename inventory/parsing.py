# inventory/parsing.py
"""Parsing of raw menu input.

Parsers never raise on bad input; they return a ``ParseResult`` carrying
either the value or a message for the user, and the menu re-prompts.
"""
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

INVALID_NUMBER = "Invalid input. Please enter a number."

# ASCII digits only: no "1_0", no non-Latin digits, no NaN/Infinity
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

# Largest accepted decimal exponent; bigger values cannot be formatted as a price
MAX_ADJUSTED_EXPONENT = 15


@dataclass(frozen=True)
class ParseResult:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_int(raw: str) -> ParseResult:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        return ParseResult(error=INVALID_NUMBER)
    return ParseResult(value=int(text))


def parse_decimal(raw: str) -> ParseResult:
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return ParseResult(error=INVALID_NUMBER)
    value = Decimal(text)
    if value.adjusted() > MAX_ADJUSTED_EXPONENT:
        return ParseResult(error=INVALID_NUMBER)
    return ParseResult(value=value)
