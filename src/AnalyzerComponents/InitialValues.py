"""Evaluation of literal variable initializers.

An initializer is only evaluated when its text looks like a bare literal.
The decision is textual: anything containing an arithmetic operator or an
opening parenthesis is handed to expression validation instead, which also
means a negative number or a string containing "-" is never stored.
"""

from __future__ import annotations

import re

from AnalyzerComponents.LanguageKeywords import (
    COMPOUND_INITIALIZER_MARKERS,
    INT_MAX,
    INT_MIN,
    STRING_DELIMITER,
)
from AnalyzerComponents.Types import PrimitiveType

_INT_LITERAL = re.compile(r"\s*\+?\d+\s*", re.ASCII)
_FLOAT_LITERAL = re.compile(r"\s*\+?(\d+\.?\d*|\.\d+)([eE]\+?\d+)?\s*", re.ASCII)


def is_compound_initializer(text: str) -> bool:
    """Return True when an initializer's text should be validated as an expression."""
    return any(marker in text for marker in COMPOUND_INITIALIZER_MARKERS)


def parse_initial_value(
    variable_type: PrimitiveType, text: str
) -> int | float | str | None:
    """Parse a bare literal according to the declared type.

    Literals that do not fit the type are left unset (None) rather than
    reported.

    Raises:
        ValueError: if a literal of the right shape still fails to convert
            (e.g. an int literal exceeding the interpreter's digit limit).
    """
    if variable_type is PrimitiveType.INT:
        if not _INT_LITERAL.fullmatch(text):
            return None
        value = int(text)
        return value if INT_MIN <= value <= INT_MAX else None

    if variable_type in (PrimitiveType.FLOAT, PrimitiveType.DOUBLE):
        if not _FLOAT_LITERAL.fullmatch(text):
            return None
        return float(text)

    if variable_type is PrimitiveType.STRING:
        if text.startswith(STRING_DELIMITER) and text.endswith(STRING_DELIMITER):
            return text.strip(STRING_DELIMITER)
        return None

    return None
