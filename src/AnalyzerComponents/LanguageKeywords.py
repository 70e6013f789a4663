"""Centralized language keywords and analysis constants

This module serves as the single source of truth for the surface spellings the
analyser relies on. It is imported by Types, SemanticAnalyser, InitialValues
and FunctionClassifier so every component agrees on what a type name, the entry
function and a compound initializer look like.
"""

__all__ = [
    "TYPE_KEYWORDS",
    "ENTRY_FUNCTION_NAME",
    "COMPOUND_INITIALIZER_MARKERS",
    "STRING_DELIMITER",
    "INT_MIN",
    "INT_MAX",
]

### Type Keywords ###
# Lowercase surface spelling -> PrimitiveType member name

TYPE_KEYWORDS = {
    "int": "INT",
    "float": "FLOAT",
    "double": "DOUBLE",
    "string": "STRING",
    "void": "VOID",
}

### Entry Function ###
# Compared case-insensitively against declared function names

ENTRY_FUNCTION_NAME = "main"

### Initializer Classification ###
# An initializer whose text contains any of these is treated as an expression,
# not a literal. Negative numbers are therefore never stored as values.

COMPOUND_INITIALIZER_MARKERS = ("+", "-", "*", "/", "(")

STRING_DELIMITER = '"'

# int literals outside a 32-bit signed range are left unset
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
