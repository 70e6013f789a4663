"""Core analyser type aliases and the primitive type catalog.

This module intentionally contains **no UI framework imports**.
The analyser can expose IDs and progress metadata to a UI, but the core
should not depend on any presentation layer to run headlessly.
"""

from __future__ import annotations

from enum import Enum
from typing import NewType

from AnalyzerComponents.LanguageKeywords import TYPE_KEYWORDS

# Opaque identifier used to correlate syntax tree nodes / progress events.
ASTNodeId = NewType("ASTNodeId", int)


class AnalysisError(Exception):
    """Base class for contract violations between the parser and the analyser.

    These are not user-correctable diagnostics; raising one aborts the pass.
    """

    pass


class UnknownTypeError(AnalysisError):
    """Raised when a type spelling is outside the fixed primitive set."""

    def __init__(self, type_text: str):
        super().__init__(f"Unknown type {type_text}")
        self.type_text = type_text


class PrimitiveType(Enum):
    INT = "Int"
    FLOAT = "Float"
    DOUBLE = "Double"
    STRING = "String"
    VOID = "Void"

    def __str__(self) -> str:
        return self.value


def resolve_type(type_text: str) -> PrimitiveType:
    """Map a surface type spelling to its PrimitiveType, case-insensitively.

    Args:
        type_text: Type token text as produced by the parser (e.g. "int", "Double").

    Returns:
        The matching PrimitiveType.

    Raises:
        UnknownTypeError: if the spelling is not one of int, float, double,
            string or void. The parser is expected to reject anything else, so
            this signals a grammar/analyser mismatch.
    """
    member = TYPE_KEYWORDS.get(type_text.lower())
    if member is None:
        raise UnknownTypeError(type_text)
    return PrimitiveType[member]


class UnhandledNodeError(AnalysisError):
    """Raised when the analyser meets a node class it has no handler for."""

    def __init__(self, node):
        super().__init__(f"Unhandled node type: {type(node).__name__}")
        self.node = node
