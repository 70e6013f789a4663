from __future__ import annotations

from rich.console import Console, Group
from rich.rule import Rule

from AnalyzerComponents.AST import Program
from AnalyzerComponents.Symbols import CompilerSymbols
from InterfaceComponents.ASTTree import ASTTree
from InterfaceComponents.DiagnosticsTable import build_diagnostics_table
from InterfaceComponents.SymbolTable import SymbolTableView


def build_analysis_view(symbols: CompilerSymbols, program: Program | None = None) -> Group:
    """Compose the full analysis result: optional tree, symbol tables and diagnostics."""
    parts = []
    if program is not None:
        parts.append(Rule("Syntax Tree"))
        parts.append(ASTTree(program, symbols.diagnostics))
    parts.append(Rule("Symbols"))
    parts.append(SymbolTableView(symbols))
    parts.append(build_diagnostics_table(symbols.diagnostics))
    return Group(*parts)


def print_analysis(
    symbols: CompilerSymbols,
    program: Program | None = None,
    console: Console | None = None,
) -> None:
    (console or Console()).print(build_analysis_view(symbols, program))
