from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from AnalyzerComponents.LanguageKeywords import ENTRY_FUNCTION_NAME
from AnalyzerComponents.Types import PrimitiveType


class DiagnosticKind(Enum):
    SEMANTIC = "Semantic"


@dataclass(frozen=True)
class Diagnostic:
    """A recorded semantic-rule violation.

    Line 0 is used for program-level issues that have no single source line.
    """

    kind: DiagnosticKind
    line: int
    message: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.kind.value} error: {self.message}"


@dataclass
class Variable:
    name: str
    variable_type: PrimitiveType
    is_global: bool
    declaration_line: int
    initial_value: int | float | str | None = None  # unset if absent or non-literal

    def to_markdown(self) -> str:
        value_str = "N/A" if self.initial_value is None else repr(self.initial_value)
        scope_str = "global" if self.is_global else "local"
        return (
            f"| {self.name} | {self.declaration_line} | {self.variable_type} | "
            f"{scope_str} | {value_str} |"
        )


class ControlStructureKind(Enum):
    IF = "If"
    IF_ELSE = "IfElse"
    WHILE = "While"
    FOR = "For"


@dataclass(frozen=True)
class ControlStructure:
    kind: ControlStructureKind
    start_line: int
    end_line: int
    condition: str


class FunctionKind(Enum):
    ENTRY = "Main"
    RECURSIVE = "Recursive"
    NORMAL = "Normal"


@dataclass
class Function:
    name: str
    return_type: PrimitiveType
    declaration_line: int
    parameters: list[Variable] = field(default_factory=list)
    local_variables: list[Variable] = field(default_factory=list)
    control_structures: list[ControlStructure] = field(default_factory=list)
    kind: FunctionKind = FunctionKind.NORMAL

    @property
    def is_entry(self) -> bool:
        return is_entry_name(self.name)

    def find_parameter(self, name: str) -> Variable | None:
        return next((p for p in self.parameters if p.name == name), None)

    def find_local(self, name: str) -> Variable | None:
        return next((v for v in self.local_variables if v.name == name), None)

    def to_markdown(self) -> str:
        params_str = (
            ", ".join(f"{p.name}: {p.variable_type}" for p in self.parameters)
            if self.parameters
            else "N/A"
        )
        return (
            f"| {self.name} | {self.declaration_line} | {self.return_type} | "
            f"{params_str} | {len(self.local_variables)} | "
            f"{len(self.control_structures)} | {self.kind.value} |"
        )


def is_entry_name(name: str) -> bool:
    return name.lower() == ENTRY_FUNCTION_NAME


class CompilerSymbols:
    """Root aggregate produced by semantic analysis.

    Holds the ordered global variables, the ordered functions and the ordered
    diagnostics. Scopes are flat: the global table, plus one parameter list and
    one local list per function.
    """

    def __init__(self):
        self.global_variables: list[Variable] = []
        self.functions: list[Function] = []
        self.diagnostics: list[Diagnostic] = []

    def find_global(self, name: str) -> Variable | None:
        return next((v for v in self.global_variables if v.name == name), None)

    def find_function(self, name: str) -> Function | None:
        return next((f for f in self.functions if f.name == name), None)

    def resolve_variable(
        self, name: str, function: Function | None = None
    ) -> Variable | None:
        """Look a variable up from inside `function` (or from top level if None).

        Search order: the function's parameters, its locals, then the globals.
        There is no shadowing; the first match wins.
        """
        if function is not None:
            sym = function.find_parameter(name) or function.find_local(name)
            if sym is not None:
                return sym
        return self.find_global(name)

    def is_variable_declared(self, name: str, function: Function | None = None) -> bool:
        return self.resolve_variable(name, function) is not None

    def has_entry_function(self) -> bool:
        return any(f.is_entry for f in self.functions)

    def add_diagnostic(
        self, line: int, message: str, kind: DiagnosticKind = DiagnosticKind.SEMANTIC
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind, line, message)
        self.diagnostics.append(diagnostic)
        return diagnostic

    @property
    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def __str__(self) -> str:
        result = "Global Variables:\n"
        for var in self.global_variables:
            result += f"  {var.name}: {var.variable_type} (line {var.declaration_line})\n"
        result += "Functions:\n"
        for func in self.functions:
            result += f"  {func.name} -> {func.return_type} [{func.kind.value}] (line {func.declaration_line})\n"
        result += "Diagnostics:\n"
        for diagnostic in self.diagnostics:
            result += f"  {diagnostic}\n"
        return result

    def to_markdown(self) -> str:
        result = "| Identifier | Line | Data Type | Scope | Initial Value |\n"
        result += "|------------|------|-----------|-------|---------------|\n"
        for var in self.global_variables:
            result += var.to_markdown() + "\n"
        for func in self.functions:
            for var in [*func.parameters, *func.local_variables]:
                result += var.to_markdown() + "\n"
        result += "\n"
        result += "| Function | Line | Return Type | Parameters | Locals | Control Structures | Kind |\n"
        result += "|----------|------|-------------|------------|--------|--------------------|------|\n"
        for func in self.functions:
            result += func.to_markdown() + "\n"
        return result


@dataclass
class AnalysisContext:
    """Explicit context threaded through every analysis handler.

    `function` is the function whose declaration is being walked; None means
    top level. `nesting` holds the control structures currently open inside
    that function, innermost last.
    """

    function: Function | None = None
    nesting: list[ControlStructure] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.nesting)
