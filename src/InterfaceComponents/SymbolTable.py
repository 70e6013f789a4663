from rich.console import Group
from rich.table import Table

from AnalyzerComponents.ProgressReport import AnalysisReport
from AnalyzerComponents.Symbols import CompilerSymbols, Function, Variable


def _format_value(variable: Variable) -> str:
    return "N/A" if variable.initial_value is None else repr(variable.initial_value)


class SymbolTableView:
    """Renderable view of the symbol tables built by semantic analysis.

    Note: This is intentionally named `SymbolTableView` to avoid confusion with
    the analyser's `AnalyzerComponents.Symbols.CompilerSymbols` data model.
    """

    def __init__(self, symbols: CompilerSymbols | None = None):
        self.variables_table = Table(title="Variables", row_styles=["", "dim"])
        self.variables_table.add_column("LINE", justify="right")
        self.variables_table.add_column("ID")
        self.variables_table.add_column("TYPE")
        self.variables_table.add_column("SCOPE")
        self.variables_table.add_column("VALUE")

        self.functions_table = Table(title="Functions", row_styles=["", "dim"])
        self.functions_table.add_column("LINE", justify="right")
        self.functions_table.add_column("ID")
        self.functions_table.add_column("RETURNS")
        self.functions_table.add_column("PARAMS")
        self.functions_table.add_column("LOCALS")
        self.functions_table.add_column("CONTROL")
        self.functions_table.add_column("KIND")

        if symbols is not None:
            self.add_symbols(symbols)

    def add_variable(self, variable: Variable, scope: str = "global"):
        """Adds a variable row.

        Args:
            variable (Variable): The variable to add.
            scope (str): Name of the owning scope.
        """
        self.variables_table.add_row(
            str(variable.declaration_line),
            variable.name,
            str(variable.variable_type),
            scope,
            _format_value(variable),
        )

    def add_function(self, function: Function):
        params = (
            "\n".join(f"{p.name}: {p.variable_type}" for p in function.parameters)
            if function.parameters
            else "none"
        )
        local_names = (
            "\n".join(v.name for v in function.local_variables)
            if function.local_variables
            else "none"
        )
        control = (
            "\n".join(
                f"{c.kind.value} {c.start_line}-{c.end_line}"
                + (f" ({c.condition})" if c.condition else "")
                for c in function.control_structures
            )
            if function.control_structures
            else "none"
        )
        self.functions_table.add_row(
            str(function.declaration_line),
            function.name,
            str(function.return_type),
            params,
            local_names,
            control,
            function.kind.value,
        )
        for variable in [*function.parameters, *function.local_variables]:
            self.add_variable(variable, scope=function.name)

    def add_symbols(self, symbols: CompilerSymbols):
        for variable in symbols.global_variables:
            self.add_variable(variable)
        for function in symbols.functions:
            self.add_function(function)

    def apply_progress_report(self, report: AnalysisReport):
        """Adds the variable or function registered by an analysis step, if any."""
        symbol = report.new_symbol
        if isinstance(symbol, Function):
            self.add_function(symbol)
        elif isinstance(symbol, Variable) and symbol.is_global:
            self.add_variable(symbol)

    def __rich__(self) -> Group:
        return Group(self.variables_table, self.functions_table)
