from rich.table import Table
from rich.text import Text

from AnalyzerComponents.Symbols import Diagnostic


def build_diagnostics_table(diagnostics: list[Diagnostic]) -> Table:
    """Build a table listing diagnostics in the order they were produced.

    Program-level diagnostics (line 0) are shown with a "-" line number.
    """
    table = Table(title="Diagnostics", title_style="bold red" if diagnostics else "bold green")
    table.add_column("LINE", justify="right")
    table.add_column("KIND")
    table.add_column("MESSAGE")
    for diagnostic in diagnostics:
        table.add_row(
            str(diagnostic.line) if diagnostic.line else "-",
            diagnostic.kind.value,
            Text(diagnostic.message, style="red"),
        )
    if not diagnostics:
        table.add_row("", "", Text("No diagnostics.", style="green"))
    return table
