import io

from rich.console import Console

from analysis_pipeline import analyse_program
from AnalyzerComponents.AST import WhileStatement, assign_node_ids
from AnalyzerComponents.ProgressReport import AnalysisReport
from AnalyzerComponents.SemanticAnalyser import get_analysis_reporter
from AnalyzerComponents.Symbols import CompilerSymbols
from InterfaceComponents.AnalysisReportView import build_analysis_view, print_analysis
from InterfaceComponents.ASTTree import ASTTree
from InterfaceComponents.DiagnosticsTable import build_diagnostics_table
from InterfaceComponents.SymbolTable import SymbolTableView

from programs import binop, block, function, global_var, ident, lit, program, stmt


def _render(renderable) -> str:
    console = Console(file=io.StringIO(), width=160, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


def _sample():
    loop = WhileStatement(binop("<", ident("i"), lit(3)), block(stmt(ident("missing", line=4))), 3, 5)
    return program(
        global_var("string", "greeting", lit('"hi"'), line=1),
        function("int", "main", [("int", "i")], block(loop), line=2, end_line=6),
    )


def test_symbol_table_view_lists_variables_and_functions():
    root = _sample()
    output = _render(SymbolTableView(analyse_program(root)))
    assert "greeting" in output
    assert "'hi'" in output
    assert "main" in output
    assert "While 3-5 (i<3)" in output
    assert "Main" in output


def test_symbol_tables_lead_with_declaration_line():
    view = SymbolTableView(analyse_program(_sample()))
    assert view.variables_table.columns[0].header == "LINE"
    assert view.functions_table.columns[0].header == "LINE"
    assert list(view.variables_table.columns[0].cells)[0] == "1"
    assert list(view.functions_table.columns[0].cells)[0] == "2"


def test_symbol_table_view_applies_progress_reports():
    view = SymbolTableView()
    for report in get_analysis_reporter(_sample(), CompilerSymbols()):
        assert isinstance(report, AnalysisReport)
        view.apply_progress_report(report)
    assert view.variables_table.row_count == 2
    assert view.functions_table.row_count == 1


def test_diagnostics_table():
    symbols = analyse_program(_sample())
    assert build_diagnostics_table(symbols.diagnostics).row_count == 1
    output = _render(build_diagnostics_table(symbols.diagnostics))
    assert "Use of undeclared variable: missing" in output


def test_empty_diagnostics_table():
    output = _render(build_diagnostics_table([]))
    assert "No diagnostics." in output


def test_ast_tree_maps_node_ids():
    root = _sample()
    assign_node_ids(root)
    symbols = analyse_program(root)
    tree = ASTTree(root, symbols.diagnostics)
    assert tree.error_lines == {4}
    assert tree.get_branch(0) is tree.tree
    output = _render(tree)
    assert "Program" in output
    assert "Identifier: missing" in output


def test_print_analysis_renders_every_section():
    root = _sample()
    symbols = analyse_program(root)
    console = Console(file=io.StringIO(), width=160, color_system=None)
    print_analysis(symbols, root, console=console)
    output = console.file.getvalue()
    for title in ("Syntax Tree", "Symbols", "Variables", "Functions", "Diagnostics"):
        assert title in output


def test_analysis_view_without_tree():
    output = _render(build_analysis_view(analyse_program(_sample())))
    assert "Syntax Tree" not in output
