from AnalyzerComponents.Symbols import (
    AnalysisContext,
    CompilerSymbols,
    ControlStructure,
    ControlStructureKind,
    Diagnostic,
    DiagnosticKind,
    Function,
    FunctionKind,
    Variable,
)
from AnalyzerComponents.Types import PrimitiveType


def _symbols_with_function():
    symbols = CompilerSymbols()
    symbols.global_variables.append(Variable("g", PrimitiveType.INT, True, 1))
    func = Function("f", PrimitiveType.VOID, 2)
    func.parameters.append(Variable("p", PrimitiveType.INT, False, 2))
    func.local_variables.append(Variable("l", PrimitiveType.STRING, False, 3))
    symbols.functions.append(func)
    return symbols, func


def test_resolve_variable_search_order():
    symbols, func = _symbols_with_function()
    assert symbols.resolve_variable("p", func).name == "p"
    assert symbols.resolve_variable("l", func).name == "l"
    assert symbols.resolve_variable("g", func).is_global


def test_top_level_lookup_only_sees_globals():
    symbols, _ = _symbols_with_function()
    assert symbols.is_variable_declared("g")
    assert not symbols.is_variable_declared("p")
    assert not symbols.is_variable_declared("l")


def test_find_function_is_case_sensitive():
    symbols, _ = _symbols_with_function()
    assert symbols.find_function("f") is not None
    assert symbols.find_function("F") is None


def test_entry_function_match_is_case_insensitive():
    symbols = CompilerSymbols()
    assert not symbols.has_entry_function()
    symbols.functions.append(Function("MAIN", PrimitiveType.INT, 1))
    assert symbols.has_entry_function()


def test_add_diagnostic_appends_in_order():
    symbols = CompilerSymbols()
    first = symbols.add_diagnostic(3, "first")
    symbols.add_diagnostic(0, "second")
    assert symbols.diagnostics == [first, Diagnostic(DiagnosticKind.SEMANTIC, 0, "second")]
    assert symbols.has_errors


def test_diagnostic_str():
    diagnostic = Diagnostic(DiagnosticKind.SEMANTIC, 7, "Use of undeclared variable: x")
    assert str(diagnostic) == "Line 7: Semantic error: Use of undeclared variable: x"


def test_context_depth_follows_nesting():
    context = AnalysisContext()
    assert context.function is None
    assert context.depth == 0
    context.nesting.append(ControlStructure(ControlStructureKind.WHILE, 1, 3, "x<1"))
    assert context.depth == 1


def test_to_markdown_lists_every_scope():
    symbols, func = _symbols_with_function()
    func.kind = FunctionKind.RECURSIVE
    markdown = symbols.to_markdown()
    assert "| g | 1 | Int | global | N/A |" in markdown
    assert "| l | 3 | String | local | N/A |" in markdown
    assert "| f | 2 | Void | p: Int | 1 | 0 | Recursive |" in markdown


def test_str_summarises_aggregate():
    symbols, _ = _symbols_with_function()
    symbols.add_diagnostic(0, "oops")
    text = str(symbols)
    assert "g: Int (line 1)" in text
    assert "f -> Void [Normal] (line 2)" in text
    assert "Line 0: Semantic error: oops" in text
