from collections.abc import Generator

from AnalyzerComponents.AST import (
    Block,
    Expression,
    ExpressionStatement,
    ForStatement,
    FunctionDeclaration,
    GlobalVariableDeclaration,
    IfStatement,
    LocalVariableDeclaration,
    Parameter,
    Program,
    ReturnStatement,
    WhileStatement,
)
from AnalyzerComponents.ExpressionValidator import get_expression_validator
from AnalyzerComponents.FunctionClassifier import classify_function
from AnalyzerComponents.InitialValues import is_compound_initializer, parse_initial_value
from AnalyzerComponents.ProgressReport import (
    AnalysisReport,
    ProgramCheckReport,
    analysis_report,
    program_check_report,
)
from AnalyzerComponents.Symbols import (
    AnalysisContext,
    CompilerSymbols,
    ControlStructure,
    ControlStructureKind,
    Function,
    Variable,
)
from AnalyzerComponents.Types import UnhandledNodeError, resolve_type

### Semantic analysis of the parsed syntax tree ###

# Single depth-first walk in source order. Every rule violation becomes a
# Diagnostic on the aggregate and the walk continues. Only parser contract
# violations (unknown type spelling, unknown node class) raise.


### Declaration Helpers ###


def _create_variable(type_name: str, name: str, is_global: bool, line: int) -> Variable:
    return Variable(name, resolve_type(type_name), is_global, line)


def _evaluate_initializer(
    variable: Variable,
    initializer: Expression,
    symbols: CompilerSymbols,
    context: AnalysisContext,
) -> Generator[AnalysisReport, None, None]:
    """Store a bare literal initializer as the variable's value, or validate a compound one.

    Compound initializers are validated for name resolution only; no value is
    computed for them.
    """
    value = initializer.text
    if is_compound_initializer(value):
        yield from get_expression_validator(initializer, symbols, context)
        return

    try:
        variable.initial_value = parse_initial_value(variable.variable_type, value)
    except ValueError:
        diagnostic = symbols.add_diagnostic(
            initializer.line,
            f"Invalid value for type {variable.variable_type}: {value}",
        )
        yield from analysis_report(
            f"Evaluating initial value of '{variable.name}'.",
            node_id=initializer.unique_id,
            depth=context.depth,
            diagnostic=diagnostic,
        )
        return

    yield from analysis_report(
        f"Initial value of '{variable.name}': "
        f"{'unset' if variable.initial_value is None else repr(variable.initial_value)}.",
        node_id=initializer.unique_id,
        depth=context.depth,
    )


## Declaration Handlers ##
# covers following nodes:
#   - GlobalVariableDeclaration
#   - LocalVariableDeclaration
#   - FunctionDeclaration (and its Parameters)


def _handle_global_variable_declaration(
    ast_node: GlobalVariableDeclaration, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for top-level variable declarations."""
    variable = _create_variable(ast_node.type_name, ast_node.name, True, ast_node.line)

    if symbols.find_global(variable.name) is not None:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, f"Duplicate global variable declaration: {variable.name}"
        )
        yield from analysis_report(
            f"Declaring global variable '{variable.name}'.",
            node_id=ast_node.unique_id,
            diagnostic=diagnostic,
        )
        return

    if ast_node.initializer is not None:
        yield from _evaluate_initializer(variable, ast_node.initializer, symbols, context)

    symbols.global_variables.append(variable)
    yield from analysis_report(
        f"Declaring global variable '{variable.name}'.",
        node_id=ast_node.unique_id,
        new_symbol=variable,
    )


def _handle_local_variable_declaration(
    ast_node: LocalVariableDeclaration, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for variable declarations inside a function body."""
    function = context.function
    if function is None:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, "Variable declaration outside of function context"
        )
        yield from analysis_report(
            f"Declaring local variable '{ast_node.name}'.",
            node_id=ast_node.unique_id,
            depth=context.depth,
            diagnostic=diagnostic,
        )
        return

    variable = _create_variable(ast_node.type_name, ast_node.name, False, ast_node.line)

    if function.find_local(variable.name) is not None:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, f"Duplicate local variable declaration: {variable.name}"
        )
        yield from analysis_report(
            f"Declaring local variable '{variable.name}' in '{function.name}'.",
            node_id=ast_node.unique_id,
            depth=context.depth,
            diagnostic=diagnostic,
        )
        return

    if ast_node.initializer is not None:
        yield from _evaluate_initializer(variable, ast_node.initializer, symbols, context)

    function.local_variables.append(variable)
    yield from analysis_report(
        f"Declaring local variable '{variable.name}' in '{function.name}'.",
        node_id=ast_node.unique_id,
        new_symbol=variable,
        depth=context.depth,
    )


def _declare_parameters(
    parameters: list[Parameter], function: Function, symbols: CompilerSymbols
) -> Generator[AnalysisReport, None, None]:
    for param in parameters:
        parameter = _create_variable(param.type_name, param.name, False, param.line)

        if function.find_parameter(parameter.name) is not None:
            diagnostic = symbols.add_diagnostic(
                param.line,
                f"Duplicate parameter name in function {function.name}: {parameter.name}",
            )
            yield from analysis_report(
                f"Declaring function parameter '{parameter.name}'.",
                node_id=param.unique_id,
                diagnostic=diagnostic,
            )
            continue

        function.parameters.append(parameter)
        yield from analysis_report(
            f"Declaring function parameter '{parameter.name}'.",
            node_id=param.unique_id,
            new_symbol=parameter,
        )


def _handle_function_declaration(
    ast_node: FunctionDeclaration, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for function declarations.

    A duplicate declaration is discarded whole: its body is never walked.
    Otherwise the function becomes the active context for its parameters and
    body, is classified, and only then registered.
    """
    func_name = ast_node.declared_name
    function = Function(func_name, resolve_type(ast_node.return_type), ast_node.line)

    if symbols.find_function(func_name) is not None:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, f"Duplicate function declaration: {func_name}"
        )
        yield from analysis_report(
            f"Declaring function '{func_name}'.",
            node_id=ast_node.unique_id,
            diagnostic=diagnostic,
        )
        return

    yield from analysis_report(
        f"Entering function '{func_name}'.", node_id=ast_node.unique_id
    )

    function_context = AnalysisContext(function=function)
    yield from _declare_parameters(ast_node.parameters, function, symbols)
    yield from get_analysis_reporter(ast_node.body, symbols, function_context)

    function.kind = classify_function(function, ast_node.body)
    symbols.functions.append(function)
    yield from analysis_report(
        f"Declaring function '{func_name}' ({function.kind.value}).",
        node_id=ast_node.unique_id,
        new_symbol=function,
    )


## Control Flow Handlers ##
# covers following nodes:
#   - IfStatement
#   - WhileStatement
#   - ForStatement


def _open_control_structure(
    structure: ControlStructure, ast_node, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Push `structure` on the nesting stack and record it on the active function.

    Control structures at top level are walked but not recorded.
    """
    context.nesting.append(structure)
    if context.function is not None:
        context.function.control_structures.append(structure)
    yield from analysis_report(
        f"Processing {structure.kind.value} statement (lines {structure.start_line}-{structure.end_line}).",
        node_id=ast_node.unique_id,
        new_control_structure=structure,
        depth=context.depth,
    )


def _handle_if_statement(
    ast_node: IfStatement, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for IF statements - process condition and both branches."""
    structure = ControlStructure(
        ControlStructureKind.IF_ELSE if ast_node.else_block is not None else ControlStructureKind.IF,
        ast_node.line,
        ast_node.end_line,
        ast_node.condition.text,
    )
    yield from _open_control_structure(structure, ast_node, context)

    yield from get_expression_validator(ast_node.condition, symbols, context)
    yield from get_analysis_reporter(ast_node.then_block, symbols, context)
    if ast_node.else_block is not None:
        yield from get_analysis_reporter(ast_node.else_block, symbols, context)

    context.nesting.pop()


def _handle_while_statement(
    ast_node: WhileStatement, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for WHILE statements - process condition and body."""
    structure = ControlStructure(
        ControlStructureKind.WHILE,
        ast_node.line,
        ast_node.end_line,
        ast_node.condition.text,
    )
    yield from _open_control_structure(structure, ast_node, context)

    yield from get_expression_validator(ast_node.condition, symbols, context)
    yield from get_analysis_reporter(ast_node.body, symbols, context)

    context.nesting.pop()


def _handle_for_statement(
    ast_node: ForStatement, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for FOR statements - process initializer, test, update and body.

    The recorded condition is the loop test only (empty when absent).
    """
    structure = ControlStructure(
        ControlStructureKind.FOR,
        ast_node.line,
        ast_node.end_line,
        ast_node.condition.text if ast_node.condition is not None else "",
    )
    yield from _open_control_structure(structure, ast_node, context)

    if ast_node.init is not None:
        yield from get_analysis_reporter(ast_node.init, symbols, context)
    if ast_node.condition is not None:
        yield from get_expression_validator(ast_node.condition, symbols, context)
    if ast_node.update is not None:
        yield from get_expression_validator(ast_node.update, symbols, context)
    yield from get_analysis_reporter(ast_node.body, symbols, context)

    context.nesting.pop()


## Statement Handlers ##
# covers following nodes:
#   - Program
#   - Block
#   - ExpressionStatement
#   - ReturnStatement


def _handle_program(
    ast_node: Program, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    for decl in ast_node.declarations:
        yield from get_analysis_reporter(decl, symbols, context)


def _handle_block(
    ast_node: Block, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for statement blocks - recurse on each statement."""
    for stmt in ast_node.statements:
        yield from get_analysis_reporter(stmt, symbols, context)


def _handle_expression_statement(
    ast_node: ExpressionStatement, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    yield from get_expression_validator(ast_node.expression, symbols, context)


def _handle_return_statement(
    ast_node: ReturnStatement, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    if ast_node.expression is None:
        yield from analysis_report(
            "Return without value.", node_id=ast_node.unique_id, depth=context.depth
        )
        return
    yield from get_expression_validator(ast_node.expression, symbols, context)


### DISPATCH TABLE ###

# Maps syntax tree node types to analysis handlers
ANALYSIS_HANDLERS = {
    Program: _handle_program,
    GlobalVariableDeclaration: _handle_global_variable_declaration,
    FunctionDeclaration: _handle_function_declaration,
    LocalVariableDeclaration: _handle_local_variable_declaration,
    Block: _handle_block,
    IfStatement: _handle_if_statement,
    WhileStatement: _handle_while_statement,
    ForStatement: _handle_for_statement,
    ExpressionStatement: _handle_expression_statement,
    ReturnStatement: _handle_return_statement,
}


### PUBLIC API ###


def get_analysis_reporter(
    ast_node, symbols: CompilerSymbols, context: AnalysisContext | None = None
) -> Generator[AnalysisReport, None, None]:
    """Semantic analysis of a declaration or statement subtree.

    Populates `symbols` with variables, functions and diagnostics, yielding a
    report for each step. Expression nodes are routed to the expression
    validator.

    Raises:
        UnknownTypeError: if a declaration names a type outside the catalog.
        UnhandledNodeError: if a node class has no handler.
    """
    if context is None:
        context = AnalysisContext()

    handler = ANALYSIS_HANDLERS.get(type(ast_node))
    if handler is not None:
        yield from handler(ast_node, symbols, context)
    elif isinstance(ast_node, Expression):
        yield from get_expression_validator(ast_node, symbols, context)
    else:
        raise UnhandledNodeError(ast_node)


def get_program_check_reporter(
    symbols: CompilerSymbols,
) -> Generator[ProgramCheckReport, None, None]:
    """Program-level checks run once the whole tree has been walked."""
    for function in symbols.functions:
        yield from program_check_report(
            f"Function '{function.name}' classified as {function.kind.value}.",
            looked_at_symbol=function,
        )

    if not symbols.has_entry_function():
        diagnostic = symbols.add_diagnostic(
            0, "Program has no entry function: no main function found"
        )
        yield from program_check_report(
            "Checking for entry function.", diagnostic=diagnostic
        )
        return

    yield from program_check_report("Entry function found.")


def get_program_reporter(
    program: Program, symbols: CompilerSymbols
) -> Generator[AnalysisReport | ProgramCheckReport, None, CompilerSymbols]:
    """Full analysis of a program: the tree walk followed by program checks.

    Returns (as the generator's return value) the populated `symbols`.
    """
    yield from get_analysis_reporter(program, symbols, AnalysisContext())
    yield from get_program_check_reporter(symbols)
    return symbols
