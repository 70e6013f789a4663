from collections.abc import Generator

from AnalyzerComponents.AST import (
    Assignment,
    BinaryExpression,
    Call,
    Grouping,
    Identifier,
    Literal,
    UnaryExpression,
)
from AnalyzerComponents.ProgressReport import AnalysisReport, analysis_report
from AnalyzerComponents.Symbols import AnalysisContext, CompilerSymbols, Function
from AnalyzerComponents.Types import UnhandledNodeError

### Expression validation ###
# Name resolution and call arity only. Operand types are never checked.


def resolve_callable(
    name: str, symbols: CompilerSymbols, context: AnalysisContext
) -> Function | None:
    """Find the function `name` refers to.

    The function whose body is being walked is not registered until its walk
    completes, so it is matched separately to let self-calls resolve.
    """
    function = symbols.find_function(name)
    if function is None and context.function is not None and context.function.name == name:
        function = context.function
    return function


## Leaf Handlers ##
# covers following nodes:
#   - Literal
#   - Identifier


def _handle_literal(
    ast_node: Literal, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    yield from analysis_report(
        f"Literal {ast_node.value}; nothing to resolve.",
        node_id=ast_node.unique_id,
        depth=context.depth,
    )


def _handle_identifier(
    ast_node: Identifier, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for identifiers used as values - must name a variable or a function."""
    name = ast_node.name
    if symbols.is_variable_declared(name, context.function):
        yield from analysis_report(
            f"Variable usage '{name}' resolved.",
            node_id=ast_node.unique_id,
            depth=context.depth,
        )
        return
    if resolve_callable(name, symbols, context) is not None:
        yield from analysis_report(
            f"Identifier '{name}' resolved to a function.",
            node_id=ast_node.unique_id,
            depth=context.depth,
        )
        return
    diagnostic = symbols.add_diagnostic(ast_node.line, f"Use of undeclared variable: {name}")
    yield from analysis_report(
        f"Variable '{name}' not declared.",
        node_id=ast_node.unique_id,
        depth=context.depth,
        diagnostic=diagnostic,
    )


## Call Handler ##


def _handle_call(
    ast_node: Call, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for calls - verify the callee exists and the argument count matches."""
    func_name = ast_node.callee
    function = resolve_callable(func_name, symbols, context)

    if function is None:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, f"Call to undefined function: {func_name}"
        )
        yield from analysis_report(
            f"Function call to '{func_name}'.",
            node_id=ast_node.unique_id,
            depth=context.depth,
            diagnostic=diagnostic,
        )
    else:
        expected_args = len(function.parameters)
        provided_args = len(ast_node.arguments)
        if expected_args != provided_args:
            diagnostic = symbols.add_diagnostic(
                ast_node.line,
                f"Function {func_name} expects {expected_args} arguments but got {provided_args}",
            )
            yield from analysis_report(
                f"Function call to '{func_name}'.",
                node_id=ast_node.unique_id,
                depth=context.depth,
                diagnostic=diagnostic,
            )
        else:
            yield from analysis_report(
                f"Function call to '{func_name}' has correct number of arguments ({provided_args}).",
                node_id=ast_node.unique_id,
                depth=context.depth,
            )

    for arg in ast_node.arguments:
        yield from get_expression_validator(arg, symbols, context)


## Compound Expression Handlers ##
# covers following nodes:
#   - UnaryExpression
#   - BinaryExpression
#   - Grouping
#   - Assignment


def _handle_unary_expression(
    ast_node: UnaryExpression, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    yield from get_expression_validator(ast_node.operand, symbols, context)


def _handle_binary_expression(
    ast_node: BinaryExpression, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for binary expressions - process both operands."""
    yield from get_expression_validator(ast_node.left, symbols, context)
    yield from get_expression_validator(ast_node.right, symbols, context)


def _handle_grouping(
    ast_node: Grouping, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    yield from get_expression_validator(ast_node.expression, symbols, context)


def _handle_assignment(
    ast_node: Assignment, symbols: CompilerSymbols, context: AnalysisContext
) -> Generator[AnalysisReport, None, None]:
    """Handler for assignments - validates the target, then processes the value."""
    name_check = ast_node.target.name
    if symbols.is_variable_declared(name_check, context.function):
        yield from analysis_report(
            f"Assignment to variable '{name_check}'.",
            node_id=ast_node.unique_id,
            depth=context.depth,
        )
    else:
        diagnostic = symbols.add_diagnostic(
            ast_node.line, f"Assignment to undeclared variable: {name_check}"
        )
        yield from analysis_report(
            f"Variable '{name_check}' not declared.",
            node_id=ast_node.unique_id,
            depth=context.depth,
            diagnostic=diagnostic,
        )
    yield from get_expression_validator(ast_node.value, symbols, context)


### EXPRESSION DISPATCH TABLE ###

EXPRESSION_HANDLERS = {
    Literal: _handle_literal,
    Identifier: _handle_identifier,
    Call: _handle_call,
    UnaryExpression: _handle_unary_expression,
    BinaryExpression: _handle_binary_expression,
    Grouping: _handle_grouping,
    Assignment: _handle_assignment,
}


### PUBLIC API ###


def get_expression_validator(
    ast_node, symbols: CompilerSymbols, context: AnalysisContext | None = None
) -> Generator[AnalysisReport, None, None]:
    """Validate identifier usage and call arity inside an expression.

    Diagnostics are appended to `symbols` and attached to the yielded reports.

    Raises:
        UnhandledNodeError: if `ast_node` is not an expression node.
    """
    if context is None:
        context = AnalysisContext()

    handler = EXPRESSION_HANDLERS.get(type(ast_node))
    if handler is None:
        raise UnhandledNodeError(ast_node)
    yield from handler(ast_node, symbols, context)
