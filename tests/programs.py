"""Small syntax tree builders shared by the test modules.

Each builder mirrors one grammar rule; `line` is always explicit so tests can
assert on diagnostic line numbers.
"""

from AnalyzerComponents.AST import (
    Assignment,
    BinaryExpression,
    Block,
    Call,
    ExpressionStatement,
    FunctionDeclaration,
    GlobalVariableDeclaration,
    Identifier,
    Literal,
    Parameter,
    Program,
    ReturnStatement,
)


def lit(value, line=1):
    return Literal(str(value), line)


def ident(name, line=1):
    return Identifier(name, line)


def call(callee, *arguments, line=1):
    return Call(callee, list(arguments), line)


def binop(operator, left, right, line=1):
    return BinaryExpression(operator, left, right, line)


def assign(name, value, line=1):
    return Assignment(Identifier(name, line), value, line)


def stmt(expression):
    return ExpressionStatement(expression, expression.line)


def ret(expression=None, line=1):
    return ReturnStatement(expression, line)


def block(*statements, line=1, end_line=None):
    return Block(list(statements), line, end_line)


def global_var(type_name, name, initializer=None, line=1):
    return GlobalVariableDeclaration(type_name, name, initializer, line)


def function(return_type, name, params=(), body=None, line=1, end_line=None, entry_name=None):
    parameters = [Parameter(t, n, line) for t, n in params]
    return FunctionDeclaration(
        return_type,
        name,
        parameters,
        body if body is not None else block(line=line),
        line,
        end_line,
        entry_name=entry_name,
    )


def main(*statements, line=1):
    return function("int", "main", body=block(*statements, line=line), line=line)


def program(*declarations):
    return Program(list(declarations))


def messages(symbols):
    return [d.message for d in symbols.diagnostics]
