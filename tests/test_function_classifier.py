from AnalyzerComponents.FunctionClassifier import classify_function, find_self_calls
from AnalyzerComponents.AST import IfStatement
from AnalyzerComponents.Symbols import Function, FunctionKind
from AnalyzerComponents.Types import PrimitiveType

from programs import binop, block, call, ident, lit, ret, stmt


def _function(name):
    return Function(name, PrimitiveType.INT, 1)


def test_nested_self_call_is_found():
    body = block(IfStatement(ident("n"), block(ret(binop("*", ident("n"), call("fact", lit(1))))), None, 2, 4))
    assert len(find_self_calls("fact", body)) == 1
    assert classify_function(_function("fact"), body) is FunctionKind.RECURSIVE


def test_identifier_use_is_not_a_self_call():
    body = block(stmt(ident("fact")))
    assert find_self_calls("fact", body) == []
    assert classify_function(_function("fact"), body) is FunctionKind.NORMAL


def test_entry_name_wins_over_recursion():
    body = block(stmt(call("Main")))
    assert classify_function(_function("Main"), body) is FunctionKind.ENTRY


def test_calls_to_other_functions_are_ignored():
    body = block(stmt(call("other", call("another"))))
    assert classify_function(_function("plain"), body) is FunctionKind.NORMAL
