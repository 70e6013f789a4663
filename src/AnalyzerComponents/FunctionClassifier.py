from AnalyzerComponents.AST import ASTNode, Call, iter_nodes
from AnalyzerComponents.Symbols import Function, FunctionKind, is_entry_name


def find_self_calls(function_name: str, body: ASTNode) -> list[Call]:
    """Return every call in `body` whose callee is `function_name`."""
    return [
        node
        for node in iter_nodes(body)
        if isinstance(node, Call) and node.callee == function_name
    ]


def classify_function(function: Function, body: ASTNode) -> FunctionKind:
    """Tag a fully walked function as entry, self-recursive or plain.

    The entry name wins regardless of self-calls. Only call targets are
    inspected; nothing is validated again.
    """
    if is_entry_name(function.name):
        return FunctionKind.ENTRY
    if find_self_calls(function.name, body):
        return FunctionKind.RECURSIVE
    return FunctionKind.NORMAL
