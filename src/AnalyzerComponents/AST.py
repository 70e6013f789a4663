### Define syntax tree nodes for the basic procedural language. ###

# The parser is an external collaborator: it builds these nodes with source
# line information and hands the Program root to the analyser.

from __future__ import annotations

from collections.abc import Iterator

from AnalyzerComponents.Types import ASTNodeId


class ASTNode:
    """Base class for all syntax tree nodes.

    ```BNF:
        <ast_node> ::= <program> | <declaration> | <statement> | <expression>
```
    Attributes:
        line (int): 1-based source line number where this node starts.
        end_line (int): 1-based source line number where this node stops.
        edges (list[ASTNode]): Canonical child nodes in source order, used for
            tree walks and tree rendering.
        unique_id (ASTNodeId | None): Id assigned by `assign_node_ids()`.

    Methods:
        tree_representation(prefix: str = "", is_last: bool = True) -> str:
            Produces a human-readable tree (debug/UI).
        unindented_representation() -> str:
            One-line label used in the tree.
    """

    def __init__(self, line: int, end_line: int | None = None):
        self.line: int = line
        self.end_line: int = end_line if end_line is not None else line
        self.edges: list[ASTNode] = []
        self.unique_id: ASTNodeId | None = None

    def tree_representation(self, prefix="", is_last=True) -> str:
        """Return a string representation of the node with indentation.

        Args:
            prefix (str): Prefix string to render before this node (used recursively).
            is_last (bool): Whether this node is rendered as the last child.

        Returns:
            str: The indented string representation of the node.
        """
        connector = "└── " if is_last else "├── "
        extension = "    " if is_last else "│   "
        result = f"{prefix}{connector}{self.unindented_representation()}"
        for i, edge in enumerate(self.edges):
            is_last_edge = i == len(self.edges) - 1
            result += "\n" + edge.tree_representation(f"{prefix}{extension}", is_last_edge)
        return result

    def unindented_representation(self) -> str:
        """Return the one-line label for this node."""
        raise NotImplementedError(
            "Subclasses must implement unindented_representation method"
        )


class Expression(ASTNode):
    """Base class for expression nodes.

    ```BNF:
        <expr> ::= <assignment_expr> | <logical_expr>
```
    Attributes:
        text (str): Token text of the expression concatenated without
            whitespace, the same rendering the parser gives for a rule context.
    """

    @property
    def text(self) -> str:
        raise NotImplementedError("Subclasses must implement text property")


class Statement(ASTNode):
    """Base class for statement nodes."""


## Expressions ##


class Literal(Expression):
    """Literal token (number or quoted string), stored as written.

    ```BNF:
        <literal> ::= INT_LITERAL | FLOAT_LITERAL | STRING_LITERAL
```
    """

    def __init__(self, value: str, line: int):
        super().__init__(line)
        self.value = value

    @property
    def text(self) -> str:
        return self.value

    def unindented_representation(self) -> str:
        return f"Literal: {self.value}"

    def __repr__(self):
        return f"LiteralNode({self.value})"


class Identifier(Expression):
    """Identifier used as a value.

    ```BNF:
        <primary_expr> ::= IDENTIFIER
```
    """

    def __init__(self, name: str, line: int):
        super().__init__(line)
        self.name = name

    @property
    def text(self) -> str:
        return self.name

    def unindented_representation(self) -> str:
        return f"Identifier: {self.name}"

    def __repr__(self):
        return f"IdentifierNode({self.name})"


class Call(Expression):
    """Function call expression.

    ```BNF:
        <primary_expr> ::= IDENTIFIER '(' <expr_list>? ')'
        <expr_list> ::= <expr> (',' <expr>)*
```
    Attributes:
        callee (str): Called function's identifier.
        arguments (list[Expression]): Argument expressions in source order.
    """

    def __init__(self, callee: str, arguments: list[Expression], line: int):
        super().__init__(line)
        self.callee = callee
        self.arguments = arguments
        self.edges = arguments  # type: ignore

    @property
    def text(self) -> str:
        return f"{self.callee}({','.join(arg.text for arg in self.arguments)})"

    def unindented_representation(self) -> str:
        return f"Call: {self.callee}"

    def __repr__(self):
        return f"CallNode({self.callee}, {self.arguments})"


class UnaryExpression(Expression):
    def __init__(self, operator: str, operand: Expression, line: int):
        super().__init__(line)
        self.operator = operator
        self.operand = operand
        self.edges = [operand]

    @property
    def text(self) -> str:
        return f"{self.operator}{self.operand.text}"

    def unindented_representation(self) -> str:
        return f"Unary Operation: {self.operator}"

    def __repr__(self):
        return f"UnaryExpressionNode({self.operator}, {self.operand})"


class BinaryExpression(Expression):
    """Binary operation (arithmetic, comparison or logical).

    ```BNF:
        <logical_expr> ::= <comparison> (('&&' | '||') <comparison>)*
        <comparison> ::= <additive> (<rel_op> <additive>)?
        <additive> ::= <term> (('+' | '-') <term>)*
        <term> ::= <unary> (('*' | '/' | '%') <unary>)*
```
    """

    def __init__(self, operator: str, left: Expression, right: Expression, line: int):
        super().__init__(line)
        self.operator = operator
        self.left = left
        self.right = right
        self.edges = [left, right]

    @property
    def text(self) -> str:
        return f"{self.left.text}{self.operator}{self.right.text}"

    def unindented_representation(self) -> str:
        return f"Binary Operation: {self.operator}"

    def __repr__(self):
        return f"BinaryExpressionNode({self.operator}, {self.left}, {self.right})"


class Grouping(Expression):
    """Parenthesised expression."""

    def __init__(self, expression: Expression, line: int):
        super().__init__(line)
        self.expression = expression
        self.edges = [expression]

    @property
    def text(self) -> str:
        return f"({self.expression.text})"

    def unindented_representation(self) -> str:
        return "Grouping"

    def __repr__(self):
        return f"GroupingNode({self.expression})"


class Assignment(Expression):
    """Plain assignment to a named variable.

    ```BNF:
        <assignment_expr> ::= IDENTIFIER '=' <expr>
```
    """

    def __init__(self, target: Identifier, value: Expression, line: int):
        super().__init__(line)
        self.target = target
        self.value = value
        self.edges = [target, value]

    @property
    def text(self) -> str:
        return f"{self.target.text}={self.value.text}"

    def unindented_representation(self) -> str:
        return f"Assignment: {self.target.name}"

    def __repr__(self):
        return f"AssignmentNode({self.target}, {self.value})"


## Statements ##


class Block(Statement):
    """Brace-delimited statement sequence.

    ```BNF:
        <block> ::= '{' <statement>* '}'
```
    """

    def __init__(self, statements: list[ASTNode], line: int, end_line: int | None = None):
        super().__init__(line, end_line)
        self.statements = statements
        self.edges = statements

    def unindented_representation(self) -> str:
        return "Block"

    def __repr__(self):
        return f"BlockNode({self.statements})"


class ExpressionStatement(Statement):
    def __init__(self, expression: Expression, line: int):
        super().__init__(line)
        self.expression = expression
        self.edges = [expression]

    def unindented_representation(self) -> str:
        return "Expression Statement"

    def __repr__(self):
        return f"ExpressionStatementNode({self.expression})"


class ReturnStatement(Statement):
    """RETURN statement.

    ```BNF:
        <return_stmt> ::= 'return' <expr>? ';'
```
    """

    def __init__(self, expression: Expression | None, line: int):
        super().__init__(line)
        self.expression = expression
        self.edges = [expression] if expression is not None else []

    def unindented_representation(self) -> str:
        return "Return"

    def __repr__(self):
        return f"ReturnNode({self.expression})"


class LocalVariableDeclaration(Statement):
    """Variable declaration inside a function body.

    ```BNF:
        <variable_decl> ::= <type> IDENTIFIER ('=' <expr>)? ';'
```
    """

    def __init__(
        self, type_name: str, name: str, initializer: Expression | None, line: int
    ):
        super().__init__(line)
        self.type_name = type_name
        self.name = name
        self.initializer = initializer
        self.edges = [initializer] if initializer is not None else []

    def unindented_representation(self) -> str:
        return f"Local Variable: {self.name} ({self.type_name})"

    def __repr__(self):
        return f"LocalVariableNode({self.type_name}, {self.name}, {self.initializer})"


class IfStatement(Statement):
    """IF statement with optional ELSE block.

    ```BNF:
        <if_stmt> ::= 'if' '(' <expr> ')' <block> ('else' <block>)?
```
    Attributes:
        condition (Expression): Tested expression.
        then_block (Block): Block run when the condition holds.
        else_block (Block | None): Block run otherwise, if present.
    """

    def __init__(
        self,
        condition: Expression,
        then_block: Block,
        else_block: Block | None,
        line: int,
        end_line: int | None = None,
    ):
        super().__init__(line, end_line)
        self.condition = condition
        self.then_block = then_block
        self.else_block = else_block
        self.edges = [condition, then_block]
        if else_block is not None:
            self.edges.append(else_block)

    def unindented_representation(self) -> str:
        return "If-Else" if self.else_block is not None else "If"

    def __repr__(self):
        return f"IfNode({self.condition}, {self.then_block}, {self.else_block})"


class WhileStatement(Statement):
    def __init__(
        self, condition: Expression, body: Block, line: int, end_line: int | None = None
    ):
        super().__init__(line, end_line)
        self.condition = condition
        self.body = body
        self.edges = [condition, body]

    def unindented_representation(self) -> str:
        return "While"

    def __repr__(self):
        return f"WhileNode({self.condition}, {self.body})"


class ForStatement(Statement):
    """FOR loop.

    ```BNF:
        <for_stmt> ::= 'for' '(' (<variable_decl> | <expr_stmt> | ';') <expr>? ';' <expr>? ')' <block>
```
    Attributes:
        init (LocalVariableDeclaration | ExpressionStatement | None): Loop initializer.
        condition (Expression | None): Loop test.
        update (Expression | None): Expression evaluated after each iteration.
        body (Block): Loop body.
    """

    def __init__(
        self,
        init: LocalVariableDeclaration | ExpressionStatement | None,
        condition: Expression | None,
        update: Expression | None,
        body: Block,
        line: int,
        end_line: int | None = None,
    ):
        super().__init__(line, end_line)
        self.init = init
        self.condition = condition
        self.update = update
        self.body = body
        self.edges = [n for n in (init, condition, update) if n is not None]
        self.edges.append(body)

    def unindented_representation(self) -> str:
        return "For"

    def __repr__(self):
        return f"ForNode({self.init}, {self.condition}, {self.update}, {self.body})"


## Declarations ##


class Parameter(ASTNode):
    def __init__(self, type_name: str, name: str, line: int):
        super().__init__(line)
        self.type_name = type_name
        self.name = name

    def unindented_representation(self) -> str:
        return f"Parameter: {self.name} ({self.type_name})"

    def __repr__(self):
        return f"ParameterNode({self.type_name}, {self.name})"


class GlobalVariableDeclaration(ASTNode):
    """Top-level variable declaration.

    ```BNF:
        <global_variable_decl> ::= <type> IDENTIFIER ('=' <expr>)? ';'
```
    """

    def __init__(
        self, type_name: str, name: str, initializer: Expression | None, line: int
    ):
        super().__init__(line)
        self.type_name = type_name
        self.name = name
        self.initializer = initializer
        self.edges = [initializer] if initializer is not None else []

    def unindented_representation(self) -> str:
        return f"Global Variable: {self.name} ({self.type_name})"

    def __repr__(self):
        return f"GlobalVariableNode({self.type_name}, {self.name}, {self.initializer})"


class FunctionDeclaration(ASTNode):
    """Function definition.

    ```BNF:
        <function_decl> ::= <type> (MAIN_FUN | IDENTIFIER) '(' <param_list>? ')' <block>
        <param_list> ::= <param> (',' <param>)*
```
    Attributes:
        return_type (str): Declared return type spelling.
        name (str): Function identifier.
        parameters (list[Parameter]): Declared parameters in order.
        body (Block): Function body.
        entry_name (str | None): Text of the reserved entry-function token,
            when the parser matched it instead of a plain identifier.

    Notes:
        `declared_name` is the name the analyser registers; the entry token
        takes precedence over the identifier.
    """

    def __init__(
        self,
        return_type: str,
        name: str | None,
        parameters: list[Parameter],
        body: Block,
        line: int,
        end_line: int | None = None,
        entry_name: str | None = None,
    ):
        super().__init__(line, end_line)
        self.return_type = return_type
        self.name = name
        self.parameters = parameters
        self.body = body
        self.entry_name = entry_name
        self.edges = [*parameters, body]

    @property
    def declared_name(self) -> str:
        return self.entry_name or self.name or ""

    def unindented_representation(self) -> str:
        return f"Function: {self.declared_name} -> {self.return_type}"

    def __repr__(self):
        return f"FunctionDeclarationNode({self.declared_name}, {self.parameters}, {self.body})"


class Program(ASTNode):
    """Program root.

    ```BNF:
        <program> ::= (<global_variable_decl> | <function_decl> | <statement>)* EOF
```
    """

    def __init__(self, declarations: list[ASTNode], line: int = 1, end_line: int | None = None):
        super().__init__(line, end_line)
        self.declarations = declarations
        self.edges = declarations

    def unindented_representation(self) -> str:
        return "Program"

    def __repr__(self):
        return f"ProgramNode({self.declarations})"


### Tree helpers ###


def iter_nodes(ast_node: ASTNode) -> Iterator[ASTNode]:
    """Yield `ast_node` and all its descendants in preorder."""
    yield ast_node
    for edge in ast_node.edges:
        yield from iter_nodes(edge)


def assign_node_ids(root: ASTNode) -> int:
    """Number every node in preorder, starting with the root at 0.

    Returns:
        int: The number of nodes numbered.
    """
    count = 0
    for node in iter_nodes(root):
        node.unique_id = ASTNodeId(count)
        count += 1
    return count


def print_ast(ast_node):
    """Print the syntax tree in a human-readable format."""
    print(ast_node.tree_representation())
