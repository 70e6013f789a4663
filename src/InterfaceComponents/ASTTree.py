from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from AnalyzerComponents.AST import ASTNode
from AnalyzerComponents.Symbols import Diagnostic


class ASTTree:
    """Tree renderable for syntax tree visualization.

    Nodes that start on a line carrying a diagnostic are drawn in red; the
    rest in white. Labels come from each node's `unindented_representation()`.
    """

    def __init__(self, root: ASTNode, diagnostics: list[Diagnostic] | None = None):
        self.error_lines: set[int] = {d.line for d in (diagnostics or []) if d.line}
        self.tree = Tree(self._label(root))
        self._nodes_by_id: dict[int, Tree] = {}
        self._add_children(self.tree, root)

    def _label(self, node: ASTNode) -> Text:
        style = "red" if node.line in self.error_lines else "white"
        label = Text(node.unindented_representation(), style=style)
        label.append(f"  (line {node.line})", style="dim")
        return label

    def _add_children(self, branch: Tree, node: ASTNode) -> None:
        if node.unique_id is not None:
            self._nodes_by_id[node.unique_id] = branch
        for edge in node.edges:
            self._add_children(branch.add(self._label(edge)), edge)

    def get_branch(self, node_id: int) -> Tree | None:
        """Return the branch rendered for the node numbered `node_id`, if any."""
        return self._nodes_by_id.get(node_id)

    def __rich__(self) -> Tree:
        return self.tree
