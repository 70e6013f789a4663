from __future__ import annotations

from collections.abc import Generator

from AnalyzerComponents.Symbols import ControlStructure, Diagnostic, Function, Variable
from AnalyzerComponents.Types import ASTNodeId


class ProgressReport:
    def __init__(self):
        self.current_phase_number = ""
        self.action_bar_message = ""


class AnalysisReport(ProgressReport):
    """
    Progress report for the semantic analysis tree walk.
    Attributes:
        current_phase_number (str): The current phase number, automatically set to "3.1".
        looked_at_tree_node_id (ASTNodeId | None): Id of the node being analysed, if numbered.
        new_symbol (Variable | Function | None): Symbol registered at this step, if any.
        new_control_structure (ControlStructure | None): Control structure recorded at this step, if any.
        depth (int): Control-structure nesting depth at this step.
        diagnostic (Diagnostic | None): Diagnostic produced at this step, if any.
    """
    def __init__(self):
        super().__init__()
        self.current_phase_number = "3.1"
        self.looked_at_tree_node_id : ASTNodeId | None = None
        self.new_symbol : Variable | Function | None = None
        self.new_control_structure : ControlStructure | None = None
        self.depth : int = 0
        self.diagnostic : Diagnostic | None = None


class ProgramCheckReport(ProgressReport):
    """
    Progress report for the program-level checks run after the tree walk.
    """
    def __init__(self):
        super().__init__()
        self.current_phase_number = "3.2"
        self.looked_at_symbol : Function | None = None
        self.diagnostic : Diagnostic | None = None


def analysis_report(
    action_message: str,
    node_id: ASTNodeId | None = None,
    new_symbol: Variable | Function | None = None,
    new_control_structure: ControlStructure | None = None,
    depth: int = 0,
    diagnostic: Diagnostic | None = None,
) -> Generator[AnalysisReport, None, None]:
    """Create and yield an AnalysisReport with the specified fields.

    Args:
        action_message: Message for the action bar
        node_id: Syntax tree node unique_id to highlight (optional)
        new_symbol: Newly declared variable or function (optional)
        new_control_structure: Newly recorded control structure (optional)
        depth: Control-structure nesting depth
        diagnostic: Diagnostic produced at this step (optional)

    Yields:
        Configured AnalysisReport
    """
    report = AnalysisReport()
    report.action_bar_message = action_message
    report.looked_at_tree_node_id = node_id
    report.new_symbol = new_symbol
    report.new_control_structure = new_control_structure
    report.depth = depth
    report.diagnostic = diagnostic
    yield report


def program_check_report(
    action_message: str,
    looked_at_symbol: Function | None = None,
    diagnostic: Diagnostic | None = None,
) -> Generator[ProgramCheckReport, None, None]:
    """Create and yield a ProgramCheckReport with the specified fields."""
    report = ProgramCheckReport()
    report.action_bar_message = action_message
    report.looked_at_symbol = looked_at_symbol
    report.diagnostic = diagnostic
    yield report
