from __future__ import annotations

from AnalyzerComponents.AST import Program, assign_node_ids
from AnalyzerComponents.ProgressReport import AnalysisReport, ProgramCheckReport
from AnalyzerComponents.SemanticAnalyser import (
    get_analysis_reporter,
    get_program_check_reporter,
)
from AnalyzerComponents.Symbols import AnalysisContext, CompilerSymbols


class AnalysisSession:
    """Shared semantic analysis state.

    This is a UI-agnostic orchestrator that drives the analysis reporters one
    step at a time. It keeps the phase generators, the collected reports and
    the produced symbol aggregate in one place, so stage sequencing can't drift
    between callers.
    """

    def __init__(self) -> None:
        self.reset_all()

    def reset_all(self) -> None:
        self.ast_root: Program | None = None
        self.symbols: CompilerSymbols = CompilerSymbols()
        self.reports: list[AnalysisReport | ProgramCheckReport] = []

        self._analyser = None
        self._program_checker = None

    # ----- Tree walk -----

    def begin_analysis(self, program: Program) -> None:
        self.ast_root = program
        self.symbols = CompilerSymbols()
        self.reports.clear()
        assign_node_ids(program)
        self._analyser = get_analysis_reporter(program, self.symbols, AnalysisContext())
        self._program_checker = None

    def tick_analysis(self) -> tuple[bool, AnalysisReport | None]:
        if self._analyser is None:
            raise RuntimeError("Analysis generator not initialized.")
        try:
            report: AnalysisReport = next(self._analyser)
            self.reports.append(report)
            return False, report
        except StopIteration:
            return True, None

    # ----- Program checks -----

    def begin_program_check(self) -> None:
        if self.ast_root is None:
            raise RuntimeError("No syntax tree available for program checks.")
        self._program_checker = get_program_check_reporter(self.symbols)

    def tick_program_check(self) -> tuple[bool, ProgramCheckReport | None]:
        if self._program_checker is None:
            raise RuntimeError("Program check generator not initialized.")
        try:
            report: ProgramCheckReport = next(self._program_checker)
            self.reports.append(report)
            return False, report
        except StopIteration:
            return True, None

    def finish_analysis(self) -> CompilerSymbols:
        """Consume the remaining reports of both phases and return the aggregate."""
        if self._analyser is None:
            raise RuntimeError("Analysis generator not initialized.")
        while True:
            done, _ = self.tick_analysis()
            if done:
                break
        if self._program_checker is None:
            self.begin_program_check()
        while True:
            done, _ = self.tick_program_check()
            if done:
                break
        return self.symbols


def analyse_program(program: Program) -> CompilerSymbols:
    """Analyse `program` end-to-end and return the symbol/diagnostic aggregate.

    Semantic problems are reported as diagnostics on the result; a non-empty
    `diagnostics` list means the program is invalid.
    """
    session = AnalysisSession()
    session.begin_analysis(program)
    return session.finish_analysis()
