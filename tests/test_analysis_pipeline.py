import pytest

from analysis_pipeline import AnalysisSession, analyse_program
from AnalyzerComponents.ProgressReport import AnalysisReport, ProgramCheckReport
from AnalyzerComponents.Symbols import FunctionKind

from programs import block, call, function, global_var, ident, lit, main, messages, program, stmt


def _sample():
    return program(
        global_var("int", "x", lit(5), line=1),
        function("int", "twice", [("int", "n")], block(stmt(call("twice", ident("n")))), line=2),
        main(stmt(call("twice", lit(1), lit(2), line=5)), line=4),
    )


def test_analyse_program_end_to_end():
    symbols = analyse_program(_sample())
    assert [v.name for v in symbols.global_variables] == ["x"]
    assert [(f.name, f.kind) for f in symbols.functions] == [
        ("twice", FunctionKind.RECURSIVE),
        ("main", FunctionKind.ENTRY),
    ]
    assert messages(symbols) == ["Function twice expects 1 arguments but got 2"]


def test_session_ticks_through_both_phases():
    session = AnalysisSession()
    session.begin_analysis(_sample())

    walk_reports = []
    while True:
        done, report = session.tick_analysis()
        if done:
            break
        walk_reports.append(report)
    assert walk_reports
    assert all(isinstance(r, AnalysisReport) for r in walk_reports)
    assert all(r.current_phase_number == "3.1" for r in walk_reports)

    session.begin_program_check()
    done, report = session.tick_program_check()
    assert not done
    assert isinstance(report, ProgramCheckReport)

    symbols = session.finish_analysis()
    assert symbols is session.symbols
    assert len(session.reports) > len(walk_reports)


def test_begin_analysis_numbers_nodes():
    session = AnalysisSession()
    root = _sample()
    session.begin_analysis(root)
    session.finish_analysis()
    assert root.unique_id == 0
    assert any(r.looked_at_tree_node_id for r in session.reports if isinstance(r, AnalysisReport))


def test_diagnostic_reports_match_aggregate():
    session = AnalysisSession()
    session.begin_analysis(program(function("void", "f", body=block(stmt(ident("y"))))))
    symbols = session.finish_analysis()
    reported = [r.diagnostic for r in session.reports if r.diagnostic is not None]
    assert reported == symbols.diagnostics


def test_begin_analysis_resets_previous_run():
    session = AnalysisSession()
    session.begin_analysis(program(function("void", "f")))
    first = session.finish_analysis()
    session.begin_analysis(program(main()))
    second = session.finish_analysis()
    assert first is not second
    assert second.diagnostics == []


def test_tick_before_begin_raises():
    session = AnalysisSession()
    with pytest.raises(RuntimeError):
        session.tick_analysis()
    with pytest.raises(RuntimeError):
        session.tick_program_check()
    with pytest.raises(RuntimeError):
        session.begin_program_check()
