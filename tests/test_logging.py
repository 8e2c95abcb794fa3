import logging

import pytest

from ssp_mcf import FlowOptions, InvalidStateError, ResidualGraph, solve


def _graph() -> ResidualGraph:
    graph = ResidualGraph(3)
    graph.add_edge(0, 1, 2, 1)
    graph.add_edge(1, 2, 1, 1)
    graph.add_edge(0, 2, 1, 5)
    return graph


def test_solve_logs_start_and_finish(caplog):
    with caplog.at_level(logging.INFO, logger="ssp_mcf.solver"):
        solve(_graph(), 0, 2)

    messages = [record.getMessage() for record in caplog.records]
    assert "Starting successive shortest path solver" in messages
    finished = [r for r in caplog.records if r.getMessage() == "Solver finished"]
    assert len(finished) == 1
    assert finished[0].flow == 2
    assert finished[0].cost == 7
    assert finished[0].iterations == 2


def test_augmentations_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="ssp_mcf.solver"):
        solve(_graph(), 0, 2)

    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert [r.iteration for r in debug] == [1, 2]


def test_negative_cycle_logged_as_warning(caplog):
    graph = ResidualGraph(2)
    graph.add_edge(0, 1, 1, -1)
    graph.add_edge(1, 0, 1, -1)

    with caplog.at_level(logging.WARNING, logger="ssp_mcf.solver"):
        with pytest.raises(InvalidStateError):
            solve(graph, 0, 1, FlowOptions(check_negative_cycles=True))
    assert any(r.levelno == logging.WARNING for r in caplog.records)
