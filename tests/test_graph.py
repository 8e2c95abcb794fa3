import numpy as np
import pytest

from ssp_mcf import InvalidArgumentError, ResidualGraph, create


@pytest.mark.parametrize("node_count", [0, -3])
def test_rejects_non_positive_node_count(node_count):
    with pytest.raises(InvalidArgumentError):
        ResidualGraph(node_count)


@pytest.mark.parametrize("u, v", [(-1, 2), (0, 3), (3, 0)])
def test_rejects_out_of_range_nodes(u, v):
    graph = ResidualGraph(3)
    with pytest.raises(InvalidArgumentError, match="out of bounds"):
        graph.add_edge(u, v, 1, 1)


def test_rejects_negative_capacity():
    graph = ResidualGraph(3)
    with pytest.raises(InvalidArgumentError, match="Capacity"):
        graph.add_edge(0, 1, -1, 1)
    assert graph.edge_count == 0


def test_add_edge_creates_residual_pair():
    graph = create(2)
    edge_id = graph.add_edge(0, 1, 7, 3)

    fwd = graph.edge(edge_id)
    rev = graph.reverse(fwd)
    assert (fwd.to, fwd.capacity, fwd.cost, fwd.original) == (1, 7, 3, True)
    assert (rev.to, rev.capacity, rev.cost, rev.original) == (0, 0, -3, False)
    assert rev.initial_capacity == 0
    assert graph.reverse(rev) is fwd


def test_parallel_edges_are_independent():
    graph = ResidualGraph(2)
    first = graph.add_edge(0, 1, 1, 1)
    second = graph.add_edge(0, 1, 4, 9)

    assert first != second
    assert graph.edge_count == 2
    assert len(graph.edges_from(0)) == 2
    assert len(graph.edges_from(1)) == 2


def test_self_loop_pairs_with_its_twin():
    graph = ResidualGraph(2)
    edge_id = graph.add_edge(1, 1, 3, 2)

    fwd = graph.edge(edge_id)
    rev = graph.reverse(fwd)
    assert rev is not fwd
    assert rev.capacity == 0 and rev.cost == -2
    assert graph.reverse(rev) is fwd


def test_push_keeps_pair_capacities_balanced():
    graph = ResidualGraph(3)
    edge_id = graph.add_edge(0, 2, 5, 1)
    u, index = edge_id

    graph.push(u, index, 3)
    fwd = graph.edge(edge_id)
    assert fwd.capacity == 2
    assert graph.reverse(fwd).capacity == 3
    assert fwd.capacity + graph.reverse(fwd).capacity == fwd.initial_capacity
    assert graph.flow(edge_id) == 3
    assert graph.residual_capacity(edge_id) == 2


def test_reset_restores_initial_capacities():
    graph = ResidualGraph(2)
    edge_id = graph.add_edge(0, 1, 5, 1)
    graph.push(*edge_id, 5)

    graph.reset()
    assert graph.flow(edge_id) == 0
    assert graph.reverse(graph.edge(edge_id)).capacity == 0


def test_to_arrays_reports_user_arcs_in_insertion_order():
    graph = ResidualGraph(3)
    graph.add_edge(2, 0, 4, -1)
    edge_id = graph.add_edge(0, 1, 6, 5)
    graph.push(*edge_id, 2)

    tail, head, capacity, cost, flow = graph.to_arrays()
    assert tail.dtype == np.int64
    assert tail.tolist() == [2, 0]
    assert head.tolist() == [0, 1]
    assert capacity.tolist() == [4, 6]
    assert cost.tolist() == [-1, 5]
    assert flow.tolist() == [0, 2]


def test_original_edges_skip_residual_twins():
    graph = ResidualGraph(3)
    graph.add_edge(0, 1, 1, 1)
    graph.add_edge(1, 2, 1, 1)

    arcs = [(u, e.to) for u, e in graph.original_edges()]
    assert arcs == [(0, 1), (1, 2)]
    assert all(e.original for _u, e in graph.original_edges())
