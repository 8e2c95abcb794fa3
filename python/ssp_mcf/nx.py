"""NetworkX adapter for ssp-mcf.

Maps arbitrary hashable nodes to indices, solves on a
:class:`~ssp_mcf.graph.ResidualGraph`, and translates the per-edge flow
back into the nested-dict format NetworkX uses.
"""
from __future__ import annotations

from typing import Dict, Tuple

import math

from .exceptions import InvalidArgumentError
from .graph import ResidualGraph
from .options import FlowOptions
from .solver import solve
from .typing import FlowDict, MultiFlowDict, Node


def _graph_to_arrays(
    G, capacity: str = "capacity", weight: str = "weight"
) -> Tuple[list, list, list, list, Dict, list]:
    if not G.is_directed():
        raise InvalidArgumentError("Only directed graphs are supported.")
    nodes = list(G.nodes())
    index = {node: idx for idx, node in enumerate(nodes)}
    tails = []
    heads = []
    upper = []
    cost = []
    if G.is_multigraph():
        edges = list(G.edges(keys=True, data=True))
    else:
        edges = list(G.edges(data=True))
    for edge in edges:
        u, v, data = edge[0], edge[1], edge[-1]
        tails.append(index[u])
        heads.append(index[v])
        if capacity not in data:
            raise InvalidArgumentError("Each edge must specify a finite capacity.")
        edge_capacity = data[capacity]
        if not isinstance(edge_capacity, (int, float)) or not math.isfinite(edge_capacity):
            raise InvalidArgumentError("Each edge must specify a finite capacity.")
        if edge_capacity < 0:
            raise InvalidArgumentError("Capacity must be non-negative.")
        upper.append(int(edge_capacity))
        edge_cost = data.get(weight, 0)
        if not isinstance(edge_cost, (int, float)) or not math.isfinite(edge_cost):
            raise InvalidArgumentError("Edge cost must be a finite number.")
        cost.append(int(edge_cost))
    return tails, heads, upper, cost, index, edges


def max_flow_min_cost(
    G,
    source: Node,
    sink: Node,
    *,
    capacity: str = "capacity",
    weight: str = "weight",
    options: FlowOptions | None = None,
) -> tuple[int, int, FlowDict | MultiFlowDict]:
    """Return ``(flow_value, cost, flow_dict)`` for a NetworkX digraph.

    Args:
        G: NetworkX DiGraph or MultiDiGraph with capacity attributes.
        source: Source node.
        sink: Sink node.
        capacity: Edge attribute holding the capacity. Required on every edge.
        weight: Edge attribute holding the per-unit cost (0 when absent).
        options: Solver configuration.
    """
    tails, heads, upper, cost, index, edges = _graph_to_arrays(G, capacity, weight)
    for node in (source, sink):
        if node not in index:
            raise InvalidArgumentError(f"Node {node!r} is not in the graph.")

    graph = ResidualGraph(max(1, len(index)))
    edge_ids = [graph.add_edge(*arc) for arc in zip(tails, heads, upper, cost)]
    result = solve(graph, index[source], index[sink], options)

    if G.is_multigraph():
        flow_dict: MultiFlowDict = {node: {} for node in G.nodes()}
        for (u, v, key, _data), edge_id in zip(edges, edge_ids):
            flow_dict[u].setdefault(v, {})[key] = graph.flow(edge_id)
    else:
        flow_dict = {node: {} for node in G.nodes()}
        for (u, v, _data), edge_id in zip(edges, edge_ids):
            flow_dict[u][v] = graph.flow(edge_id)
    return result.flow, result.cost, flow_dict


def cost_of_flow(G, flow_dict: FlowDict | MultiFlowDict, *, weight: str = "weight") -> int:
    """Compute the total cost for a flow dict in NetworkX format."""
    total = 0
    if G.is_multigraph():
        edges = G.edges(keys=True, data=True)
    else:
        edges = G.edges(data=True)
    for edge in edges:
        if G.is_multigraph():
            u, v, key, data = edge
            flow = flow_dict.get(u, {}).get(v, {}).get(key, 0)
        else:
            u, v, data = edge
            flow = flow_dict.get(u, {}).get(v, 0)
        total += int(flow) * int(data.get(weight, 0))
    return total


__all__ = ["cost_of_flow", "max_flow_min_cost"]
