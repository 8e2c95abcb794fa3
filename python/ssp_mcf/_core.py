"""Low-level array API.

Builds a residual graph from parallel edge arrays, solves it, and reports
the per-edge flow in input order.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from ._version import __version__
from .exceptions import InvalidArgumentError
from .graph import ResidualGraph
from .options import FlowOptions
from .solver import solve

__all__ = ["max_flow_min_cost_edges", "__version__"]


def _as_int64_array(values: Iterable[int], name: str) -> np.ndarray:
    array = np.asarray(values, dtype=np.int64)
    if array.ndim != 1:
        raise InvalidArgumentError(f"{name} must be a 1D array")
    return array


def max_flow_min_cost_edges(
    n: int,
    tail: Iterable[int],
    head: Iterable[int],
    capacity: Iterable[int],
    cost: Iterable[int],
    source: int,
    sink: int,
    *,
    options: FlowOptions | None = None,
) -> tuple[np.ndarray, int, int]:
    """Solve min-cost max-flow on an edge list.

    Returns:
        ``(flows, flow_value, total_cost)`` where ``flows[i]`` is the flow
        routed on input edge ``i``.
    """
    if n <= 0:
        raise InvalidArgumentError("n must be positive")

    tail_arr = _as_int64_array(tail, "tail")
    head_arr = _as_int64_array(head, "head")
    capacity_arr = _as_int64_array(capacity, "capacity")
    cost_arr = _as_int64_array(cost, "cost")

    edge_count = len(tail_arr)
    if len(head_arr) != edge_count:
        raise InvalidArgumentError("tail and head arrays must match length")
    if len(capacity_arr) != edge_count or len(cost_arr) != edge_count:
        raise InvalidArgumentError("edge attribute arrays must match tail/head length")

    if np.any(tail_arr < 0) or np.any(tail_arr >= n):
        raise InvalidArgumentError("tail index out of range")
    if np.any(head_arr < 0) or np.any(head_arr >= n):
        raise InvalidArgumentError("head index out of range")
    if np.any(capacity_arr < 0):
        raise InvalidArgumentError("capacity must be non-negative")

    graph = ResidualGraph(n)
    edge_ids = [
        graph.add_edge(u, v, cap, c)
        for u, v, cap, c in zip(
            tail_arr.tolist(), head_arr.tolist(), capacity_arr.tolist(), cost_arr.tolist()
        )
    ]
    result = solve(graph, int(source), int(sink), options)

    flows = np.fromiter((graph.flow(edge_id) for edge_id in edge_ids), dtype=np.int64, count=edge_count)
    return flows, result.flow, result.cost
