"""Successive shortest augmenting paths with vertex potentials."""
from __future__ import annotations

import logging
import time
from typing import List, NamedTuple

from .diagnostics import find_negative_cycle, has_negative_cost_edge
from .exceptions import InvalidArgumentError, InvalidStateError
from .graph import ResidualGraph
from .options import FlowOptions
from .potentials import INF, bellman_ford_potentials
from .shortest_path import PathResult, shortest_path_with_potentials
from .verify import verify_conservation

logger = logging.getLogger(__name__)


class FlowResult(NamedTuple):
    flow: int
    cost: int


def _update_potentials(potential: List[int], path: PathResult, sink: int) -> None:
    """Johnson update that keeps the next round's reduced costs non-negative.

    When the search stopped at the sink, distances of nodes that were not
    finalized are only upper bounds, so every node is raised by at most the
    sink distance.
    """
    dist = path.dist
    if path.stopped_at_sink:
        limit = dist[sink]
        for v, d in enumerate(dist):
            potential[v] += d if d < limit else limit
    else:
        for v, d in enumerate(dist):
            if d < INF:
                potential[v] += d


def solve(
    graph: ResidualGraph,
    source: int,
    sink: int,
    options: FlowOptions | None = None,
) -> FlowResult:
    """Push as much flow as allowed from ``source`` to ``sink`` at minimum cost.

    Residual capacities of ``graph`` are updated in place; call
    :meth:`ResidualGraph.reset` before solving the same graph again.

    Args:
        graph: Residual network built with :meth:`ResidualGraph.add_edge`.
        source: Index of the source node.
        sink: Index of the sink node.
        options: Solver configuration, :class:`FlowOptions` defaults if None.

    Returns:
        ``FlowResult(flow, cost)``.

    Raises:
        InvalidArgumentError: bad node index, negative ``max_flow``, or a
            negative-cost edge while ``allow_negative_costs`` is False.
        InvalidStateError: a negative cycle was found or the conservation
            check failed.
    """
    if options is None:
        options = FlowOptions.defaults()
    n = graph.node_count
    if not (0 <= source < n and 0 <= sink < n):
        raise InvalidArgumentError("Node index out of bounds.")
    if source == sink:
        return FlowResult(0, 0)
    if options.max_flow is not None and options.max_flow < 0:
        raise InvalidArgumentError("Max flow must be non-negative.")

    negative_costs = has_negative_cost_edge(graph)
    if not options.allow_negative_costs and negative_costs:
        raise InvalidArgumentError("Negative costs are not allowed by options.")
    if options.check_negative_cycles:
        cycle = find_negative_cycle(graph)
        if cycle is not None:
            logger.warning("Negative cost cycle found", extra={"cycle": cycle})
            raise InvalidStateError(f"Negative cost cycle detected: {cycle}")

    logger.info(
        "Starting successive shortest path solver",
        extra={
            "nodes": n,
            "arcs": graph.edge_count,
            "source": source,
            "sink": sink,
            **options.as_dict(),
        },
    )
    start_time = time.perf_counter()

    if options.use_bellman_ford_init_potentials:
        potential = bellman_ford_potentials(graph, source)
        feasible = True
    else:
        potential = [0] * n
        feasible = not negative_costs

    flow = 0
    cost = 0
    iterations = 0
    while True:
        # zero potentials over negative costs are not yet feasible, so the
        # first search has to drain its queue to get exact distances
        path = shortest_path_with_potentials(
            graph, source, sink, potential, stop_at_sink=feasible
        )
        feasible = True
        if not path.reached_sink:
            break
        _update_potentials(potential, path, sink)

        add = path.bottleneck[sink]
        if options.max_flow is not None:
            add = min(add, options.max_flow - flow)
        if add <= 0:
            break

        v = sink
        while v != source:
            u = path.parent_node[v]
            graph.push(u, path.parent_edge[v], add)
            v = u
        flow += add
        cost += add * path.path_cost[sink]
        iterations += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Augmented %d units at unit cost %d",
                add,
                path.path_cost[sink],
                extra={"iteration": iterations, "flow": flow, "cost": cost},
            )

    if options.verify_conservation:
        verify_conservation(graph, source, sink, flow)

    logger.info(
        "Solver finished",
        extra={
            "flow": flow,
            "cost": cost,
            "iterations": iterations,
            "elapsed_seconds": time.perf_counter() - start_time,
        },
    )
    return FlowResult(flow, cost)


def min_cost_max_flow(graph: ResidualGraph, source: int, sink: int) -> FlowResult:
    """Maximum flow at minimum cost with default options."""
    return solve(graph, source, sink, FlowOptions.defaults())


def min_cost_flow(graph: ResidualGraph, source: int, sink: int, max_flow: int) -> FlowResult:
    """Cheapest way to push at most ``max_flow`` units."""
    return solve(graph, source, sink, FlowOptions(max_flow=max_flow))


__all__ = ["FlowResult", "min_cost_flow", "min_cost_max_flow", "solve"]
