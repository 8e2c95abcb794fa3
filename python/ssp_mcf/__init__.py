"""Python interface for ssp-mcf.

Example:
    >>> from ssp_mcf import FlowOptions, ResidualGraph, solve
    >>> graph = ResidualGraph(3)
    >>> _ = graph.add_edge(0, 1, 1, -5)
    >>> _ = graph.add_edge(1, 2, 1, 2)
    >>> _ = graph.add_edge(0, 2, 1, 4)
    >>> solve(graph, 0, 2)
    FlowResult(flow=2, cost=1)

Safety checks:
    :class:`FlowOptions` toggles negative-cost rejection, a negative-cycle
    pre-check, Bellman-Ford potential seeding, and a post-solve
    conservation check. All are off by default except that negative costs
    are allowed.
"""

from ._version import __version__
from .diagnostics import find_negative_cycle, has_negative_cost_edge, has_negative_cycle
from .exceptions import FlowError, InvalidArgumentError, InvalidStateError
from .graph import Edge, ResidualGraph, create
from .nx import cost_of_flow, max_flow_min_cost
from .options import FlowOptions
from .potentials import bellman_ford_potentials
from .shortest_path import PathResult, shortest_path_with_potentials
from .solver import FlowResult, min_cost_flow, min_cost_max_flow, solve
from .typing import EdgeId, FlowDict
from .verify import node_balances, verify_conservation

__all__ = [
    "Edge",
    "EdgeId",
    "FlowDict",
    "FlowError",
    "FlowOptions",
    "FlowResult",
    "InvalidArgumentError",
    "InvalidStateError",
    "PathResult",
    "ResidualGraph",
    "bellman_ford_potentials",
    "cost_of_flow",
    "create",
    "find_negative_cycle",
    "has_negative_cost_edge",
    "has_negative_cycle",
    "max_flow_min_cost",
    "min_cost_flow",
    "min_cost_max_flow",
    "node_balances",
    "shortest_path_with_potentials",
    "solve",
    "verify_conservation",
    "__version__",
]
