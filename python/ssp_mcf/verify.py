"""Post-hoc flow-conservation check."""
from __future__ import annotations

import logging

import numpy as np

from .exceptions import InvalidStateError
from .graph import ResidualGraph

logger = logging.getLogger(__name__)


def node_balances(graph: ResidualGraph) -> np.ndarray:
    """Net inflow per node implied by the flow on the original arcs."""
    tail, head, _capacity, _cost, flow = graph.to_arrays()
    balance = np.zeros(graph.node_count, dtype=np.int64)
    np.add.at(balance, tail, -flow)
    np.add.at(balance, head, flow)
    return balance


def verify_conservation(graph: ResidualGraph, source: int, sink: int, total_flow: int) -> None:
    """Raise InvalidStateError unless every node is balanced.

    The source must show ``-total_flow``, the sink ``+total_flow`` and every
    other node zero.
    """
    expected = np.zeros(graph.node_count, dtype=np.int64)
    expected[source] = -total_flow
    expected[sink] = total_flow
    balance = node_balances(graph)
    mismatched = np.flatnonzero(balance != expected)
    if mismatched.size:
        node = int(mismatched[0])
        logger.warning(
            "Flow conservation check failed",
            extra={"node": node, "balance": int(balance[node]), "expected": int(expected[node])},
        )
        raise InvalidStateError(f"Flow conservation violated at node {node}")


__all__ = ["node_balances", "verify_conservation"]
