"""Residual graph storage with paired forward/reverse arcs."""
from __future__ import annotations

from typing import Iterator

import numpy as np

from .exceptions import InvalidArgumentError
from .typing import EdgeId


class Edge:
    """
    One directed arc in the residual network.

    The paired arc is addressed by index (``rev``) inside the adjacency list
    of ``to`` rather than by reference.
    """

    __slots__ = (
        "to",                # head node
        "capacity",          # residual capacity
        "initial_capacity",  # capacity at creation
        "cost",              # signed per-unit cost
        "original",          # False for the residual twin
        "rev",               # index of the paired arc in graph[to]
    )

    def __init__(self, to: int, capacity: int, cost: int, original: bool, rev: int) -> None:
        self.to = to
        self.capacity = capacity
        self.initial_capacity = capacity
        self.cost = cost
        self.original = original
        self.rev = rev

    def __repr__(self) -> str:
        return (
            f"Edge(to={self.to}, cap={self.capacity}/{self.initial_capacity}, "
            f"cost={self.cost}, original={self.original})"
        )


class ResidualGraph:
    """Adjacency-list residual network over nodes ``0 .. n-1``.

    Edges are only ever appended. Solving changes residual capacities but
    never the structure.
    """

    def __init__(self, node_count: int) -> None:
        if node_count <= 0:
            raise InvalidArgumentError("Number of nodes must be positive.")
        self._n = node_count
        self._adj: list[list[Edge]] = [[] for _ in range(node_count)]
        self._arcs: list[EdgeId] = []

    @property
    def node_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        """Number of user-added arcs (residual twins excluded)."""
        return len(self._arcs)

    def __len__(self) -> int:
        return self._n

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._n:
            raise InvalidArgumentError(f"Node index {node} out of bounds for {self._n} nodes.")

    def add_edge(self, u: int, v: int, capacity: int, cost: int) -> EdgeId:
        """Append the arc ``u -> v`` and its zero-capacity residual twin."""
        self._check_node(u)
        self._check_node(v)
        if capacity < 0:
            raise InvalidArgumentError("Capacity must be non-negative.")
        fwd_index = len(self._adj[u])
        # for a self-loop the twin lands right after the forward arc
        rev_index = len(self._adj[v]) + (1 if u == v else 0)
        self._adj[u].append(Edge(v, capacity, cost, True, rev_index))
        self._adj[v].append(Edge(u, 0, -cost, False, fwd_index))
        edge_id = (u, fwd_index)
        self._arcs.append(edge_id)
        return edge_id

    def edges_from(self, u: int) -> list[Edge]:
        return self._adj[u]

    def edge(self, edge_id: EdgeId) -> Edge:
        u, index = edge_id
        self._check_node(u)
        return self._adj[u][index]

    def reverse(self, edge: Edge) -> Edge:
        return self._adj[edge.to][edge.rev]

    def original_edges(self) -> Iterator[tuple[int, Edge]]:
        """Yield ``(tail, edge)`` for every user-added arc in insertion order."""
        for u, index in self._arcs:
            yield u, self._adj[u][index]

    def push(self, u: int, index: int, amount: int) -> None:
        """Send ``amount`` units across ``graph[u][index]``."""
        edge = self._adj[u][index]
        edge.capacity -= amount
        self._adj[edge.to][edge.rev].capacity += amount

    def flow(self, edge_id: EdgeId) -> int:
        edge = self.edge(edge_id)
        return edge.initial_capacity - edge.capacity

    def residual_capacity(self, edge_id: EdgeId) -> int:
        return self.edge(edge_id).capacity

    def reset(self) -> None:
        """Drop all routed flow so the graph can be solved again."""
        for edges in self._adj:
            for edge in edges:
                edge.capacity = edge.initial_capacity

    def to_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(tail, head, capacity, cost, flow)`` for the user arcs."""
        m = len(self._arcs)
        tail = np.empty(m, dtype=np.int64)
        head = np.empty(m, dtype=np.int64)
        capacity = np.empty(m, dtype=np.int64)
        cost = np.empty(m, dtype=np.int64)
        flow = np.empty(m, dtype=np.int64)
        for idx, (u, edge) in enumerate(self.original_edges()):
            tail[idx] = u
            head[idx] = edge.to
            capacity[idx] = edge.initial_capacity
            cost[idx] = edge.cost
            flow[idx] = edge.initial_capacity - edge.capacity
        return tail, head, capacity, cost, flow

    def __repr__(self) -> str:
        return f"ResidualGraph(nodes={self._n}, arcs={len(self._arcs)})"


def create(node_count: int) -> ResidualGraph:
    """Return an empty residual graph with ``node_count`` nodes."""
    return ResidualGraph(node_count)


__all__ = ["Edge", "ResidualGraph", "create"]
