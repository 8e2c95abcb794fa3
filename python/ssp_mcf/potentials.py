"""Bellman-Ford seed for the vertex potentials."""
from __future__ import annotations

from typing import List

from .graph import ResidualGraph

INF = 10**18  # "∞" large enough for all problem sizes


def bellman_ford_potentials(graph: ResidualGraph, source: int) -> List[int]:
    """
    Single-source shortest distances from ``source`` over original arcs with
    spare capacity, used as initial potentials.

    With these potentials every reduced cost seen by the first path search is
    already non-negative, even when original costs are negative. Nodes the
    source cannot reach get potential 0: they never lie on an augmenting
    path, and an "infinite" potential would corrupt reduced costs of the
    edges touching them.
    """
    n = graph.node_count
    dist = [INF] * n
    dist[source] = 0
    for _ in range(n - 1):
        updated = False
        for u in range(n):
            if dist[u] == INF:
                continue
            for e in graph.edges_from(u):
                if not e.original or e.capacity <= 0:
                    continue
                nd = dist[u] + e.cost
                if nd < dist[e.to]:
                    dist[e.to] = nd
                    updated = True
        if not updated:  # early exit if nothing relaxed
            break

    return [0 if d == INF else d for d in dist]


__all__ = ["INF", "bellman_ford_potentials"]
