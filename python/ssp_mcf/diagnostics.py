"""Pre-flight checks over the original (non-residual) arcs."""
from __future__ import annotations

from .graph import ResidualGraph


def has_negative_cost_edge(graph: ResidualGraph) -> bool:
    """True iff an original edge with spare capacity has a negative cost."""
    for u in range(graph.node_count):
        for e in graph.edges_from(u):
            if e.original and e.capacity > 0 and e.cost < 0:
                return True
    return False


def has_negative_cycle(graph: ResidualGraph) -> bool:
    """Bellman-Ford from every node at once over arcs with spare capacity.

    All distances start at 0, so a cycle anywhere in the graph is found, not
    only one reachable from a particular source. A cycle exists iff the
    ``n``-th round still relaxes an edge.
    """
    n = graph.node_count
    dist = [0] * n
    for _ in range(n):
        updated = False
        for u in range(n):
            for e in graph.edges_from(u):
                if not e.original or e.capacity <= 0:
                    continue
                nd = dist[u] + e.cost
                if nd < dist[e.to]:
                    dist[e.to] = nd
                    updated = True
        if not updated:
            return False
    return True


def find_negative_cycle(graph: ResidualGraph) -> list[int] | None:
    """Return a negative cycle as a node list, or None if there is none.

    The first node is repeated at the end of the list.
    """
    n = graph.node_count
    dist = [0] * n
    pred = [-1] * n
    last_updated = -1
    for _ in range(n):
        last_updated = -1
        for u in range(n):
            for e in graph.edges_from(u):
                if not e.original or e.capacity <= 0:
                    continue
                nd = dist[u] + e.cost
                if nd < dist[e.to]:
                    dist[e.to] = nd
                    pred[e.to] = u
                    last_updated = e.to
        if last_updated == -1:
            return None

    # n steps back from a node relaxed in round n always land on the cycle
    cycle_node = last_updated
    for _ in range(n):
        cycle_node = pred[cycle_node]
    cycle = [cycle_node]
    current = pred[cycle_node]
    while current != cycle_node:
        cycle.append(current)
        current = pred[current]
    cycle.append(cycle_node)
    cycle.reverse()
    return cycle


__all__ = ["find_negative_cycle", "has_negative_cost_edge", "has_negative_cycle"]
