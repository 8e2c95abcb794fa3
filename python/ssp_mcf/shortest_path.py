"""One shortest-path search over reduced (potential-adjusted) costs."""
from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .exceptions import InvalidStateError
from .graph import ResidualGraph
from .potentials import INF


@dataclass
class PathResult:
    """Per-node output of :func:`shortest_path_with_potentials`.

    ``dist`` is measured in reduced costs, ``path_cost`` in true costs.
    ``parent_edge[v]`` is the position of the arc into ``v`` inside the
    adjacency list of ``parent_node[v]``.
    """

    dist: List[int]
    bottleneck: List[int]
    parent_node: List[int]
    parent_edge: List[int]
    path_cost: List[int]
    reached_sink: bool
    stopped_at_sink: bool

    def path_edges(self, source: int, sink: int) -> List[Tuple[int, int]]:
        """Return ``(tail, index)`` pairs from ``source`` to ``sink``."""
        if self.dist[sink] == INF:
            return []
        path = []
        v = sink
        while v != source:
            u = self.parent_node[v]
            path.append((u, self.parent_edge[v]))
            v = u
        path.reverse()
        return path


def shortest_path_with_potentials(
    graph: ResidualGraph,
    source: int,
    sink: int,
    potential: Sequence[int],
    *,
    stop_at_sink: bool = True,
) -> PathResult:
    """
    Dijkstra over Johnson-reweighted residual costs.

    The reduced cost of ``u -> v`` is ``cost + potential[u] - potential[v]``.
    Only arcs with positive residual capacity are relaxed. The queue has no
    decrease-key: an entry whose distance no longer matches ``dist`` is
    stale and skipped. A node whose distance improves after it was popped is
    pushed again, so the search stays correct if some reduced costs are
    negative, as long as it is allowed to drain the queue
    (``stop_at_sink=False``).

    Raises:
        InvalidStateError: a tentative path grew to ``n`` arcs, which only
            happens when it runs around a negative-cost cycle.
    """
    n = graph.node_count
    dist = [INF] * n
    bottleneck = [0] * n
    parent_node = [-1] * n
    parent_edge = [-1] * n
    path_cost = [0] * n
    hops = [0] * n

    dist[source] = 0
    bottleneck[source] = INF

    pq = [(0, source)]
    stopped = False
    while pq:
        d, u = heapq.heappop(pq)
        if d != dist[u]:
            continue
        if stop_at_sink and u == sink:
            stopped = True
            break
        pu = potential[u]
        for idx, e in enumerate(graph.edges_from(u)):
            if e.capacity <= 0:
                continue
            v = e.to
            nd = d + e.cost + pu - potential[v]
            if nd < dist[v]:
                dist[v] = nd
                parent_node[v] = u
                parent_edge[v] = idx
                bottleneck[v] = min(bottleneck[u], e.capacity)
                path_cost[v] = path_cost[u] + e.cost
                hops[v] = hops[u] + 1
                if hops[v] >= n:
                    raise InvalidStateError("Negative cost cycle detected in residual graph.")
                heapq.heappush(pq, (nd, v))

    return PathResult(
        dist=dist,
        bottleneck=bottleneck,
        parent_node=parent_node,
        parent_edge=parent_edge,
        path_cost=path_cost,
        reached_sink=dist[sink] != INF,
        stopped_at_sink=stopped,
    )


__all__ = ["PathResult", "shortest_path_with_potentials"]
