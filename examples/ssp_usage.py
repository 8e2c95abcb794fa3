"""Example usage of the residual-graph API with solver options."""
from __future__ import annotations

import logging

from ssp_mcf import FlowOptions, ResidualGraph, solve


def build_grid_graph(size: int = 8) -> ResidualGraph:
    graph = ResidualGraph(size * size)
    for i in range(size):
        for j in range(size):
            node = i * size + j
            if i + 1 < size:
                graph.add_edge(node, node + size, 5, 1)
            if j + 1 < size:
                graph.add_edge(node, node + 1, 5, 1)
    return graph


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    size = 8
    graph = build_grid_graph(size)
    options = FlowOptions(max_flow=10, verify_conservation=True)
    result = solve(graph, 0, size * size - 1, options)
    print("flow:", result.flow)
    print("cost:", result.cost)


if __name__ == "__main__":
    main()
