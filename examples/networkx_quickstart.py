"""Quickstart example for ssp-mcf with NetworkX."""
import networkx as nx

from ssp_mcf.nx import cost_of_flow, max_flow_min_cost


def main() -> None:
    graph = nx.DiGraph()
    graph.add_edge("s", "a", capacity=2, weight=-1)
    graph.add_edge("a", "t", capacity=2, weight=3)
    graph.add_edge("s", "t", capacity=1, weight=4)

    flow_value, cost, flow = max_flow_min_cost(graph, "s", "t")
    print("flow value:", flow_value)
    print("flow:", flow)
    print("cost:", cost, cost_of_flow(graph, flow))


if __name__ == "__main__":
    main()
