"""Type aliases for the ssp-mcf public API."""
from __future__ import annotations

from typing import Dict, Hashable, Tuple

NodeIndex = int
Capacity = int
Cost = int
FlowValue = int

# (tail, position of the forward edge in the tail's adjacency list)
EdgeId = Tuple[NodeIndex, int]

Node = Hashable
FlowDict = Dict[Node, Dict[Node, FlowValue]]
MultiFlowDict = Dict[Node, Dict[Node, Dict[Hashable, FlowValue]]]

__all__ = [
    "Capacity",
    "Cost",
    "EdgeId",
    "FlowDict",
    "FlowValue",
    "MultiFlowDict",
    "Node",
    "NodeIndex",
]
