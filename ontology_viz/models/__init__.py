from .graph import (
    Edge,
    Graph,
    GraphStatistics,
    NeighborRecord,
    Neighborhood,
    Node,
    Triple,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphStatistics",
    "NeighborRecord",
    "Neighborhood",
    "Node",
    "Triple",
]
