# ontology_viz/models/graph.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class Triple:
    subject: str
    predicate: str
    object: str


@dataclass(frozen=True)
class Node:
    id: str
    label: str


@dataclass(frozen=True)
class Edge:
    subject: str
    object: str
    predicate: str
    label: str


@dataclass(frozen=True)
class Graph:
    """
    A renderable ontology graph.

    - nodes: unique by id, in first-seen order
    - edges: one per triple, in ingestion order

    Every edge endpoint is present in ``nodes``.
    """

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()

    def node_ids(self) -> FrozenSet[str]:
        return frozenset(node.id for node in self.nodes)


@dataclass(frozen=True)
class NeighborRecord:
    node_id: str
    node_label: str
    relationship_type: str


@dataclass(frozen=True)
class Neighborhood:
    id: str
    label: str
    incoming: Tuple[NeighborRecord, ...] = field(default_factory=tuple)
    outgoing: Tuple[NeighborRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GraphStatistics:
    node_count: int
    edge_count: int
    triple_count: int
    distinct_label_count: int
