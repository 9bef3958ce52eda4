# ontology_viz/graph/sampler.py

from __future__ import annotations

from typing import List, Optional, Set

import networkx as nx

from ontology_viz.models.graph import Graph


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """
    Build a MultiDiGraph view of the graph: one networkx edge per Edge
    (repeated triples included), with node/edge labels as attributes.
    """
    G = nx.MultiDiGraph()
    for node in graph.nodes:
        G.add_node(node.id, label=node.label)
    for edge in graph.edges:
        G.add_edge(
            edge.subject,
            edge.object,
            predicate=edge.predicate,
            label=edge.label,
        )
    return G


def rank_nodes(graph: Graph) -> List[str]:
    """
    Node ids ordered by degree (descending), ties broken by id (ascending).

    Degrees are recomputed from the edges present in `graph`. In a
    MultiDiGraph a self-loop contributes to both in- and out-degree, so it
    counts twice, and parallel edges each count once.
    """
    G = to_networkx(graph)
    degrees = G.degree()
    return sorted(
        (node.id for node in graph.nodes),
        key=lambda node_id: (-degrees[node_id], node_id),
    )


def sample_top_k(graph: Graph, capacity: Optional[int] = None) -> Graph:
    """
    Return the induced subgraph on the `capacity` highest-degree nodes.

    - capacity None, or graph already small enough: the input is returned as is.
    - An edge survives only if both its endpoints were selected.

    Callers validate that capacity is non-negative.
    """
    if capacity is None or len(graph.nodes) <= capacity:
        return graph

    selected: Set[str] = set(rank_nodes(graph)[:capacity])

    return Graph(
        nodes=tuple(node for node in graph.nodes if node.id in selected),
        edges=tuple(
            edge
            for edge in graph.edges
            if edge.subject in selected and edge.object in selected
        ),
    )
