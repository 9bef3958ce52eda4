# ontology_viz/graph/statistics.py

from __future__ import annotations

from typing import Set

from ontology_viz.models.graph import Graph, GraphStatistics


def compute_statistics(graph: Graph) -> GraphStatistics:
    """
    Count nodes, edges and distinct edge labels.

    Labels are compared after label derivation, so two predicates from
    different namespaces that both end in "#name" count once. Every edge
    comes from exactly one triple, hence triple_count == edge_count.
    """
    labels: Set[str] = set()
    for edge in graph.edges:
        labels.add(edge.label)

    return GraphStatistics(
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        triple_count=len(graph.edges),
        distinct_label_count=len(labels),
    )
