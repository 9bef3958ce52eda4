"""
Core graph operations: accumulate triples into a Graph, sample it down to the
highest-degree nodes, expand a node's neighborhood and summarize a Graph.
"""

from .builder import GraphBuilder, build_graph, degree_map, merge_degree_maps
from .labels import extract_label, resolve_label
from .neighborhood import get_neighborhood
from .sampler import rank_nodes, sample_top_k, to_networkx
from .statistics import compute_statistics

__all__ = [
    "GraphBuilder",
    "build_graph",
    "compute_statistics",
    "degree_map",
    "extract_label",
    "get_neighborhood",
    "merge_degree_maps",
    "rank_nodes",
    "resolve_label",
    "sample_top_k",
    "to_networkx",
]
