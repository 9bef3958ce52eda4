from __future__ import annotations

import logging
from typing import Optional, Union

from ontology_viz.config.settings import Settings, get_settings
from ontology_viz.errors import InvalidArgumentError
from ontology_viz.graph.builder import build_graph
from ontology_viz.graph.neighborhood import get_neighborhood
from ontology_viz.graph.sampler import sample_top_k
from ontology_viz.graph.schema import RdfFormat
from ontology_viz.graph.statistics import compute_statistics
from ontology_viz.models.graph import Graph, GraphStatistics, Neighborhood
from ontology_viz.parsing.loader import iter_triples, load_dataset

logger = logging.getLogger(__name__)

Content = Union[str, bytes]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_format(fmt: Optional[Union[str, RdfFormat]], settings: Settings) -> RdfFormat:
    if isinstance(fmt, RdfFormat):
        return fmt
    return RdfFormat.from_name(fmt if fmt is not None else settings.default_format)


def _full_graph(content: Content, rdf_format: RdfFormat, settings: Settings) -> Graph:
    dataset = load_dataset(content, rdf_format)
    graph = build_graph(iter_triples(dataset), batch_size=settings.batch_size)
    logger.info(
        "Built graph with %d nodes and %d edges from %s input",
        len(graph.nodes),
        len(graph.edges),
        rdf_format.name,
    )
    return graph


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_ontology(
    content: Content,
    fmt: Optional[Union[str, RdfFormat]] = None,
    max_nodes: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> Graph:
    """
    Parse ontology text and return a graph capped at `max_nodes` nodes.

    max_nodes=None keeps the whole graph. A negative cap is rejected before
    any parsing happens.
    """
    settings = settings or get_settings()
    if max_nodes is not None and max_nodes < 0:
        raise InvalidArgumentError(f"maxNodes must be non-negative, got {max_nodes}")

    rdf_format = _resolve_format(fmt, settings)
    graph = _full_graph(content, rdf_format, settings)

    sampled = sample_top_k(graph, max_nodes)
    if sampled is not graph:
        logger.debug(
            "Sampled graph down to %d of %d nodes (%d edges kept)",
            len(sampled.nodes),
            len(graph.nodes),
            len(sampled.edges),
        )
    return sampled


def node_details(
    content: Content,
    fmt: Optional[Union[str, RdfFormat]],
    node_id: Optional[str],
    settings: Optional[Settings] = None,
) -> Neighborhood:
    """Incoming/outgoing connections of one node, with dataset labels."""
    settings = settings or get_settings()
    if node_id is None or not node_id.strip():
        raise InvalidArgumentError("Node id cannot be empty")

    rdf_format = _resolve_format(fmt, settings)
    dataset = load_dataset(content, rdf_format)
    return get_neighborhood(dataset, node_id, label_property=settings.label_property)


def ontology_statistics(
    content: Content,
    fmt: Optional[Union[str, RdfFormat]] = None,
    settings: Optional[Settings] = None,
) -> GraphStatistics:
    """Statistics over the complete (unsampled) graph."""
    settings = settings or get_settings()
    rdf_format = _resolve_format(fmt, settings)
    return compute_statistics(_full_graph(content, rdf_format, settings))
