# ontology_viz/graph/builder.py

from __future__ import annotations

from collections import Counter
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence

from ontology_viz.errors import InvalidArgumentError
from ontology_viz.graph.labels import extract_label
from ontology_viz.models.graph import Edge, Graph, Node, Triple

DEFAULT_BATCH_SIZE = 500

DegreeMap = Dict[str, int]


def _batched(triples: Iterable[Triple], size: int) -> Iterator[List[Triple]]:
    """
    Yield lists of at most `size` triples without materializing the stream.
    """
    it = iter(triples)
    while True:
        batch = list(islice(it, size))
        if not batch:
            return
        yield batch


class GraphBuilder:
    """
    Accumulate triples into local node/edge/degree structures.

    The builder owns its working state until build() is called; the returned
    Graph is an immutable snapshot and later add() calls do not affect it.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []
        self._degrees: Counter[str] = Counter()

    def _ensure_node(self, node_id: str) -> None:
        if node_id not in self._nodes:
            self._nodes[node_id] = Node(id=node_id, label=extract_label(node_id))

    def add(self, triple: Triple) -> None:
        self._ensure_node(triple.subject)
        self._ensure_node(triple.object)

        self._edges.append(
            Edge(
                subject=triple.subject,
                object=triple.object,
                predicate=triple.predicate,
                label=extract_label(triple.predicate),
            )
        )

        # Self-loops count twice.
        self._degrees[triple.subject] += 1
        self._degrees[triple.object] += 1

    def add_batch(self, batch: Sequence[Triple]) -> None:
        for triple in batch:
            self.add(triple)

    @property
    def degrees(self) -> DegreeMap:
        return dict(self._degrees)

    def build(self) -> Graph:
        return Graph(nodes=tuple(self._nodes.values()), edges=tuple(self._edges))


def build_graph(
    triples: Iterable[Triple],
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Graph:
    """
    Build a Graph from a (possibly very large) triple stream.

    Parameters
    ----------
    triples:
        Any iterable of Triple. Consumed lazily, `batch_size` at a time.
        Errors raised by the producer (e.g. ParseError) propagate unchanged.

    batch_size:
        Upper bound on triples held per processing step. Only affects peak
        memory; the resulting graph is the same for every batch size.

    Returns
    -------
    Graph
        Deduplicated nodes and one edge per triple, in arrival order.
    """
    if batch_size <= 0:
        raise InvalidArgumentError(f"batch_size must be positive, got {batch_size}")

    builder = GraphBuilder()
    for batch in _batched(triples, batch_size):
        builder.add_batch(batch)
    return builder.build()


def degree_map(edges: Iterable[Edge]) -> DegreeMap:
    """Recompute node degrees from an edge list."""
    degrees: Counter[str] = Counter()
    for edge in edges:
        degrees[edge.subject] += 1
        degrees[edge.object] += 1
    return dict(degrees)


def merge_degree_maps(*maps: Mapping[str, int]) -> DegreeMap:
    """
    Merge partial degree maps computed over disjoint slices of a triple stream.

    Addition is commutative, so the result does not depend on argument order.
    """
    merged: Counter[str] = Counter()
    for partial in maps:
        merged.update(partial)
    return dict(merged)
