# tests/test_graph_builder.py

import itertools
from collections import Counter

import pytest

from ontology_viz.errors import InvalidArgumentError, ParseError
from ontology_viz.graph.builder import (
    GraphBuilder,
    build_graph,
    degree_map,
    merge_degree_maps,
)
from ontology_viz.models.graph import Edge, Node, Triple

EX = "http://ex.org/onto#"


def _triples():
    return [
        Triple(EX + "A", EX + "p", EX + "B"),
        Triple(EX + "B", EX + "q", EX + "C"),
        Triple(EX + "A", EX + "r", EX + "C"),
        Triple(EX + "C", EX + "p", EX + "C"),  # self-loop
        Triple(EX + "A", EX + "p", EX + "B"),  # repeated triple
    ]


def test_build_graph_basic():
    G = build_graph(_triples())

    assert G.node_ids() == {EX + "A", EX + "B", EX + "C"}
    assert len(G.nodes) == 3
    assert len(G.edges) == 5

    # Labels are derived from ids / predicates
    assert Node(EX + "A", "A") in G.nodes
    assert G.edges[0] == Edge(EX + "A", EX + "B", EX + "p", "p")

    # Every edge endpoint is a node
    ids = G.node_ids()
    for e in G.edges:
        assert e.subject in ids
        assert e.object in ids


def test_edges_keep_arrival_order():
    triples = _triples()
    G = build_graph(triples, batch_size=2)

    assert [(e.subject, e.predicate, e.object) for e in G.edges] == [
        (t.subject, t.predicate, t.object) for t in triples
    ]


def test_degrees_count_self_loops_twice():
    builder = GraphBuilder()
    builder.add_batch(_triples())

    # A: 3 edges, B: 3 edges, C: 2 edges + self-loop (2)
    assert builder.degrees == {EX + "A": 3, EX + "B": 3, EX + "C": 4}
    assert degree_map(builder.build().edges) == builder.degrees


def test_build_graph_is_order_and_batch_independent():
    triples = _triples()
    reference = build_graph(triples)
    ref_degrees = degree_map(reference.edges)

    for perm in itertools.permutations(triples):
        for batch_size in (1, 2, 3, 500):
            G = build_graph(iter(perm), batch_size=batch_size)
            assert G.node_ids() == reference.node_ids()
            assert set(G.nodes) == set(reference.nodes)
            assert degree_map(G.edges) == ref_degrees
            assert Counter(G.edges) == Counter(reference.edges)


def test_build_graph_empty_stream():
    G = build_graph(iter(()))
    assert G.nodes == ()
    assert G.edges == ()


def test_build_graph_rejects_non_positive_batch_size():
    with pytest.raises(InvalidArgumentError):
        build_graph(_triples(), batch_size=0)


def test_build_graph_propagates_source_errors():
    def source():
        yield Triple(EX + "A", EX + "p", EX + "B")
        raise ParseError("bad input", fmt="turtle")

    with pytest.raises(ParseError):
        build_graph(source(), batch_size=1)


def test_build_graph_consumes_lazily():
    pulled = []

    def source():
        for t in _triples():
            pulled.append(t)
            yield t

    # Nothing is read before the builder starts.
    stream = source()
    assert pulled == []
    build_graph(stream, batch_size=2)
    assert len(pulled) == len(_triples())


def test_builder_snapshot_is_immutable():
    builder = GraphBuilder()
    builder.add(Triple("a", "p", "b"))
    snapshot = builder.build()

    builder.add(Triple("b", "p", "c"))

    assert len(snapshot.nodes) == 2
    assert len(snapshot.edges) == 1
    assert len(builder.build().nodes) == 3


def test_merge_degree_maps_matches_single_pass():
    triples = _triples()
    left = GraphBuilder()
    left.add_batch(triples[:2])
    right = GraphBuilder()
    right.add_batch(triples[2:])

    full = degree_map(build_graph(triples).edges)
    assert merge_degree_maps(left.degrees, right.degrees) == full
    assert merge_degree_maps(right.degrees, left.degrees) == full
