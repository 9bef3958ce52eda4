# tests/test_loader.py

import pytest

from ontology_viz.errors import (
    InvalidArgumentError,
    OntologyVizError,
    ParseError,
    UnsupportedFormatError,
)
from ontology_viz.graph.schema import RdfFormat
from ontology_viz.parsing.loader import iter_triples, load_dataset
from ontology_viz.models.graph import Triple

from ontology_samples import (
    A,
    B,
    BLANK_TTL,
    BROKEN_TTL,
    CAT,
    CATS_EDGE_COUNT,
    CATS_TTL,
    JSONLD,
    MOUSE,
    NTRIPLES,
    RDFXML,
    TRIG,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("turtle", RdfFormat.TURTLE),
        ("TTL", RdfFormat.TURTLE),
        (" rdfxml ", RdfFormat.RDFXML),
        ("rdf/xml", RdfFormat.RDFXML),
        ("jsonld", RdfFormat.JSONLD),
        ("json-ld", RdfFormat.JSONLD),
        ("ntriples", RdfFormat.NTRIPLES),
        ("n-triples", RdfFormat.NTRIPLES),
        ("nt", RdfFormat.NTRIPLES),
        ("trig", RdfFormat.TRIG),
        ("nquads", RdfFormat.NQUADS),
    ],
)
def test_format_aliases(name, expected):
    assert RdfFormat.from_name(name) is expected


def test_unsupported_format_is_distinct_from_parse_error():
    with pytest.raises(UnsupportedFormatError) as excinfo:
        RdfFormat.from_name("yaml")

    assert "yaml" in str(excinfo.value)
    assert "turtle" in str(excinfo.value)
    assert not isinstance(excinfo.value, ParseError)
    assert isinstance(excinfo.value, ValueError)

    with pytest.raises(UnsupportedFormatError):
        RdfFormat.from_name(None)


def test_unsupported_format_rejected_before_parsing():
    # Even empty content reports the format problem first
    with pytest.raises(UnsupportedFormatError):
        load_dataset("", "yaml")


def test_load_turtle():
    dataset = load_dataset(CATS_TTL, "turtle")
    triples = list(iter_triples(dataset))

    assert len(triples) == CATS_EDGE_COUNT
    assert Triple(CAT, "http://ex.org/onto#eats", MOUSE) in triples
    # Literals contribute their lexical form
    assert Triple(CAT, "http://www.w3.org/2000/01/rdf-schema#label", "Kitty") in triples


def test_load_turtle_from_bytes():
    dataset = load_dataset(CATS_TTL.encode("utf-8"), RdfFormat.TURTLE)
    assert len(list(iter_triples(dataset))) == CATS_EDGE_COUNT


def test_load_ntriples():
    triples = list(iter_triples(load_dataset(NTRIPLES, "ntriples")))
    assert set(triples) == {
        Triple("http://ex.org/a", "http://ex.org/p", "http://ex.org/b"),
        Triple("http://ex.org/b", "http://ex.org/q", "plain text"),
    }


def test_load_trig_merges_named_graphs():
    triples = list(iter_triples(load_dataset(TRIG, "trig")))
    assert set(triples) == {
        Triple("http://ex.org/a", "http://ex.org/p", "http://ex.org/b"),
        Triple("http://ex.org/b", "http://ex.org/q", "http://ex.org/c"),
    }


def test_load_jsonld():
    triples = list(iter_triples(load_dataset(JSONLD, "json-ld")))
    assert triples == [Triple("http://ex.org/a", "http://ex.org/p", "http://ex.org/b")]


def test_load_rdfxml():
    triples = list(iter_triples(load_dataset(RDFXML, "rdfxml")))
    assert triples == [Triple(CAT, "http://ex.org/onto#eats", MOUSE)]


def test_parse_error_is_raised_and_chained():
    with pytest.raises(ParseError) as excinfo:
        load_dataset(BROKEN_TTL, "turtle")

    err = excinfo.value
    assert isinstance(err, OntologyVizError)
    assert err.format == "turtle"
    assert err.__cause__ is not None


def test_empty_content_is_invalid():
    with pytest.raises(InvalidArgumentError):
        load_dataset("", "turtle")
    with pytest.raises(InvalidArgumentError):
        load_dataset(b"", "turtle")


def test_blank_node_ids_are_stable_across_parses():
    first = list(iter_triples(load_dataset(BLANK_TTL, "turtle")))
    second = list(iter_triples(load_dataset(BLANK_TTL, "turtle")))

    assert set(first) == set(second)
    blank_ids = {t.object for t in first if t.subject == A}
    assert len(blank_ids) == 1
    assert blank_ids == {t.subject for t in second if t.object == B}
