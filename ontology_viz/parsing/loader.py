# ontology_viz/parsing/loader.py

from __future__ import annotations

import logging
from typing import Iterator, Union

from rdflib import BNode, Dataset, Graph as RDFGraph
from rdflib.compare import to_canonical_graph

from ontology_viz.errors import InvalidArgumentError, ParseError
from ontology_viz.graph.schema import RdfFormat
from ontology_viz.models.graph import Triple

logger = logging.getLogger(__name__)


def _coerce_format(fmt: Union[str, RdfFormat]) -> RdfFormat:
    if isinstance(fmt, RdfFormat):
        return fmt
    return RdfFormat.from_name(fmt)


def load_dataset(content: Union[str, bytes], fmt: Union[str, RdfFormat]) -> RDFGraph:
    """
    Parse ontology text into an rdflib graph.

    - Unknown format names raise UnsupportedFormatError before any parsing.
    - Empty content raises InvalidArgumentError.
    - Any parser failure is re-raised as ParseError, chained to the cause.

    Quad formats (TriG, N-Quads) are parsed into a Dataset whose default
    graph is the union of all named graphs, so callers can treat every
    result as a single triple set.

    Blank nodes get identifiers derived from the content, so parsing the
    same text twice yields the same ids.
    """
    rdf_format = _coerce_format(fmt)

    if content is None or len(content) == 0:
        raise InvalidArgumentError("Ontology content cannot be empty")

    if rdf_format.is_quad_format:
        dataset: RDFGraph = Dataset(default_union=True)
    else:
        dataset = RDFGraph()

    try:
        dataset.parse(data=content, format=rdf_format.value)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Failed to parse ontology as %s: %s", rdf_format.name, exc)
        raise ParseError(
            f"Failed to parse ontology in format: {rdf_format.name.lower()}",
            fmt=rdf_format.name.lower(),
        ) from exc

    logger.debug("Parsed %d statements as %s", len(dataset), rdf_format.name)
    return _stable_blank_nodes(dataset)


def _stable_blank_nodes(dataset: RDFGraph) -> RDFGraph:
    """
    Relabel blank nodes with content-derived identifiers.

    Parsers mint fresh blank node ids on every run, so an id handed out by
    one request would never match the dataset parsed for the next one.
    Datasets without blank nodes are returned untouched.
    """
    if not any(
        isinstance(term, BNode)
        for triple in dataset.triples((None, None, None))
        for term in triple
    ):
        return dataset

    # Dataset iterates quads; the canonicalizer wants plain triples
    flat = RDFGraph()
    for triple in dataset.triples((None, None, None)):
        flat.add(triple)

    canonical = RDFGraph()
    for triple in to_canonical_graph(flat).triples((None, None, None)):
        canonical.add(triple)
    return canonical


def iter_triples(dataset: RDFGraph) -> Iterator[Triple]:
    """
    Lazily yield every statement of the dataset as a string Triple.

    Literals contribute their lexical form; blank nodes their identifier.
    """
    for s, p, o in dataset.triples((None, None, None)):
        yield Triple(subject=str(s), predicate=str(p), object=str(o))
