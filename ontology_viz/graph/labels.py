# ontology_viz/graph/labels.py

from __future__ import annotations

from typing import Optional, Union

from rdflib import BNode, Graph as RDFGraph, URIRef
from rdflib.namespace import RDFS

LabelProperty = Union[str, URIRef]


def extract_label(identifier: Optional[str]) -> str:
    """
    Derive a display label from a URI-ish identifier.

    Takes the fragment after the last '#', otherwise the segment after the
    last '/', otherwise the identifier itself.
    """
    if not identifier:
        return ""
    if "#" in identifier:
        return identifier.rsplit("#", 1)[1]
    if "/" in identifier:
        return identifier.rsplit("/", 1)[1]
    return identifier


def resolve_label(
    dataset: Optional[RDFGraph],
    identifier: Optional[str],
    label_property: LabelProperty = RDFS.label,
) -> str:
    """
    Look up ``label_property`` for the identifier in the dataset and fall back
    to extract_label() when there is no usable value.

    Lookup problems never propagate; the heuristic label is returned instead.
    """
    if dataset is None or not identifier:
        return extract_label(identifier)

    try:
        value = _lookup_label(dataset, identifier, URIRef(str(label_property)))
    except Exception:  # noqa: BLE001
        value = None

    return value or extract_label(identifier)


def _lookup_label(dataset: RDFGraph, identifier: str, prop: URIRef) -> Optional[str]:
    for term in (URIRef(identifier), BNode(identifier)):
        value = dataset.value(subject=term, predicate=prop, any=True)
        if value is not None and str(value):
            return str(value)
    return None
