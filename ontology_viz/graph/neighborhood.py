# ontology_viz/graph/neighborhood.py

from __future__ import annotations

from typing import List, Optional, Tuple, Union

from rdflib import BNode, Graph as RDFGraph, Literal, URIRef
from rdflib.namespace import RDFS

from ontology_viz.errors import InvalidArgumentError
from ontology_viz.graph.labels import LabelProperty, resolve_label
from ontology_viz.models.graph import NeighborRecord, Neighborhood


def _node_term(dataset: RDFGraph, node_id: str) -> Union[URIRef, BNode]:
    """
    Map a node id back to an rdflib term.

    Blank node ids are only recognized when the dataset actually uses them;
    anything else is treated as a URI.
    """
    bnode = BNode(node_id)
    if (bnode, None, None) in dataset or (None, None, bnode) in dataset:
        return bnode
    return URIRef(node_id)


def _sort_records(records: List[NeighborRecord]) -> Tuple[NeighborRecord, ...]:
    return tuple(sorted(records, key=lambda r: (r.relationship_type, r.node_id)))


def get_neighborhood(
    dataset: Optional[RDFGraph],
    node_id: Optional[str],
    label_property: LabelProperty = RDFS.label,
) -> Neighborhood:
    """
    Collect the incoming and outgoing connections of a single node.

    - outgoing: every triple with the node as subject. Literal objects use
      their text as both id and label.
    - incoming: every triple with the node as object.

    A node that does not occur in the dataset yields empty lists; that is
    not an error. A missing dataset or an empty node id is.
    """
    if dataset is None:
        raise InvalidArgumentError("Dataset cannot be empty")
    if node_id is None or not node_id.strip():
        raise InvalidArgumentError("Node id cannot be empty")

    term = _node_term(dataset, node_id)

    def label_of(identifier: str) -> str:
        return resolve_label(dataset, identifier, label_property)

    outgoing: List[NeighborRecord] = []
    for predicate, obj in dataset.predicate_objects(subject=term):
        relation = label_of(str(predicate))
        if isinstance(obj, Literal):
            text = str(obj)
            outgoing.append(NeighborRecord(text, text, relation))
        else:
            outgoing.append(NeighborRecord(str(obj), label_of(str(obj)), relation))

    incoming: List[NeighborRecord] = []
    for subject, predicate in dataset.subject_predicates(object=term):
        incoming.append(
            NeighborRecord(str(subject), label_of(str(subject)), label_of(str(predicate)))
        )

    return Neighborhood(
        id=node_id,
        label=label_of(node_id),
        incoming=_sort_records(incoming),
        outgoing=_sort_records(outgoing),
    )
