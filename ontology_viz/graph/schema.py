# ontology_viz/graph/schema.py

from __future__ import annotations

from enum import Enum
from typing import Dict

from ontology_viz.errors import UnsupportedFormatError


class RdfFormat(str, Enum):
    """
    Serializations accepted at the boundary.

    Values are the rdflib parser plugin names.
    """
    TURTLE = "turtle"
    RDFXML = "xml"
    JSONLD = "json-ld"
    NTRIPLES = "nt"
    TRIG = "trig"
    NQUADS = "nquads"

    @property
    def is_quad_format(self) -> bool:
        # These carry named graphs and need a context-aware store.
        return self in (RdfFormat.TRIG, RdfFormat.NQUADS)

    @classmethod
    def from_name(cls, name: str | None) -> "RdfFormat":
        """
        Resolve a user-supplied format name (case-insensitive, trimmed).

        Raises UnsupportedFormatError for anything not in FORMAT_ALIASES.
        """
        if name is None:
            raise UnsupportedFormatError("Format cannot be empty")

        normalized = name.strip().lower()
        try:
            return FORMAT_ALIASES[normalized]
        except KeyError:
            raise UnsupportedFormatError(
                f"Unsupported format: {name}. "
                f"Supported formats: {', '.join(SUPPORTED_FORMAT_NAMES)}"
            ) from None


FORMAT_ALIASES: Dict[str, RdfFormat] = {
    "turtle": RdfFormat.TURTLE,
    "ttl": RdfFormat.TURTLE,
    "rdfxml": RdfFormat.RDFXML,
    "rdf/xml": RdfFormat.RDFXML,
    "xml": RdfFormat.RDFXML,
    "jsonld": RdfFormat.JSONLD,
    "json-ld": RdfFormat.JSONLD,
    "ntriples": RdfFormat.NTRIPLES,
    "n-triples": RdfFormat.NTRIPLES,
    "nt": RdfFormat.NTRIPLES,
    "trig": RdfFormat.TRIG,
    "nquads": RdfFormat.NQUADS,
    "n-quads": RdfFormat.NQUADS,
    "nq": RdfFormat.NQUADS,
}

SUPPORTED_FORMAT_NAMES = ("turtle", "rdfxml", "jsonld", "ntriples", "trig", "nquads")
