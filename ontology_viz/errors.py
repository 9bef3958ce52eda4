# ontology_viz/errors.py

from __future__ import annotations


class OntologyVizError(Exception):
    """Base class for all errors raised by ontology_viz."""

    code = "ontology_error"


class ParseError(OntologyVizError):
    """
    The ontology text could not be parsed in the declared serialization.

    The underlying parser exception is always chained (``raise ... from exc``).
    """

    code = "parse_error"

    def __init__(self, message: str, fmt: str | None = None) -> None:
        super().__init__(message)
        self.format = fmt


class UnsupportedFormatError(OntologyVizError, ValueError):
    """An unrecognized serialization name was supplied."""

    code = "unsupported_format"


class InvalidArgumentError(OntologyVizError, ValueError):
    """A caller passed an empty dataset/identifier or an out-of-range number."""

    code = "invalid_argument"
