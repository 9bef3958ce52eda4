from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rdflib.util import guess_format
from rich.console import Console
from rich.table import Table

from ontology_viz.api import service
from ontology_viz.api.models import GraphResponse
from ontology_viz.config.settings import get_settings
from ontology_viz.errors import OntologyVizError
from ontology_viz.graph.builder import degree_map

app = typer.Typer(
    help="Read/query utilities over an ontology file."
)

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_ontology(path: Path) -> bytes:
    if not path.exists():
        console.print(f"[red]Ontology file not found:[/red] {path}")
        raise typer.Exit(code=1)
    return path.read_bytes()


def _format_for(path: Path, fmt: Optional[str]) -> str:
    """
    Explicit --format wins; otherwise guess from the file suffix, then fall
    back to the configured default.

    rdflib.util.guess_format returns plugin names such as "xml" or "nt",
    all of which RdfFormat.from_name accepts.
    """
    if fmt:
        return fmt
    return guess_format(str(path)) or get_settings().default_format


def _fail(exc: OntologyVizError) -> NoReturn:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("graph")
def graph(
    ontology_file: Path = typer.Argument(..., help="Path to an RDF file."),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Serialization (turtle, rdfxml, jsonld, ntriples, trig, nquads).",
    ),
    max_nodes: Optional[int] = typer.Option(
        None,
        "--max-nodes",
        "-n",
        min=0,
        help="Keep only the N highest-degree nodes (induced subgraph).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the graph as JSON instead of a table.",
    ),
) -> None:
    """
    Show the graph's nodes ranked by degree, or dump it as JSON.
    """
    content = _read_ontology(ontology_file)

    try:
        G = service.parse_ontology(content, _format_for(ontology_file, fmt), max_nodes)
    except OntologyVizError as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps(GraphResponse.from_graph(G).model_dump(), indent=2))
        return

    degrees = degree_map(G.edges)
    ranked = sorted(G.nodes, key=lambda n: (-degrees.get(n.id, 0), n.id))

    console.print(
        f"[bold]{len(G.nodes)} nodes, {len(G.edges)} edges[/bold]"
        f"{f' (max {max_nodes} nodes)' if max_nodes is not None else ''}"
    )

    tbl = Table(show_header=True, header_style="bold")
    tbl.add_column("Node id")
    tbl.add_column("Label")
    tbl.add_column("Degree", justify="right")

    for node in ranked:
        tbl.add_row(node.id, node.label, str(degrees.get(node.id, 0)))

    console.print(tbl)


@app.command("node")
def node(
    ontology_file: Path = typer.Argument(..., help="Path to an RDF file."),
    node_id: str = typer.Argument(..., help="Full identifier of the node (usually a URI)."),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Serialization (turtle, rdfxml, jsonld, ntriples, trig, nquads).",
    ),
) -> None:
    """
    Show the incoming and outgoing connections of one node.
    """
    content = _read_ontology(ontology_file)

    try:
        hood = service.node_details(content, _format_for(ontology_file, fmt), node_id)
    except OntologyVizError as exc:
        _fail(exc)

    console.print(f"[bold]{hood.label}[/bold] [dim]{hood.id}[/dim]\n")

    for title, records in (("Outgoing", hood.outgoing), ("Incoming", hood.incoming)):
        console.print(f"[bold]{title}:[/bold]")
        if not records:
            console.print("  (none)")
            continue

        tbl = Table(show_header=True, header_style="bold")
        tbl.add_column("Relation")
        tbl.add_column("Node")
        tbl.add_column("Node id")
        for r in records:
            tbl.add_row(r.relationship_type, r.node_label, r.node_id)
        console.print(tbl)


@app.command("stats")
def stats(
    ontology_file: Path = typer.Argument(..., help="Path to an RDF file."),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Serialization (turtle, rdfxml, jsonld, ntriples, trig, nquads).",
    ),
) -> None:
    """
    Print node, edge, triple and relation-label counts.
    """
    content = _read_ontology(ontology_file)

    try:
        result = service.ontology_statistics(content, _format_for(ontology_file, fmt))
    except OntologyVizError as exc:
        _fail(exc)

    tbl = Table(show_header=True, header_style="bold")
    tbl.add_column("Metric")
    tbl.add_column("Value", justify="right")
    tbl.add_row("Nodes", str(result.node_count))
    tbl.add_row("Edges", str(result.edge_count))
    tbl.add_row("Triples", str(result.triple_count))
    tbl.add_row("Relation labels", str(result.distinct_label_count))
    console.print(tbl)
