# ontology_viz/cli/main.py

from __future__ import annotations

import typer
from ontology_viz.cli import query_cli

app = typer.Typer(help="CLI tools for exploring RDF ontologies as graphs.")

app.add_typer(query_cli.app, name="query")

if __name__ == "__main__":
    app()
