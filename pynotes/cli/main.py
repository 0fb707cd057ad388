#!/usr/bin/env python
"""Command line interface for pynotes."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pynotes.cli.commands import notes
from pynotes.cli.utils import session

app = typer.Typer(help="Command Line Interface for a notes API")
console = Console()

app.add_typer(notes.app, name="notes")


@app.callback()
def callback(
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="Notes API base URL, e.g. http://localhost:4000/v1"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logs"
    ),
):
    """Create, read, edit, archive and delete notes."""
    session.state["base_url"] = base_url
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
