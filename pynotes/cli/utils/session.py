"""Utility functions shared by the pynotes CLI commands."""

import json
import os
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from pynotes import NotesConfig, PyNotesService
from pynotes.config import BASE_URL_ENV, CONFIG_DIR
from pynotes.exceptions import PyNotesConfigError

console = Console()

config_path = os.path.join(CONFIG_DIR, "config.json")

# Set by the root callback from --base-url
state: Dict[str, Optional[str]] = {"base_url": None}


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def parse_tags(raw: Optional[str]) -> List[str]:
    """Split comma separated tag text, trimming blanks and dropping empties."""
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]


def _resolve_base_url() -> Optional[str]:
    # --base-url > environment > config file
    return (
        state.get("base_url")
        or os.environ.get(BASE_URL_ENV)
        or load_config().get("base_url")
    )


def get_api_instance() -> PyNotesService:
    """Build the client, exiting when no endpoint is configured."""
    try:
        config = NotesConfig.from_env(base_url=_resolve_base_url())
    except PyNotesConfigError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        console.print(
            Panel(
                "Tell pynotes where the notes API lives, using one of:\n"
                f"- export {BASE_URL_ENV}=http://localhost:4000/v1\n"
                "- pynotes --base-url http://localhost:4000/v1 ...\n"
                f'- {{"base_url": "..."}} in {config_path}',
                title="Configuration Required",
                border_style="red",
            )
        )
        raise typer.Exit(1) from exc
    return PyNotesService(config)
