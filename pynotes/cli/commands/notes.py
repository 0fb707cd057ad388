"""Notes commands for the pynotes CLI."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pynotes.services.notes import (
    CreateNoteInput,
    Note,
    NotesError,
    UpdateNoteInput,
)

from ..utils.session import get_api_instance, parse_tags

app = typer.Typer(help="Notes commands")
console = Console()


def _print_note(note: Note) -> None:
    console.print(f"[bold]{note.title}[/bold] (id {note.id}, version {note.version})")
    console.print(note.body)
    console.print(f"Tags: {', '.join(note.tags) if note.tags else '-'}")
    console.print(f"Archived: {'Yes' if note.archived else 'No'}")
    console.print(f"Updated: {note.updated_at}")


def _fail(exc: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {str(exc)}")
    raise typer.Exit(1)


@app.command("create")
def create_note(
    title: str = typer.Option(..., "--title", "-t", help="Note title"),
    body: str = typer.Option(..., "--body", "-b", help="Note body"),
    tags: Optional[str] = typer.Option(None, help="Comma separated tags"),
):
    """Create a note and remember it as one of ours."""
    api = get_api_instance()

    try:
        note = api.notes.create(
            CreateNoteInput(title=title, body=body, tags=parse_tags(tags))
        )
    except NotesError as e:
        _fail(e)
    api.ownership.add(note.id)
    console.print(f"Created note [bold]{note.id}[/bold]")


@app.command("show")
def show_note(note_id: int = typer.Argument(..., help="ID of the note")):
    """Fetch a note and remember it as one of ours."""
    api = get_api_instance()

    try:
        note = api.notes.get(note_id)
    except NotesError as e:
        _fail(e)
    api.ownership.add(note.id)
    _print_note(note)


@app.command("edit")
def edit_note(
    note_id: int = typer.Argument(..., help="ID of the note"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    body: Optional[str] = typer.Option(None, "--body", "-b", help="New body"),
    tags: Optional[str] = typer.Option(None, help="New comma separated tags"),
):
    """Edit a note's title, body or tags."""
    if title is None and body is None and tags is None:
        console.print("[yellow]Warning:[/yellow] No updates specified")
        return

    api = get_api_instance()

    try:
        # Title, body and tags are always sent, so start from the current note
        current = api.notes.get(note_id)
        changes = {}
        if title is not None:
            changes["title"] = title
        if body is not None:
            changes["body"] = body
        if tags is not None:
            changes["tags"] = parse_tags(tags)
        note = api.notes.update(note_id, UpdateNoteInput.from_note(current, **changes))
    except NotesError as e:
        _fail(e)
    console.print(f"Updated note [bold]{note.id}[/bold] (version {note.version})")


def _set_archived(note_id: int, archived: bool) -> None:
    api = get_api_instance()

    try:
        note = api.notes.set_archived(api.notes.get(note_id), archived)
    except NotesError as e:
        _fail(e)
    state = "Archived" if note.archived else "Unarchived"
    console.print(f"{state} note [bold]{note.id}[/bold]")


@app.command("archive")
def archive_note(note_id: int = typer.Argument(..., help="ID of the note")):
    """Archive a note."""
    _set_archived(note_id, True)


@app.command("unarchive")
def unarchive_note(note_id: int = typer.Argument(..., help="ID of the note")):
    """Move a note out of the archive."""
    _set_archived(note_id, False)


@app.command("delete")
def delete_note(
    note_id: int = typer.Argument(..., help="ID of the note"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
):
    """Delete a note."""
    if not force:
        confirmed = typer.confirm(f"Are you sure you want to delete note {note_id}?")
        if not confirmed:
            console.print("Deletion cancelled")
            return

    api = get_api_instance()

    try:
        api.notes.delete(note_id)
    except NotesError as e:
        _fail(e)
    # Only forget the id once the server confirmed the delete
    api.ownership.remove(note_id)
    console.print(f"Deleted note [bold]{note_id}[/bold]")


@app.command("list")
def list_notes():
    """List the ids of notes created or opened from this profile."""
    api = get_api_instance()

    ids = api.ownership.ids
    if not ids:
        console.print("No saved notes")
        return

    table = Table("ID")
    for note_id in ids:
        table.add_row(str(note_id))
    console.print(table)


@app.command("health")
def healthcheck():
    """Check that the notes API is reachable."""
    api = get_api_instance()

    try:
        health = api.notes.healthcheck()
    except NotesError as e:
        _fail(e)
    console.print(f"Status: [bold]{health.status}[/bold]")
    for key, value in sorted(health.system_info.items()):
        console.print(f"{key}: {value}")
