"""Command modules for the pynotes CLI."""

from pynotes.cli.commands import notes

__all__ = ["notes"]
