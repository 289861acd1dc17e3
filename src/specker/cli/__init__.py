"""Specker CLI module.

Prints a game transcript to the console, or shows it in a Textual viewer.

Usage:
    uv run specker

Or directly:
    python -m specker.cli.app
"""

from specker.cli.app import TranscriptApp, TranscriptPrinter, main

__all__ = ["TranscriptApp", "TranscriptPrinter", "main"]
