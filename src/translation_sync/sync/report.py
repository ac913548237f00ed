"""Read-only report of the keys each target language is missing."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from ..dictionary.models import Dictionary
from .engine import find_missing_keys

PREVIEW_KEYS = 5


def build_missing_keys_table(dictionary: Dictionary) -> Table:
    """
    Build a table with one row per target language.

    Args:
        dictionary: Dictionary to inspect

    Returns:
        Rich table listing target code, missing count and the first keys
    """
    table = Table(title="Missing Translations")
    table.add_column("Language", style="cyan")
    table.add_column("DeepL", style="magenta")
    table.add_column("Missing", justify="right")
    table.add_column("Keys")

    for lang, missing in find_missing_keys(dictionary).items():
        entry = dictionary.translations[lang]
        preview = ", ".join(missing[:PREVIEW_KEYS])
        if len(missing) > PREVIEW_KEYS:
            preview += f", ... (+{len(missing) - PREVIEW_KEYS})"

        count_style = "red" if missing else "green"
        table.add_row(
            lang,
            entry.deepl_language or "[yellow]none[/yellow]",
            f"[{count_style}]{len(missing)}[/{count_style}]",
            preview,
        )

    return table


def print_missing_keys_report(
    dictionary: Dictionary, console: Console | None = None
) -> int:
    """
    Print the missing-keys table and a one-line summary.

    Args:
        dictionary: Dictionary to inspect
        console: Console to print to (defaults to a new stdout console)

    Returns:
        Total number of missing (language, key) pairs
    """
    console = console or Console()
    total = sum(len(missing) for missing in find_missing_keys(dictionary).values())

    console.print(build_missing_keys_table(dictionary))
    if total:
        console.print(f"[red]✗ {total} translation(s) missing[/red]")
    else:
        console.print("[green]✓ All languages are up to date[/green]")

    return total
