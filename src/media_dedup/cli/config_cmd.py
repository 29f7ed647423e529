"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Extensions", " ".join(settings.extensions))
    table.add_row("Min file size", str(settings.min_file_size))
    table.add_row("Reject folder", settings.reject_folder)
    table.add_row("Hash workers", str(settings.hash_workers))
    table.add_row("Chunk size", str(settings.chunk_size))
    table.add_row("Tie-break", settings.tie_break)
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
    console.print("Settings are read from MEDIA_DEDUP_* environment variables or .env")
