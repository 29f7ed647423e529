"""Main CLI application."""

import typer

from ..common.logging import setup_logging
from ..config.settings import get_settings
from .config_cmd import config_app
from .report_cmd import report
from .scan_cmd import scan

app = typer.Typer(
    name="media-dedup",
    help="Find duplicate media files and move extra copies into _Rejected folders",
    add_completion=False,
)

# Register subcommands
app.add_typer(config_app, name="config")

# Add main commands
app.command(name="scan")(scan)
app.command(name="report")(report)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Local duplicate file finder with quarantine folders."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
