"""Entry point for ``python -m media_dedup``."""

from .cli.app import app


def main() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
