"""CLI application using Typer."""

import sys

import typer

from muzzle.cli.commands.config import config_app
from muzzle.cli.commands.fixtures import fixtures_app
from muzzle.cli.console import print_error
from muzzle.exceptions import MuzzleError

__all__ = ["app", "main"]

app = typer.Typer(
    name="muzzle",
    help="Inspect configuration and manage HTTP response fixtures for Muzzle tests.",
    add_completion=True,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Muzzle CLI entry point.
    """
    from muzzle.logging import configure_logging

    configure_logging("DEBUG" if verbose else None)


app.add_typer(config_app, name="config")
app.add_typer(fixtures_app, name="fixtures")


def main() -> None:
    """Main entry point for CLI."""
    try:
        app()
    except MuzzleError as e:
        print_error(e.message)
        sys.exit(e.exit_code)
    except Exception as e:
        print_error(f"An unexpected error occurred: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
