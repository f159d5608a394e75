from pathlib import Path
from typing import Annotated

import typer
from rich.syntax import Syntax
from rich.table import Table

from muzzle.cli.console import console, print_saved, print_warning
from muzzle.exceptions import FixtureDirectoryError
from muzzle.messages.fixtures import HtmlFixture, JsonFixture, fixture_class_for, load_fixture
from muzzle.models.config import Config
from muzzle.response_builder import ResponseBuilder
from muzzle.services.capture import FixtureRecorder

fixtures_app = typer.Typer(no_args_is_help=True, help="Inspect and capture response fixtures.")

DirectoryOption = Annotated[
    Path | None,
    typer.Option("--dir", "-d", help="Fixture directory (defaults to MUZZLE_FIXTURE_DIRECTORY)"),
]


def _resolve_directory(directory: Path | None) -> Path:
    if directory is None:
        return ResponseBuilder.get_fixture_directory()
    if not directory.is_dir():
        raise FixtureDirectoryError(f"Fixture directory does not exist: {directory}")
    return directory


@fixtures_app.command("list")
def list_fixtures(directory: DirectoryOption = None) -> None:
    """List the fixtures in the fixture directory."""
    root = _resolve_directory(directory)
    files = sorted(path for path in root.rglob("*") if path.is_file())

    if not files:
        console.print(f"[yellow]No fixtures found in {root}.[/yellow]")
        return

    table = Table(title=f"Fixtures in {root}")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Size", justify="right", style="green")

    for path in files:
        table.add_row(
            str(path.relative_to(root)),
            fixture_class_for(path).kind,
            f"{path.stat().st_size} B",
        )

    console.print(table)


@fixtures_app.command("show")
def show_fixture(
    name: Annotated[str, typer.Argument(help="Fixture file name, relative to the directory")],
    directory: DirectoryOption = None,
) -> None:
    """Print the decoded content of a fixture."""
    fixture = load_fixture(_resolve_directory(directory) / name)

    if isinstance(fixture, JsonFixture):
        console.print_json(data=fixture.decode())
    elif isinstance(fixture, HtmlFixture):
        title = fixture.decode().title
        if title is not None and title.string:
            console.print(f"[bold]Title:[/bold] {title.string.strip()}")
        console.print(Syntax(fixture.content, "html"))
    else:
        console.print(fixture.content, markup=False, highlight=False)


@fixtures_app.command("capture")
def capture_fixture(
    url: Annotated[str, typer.Argument(help="URL to fetch")],
    name: Annotated[str, typer.Argument(help="Fixture file name to write, e.g. users.json")],
    directory: DirectoryOption = None,
    timeout: Annotated[
        float | None, typer.Option("--timeout", help="Request timeout in seconds")
    ] = None,
    overwrite: Annotated[
        bool, typer.Option("--overwrite", help="Replace an existing fixture")
    ] = False,
) -> None:
    """Fetch a live URL and store the response body as a fixture."""
    root = _resolve_directory(directory)
    recorder = FixtureRecorder(root, timeout=timeout or Config().capture_timeout)

    if (root / name).exists() and overwrite:
        print_warning(f"Overwriting existing fixture [bold]{name}[/bold].")

    fixture = recorder.capture(url, name, overwrite=overwrite)
    print_saved(fixture.kind, fixture.path)
