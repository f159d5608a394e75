from rich.console import Console
from rich.theme import Theme

__all__ = [
    "console",
    "err_console",
    "print_error",
    "print_saved",
    "print_warning",
]

theme = Theme(
    {
        "muzzle.error": "bold red",
        "muzzle.warning": "bold yellow",
        "muzzle.fixture": "bold green",
    }
)

console = Console(theme=theme)
err_console = Console(stderr=True, theme=theme)


def print_error(message: str) -> None:
    err_console.print(f"[muzzle.error]Error:[/muzzle.error] {message}")


def print_warning(message: str) -> None:
    err_console.print(f"[muzzle.warning]Warning:[/muzzle.warning] {message}")


def print_saved(kind: str, path: object) -> None:
    """Report a fixture written to disk."""
    console.print(f"Saved [muzzle.fixture]{kind}[/muzzle.fixture] fixture to {path}")
