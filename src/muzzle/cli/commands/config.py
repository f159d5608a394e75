import typer
from pydantic import ValidationError

from muzzle.cli.console import console
from muzzle.cli.utils import handle_validation_error
from muzzle.exceptions import ConfigError
from muzzle.models.config import Config

config_app = typer.Typer(no_args_is_help=True, help="Inspect Muzzle configuration.")


@config_app.command()
def show() -> None:
    """Display the current Muzzle configuration."""
    try:
        config = Config()
        console.print(config)
    except ValidationError as e:
        handle_validation_error(e)
        raise ConfigError("Configuration validation failed.") from e
