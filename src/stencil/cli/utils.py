"""
stencil CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from stencil.core.config import TemplateConfig, load_config
from stencil.core.errors import ConfigError

__version__ = "0.1.0"


def get_version() -> str:
    """Get stencil version from package metadata."""
    try:
        from importlib.metadata import version

        return version("stencil")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"stencil version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send debug logging to stderr when --verbose is given."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def resolve_config(path: Path) -> TemplateConfig:
    """
    Load the template configuration for a root directory.

    Exits with code 1 if the directory is missing or the overrides are invalid.
    """
    if not path.is_dir():
        typer.echo(f"Not a directory: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return load_config(path)
    except ConfigError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(code=1)
