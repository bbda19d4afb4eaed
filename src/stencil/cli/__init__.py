"""
stencil CLI Package.

- project.py: init, check and placeholders commands
- utils.py: Shared utilities
"""

import typer

from stencil.cli.project import check_command, init_command, placeholders_command
from stencil.cli.utils import get_version, version_callback

app = typer.Typer(
    help="""stencil – template initialization and verification

Commands:
  • init: replace placeholders in a fresh template clone
  • check: verify no placeholders remain (CI)
  • placeholders: show the placeholder reference
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """stencil CLI main callback for global options."""
    pass


app.command(name="init")(init_command)
app.command(name="check")(check_command)
app.command(name="placeholders")(placeholders_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
