"""
Template commands for stencil CLI.

- init: Replace placeholders and mark the template initialized
- check: Verify that initialization is complete
- placeholders: Print or write the placeholder reference
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from stencil import cli_ui
from stencil.cli.utils import configure_logging, resolve_config
from stencil.core.config import TemplateConfig
from stencil.core.errors import InitError, StateError
from stencil.core.init_impl import (
    accept_defaults,
    collect_values,
    confirm_values,
    format_summary,
    initialize_template,
    is_initialized,
    render_placeholder_reference,
    resolve_defaults,
    verify_template,
    write_placeholder_reference,
)
from stencil.core.reporting import NullReporter
from stencil.core.state import load_state

# =============================================================================
# Helper Functions
# =============================================================================


def _show_already_initialized(config: TemplateConfig) -> None:
    """Explain how to re-run and show the recorded state, if any."""
    marker = config.relative(config.marker_path)
    cli_ui.print_info("Template is already initialized.")
    cli_ui.print_info(f"To re-initialize, recreate {marker} and run again.")

    try:
        state = load_state(config)
    except StateError as e:
        cli_ui.print_warning(f"Could not read state record: {e}")
        return

    if state is not None:
        cli_ui.print_info(f"Initialized at {state.timestamp}")
        cli_ui.display_values_table(state.values, title="Recorded values")


def _show_next_steps() -> None:
    """Print what to do after a successful run."""
    cli_ui.print_header("Template Initialized Successfully!")
    typer.echo("Next Steps:\n")
    typer.echo("  1. Verify initialization:")
    typer.echo("     stencil check\n")
    typer.echo("  2. Review and customize:")
    typer.echo("     - .env.local (environment variables)")
    typer.echo("     - .github/CODEOWNERS (team ownership)")
    typer.echo("     - docs/ (documentation)\n")


# =============================================================================
# Template Commands - These are registered directly on the main app
# =============================================================================


def init_command(
    path: Path = typer.Argument(  # noqa: B008
        Path("."), help="Template root directory (defaults to current directory)"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
    use_defaults: bool = typer.Option(
        False, "--defaults", help="Accept every resolved default without prompting"
    ),
    update_remote: bool = typer.Option(
        False,
        "--update-remote",
        help="Point git 'origin' at the derived repository URL if it is unset or a placeholder",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Initialize a freshly cloned template.

    Asks for project values (pressing Enter keeps the suggested default),
    shows them for review, and only after confirmation rewrites
    placeholders, creates .env.local, records .template/state.json and
    removes the .template/UNINITIALIZED marker.

    Examples:
        stencil init                    # Interactive, current directory
        stencil init ./my-app           # Interactive, another directory
        stencil init --defaults --yes   # Non-interactive
    """
    configure_logging(verbose)
    config = resolve_config(path)

    if is_initialized(config):
        _show_already_initialized(config)
        return

    defaults = resolve_defaults(
        config.root, template_name=config.template_name, rules=config.rules
    )

    cli_ui.print_header(
        "Template Initialization Wizard",
        "Press Enter to accept default values shown in parentheses.",
    )

    try:
        if use_defaults:
            values = accept_defaults(defaults, config.repo_host)
        else:
            values = collect_values(defaults, cli_ui.ask, config.repo_host)

        if yes:
            typer.echo(format_summary(values))
            confirmed = True
        else:
            confirmed = confirm_values(
                values,
                confirm=lambda message: cli_ui.confirm(message, default=False),
                show=typer.echo,
            )
    except (KeyboardInterrupt, EOFError):
        typer.echo("")
        cli_ui.print_warning("Initialization aborted.")
        raise typer.Exit(code=1)

    if not confirmed:
        cli_ui.print_warning("Initialization cancelled.")
        return

    try:
        initialize_template(
            config,
            values,
            reporter=cli_ui.ConsoleReporter(),
            update_remote=update_remote,
        )
    except InitError as e:
        cli_ui.print_error(f"Initialization failed: {e}")
        raise typer.Exit(code=1)

    _show_next_steps()


def check_command(
    path: Path = typer.Argument(  # noqa: B008
        Path("."), help="Template root directory (defaults to current directory)"
    ),
    format_: str = typer.Option(
        "human", "--format", "-f", help="Output format: 'human' or 'json'"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Verify that a template has been initialized.

    Fails if the UNINITIALIZED marker is present, a required file is
    missing, or any placeholder remains. Intended for CI.
    """
    configure_logging(verbose)

    if format_ not in ("human", "json"):
        typer.echo(f"Unknown format: {format_}. Choose 'human' or 'json'.", err=True)
        raise typer.Exit(code=1)

    config = resolve_config(path)

    if format_ == "json":
        report = verify_template(config, reporter=NullReporter())
        typer.echo(json.dumps(report.model_dump(by_alias=True), indent=2))
        raise typer.Exit(code=0 if report.passed else 1)

    cli_ui.print_header("Template Verification")
    report = verify_template(config, reporter=cli_ui.ConsoleReporter())
    cli_ui.display_issues(report)

    if not report.marker_removed:
        cli_ui.print_info("To initialize the template, run: stencil init")

    if report.issues:
        cli_ui.print_info("To fix:")
        cli_ui.print_info("  1. Run: stencil init")
        cli_ui.print_info("  2. Manually search and replace any remaining placeholders")
        cli_ui.print_info("  3. Run this check again: stencil check")

    typer.echo("")
    if report.passed:
        cli_ui.print_success("All checks passed!")
        cli_ui.print_info("Template is properly initialized and ready for development.")
        return

    cli_ui.print_error("Checks failed! Fix the issues above and run this check again.")
    raise typer.Exit(code=1)


def placeholders_command(
    path: Path = typer.Argument(  # noqa: B008
        Path("."), help="Template root directory (defaults to current directory)"
    ),
    write: bool = typer.Option(
        False, "--write", "-w", help="Write .template/PLACEHOLDERS.md instead of printing"
    ),
) -> None:
    """Print (or write) the placeholder reference document."""
    config = resolve_config(path)

    if write:
        written = write_placeholder_reference(config)
        cli_ui.print_success(f"Wrote {config.relative(written)}")
        return

    typer.echo(render_placeholder_reference(config.rules), nl=False)
