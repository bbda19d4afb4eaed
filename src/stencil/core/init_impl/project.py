"""
Main template initialization logic.

Runs the mutation phase once the values have been confirmed: substitute
placeholders, create the local env file, optionally fix the git remote,
record state and finally remove the marker.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import TemplateConfig
from ..errors import ErrorContext, InitError
from ..reporting import LogReporter, Reporter
from ..state import save_state
from ..values import PlaceholderValues
from .environment import create_env_file
from .git import GitRunner, run_git, update_git_remote
from .marker import is_initialized, remove_marker
from .templates import process_files


@dataclass
class InitResult:
    """What an initialization run changed."""

    processed: int = 0
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    env_created: bool = False
    state_saved: bool = False
    remote_updated: bool = False


def initialize_template(
    config: TemplateConfig,
    values: PlaceholderValues,
    reporter: Reporter | None = None,
    update_remote: bool = False,
    git: GitRunner = run_git,
) -> InitResult:
    """
    Initialize a template tree with confirmed values.

    The closing sequence is ordered: the state record is written before the
    marker is removed, and a marker failure aborts before anything reports
    success. An interrupted run leaves the marker in place; running again
    converges because substitution is idempotent.

    Args:
        config: Template configuration
        values: Confirmed placeholder values
        reporter: Progress sink (defaults to logging)
        update_remote: If True, point ``origin`` at the derived repo URL
        git: Runner for git commands

    Returns:
        InitResult describing the changes

    Raises:
        InitError: If the template is already initialized
        MarkerError: If the marker cannot be removed
    """
    reporter = reporter or LogReporter()

    if is_initialized(config):
        raise InitError("Template is already initialized", ErrorContext(config.root))

    result = InitResult()

    reporter.info("Processing files...")
    processed = process_files(config, values, reporter)
    result.processed = processed.processed
    result.updated = processed.updated
    result.skipped = processed.skipped

    result.env_created = create_env_file(config, reporter)

    if update_remote:
        result.remote_updated = update_git_remote(config.root, values.repo_url, reporter, git)

    result.state_saved = save_state(config, values, reporter)

    remove_marker(config, reporter)

    return result
