"""
Interactive value collection.

The terminal is injected as plain callables so the collector can be driven
by any prompt channel (typer in the CLI, canned answers in tests).
"""

from __future__ import annotations

import json
from collections.abc import Callable

from ..values import PlaceholderValues

# (label, default) -> raw answer
Ask = Callable[[str, str], str]

# repo_url is derived, never asked
PROMPTS: tuple[tuple[str, str], ...] = (
    ("project_name", "Project name (kebab-case)"),
    ("description", "Project description"),
    ("author", "Author name"),
    ("author_email", "Author email"),
    ("repo_owner", "GitHub username/organization"),
    ("repo_name", "Repository name"),
    ("company_domain", "Company domain"),
    ("support_email", "Support email"),
    ("security_email", "Security email"),
)


def collect_values(
    defaults: PlaceholderValues,
    ask: Ask,
    repo_host: str = "github.com",
) -> PlaceholderValues:
    """
    Ask for every value, offering the resolved default. Blank keeps the default.

    The repository name defaults to the answered project name when nothing
    better was resolved.
    """
    answers: dict[str, str] = {}
    for key, label in PROMPTS:
        default = getattr(defaults, key)
        if key == "repo_name" and not default:
            default = answers.get("project_name", "")
        answer = (ask(label, default) or "").strip()
        answers[key] = answer or default

    values = PlaceholderValues(repo_url=defaults.repo_url, **answers)
    return values.with_repo_url(repo_host)


def accept_defaults(defaults: PlaceholderValues, repo_host: str = "github.com") -> PlaceholderValues:
    """Non-interactive equivalent of answering every prompt with a blank line."""
    return collect_values(defaults, lambda _label, default: default, repo_host)


def format_summary(values: PlaceholderValues) -> str:
    """Render the assembled values for the confirmation step."""
    return json.dumps(values.as_dict(), indent=2)


def confirm_values(
    values: PlaceholderValues,
    confirm: Callable[[str], bool],
    show: Callable[[str], None],
) -> bool:
    """
    Show the value set and ask for go-ahead.

    Nothing is written before this returns True.
    """
    show(format_summary(values))
    return bool(confirm("Proceed with initialization?"))
