"""
Default value resolution.

Guesses initial placeholder values from local signals, in order:

1. the template directory name
2. project descriptors (package.json, then pyproject.toml)
3. the ``origin`` git remote URL
4. the local git identity

A later source only fills a value the earlier ones left empty, and a
candidate that is itself a placeholder token (say, a package.json still
named "PROJECT_NAME") is never accepted. Every source failure is ignored.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any

from ..rules import DEFAULT_RULES, ReplacementRule, is_placeholder_token
from ..values import VALUE_KEYS, PlaceholderValues
from .git import GIT_FAILURES, GitRunner, run_git

logger = logging.getLogger(__name__)

# https://host/owner/repo(.git) and git@host:owner/repo(.git)
_REMOTE_RE = re.compile(r"[:/](?P<owner>[^/:]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


def parse_remote_url(url: str) -> tuple[str, str] | None:
    """
    Extract (owner, repo) from a git remote URL.

    Examples:
        parse_remote_url("https://github.com/janedoe/acme-app.git")
        # -> ("janedoe", "acme-app")
        parse_remote_url("git@github.com:janedoe/acme-app.git")
        # -> ("janedoe", "acme-app")
    """
    match = _REMOTE_RE.search(url.strip())
    if not match:
        return None
    return match.group("owner"), match.group("repo")


def _from_directory(root: Path, template_name: str | None) -> dict[str, str]:
    name = root.name
    if not name or name == template_name:
        return {}
    return {"project_name": name, "repo_name": name}


def _split_author(author: Any) -> dict[str, str]:
    """Accept "Name", "Name <email>" or {"name": ..., "email": ...}."""
    if isinstance(author, dict):
        return {
            "author": str(author.get("name") or ""),
            "author_email": str(author.get("email") or ""),
        }
    if isinstance(author, str):
        match = re.match(r"^\s*(?P<name>[^<]*?)\s*(?:<(?P<email>[^>]+)>)?\s*$", author)
        if match:
            return {"author": match.group("name"), "author_email": match.group("email") or ""}
    return {}


def _from_package_json(root: Path) -> dict[str, str]:
    try:
        data = json.loads((root / "package.json").read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        logger.debug("package.json unavailable", exc_info=True)
        return {}
    if not isinstance(data, dict):
        return {}

    found = {
        "project_name": data.get("name"),
        "description": data.get("description"),
    }
    found.update(_split_author(data.get("author")))
    return {key: value for key, value in found.items() if isinstance(value, str)}


def _from_pyproject(root: Path) -> dict[str, str]:
    try:
        data = tomllib.loads((root / "pyproject.toml").read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        logger.debug("pyproject.toml unavailable", exc_info=True)
        return {}

    project = data.get("project")
    if not isinstance(project, dict):
        return {}

    found = {
        "project_name": project.get("name"),
        "description": project.get("description"),
    }
    authors = project.get("authors")
    if isinstance(authors, list) and authors:
        found.update(_split_author(authors[0]))
    return {key: value for key, value in found.items() if isinstance(value, str)}


def _from_remote(root: Path, git: GitRunner) -> dict[str, str]:
    try:
        url = git(["remote", "get-url", "origin"], root)
    except GIT_FAILURES:
        logger.debug("No origin remote", exc_info=True)
        return {}
    if not url:
        return {}

    found = {"repo_url": url}
    parsed = parse_remote_url(url)
    if parsed:
        owner, repo = parsed
        found.update(repo_owner=owner, repo_name=repo, project_name=repo)
    return found


def _from_identity(root: Path, git: GitRunner) -> dict[str, str]:
    found: dict[str, str] = {}
    try:
        found["author"] = git(["config", "user.name"], root)
    except GIT_FAILURES:
        logger.debug("git user.name not set", exc_info=True)
    try:
        email = git(["config", "user.email"], root)
    except GIT_FAILURES:
        logger.debug("git user.email not set", exc_info=True)
    else:
        found.update(author_email=email, support_email=email, security_email=email)
    return found


def resolve_defaults(
    root: Path,
    *,
    template_name: str | None = None,
    git: GitRunner | None = None,
    rules: tuple[ReplacementRule, ...] = DEFAULT_RULES,
) -> PlaceholderValues:
    """
    Guess initial values for a template tree.

    Args:
        root: Template root directory
        template_name: Directory name to ignore (the template's own name)
        git: Runner for read-only git queries (defaults to run_git)
        rules: Rule table used to recognise placeholder tokens

    Returns:
        PlaceholderValues; anything that could not be guessed is ""
    """
    git = git or run_git
    resolved = dict.fromkeys(VALUE_KEYS, "")

    layers = (
        _from_directory(root, template_name),
        _from_package_json(root),
        _from_pyproject(root),
        _from_remote(root, git),
        _from_identity(root, git),
    )
    for layer in layers:
        for key, value in layer.items():
            value = value.strip()
            if not value or is_placeholder_token(value, rules):
                continue
            if not resolved[key]:
                resolved[key] = value

    return PlaceholderValues(**resolved)
