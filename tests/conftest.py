"""Shared pytest fixtures for stencil tests."""

import json
from pathlib import Path

import pytest

from stencil.core.config import TemplateConfig, load_config
from stencil.core.errors import GitCommandError
from stencil.core.values import PlaceholderValues

README = """\
# __PROJECT_NAME__

__DESCRIPTION__

Maintained by __AUTHOR__ <__AUTHOR_EMAIL__>.

Clone from https://github.com/USERNAME/REPO_NAME or visit https://YOUR_DOMAIN.
Report security issues to SECURITY_EMAIL@example.com.
"""


class RecordingReporter:
    """Reporter that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def texts(self, level: str) -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]


class FakeGit:
    """GitRunner returning canned stdout; unknown commands fail like git would."""

    def __init__(self, responses: dict[tuple[str, ...], str] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[list[str]] = []

    def __call__(self, args: list[str], cwd: Path) -> str:
        self.calls.append(list(args))
        key = tuple(args)
        if key in self.responses:
            return self.responses[key]
        raise GitCommandError(f"git {' '.join(args)} failed")


@pytest.fixture
def reporter() -> RecordingReporter:
    """Return a recording reporter."""
    return RecordingReporter()


@pytest.fixture
def no_git() -> FakeGit:
    """A git runner for which every query fails."""
    return FakeGit()


@pytest.fixture
def values() -> PlaceholderValues:
    """A complete value set."""
    return PlaceholderValues(
        project_name="acme-app",
        description="Inventory tracking for small shops",
        author="Jane Doe",
        author_email="jane@acme.dev",
        repo_owner="janedoe",
        repo_name="acme-app",
        repo_url="https://github.com/janedoe/acme-app",
        company_domain="acme.dev",
        support_email="support@acme.dev",
        security_email="security@acme.dev",
    )


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Create an uninitialized template tree."""
    root = tmp_path / "acme-app"
    (root / ".template").mkdir(parents=True)
    (root / ".template" / "UNINITIALIZED").write_text("")
    (root / ".template" / "PLACEHOLDERS.md").write_text("Use __PROJECT_NAME__ and AUTHOR.\n")

    (root / "package.json").write_text(
        json.dumps({"name": "PROJECT_NAME", "author": "AUTHOR", "version": "0.1.0"}, indent=2)
    )
    (root / "README.md").write_text(README)
    (root / ".env.example").write_text("APP_NAME=__PROJECT_NAME__\nAPI_KEY=\n")
    (root / ".gitignore").write_text("node_modules/\n.env.local\n")
    (root / "tsconfig.json").write_text("{}\n")

    src = root / "src"
    src.mkdir()
    (src / "index.ts").write_text('export const name = "__PROJECT_NAME__";\n')
    (src / "auth.ts").write_text("// Returns 401 when the user is UNAUTHORIZED\n")

    modules = root / "node_modules" / "dep"
    modules.mkdir(parents=True)
    (modules / "index.js").write_text("module.exports = '__PROJECT_NAME__';\n")

    return root


@pytest.fixture
def config(template_root: Path) -> TemplateConfig:
    """Configuration for the template tree."""
    return load_config(template_root)


@pytest.fixture
def make_git():
    """Factory for FakeGit runners with canned responses."""
    return FakeGit
