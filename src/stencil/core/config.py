"""
Template configuration.

A TemplateConfig is passed explicitly to every component instead of
module-level constants. Built-in defaults can be extended from
``stencil.toml`` or a ``[tool.stencil]`` table in ``pyproject.toml``.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError, ErrorContext
from .rules import DEFAULT_RULES, ReplacementRule

TEMPLATE_DIR = ".template"
MARKER_NAME = "UNINITIALIZED"
STATE_NAME = "state.json"
REFERENCE_NAME = "PLACEHOLDERS.md"

CONFIG_FILE = "stencil.toml"

TEXT_EXTENSIONS = (
    ".md",
    ".txt",
    ".json",
    ".yml",
    ".yaml",
    ".ts",
    ".tsx",
    ".js",
    ".mjs",
    ".css",
    ".py",
    ".toml",
    ".html",
)

# Build artifacts, dependency caches and VCS metadata
EXCLUDE_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        ".next",
        "dist",
        "build",
        "out",
        "coverage",
        ".venv",
        "venv",
        "__pycache__",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
    }
)

# The stencil package itself; skipped when it sits inside the tree being processed
ENGINE_DIR = Path(__file__).resolve().parents[1]

# Script-based engines shipped by older templates
ENGINE_FILES = frozenset(
    {
        "template-init.mjs",
        "template-check.mjs",
    }
)
LOCK_FILES = frozenset(
    {
        "package-lock.json",
        "pnpm-lock.yaml",
        "yarn.lock",
        "poetry.lock",
        "uv.lock",
    }
)
EXCLUDE_FILES = ENGINE_FILES | LOCK_FILES | {REFERENCE_NAME}

REQUIRED_FILES = (
    "package.json",
    "README.md",
    ".env.example",
    ".gitignore",
    "tsconfig.json",
)


@dataclass
class TemplateConfig:
    """Everything a template run needs to know about the tree it operates on."""

    root: Path
    template_name: str | None = None  # directory name that is never a useful default
    repo_host: str = "github.com"
    text_extensions: tuple[str, ...] = TEXT_EXTENSIONS
    exclude_dirs: frozenset[str] = EXCLUDE_DIRS
    exclude_files: frozenset[str] = EXCLUDE_FILES
    # Directories skipped by path, e.g. the engine source or a vendored copy of it
    exclude_paths: tuple[Path, ...] = (ENGINE_DIR,)
    # Extra exclusions applied only by the verification scanner
    scan_exclude_dirs: frozenset[str] = frozenset({TEMPLATE_DIR})
    scan_exclude_files: frozenset[str] = ENGINE_FILES | {REFERENCE_NAME}
    required_files: tuple[str, ...] = REQUIRED_FILES
    rules: tuple[ReplacementRule, ...] = field(default=DEFAULT_RULES)

    @property
    def template_dir(self) -> Path:
        return self.root / TEMPLATE_DIR

    @property
    def marker_path(self) -> Path:
        return self.template_dir / MARKER_NAME

    @property
    def state_path(self) -> Path:
        return self.template_dir / STATE_NAME

    @property
    def reference_path(self) -> Path:
        return self.template_dir / REFERENCE_NAME

    @property
    def env_example_path(self) -> Path:
        return self.root / ".env.example"

    @property
    def env_local_path(self) -> Path:
        return self.root / ".env.local"

    def relative(self, path: Path) -> str:
        """POSIX path relative to the root, for reporting."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()


def _read_overrides(root: Path) -> tuple[Path | None, dict[str, Any]]:
    """Locate the overrides table, preferring stencil.toml over pyproject.toml."""
    config_file = root / CONFIG_FILE
    pyproject = root / "pyproject.toml"

    for path in (config_file, pyproject):
        if not path.is_file():
            continue
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", ErrorContext(path)) from e
        if path == config_file:
            return path, data
        table = data.get("tool", {}).get("stencil")
        if table is not None:
            return path, table

    return None, {}


def _string_list(data: dict[str, Any], key: str, source: Path) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings", ErrorContext(source))
    return value


def _string(data: dict[str, Any], key: str, source: Path) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string", ErrorContext(source))
    return value


def load_config(root: Path) -> TemplateConfig:
    """
    Build the configuration for a template tree.

    Args:
        root: Root directory of the template

    Returns:
        TemplateConfig with any overrides applied

    Raises:
        ConfigError: If the overrides file is malformed
    """
    root = root.resolve()
    config = TemplateConfig(root=root)

    source, data = _read_overrides(root)
    if source is None:
        return config

    template_name = _string(data, "template_name", source)
    repo_host = _string(data, "repo_host", source)
    extensions = _string_list(data, "text_extensions", source)
    extra_dirs = _string_list(data, "extra_exclude_dirs", source)
    extra_files = _string_list(data, "extra_exclude_files", source)
    extra_paths = _string_list(data, "extra_exclude_paths", source)

    updates: dict[str, Any] = {
        "exclude_dirs": config.exclude_dirs | set(extra_dirs),
        "exclude_files": config.exclude_files | set(extra_files),
        "exclude_paths": config.exclude_paths + tuple(root / p for p in extra_paths),
    }
    if template_name:
        updates["template_name"] = template_name
    if repo_host:
        updates["repo_host"] = repo_host
    if extensions:
        updates["text_extensions"] = tuple(
            ext if ext.startswith(".") else f".{ext}" for ext in extensions
        )
    if "required_files" in data:
        updates["required_files"] = tuple(_string_list(data, "required_files", source))

    return replace(config, **updates)
