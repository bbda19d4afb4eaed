"""
stencil - template initialization and verification.

Rewrites placeholder tokens across a freshly cloned template repository
and verifies that none remain.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core.config import TemplateConfig, load_config
from .core.errors import ConfigError, InitError, MarkerError, StateError, StencilError
from .core.values import PlaceholderValues


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("stencil")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "TemplateConfig",
    "load_config",
    "PlaceholderValues",
    "StencilError",
    "ConfigError",
    "InitError",
    "MarkerError",
    "StateError",
]
