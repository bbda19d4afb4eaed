"""The UNINITIALIZED marker: present until a run completes."""

from __future__ import annotations

from ..config import TemplateConfig
from ..errors import ErrorContext, MarkerError
from ..reporting import Reporter


def is_initialized(config: TemplateConfig) -> bool:
    """A template is initialized exactly when its marker is gone."""
    return not config.marker_path.exists()


def remove_marker(config: TemplateConfig, reporter: Reporter) -> None:
    """
    Delete the marker, completing initialization.

    Raises:
        MarkerError: If the marker exists but cannot be deleted
    """
    marker = config.marker_path
    if not marker.exists():
        return

    try:
        marker.unlink()
    except OSError as e:
        raise MarkerError(
            f"Could not remove marker: {e}", ErrorContext(marker)
        ) from e

    reporter.success("Removed UNINITIALIZED marker")
