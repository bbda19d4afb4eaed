"""
Initialization state record.

Written to ``.template/state.json`` at the end of a successful run. The
record is an audit convenience; the UNINITIALIZED marker remains the
authoritative completion signal, so failing to write it only warns.
"""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .config import TemplateConfig
from .errors import ErrorContext, StateError
from .reporting import Reporter
from .values import PlaceholderValues

logger = logging.getLogger(__name__)


class InitializationState(BaseModel):
    """Summary of the last initialization run."""

    initialized: bool = True
    timestamp: str  # ISO format datetime, UTC
    values: PlaceholderValues

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict with camelCase value keys."""
        return {
            "initialized": self.initialized,
            "timestamp": self.timestamp,
            "values": self.values.as_dict(),
        }


def get_state_file_path(config: TemplateConfig) -> Path:
    """
    Get path to the state record for a template.

    Returns:
        Path to .template/state.json
    """
    return config.state_path


def save_state(
    config: TemplateConfig,
    values: PlaceholderValues,
    reporter: Reporter,
    now: datetime | None = None,
) -> bool:
    """
    Record a completed initialization, replacing any previous record.

    Args:
        config: Template configuration
        values: Values the template was initialized with
        reporter: Progress sink
        now: Timestamp override (defaults to current UTC time)

    Returns:
        True if the record was written, False if writing failed
    """
    state = InitializationState(
        timestamp=(now or datetime.now(UTC)).isoformat(),
        values=values,
    )
    state_file = get_state_file_path(config)

    try:
        state_file.parent.mkdir(parents=True, exist_ok=True)
        state_file.write_text(json.dumps(state.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        reporter.warn(f"Could not save state: {e}")
        return False

    reporter.success("Saved initialization state")
    return True


def load_state(config: TemplateConfig) -> InitializationState | None:
    """
    Load the state record.

    Returns:
        InitializationState if a record exists, None otherwise

    Raises:
        StateError: If the record is unreadable or corrupted
    """
    state_file = get_state_file_path(config)

    if not state_file.exists():
        return None

    try:
        data = json.loads(state_file.read_text(encoding="utf-8"))
        return InitializationState.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.debug("Unreadable state record", exc_info=True)
        raise StateError(f"Failed to load state: {e}", ErrorContext(state_file)) from e
