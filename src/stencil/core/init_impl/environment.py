"""Local environment file creation."""

from __future__ import annotations

import shutil

from ..config import TemplateConfig
from ..reporting import Reporter


def create_env_file(config: TemplateConfig, reporter: Reporter) -> bool:
    """
    Copy .env.example to .env.local when the local file does not exist yet.

    The example is copied byte for byte without substitution, and an
    existing .env.local is never touched. A failed copy only warns.

    Returns:
        True if .env.local was created
    """
    example = config.env_example_path
    local = config.env_local_path

    if local.exists() or not example.is_file():
        return False

    try:
        shutil.copyfile(example, local)
    except OSError as e:
        reporter.warn(f"Could not create {local.name}: {e}")
        return False

    reporter.success(f"Created {local.name} from {example.name}")
    return True
