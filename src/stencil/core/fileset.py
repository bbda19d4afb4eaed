"""Text file discovery for template trees."""

import os
from collections.abc import Iterable
from pathlib import Path

from .config import TemplateConfig


def discover_text_files(
    config: TemplateConfig,
    extra_exclude_dirs: Iterable[str] = (),
    extra_exclude_files: Iterable[str] = (),
) -> list[Path]:
    """
    Enumerate candidate text files under the template root.

    Directories named in the exclusion list are pruned at any depth, as are
    the directories listed by path (the engine source). Files are excluded
    by name, and only regular files with an allow-listed extension are
    returned. Symlinks are never followed.

    Args:
        config: Template configuration
        extra_exclude_dirs: Additional directory names to prune
        extra_exclude_files: Additional file names to skip

    Returns:
        Absolute paths sorted by their POSIX path relative to the root
    """
    root = config.root
    exclude_dirs = config.exclude_dirs | set(extra_exclude_dirs)
    exclude_files = config.exclude_files | set(extra_exclude_files)
    extensions = {ext.lower() for ext in config.text_extensions}
    excluded_paths = {p.resolve() for p in config.exclude_paths}

    if root.resolve() in excluded_paths:
        return []

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [
            d
            for d in dirnames
            if d not in exclude_dirs and (Path(dirpath) / d).resolve() not in excluded_paths
        ]
        for name in filenames:
            if name in exclude_files:
                continue
            path = Path(dirpath) / name
            if path.suffix.lower() not in extensions:
                continue
            if path.is_symlink() or not path.is_file():
                continue
            files.append(path)

    return sorted(files, key=lambda p: p.relative_to(root).as_posix())
