"""
Template verification.

Checks, independently of the init run, that a template is fully
initialized:

1. the UNINITIALIZED marker is gone
2. required files exist
3. no placeholder tokens remain in any scanned text file

A file that cannot be read fails the check; invalid UTF-8 is decoded with
replacement characters so the tokens around it are still found.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

from ..config import TemplateConfig
from ..fileset import discover_text_files
from ..reporting import LogReporter, Reporter
from ..rules import DEFAULT_RULES, ReplacementRule, detection_patterns
from .marker import is_initialized

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 80


class DiagnosticIssue(BaseModel):
    """A placeholder found on one line of one file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file: str
    line_number: int
    matched_token: str
    line_excerpt: str


class VerificationReport(BaseModel):
    """Combined result of the three checks."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    marker_removed: bool
    missing_files: list[str]
    issues: list[DiagnosticIssue]
    unreadable_files: list[str] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return (
            self.marker_removed
            and not self.missing_files
            and not self.issues
            and not self.unreadable_files
        )

    def issues_by_file(self) -> dict[str, list[DiagnosticIssue]]:
        grouped: dict[str, list[DiagnosticIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.file, []).append(issue)
        return grouped


def find_placeholders(
    content: str,
    patterns: list[re.Pattern[str]] | None = None,
) -> Iterator[tuple[int, str, str]]:
    """
    Locate placeholder tokens line by line.

    Yields:
        (line_number, token, excerpt) once per distinct token per line
    """
    if patterns is None:
        patterns = detection_patterns(DEFAULT_RULES)

    for line_number, line in enumerate(content.split("\n"), start=1):
        seen: set[str] = set()
        for pattern in patterns:
            for match in pattern.finditer(line):
                token = match.group(0)
                if token in seen:
                    continue
                seen.add(token)
                yield line_number, token, line.strip()[:EXCERPT_LENGTH]


def scan_for_placeholders(
    config: TemplateConfig,
    rules: tuple[ReplacementRule, ...] | None = None,
) -> tuple[list[DiagnosticIssue], list[str]]:
    """
    Scan every text file in the tree.

    Returns:
        (issues, unreadable_files); a file that cannot be read is listed
        rather than skipped, since it may still hold placeholders
    """
    patterns = detection_patterns(rules if rules is not None else config.rules)
    files = discover_text_files(
        config,
        extra_exclude_dirs=config.scan_exclude_dirs,
        extra_exclude_files=config.scan_exclude_files,
    )

    issues: list[DiagnosticIssue] = []
    unreadable: list[str] = []
    for path in files:
        rel_path = config.relative(path)
        try:
            content = path.read_bytes().decode("utf-8", errors="replace")
        except OSError:
            logger.debug("Cannot read %s", rel_path, exc_info=True)
            unreadable.append(rel_path)
            continue

        for line_number, token, excerpt in find_placeholders(content, patterns):
            issues.append(
                DiagnosticIssue(
                    file=rel_path,
                    line_number=line_number,
                    matched_token=token,
                    line_excerpt=excerpt,
                )
            )

    return issues, unreadable


def check_required_files(config: TemplateConfig) -> list[str]:
    """Return the required files that are missing."""
    return [name for name in config.required_files if not (config.root / name).exists()]


def verify_template(config: TemplateConfig, reporter: Reporter | None = None) -> VerificationReport:
    """
    Run all verification checks.

    Every check runs even when an earlier one fails, so a single report
    lists everything that needs fixing.
    """
    reporter = reporter or LogReporter()

    marker_removed = is_initialized(config)
    if marker_removed:
        reporter.success("Initialization marker removed")
    else:
        reporter.error(f"Template is not initialized: found {config.relative(config.marker_path)}")

    missing = check_required_files(config)
    for name in config.required_files:
        if name in missing:
            reporter.error(f"Missing: {name}")
        else:
            reporter.success(f"Found: {name}")

    issues, unreadable = scan_for_placeholders(config)
    for rel_path in unreadable:
        reporter.error(f"Could not read: {rel_path}")
    if issues:
        files = {issue.file for issue in issues}
        reporter.error(f"Found placeholders in {len(files)} file(s)")
    elif not unreadable:
        reporter.success("No placeholders found")

    return VerificationReport(
        marker_removed=marker_removed,
        missing_files=missing,
        issues=issues,
        unreadable_files=unreadable,
    )
