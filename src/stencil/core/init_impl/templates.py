"""
Placeholder substitution.

``substitute_placeholders`` is a pure text transform; ``process_files``
applies it across a template tree and owns all file I/O.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import TemplateConfig
from ..fileset import discover_text_files
from ..reporting import Reporter
from ..rules import DEFAULT_RULES, MatchMode, ReplacementRule
from ..values import PlaceholderValues

logger = logging.getLogger(__name__)


def substitute_placeholders(
    content: str,
    values: PlaceholderValues,
    rules: tuple[ReplacementRule, ...] = DEFAULT_RULES,
) -> str:
    """
    Replace placeholder tokens in content.

    Rules are applied in table order. Content without any match comes back
    unchanged, so callers can compare to detect changes. Re-applying to
    substituted content is a no-op unless a value itself contains
    placeholder syntax.

    Args:
        content: Text to transform
        values: Values to substitute
        rules: Ordered replacement table

    Returns:
        Content with placeholders substituted

    Examples:
        substitute_placeholders("__PROJECT_NAME__", PlaceholderValues(project_name="acme"))
        # -> "acme"
    """
    for rule in rules:
        replacement = rule.render(values)
        if rule.mode is MatchMode.SUBSTRING:
            if rule.pattern in content:
                content = content.replace(rule.pattern, replacement)
        else:
            # Callable replacement keeps backslashes in values literal
            content = rule.regex.sub(lambda _match: replacement, content)

    return content


@dataclass
class ProcessResult:
    """Outcome of a substitution pass over the tree."""

    processed: int = 0
    updated: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def process_files(
    config: TemplateConfig,
    values: PlaceholderValues,
    reporter: Reporter,
) -> ProcessResult:
    """
    Substitute placeholders in every discovered text file, writing only changed files.

    A file that cannot be read, decoded or written is reported and skipped;
    the pass continues with the remaining files. Bytes are round-tripped
    without newline translation.
    """
    result = ProcessResult()

    for path in discover_text_files(config):
        rel_path = config.relative(path)
        try:
            content = path.read_bytes().decode("utf-8")
            updated = substitute_placeholders(content, values, config.rules)
            if updated != content:
                path.write_bytes(updated.encode("utf-8"))
                reporter.success(f"Updated: {rel_path}")
                result.updated.append(rel_path)
            result.processed += 1
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to process %s", rel_path, exc_info=True)
            reporter.warn(f"Skipped ({type(e).__name__}): {rel_path}")
            result.skipped.append(rel_path)

    reporter.info(
        f"Processed {result.processed} files, updated {len(result.updated)} files."
    )
    return result
