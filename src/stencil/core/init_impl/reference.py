"""Placeholder reference document, rendered from the rule table."""

from __future__ import annotations

from pathlib import Path

from ..config import TemplateConfig
from ..rules import DEFAULT_RULES, MatchMode, ReplacementRule
from ..values import PlaceholderValues

HEADER = """\
# Template Placeholders

This file is generated by `stencil placeholders --write`. It lists every
placeholder that `stencil init` replaces and that `stencil check` reports.

Bracketed placeholders (`__NAME__`) are replaced wherever they appear.
Legacy bare placeholders are only replaced as whole words. Any other
`__UPPER_CASE__` token is reported by `stencil check` even though
`stencil init` does not know how to replace it.
"""


def _value_label(rule: ReplacementRule) -> str:
    """camelCase value names used by the target, e.g. "repoOwner/repoName"."""
    fields = PlaceholderValues.model_fields
    label = rule.target
    for key in rule.keys:
        label = label.replace(f"{{{key}}}", fields[key].alias or key)
    return label


def render_placeholder_reference(rules: tuple[ReplacementRule, ...] = DEFAULT_RULES) -> str:
    """Render the Markdown reference for a rule table."""
    legacy: dict[str, list[str]] = {}
    for rule in rules:
        if rule.mode is MatchMode.WORD:
            legacy.setdefault(rule.target, []).append(rule.pattern)

    lines = [HEADER, "## Bracketed placeholders", ""]
    lines.append("| Placeholder | Value | Legacy forms |")
    lines.append("|---|---|---|")
    covered: set[str] = set()
    for rule in rules:
        if rule.mode is not MatchMode.SUBSTRING:
            continue
        forms = legacy.get(rule.target, [])
        covered.add(rule.target)
        legacy_text = ", ".join(f"`{form}`" for form in forms) or "-"
        lines.append(f"| `{rule.pattern}` | {_value_label(rule)} | {legacy_text} |")

    remaining = [rule for rule in rules if rule.mode is MatchMode.WORD and rule.target not in covered]
    if remaining:
        lines += ["", "## Legacy-only placeholders", ""]
        lines.append("| Placeholder | Value | Exceptions |")
        lines.append("|---|---|---|")
        for rule in remaining:
            exceptions = ", ".join(f"`{suffix}`" for suffix in rule.exceptions) or "-"
            lines.append(f"| `{rule.pattern}` | {_value_label(rule)} | {exceptions} |")

    exception_rules = [rule for rule in rules if rule.exceptions and rule.target in covered]
    if exception_rules:
        lines += ["", "## Exceptions", ""]
        for rule in exception_rules:
            suffixes = ", ".join(f"`{suffix}`" for suffix in rule.exceptions)
            lines.append(f"- `{rule.pattern}` is not replaced when followed by {suffixes}.")

    return "\n".join(lines) + "\n"


def write_placeholder_reference(config: TemplateConfig) -> Path:
    """Write the reference document to .template/PLACEHOLDERS.md."""
    path = config.reference_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_placeholder_reference(config.rules), encoding="utf-8")
    return path
