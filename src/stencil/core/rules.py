"""
Placeholder grammar and the ordered replacement rule table.

Two grammars coexist in a template:

- bracketed-sigil tokens such as ``__PROJECT_NAME__``, replaced as plain
  substrings since the ``__`` delimiter already makes them unambiguous;
- bare legacy tokens such as ``PROJECT_NAME`` or ``USERNAME/REPO_NAME``,
  replaced only on word boundaries and subject to per-rule exceptions.

The table is ordered. Bracketed rules come first, then legacy composites
(longest first), then single-word legacy rules.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .values import PlaceholderValues

SIGIL = "__"

# Any delimiter-wrapped upper-case identifier, known or not
GENERIC_BRACKETED = re.compile(r"__[A-Z_]+__")


class MatchMode(StrEnum):
    """How a rule's pattern is located in content."""

    SUBSTRING = "substring"
    WORD = "word"


@dataclass(frozen=True)
class ReplacementRule:
    """
    One entry of the replacement table.

    Attributes:
        pattern: Literal text to find
        target: ``str.format`` template over PlaceholderValues fields,
            e.g. ``"{project_name}"`` or ``"{repo_owner}/{repo_name}"``
        mode: SUBSTRING (unconditional) or WORD (boundary-aware regex)
        exceptions: Suffixes that veto a WORD match when they follow it
    """

    pattern: str
    target: str
    mode: MatchMode = MatchMode.WORD
    exceptions: tuple[str, ...] = ()

    @cached_property
    def keys(self) -> tuple[str, ...]:
        """Value fields referenced by the target."""
        return tuple(name for _, name, _, _ in string.Formatter().parse(self.target) if name)

    @cached_property
    def regex(self) -> re.Pattern[str]:
        """Compiled matcher; SUBSTRING rules compile to an escaped literal."""
        if self.mode is MatchMode.SUBSTRING:
            return re.compile(re.escape(self.pattern))
        lookaheads = "".join(f"(?!{re.escape(suffix)})" for suffix in self.exceptions)
        return re.compile(rf"\b{re.escape(self.pattern)}\b{lookaheads}")

    def render(self, values: PlaceholderValues) -> str:
        """Replacement text for the given values."""
        return self.target.format(**values.model_dump())


def bracketed(name: str) -> str:
    """Wrap an identifier in the placeholder sigil: PROJECT_NAME -> __PROJECT_NAME__."""
    return f"{SIGIL}{name}{SIGIL}"


# Canonical bracketed tokens and the value each one receives
CANONICAL_PLACEHOLDERS: tuple[tuple[str, str], ...] = (
    ("PROJECT_NAME", "project_name"),
    ("DESCRIPTION", "description"),
    ("AUTHOR", "author"),
    ("AUTHOR_EMAIL", "author_email"),
    ("REPO_OWNER", "repo_owner"),
    ("REPO_NAME", "repo_name"),
    ("REPO_URL", "repo_url"),
    ("COMPANY_DOMAIN", "company_domain"),
    ("SUPPORT_EMAIL", "support_email"),
    ("SECURITY_EMAIL", "security_email"),
)

BRACKETED_RULES: tuple[ReplacementRule, ...] = tuple(
    ReplacementRule(bracketed(name), f"{{{key}}}", MatchMode.SUBSTRING)
    for name, key in CANONICAL_PLACEHOLDERS
)

LEGACY_RULES: tuple[ReplacementRule, ...] = (
    # Composites before their constituents, longer prefix first
    ReplacementRule("YOUR_USERNAME/REPO_NAME", "{repo_owner}/{repo_name}"),
    ReplacementRule("USERNAME/REPO_NAME", "{repo_owner}/{repo_name}"),
    ReplacementRule("PROJECT_NAME", "{project_name}"),
    ReplacementRule("DESCRIPTION", "{description}"),
    # Must not touch UNAUTHORIZED and friends
    ReplacementRule("AUTHOR", "{author}", exceptions=("IZED",)),
    ReplacementRule("YOUR_DOMAIN", "{company_domain}"),
    ReplacementRule("SUPPORT_EMAIL@example.com", "{support_email}"),
    ReplacementRule("SECURITY_EMAIL@example.com", "{security_email}"),
)

DEFAULT_RULES: tuple[ReplacementRule, ...] = BRACKETED_RULES + LEGACY_RULES


def detection_patterns(
    rules: tuple[ReplacementRule, ...] = DEFAULT_RULES,
) -> list[re.Pattern[str]]:
    """
    Patterns the verification scanner looks for.

    Bracketed detection is generic rather than limited to the table, so a
    newly introduced ``__TOKEN__`` that the table forgot is still flagged.
    Bare detection reuses the WORD rules as-is, exceptions included.
    """
    patterns = [GENERIC_BRACKETED]
    patterns.extend(rule.regex for rule in rules if rule.mode is MatchMode.WORD)
    return patterns


def is_placeholder_token(value: str, rules: tuple[ReplacementRule, ...] = DEFAULT_RULES) -> bool:
    """True if value is itself an un-substituted placeholder (e.g. "PROJECT_NAME")."""
    value = value.strip()
    if GENERIC_BRACKETED.fullmatch(value):
        return True
    if any(name == value for name, _ in CANONICAL_PLACEHOLDERS):
        return True
    return any(rule.pattern == value for rule in rules)
