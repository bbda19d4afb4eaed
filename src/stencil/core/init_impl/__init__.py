"""
Template initialization utilities for stencil.

This package contains modular implementations for template initialization:
- defaults.py - Default value resolution from local signals
- prompts.py - Interactive value collection and confirmation
- templates.py - Placeholder substitution across the tree
- environment.py - .env.local creation
- git.py - Local git queries and remote update
- marker.py - UNINITIALIZED marker handling
- project.py - Main initialize_template logic
- verify.py - Template verification scanner
- reference.py - PLACEHOLDERS.md rendering
"""

from __future__ import annotations

from .defaults import parse_remote_url, resolve_defaults
from .environment import create_env_file
from .git import GitRunner, run_git, update_git_remote
from .marker import is_initialized, remove_marker
from .project import InitResult, initialize_template
from .prompts import PROMPTS, accept_defaults, collect_values, confirm_values, format_summary
from .reference import render_placeholder_reference, write_placeholder_reference
from .templates import ProcessResult, process_files, substitute_placeholders
from .verify import (
    DiagnosticIssue,
    VerificationReport,
    check_required_files,
    find_placeholders,
    scan_for_placeholders,
    verify_template,
)

__all__ = [
    # Defaults
    "parse_remote_url",
    "resolve_defaults",
    # Prompts
    "PROMPTS",
    "accept_defaults",
    "collect_values",
    "confirm_values",
    "format_summary",
    # Substitution
    "ProcessResult",
    "process_files",
    "substitute_placeholders",
    # Environment / git / marker
    "create_env_file",
    "GitRunner",
    "run_git",
    "update_git_remote",
    "is_initialized",
    "remove_marker",
    # Project init
    "InitResult",
    "initialize_template",
    # Verification
    "DiagnosticIssue",
    "VerificationReport",
    "check_required_files",
    "find_placeholders",
    "scan_for_placeholders",
    "verify_template",
    # Reference
    "render_placeholder_reference",
    "write_placeholder_reference",
]
