"""
Template initialization utilities for stencil.

This module re-exports from init_impl/ package.
For implementation details, see the init_impl/ package.
"""

from .init_impl import (
    DiagnosticIssue,
    InitResult,
    VerificationReport,
    accept_defaults,
    collect_values,
    confirm_values,
    initialize_template,
    is_initialized,
    resolve_defaults,
    substitute_placeholders,
    verify_template,
    write_placeholder_reference,
)

__all__ = [
    "DiagnosticIssue",
    "InitResult",
    "VerificationReport",
    "accept_defaults",
    "collect_values",
    "confirm_values",
    "initialize_template",
    "is_initialized",
    "resolve_defaults",
    "substitute_placeholders",
    "verify_template",
    "write_placeholder_reference",
]
