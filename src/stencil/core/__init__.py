"""Core stencil functionality: configuration, rules, discovery, state, init and verification."""

from .config import TemplateConfig, load_config
from .errors import (
    ConfigError,
    ErrorContext,
    GitCommandError,
    InitError,
    MarkerError,
    StateError,
    StencilError,
)
from .init import initialize_template, resolve_defaults, substitute_placeholders, verify_template
from .reporting import LogReporter, NullReporter, Reporter
from .rules import DEFAULT_RULES, MatchMode, ReplacementRule
from .state import InitializationState, load_state, save_state
from .values import PlaceholderValues

__all__ = [
    "TemplateConfig",
    "load_config",
    "StencilError",
    "ConfigError",
    "ErrorContext",
    "GitCommandError",
    "InitError",
    "MarkerError",
    "StateError",
    "initialize_template",
    "resolve_defaults",
    "substitute_placeholders",
    "verify_template",
    "LogReporter",
    "NullReporter",
    "Reporter",
    "DEFAULT_RULES",
    "MatchMode",
    "ReplacementRule",
    "InitializationState",
    "load_state",
    "save_state",
    "PlaceholderValues",
]
