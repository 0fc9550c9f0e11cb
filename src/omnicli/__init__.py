"""
OmniCLI - command resolution and vim-style suggestion navigation for
single-line text inputs.

Key Components:
- CommandRegistry: flat, alias-aware lookup of a nested command tree
- InputResolver: longest registered path matching the typed tokens
- motion: parser for bracketed navigation segments like ``[2j]``
- OmniCLI: lifecycle entry points a host forwards its input events to

Usage:
    from omnicli import Command, Suggestion, create_cli

    cli = create_cli([Command("list", aliases=["ls"], action=print)])
    suggestions = await cli.on_input_changed("ls [j]")
    error = cli.on_input_entered("ls")
"""

from .command import (
    Command,
    NormalizedCommand,
    find_command_depth,
    normalize_command,
    wrap_suggestion_provider,
)

from .suggestion import Suggestion, VimSuggestion
from .registry import CommandRegistry
from .resolver import InputResolver, ResolvedInput
from .session import Session, SessionState
from .engine import OmniCLI, create_cli

from .utils.error_handling import (
    OmniCLIError,
    PrefixMismatchError,
    NoCommandMatchedError,
    ProviderRejectedError,
    MalformedMotionTokenError,
    CommandActionError,
    ConfigurationError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Engine
    "OmniCLI",
    "create_cli",
    "Session",
    "SessionState",

    # Commands
    "Command",
    "NormalizedCommand",
    "find_command_depth",
    "normalize_command",
    "wrap_suggestion_provider",
    "CommandRegistry",
    "InputResolver",
    "ResolvedInput",

    # Suggestions
    "Suggestion",
    "VimSuggestion",

    # Errors
    "OmniCLIError",
    "PrefixMismatchError",
    "NoCommandMatchedError",
    "ProviderRejectedError",
    "MalformedMotionTokenError",
    "CommandActionError",
    "ConfigurationError",
    "ValidationError",
]
