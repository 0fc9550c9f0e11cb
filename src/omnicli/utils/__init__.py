"""
OmniCLI Utilities

Logging and error handling helpers shared by the engine modules.
"""

from .logging import (
    setup_logging,
    get_logger,
    log_performance,
    performance_timer,
    is_logging_initialized,
)

from .error_handling import (
    OmniCLIError,
    PrefixMismatchError,
    NoCommandMatchedError,
    ProviderRejectedError,
    MalformedMotionTokenError,
    CommandActionError,
    ConfigurationError,
    ValidationError,
    handle_provider_operation,
    handle_command_action,
    validate_input,
)

__all__ = [
    # Logging utilities
    "setup_logging",
    "get_logger",
    "log_performance",
    "performance_timer",
    "is_logging_initialized",

    # Error handling utilities
    "OmniCLIError",
    "PrefixMismatchError",
    "NoCommandMatchedError",
    "ProviderRejectedError",
    "MalformedMotionTokenError",
    "CommandActionError",
    "ConfigurationError",
    "ValidationError",
    "handle_provider_operation",
    "handle_command_action",
    "validate_input",
]
