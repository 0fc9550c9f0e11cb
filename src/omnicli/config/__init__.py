"""
OmniCLI Configuration System

    from omnicli.config import get_config, load_config

Basic usage:
    config = load_config("omnicli.yaml")
    print(config.input.prefix)          # ""
    print(config.vim.highlight_hint)    # "[↓j↑k] ↳"
"""

from .loader import (
    ConfigLoader,
    load_config,
    get_config,
    reload_config,
    validate_config_file,
    ConfigurationError,
)

from .models import (
    OmniCLIConfig,
    AppConfig,
    InputConfig,
    VimConfig,
    LogLevel,
    DEFAULT_COMMAND_NAME,
)

__all__ = [
    # Main functions
    "ConfigLoader",
    "get_config",
    "load_config",
    "reload_config",
    "validate_config_file",

    # Exception
    "ConfigurationError",

    # Configuration models
    "OmniCLIConfig",
    "AppConfig",
    "InputConfig",
    "VimConfig",
    "LogLevel",
    "DEFAULT_COMMAND_NAME",
]
