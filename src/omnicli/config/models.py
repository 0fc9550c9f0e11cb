"""
Pydantic models for OmniCLI configuration validation.
"""

from typing import Optional
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Name under which a catch-all command is registered. It is matched only when
# the first input token resolves to nothing else.
DEFAULT_COMMAND_NAME = "*"


class AppConfig(BaseModel):
    """Application-level configuration settings."""

    name: str = Field(default="OmniCLI", min_length=1, description="Display name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")
    verbose_logging: bool = Field(default=False, description="Enable verbose debug logging")

    log_file: Optional[str] = Field(default=None, description="Optional JSON log file location")
    max_log_size_mb: int = Field(default=10, ge=1, le=1000, description="Maximum log file size")
    backup_count: int = Field(default=5, ge=1, le=100, description="Number of backup log files")

    @field_validator('log_file')
    @classmethod
    def expand_path(cls, v):
        """Expand user home directory in paths."""
        if v is None:
            return v
        return str(Path(v).expanduser())


class InputConfig(BaseModel):
    """How raw input text is recognized and resolved."""

    prefix: str = Field(default="", description="Prefix every command line must start with")
    default_command: str = Field(
        default=DEFAULT_COMMAND_NAME,
        min_length=1,
        description="Reserved name of the catch-all command"
    )
    list_all_commands: bool = Field(
        default=True,
        description="List every registered command when nothing matches"
    )
    empty_hint: str = Field(
        default="Enter a command",
        description="Description of the placeholder entry shown when nothing matches"
    )

    @field_validator('default_command')
    @classmethod
    def validate_default_command(cls, v):
        """The sentinel must be a single token."""
        if len(v.split()) != 1 or v != v.strip():
            raise ValueError("default_command must be a single whitespace-free token")
        return v


class VimConfig(BaseModel):
    """Motion navigation settings for the suggestion list."""

    enabled: bool = Field(default=True, description="Honor bracketed motion segments")
    highlight_hint: str = Field(
        default="[↓j↑k] ↳",
        description="Prefix for the highlighted (first) suggestion"
    )
    key_format: str = Field(
        default="[{key}]",
        description="Format of the keymap code prefix on other suggestions"
    )

    @field_validator('key_format')
    @classmethod
    def validate_key_format(cls, v):
        """Ensure the format string places the code somewhere."""
        if "{key}" not in v:
            raise ValueError("key_format must contain the '{key}' placeholder")
        return v


class OmniCLIConfig(BaseModel):
    """Main configuration model."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    app: AppConfig = Field(default_factory=AppConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    vim: VimConfig = Field(default_factory=VimConfig)
